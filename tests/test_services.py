import logging

import pytest

from vietqr.bill_number import FixedRandomSource
from vietqr.crc import verify_crc
from vietqr.models import InitiationType
from vietqr.services.errors import LengthOutOfRange, ServiceError
from vietqr.services.generator import PayloadGenerator
from vietqr.services.inspector import PayloadInspector


class TestPayloadGenerator:
    def test_static_defaults_from_settings(self):
        result = PayloadGenerator(FixedRandomSource(42)).create_payload(bank_bin="970407", account_identifier="2543663452")
        assert result.config.initiation_type is InitiationType.STATIC
        assert result.encoded.payload.startswith("000201010211")
        assert result.encoded.payload.endswith(result.encoded.crc)
        assert verify_crc(result.encoded.payload)

    def test_dynamic(self):
        result = PayloadGenerator(FixedRandomSource(42)).create_payload(
            bank_bin="970407",
            account_identifier="2543663452",
            is_account=True,
            initiation_type="dynamic",
            amount="50000",
            description="Thanh toan",
        )
        assert result.config.bill_number == "NAPAS0042"
        assert result.components.amount == "540550000"
        assert "".join(result.components.segments()) + "6304" + result.encoded.crc == result.encoded.payload

    def test_log_masks_account(self, caplog):
        with caplog.at_level(logging.INFO, logger="vietqr.generator"):
            PayloadGenerator(FixedRandomSource(1)).create_payload(bank_bin="970407", account_identifier="2543663452")
        record = next(r for r in caplog.records if r.message == "payload generated")
        assert record.account == "***3452"
        assert "2543663452" not in caplog.text

    def test_length_error_propagates(self):
        with pytest.raises(LengthOutOfRange):
            PayloadGenerator().create_payload(bank_bin="970407", account_identifier="")


class TestPayloadInspector:
    def test_valid_payload(self):
        payload = PayloadGenerator(FixedRandomSource(42)).create_payload(
            bank_bin="970407", account_identifier="2543663452", is_account=True
        ).encoded.payload
        result = PayloadInspector().inspect(payload)
        assert result.valid
        assert result.expected_crc == result.actual_crc == payload[-4:]
        assert [item.tag for item in result.items] == ["00", "01", "38", "53", "58", "63"]

    def test_tampered_payload(self):
        payload = PayloadGenerator(FixedRandomSource(42)).create_payload(
            bank_bin="970407", account_identifier="2543663452", is_account=True
        ).encoded.payload
        tampered = payload.replace("2543663452", "2543663453")
        result = PayloadInspector().inspect(tampered)
        assert not result.valid
        assert result.actual_crc == payload[-4:]
        assert result.expected_crc != result.actual_crc

    def test_unparseable_payload(self):
        with pytest.raises(ServiceError) as excinfo:
            PayloadInspector().inspect("0099abc")
        assert excinfo.value.code == "ERR_BAD_PAYLOAD"

    def test_missing_crc_field(self):
        with pytest.raises(ServiceError) as excinfo:
            PayloadInspector().inspect("000201010211")
        assert excinfo.value.code == "ERR_BAD_PAYLOAD"
