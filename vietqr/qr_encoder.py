"""NAPAS merchant-presented QR payload composer."""
from __future__ import annotations

from dataclasses import asdict, dataclass

from .builders import additional_data, merchant_account_info, point_of_initiation, transaction_amount
from .constants import EMV
from .crc import crc16_ccitt
from .models import QRPayloadConfig


@dataclass(frozen=True)
class PayloadComponents:
    payload_format: str
    point_of_initiation: str
    merchant_account: str
    currency: str
    amount: str
    country: str
    additional_data: str
    bill_number: str

    def segments(self) -> tuple[str, ...]:
        """Payload segments in wire order, checksum excluded."""

        return (
            self.payload_format,
            self.point_of_initiation,
            self.merchant_account,
            self.currency,
            self.amount,
            self.country,
            self.additional_data,
        )

    def to_dict(self) -> dict[str, str]:
        return asdict(self)


@dataclass(frozen=True)
class EncodedPayload:
    payload: str
    crc: str


def compose_components(config: QRPayloadConfig) -> PayloadComponents:
    return PayloadComponents(
        payload_format=EMV.payload_format,
        point_of_initiation=point_of_initiation(config.initiation_type),
        merchant_account=merchant_account_info(config.bank_bin, config.account_identifier, config.is_account),
        currency=EMV.currency,
        amount=transaction_amount(config.initiation_type, config.amount),
        country=EMV.country,
        additional_data=additional_data(config.initiation_type, config.bill_number, config.description),
        bill_number=config.bill_number,
    )


def encode_components(components: PayloadComponents) -> EncodedPayload:
    """Join segments and append the CRC16 over everything up to ``6304``."""

    crc_input = "".join(components.segments()) + EMV.crc_id
    crc = crc16_ccitt(crc_input)
    return EncodedPayload(payload=f"{crc_input}{crc}", crc=crc)


def encode_payload(config: QRPayloadConfig) -> EncodedPayload:
    return encode_components(compose_components(config))


class QRGenerator:
    """Payload generator bound to one configuration.

    Output is recomputed on every call; a given instance always yields the same
    payload because the bill number is fixed when the config is created.
    """

    def __init__(self, config: QRPayloadConfig):
        self.config = config

    def generate_qr(self) -> str:
        return encode_payload(self.config).payload

    def get_components(self) -> PayloadComponents:
        return compose_components(self.config)
