"""Decoding and checksum verification of received QR payloads."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ..constants import EMV
from ..crc import crc16_ccitt, verify_crc
from ..monitoring import record_payload_verified
from ..tlv import TLVItem, parse_tlv
from .errors import err_bad_payload

logger = logging.getLogger("vietqr.inspector")


@dataclass(slots=True)
class InspectResult:
    valid: bool
    expected_crc: str
    actual_crc: str
    items: list[TLVItem]


class PayloadInspector:
    def inspect(self, payload: str) -> InspectResult:
        payload = payload.strip()
        try:
            items = list(parse_tlv(payload))
        except ValueError as exc:
            logger.warning("payload not parseable", extra={"reason": str(exc)})
            raise err_bad_payload(str(exc)) from exc

        if not items or items[-1].tag != EMV.crc_id[:2]:
            raise err_bad_payload("Payload has no trailing CRC field")

        actual = items[-1].value.upper()
        expected = crc16_ccitt(payload[:-4])
        valid = verify_crc(payload)
        logger.info("payload verified", extra={"valid": valid, "expected_crc": expected, "actual_crc": actual})
        record_payload_verified(valid)
        return InspectResult(valid=valid, expected_crc=expected, actual_crc=actual, items=items)
