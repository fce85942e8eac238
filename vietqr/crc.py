"""CRC16-CCITT implementation."""
from __future__ import annotations

from .constants import EMV

CRC16_POLY = 0x1021
CRC16_INIT = 0xFFFF


def crc16_ccitt(data: str | bytes) -> str:
    """Compute CRC16-CCITT (0x1021) for EMV payload strings.

    Strings are hashed per character code, bytes per byte.
    """

    codes = data if isinstance(data, bytes) else map(ord, data)
    checksum = CRC16_INIT
    for code in codes:
        checksum ^= code << 8
        for _ in range(8):
            if checksum & 0x8000:
                checksum = (checksum << 1) ^ CRC16_POLY
            else:
                checksum <<= 1
            checksum &= 0xFFFF
    return f"{checksum:04X}"


def verify_crc(payload: str) -> bool:
    """Check the trailing 4 hex digits of a payload against its CRC16."""

    if len(payload) < len(EMV.crc_id) + 4 or payload[-8:-4] != EMV.crc_id:
        return False
    return crc16_ccitt(payload[:-4]) == payload[-4:].upper()
