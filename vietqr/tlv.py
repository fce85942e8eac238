"""Utility helpers to build and parse EMV-style TLV payloads."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator

from .services.errors import LengthOutOfRange

MIN_VALUE_LENGTH = 1
MAX_VALUE_LENGTH = 99


def format_length(data: Any) -> str:
    """Render the character length of ``data`` as a 2-digit field.

    Raises :class:`LengthOutOfRange` outside ``1..99``.
    """

    length = len(str(data))
    if length < MIN_VALUE_LENGTH or length > MAX_VALUE_LENGTH:
        raise LengthOutOfRange(length, bounds=(MIN_VALUE_LENGTH, MAX_VALUE_LENGTH))
    return f"{length:02d}"


def build_tlv(tag: str, value: Any) -> str:
    return f"{tag}{format_length(value)}{value}"


@dataclass(frozen=True)
class TLVItem:
    tag: str
    value: str

    def serialize(self) -> str:
        return build_tlv(self.tag, self.value)


def join_tlv(items: Iterable[TLVItem]) -> str:
    """Serialize iterable of TLV items into EMV string."""

    return "".join(item.serialize() for item in items)


def parse_tlv(payload: str) -> Iterator[TLVItem]:
    """Parse TLV payload string into TLV items."""

    idx = 0
    total = len(payload)
    while idx + 4 <= total:
        tag = payload[idx : idx + 2]
        raw_length = payload[idx + 2 : idx + 4]
        if not raw_length.isdigit():
            raise ValueError(f"Invalid TLV length field {raw_length!r} for tag {tag}")
        length = int(raw_length)
        value_start = idx + 4
        value_end = value_start + length
        if value_end > total:
            raise ValueError("Invalid TLV length exceeds payload")
        value = payload[value_start:value_end]
        yield TLVItem(tag=tag, value=value)
        idx = value_end
    if idx != total:
        raise ValueError("Dangling TLV data detected")
