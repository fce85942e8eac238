"""Shared service error definitions."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class ServiceError(Exception):
    code: str
    message: str
    status_code: int = 400

    def __str__(self) -> str:  # noqa: D401 override
        return f"{self.code}: {self.message}"


class LengthOutOfRange(ServiceError):
    """A TLV value whose length cannot be written as a 2-digit field."""

    def __init__(self, length: int, bounds: tuple[int, int] = (1, 99)):
        lower, upper = bounds
        super().__init__(
            code="ERR_LENGTH_OUT_OF_RANGE",
            message=f"Data length {length} out of range ({lower}-{upper})",
            status_code=422,
        )
        self.length = length
        self.bounds = bounds


class InvalidInitiationType(ServiceError):
    def __init__(self, value: object):
        super().__init__(
            code="ERR_INITIATION_TYPE",
            message=f"Unknown initiation type {value!r}, expected STATIC or DYNAMIC",
            status_code=422,
        )
        self.value = value


def err_bad_payload(message: str | None = None) -> ServiceError:
    return ServiceError(code="ERR_BAD_PAYLOAD", message=message or "Invalid QR payload", status_code=400)
