"""Domain models for QR payload generation."""
from __future__ import annotations

import enum
from dataclasses import dataclass

from .bill_number import RandomSource, generate_bill_number
from .services.errors import InvalidInitiationType


class InitiationType(str, enum.Enum):
    STATIC = "STATIC"
    DYNAMIC = "DYNAMIC"

    @classmethod
    def parse(cls, value: str | InitiationType | None) -> InitiationType:
        """Case-insensitive lookup; ``None`` or blank means STATIC."""

        if isinstance(value, cls):
            return value
        if value is None or not str(value).strip():
            return cls.STATIC
        try:
            return cls(str(value).strip().upper())
        except ValueError as exc:
            raise InvalidInitiationType(value) from exc


@dataclass(frozen=True, slots=True)
class QRPayloadConfig:
    """Immutable input of one QR payload.

    Besides the initiation type, fields are not validated here: a non-numeric
    bank bin or negative amount still produces a structurally valid payload.
    Length limits are enforced when the payload is built.
    """

    bank_bin: str
    account_identifier: str
    bill_number: str
    is_account: bool = False
    initiation_type: InitiationType = InitiationType.STATIC
    amount: str | None = None
    description: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "initiation_type", InitiationType.parse(self.initiation_type))

    @classmethod
    def create(
        cls,
        bank_bin: str,
        account_identifier: str,
        initiation_type: str | InitiationType | None = None,
        is_account: bool = False,
        amount: str | int | None = None,
        description: str | None = None,
        *,
        random_source: RandomSource | None = None,
    ) -> QRPayloadConfig:
        return cls(
            bank_bin=bank_bin,
            account_identifier=account_identifier,
            bill_number=generate_bill_number(random_source),
            is_account=bool(is_account),
            initiation_type=InitiationType.parse(initiation_type),
            amount=None if amount is None else str(amount),
            description=description,
        )

    @property
    def is_dynamic(self) -> bool:
        return self.initiation_type is InitiationType.DYNAMIC
