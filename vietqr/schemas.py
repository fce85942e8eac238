"""Pydantic schemas for API contracts."""
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class InitiationTypeEnum(str, Enum):
    STATIC = "STATIC"
    DYNAMIC = "DYNAMIC"


class GenerateQRRequest(BaseModel):
    bank_bin: str = Field(pattern=r"^\d+$", description="Acquiring bank identification number")
    account_identifier: str = Field(min_length=1, description="Account number or card number")
    is_account: bool = Field(default=False, description="True for account transfer, false for card transfer")
    initiation_type: InitiationTypeEnum | None = None
    amount: str | None = Field(default=None, description="Transaction amount, DYNAMIC only")
    description: str | None = Field(default=None, max_length=99, description="Transfer purpose, DYNAMIC only")

    @field_validator("initiation_type", mode="before")
    @classmethod
    def _upper_initiation_type(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip().upper() or None
        return value


class PayloadComponentsSchema(BaseModel):
    payload_format: str
    point_of_initiation: str
    merchant_account: str
    currency: str
    amount: str
    country: str
    additional_data: str
    bill_number: str


class GenerateQRResponse(BaseModel):
    payload: str
    crc: str
    bill_number: str
    initiation_type: InitiationTypeEnum
    components: PayloadComponentsSchema


class VerifyQRRequest(BaseModel):
    payload: str = Field(min_length=1)


class TLVItemSchema(BaseModel):
    tag: str
    length: int
    value: str


class VerifyQRResponse(BaseModel):
    valid: bool
    expected_crc: str
    actual_crc: str
    tags: list[TLVItemSchema]
