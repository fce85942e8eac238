"""Segment builders for the NAPAS merchant-presented QR payload.

Each builder is a pure function of its arguments and returns a ready-to-concatenate
segment. Optional segments return ``""`` when they do not apply. Length errors
from :func:`vietqr.tlv.format_length` propagate unchanged.
"""
from __future__ import annotations

from decimal import Decimal, InvalidOperation

from .constants import EMV
from .models import InitiationType
from .tlv import TLVItem, build_tlv, format_length, join_tlv


def point_of_initiation(initiation_type: InitiationType) -> str:
    if initiation_type is InitiationType.STATIC:
        return EMV.pim_static
    return EMV.pim_dynamic


def merchant_info(bank_bin: str, account_identifier: str) -> str:
    """Acquirer id followed by the bank bin, then the account/card TLV."""

    acquirer = f"{EMV.acquirer_id}{bank_bin}"
    return acquirer + build_tlv(EMV.merchant_id, account_identifier)


def service_type(is_account: bool) -> str:
    return EMV.service_account if is_account else EMV.service_card


def merchant_account_info(bank_bin: str, account_identifier: str, is_account: bool) -> str:
    info = merchant_info(bank_bin, account_identifier)
    full_data = EMV.guid + EMV.beneficiary_org_id + format_length(info) + info + service_type(is_account)
    return build_tlv(EMV.service_provider_id, full_data)


def _has_amount(amount: str | None) -> bool:
    if amount is None or not amount.strip():
        return False
    try:
        return Decimal(amount) != 0
    except InvalidOperation:
        # non-numeric amounts pass through unchanged
        return True


def transaction_amount(initiation_type: InitiationType, amount: str | None) -> str:
    if initiation_type is not InitiationType.DYNAMIC or not _has_amount(amount):
        return ""
    return build_tlv(EMV.amount_id, amount)


def additional_data(initiation_type: InitiationType, bill_number: str, description: str | None) -> str:
    """Tag 62 for DYNAMIC codes; the purpose sub-field is left out when ``description`` is empty."""

    if initiation_type is not InitiationType.DYNAMIC:
        return ""
    items = [TLVItem(tag=EMV.bill_number_id, value=bill_number)]
    if description:
        items.append(TLVItem(tag=EMV.purpose_id, value=description))
    return build_tlv(EMV.additional_data_id, join_tlv(items))
