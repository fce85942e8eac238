"""Fixed EMV field ids and values for NAPAS merchant-presented QR codes."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class EMVConstants:
    payload_format: str = "000201"
    pim_static: str = "010211"
    pim_dynamic: str = "010212"
    currency: str = "5303704"
    country: str = "5802VN"
    crc_id: str = "6304"
    acquirer_id: str = "0006"
    merchant_id: str = "01"
    beneficiary_org_id: str = "01"
    service_provider_id: str = "38"
    amount_id: str = "54"
    additional_data_id: str = "62"
    bill_number_id: str = "01"
    purpose_id: str = "08"
    guid: str = "0010A000000727"
    service_account: str = "0208QRIBFTTA"
    service_card: str = "0208QRIBFTTC"
    bill_prefix: str = "NAPAS"


EMV: Final = EMVConstants()
