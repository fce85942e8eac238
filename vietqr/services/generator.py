"""QR payload generation service."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from ..bill_number import RandomSource
from ..config import settings
from ..models import InitiationType, QRPayloadConfig
from ..monitoring import record_payload_generated
from ..qr_encoder import EncodedPayload, PayloadComponents, compose_components, encode_components

logger = logging.getLogger("vietqr.generator")


@dataclass(slots=True)
class GenerateResult:
    config: QRPayloadConfig
    encoded: EncodedPayload
    components: PayloadComponents


def _mask(identifier: str) -> str:
    return f"***{identifier[-4:]}" if len(identifier) > 4 else "***"


class PayloadGenerator:
    def __init__(self, random_source: RandomSource | None = None):
        self.random_source = random_source

    def create_payload(
        self,
        *,
        bank_bin: str,
        account_identifier: str,
        is_account: bool = False,
        initiation_type: str | InitiationType | None = None,
        amount: str | None = None,
        description: str | None = None,
    ) -> GenerateResult:
        config = QRPayloadConfig.create(
            bank_bin=bank_bin,
            account_identifier=account_identifier,
            initiation_type=initiation_type or settings.default_initiation_type,
            is_account=is_account,
            amount=amount,
            description=description,
            random_source=self.random_source,
        )
        components = compose_components(config)
        encoded = encode_components(components)

        logger.info(
            "payload generated",
            extra={
                "bank_bin": bank_bin,
                "account": _mask(account_identifier),
                "initiation_type": config.initiation_type.value,
                "bill_number": config.bill_number,
                "crc": encoded.crc,
            },
        )
        record_payload_generated(config.initiation_type.value)
        return GenerateResult(config=config, encoded=encoded, components=components)
