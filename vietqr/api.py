"""FastAPI application for vietqr."""
from __future__ import annotations

import logging

from fastapi import Depends, FastAPI, Header, HTTPException, Request, status
from fastapi.responses import JSONResponse, Response

from .config import settings
from .logging_conf import configure_logging
from .middleware import RequestLoggingMiddleware, route_path
from .monitoring import metrics_payload, record_service_error
from .schemas import (
    GenerateQRRequest,
    GenerateQRResponse,
    InitiationTypeEnum,
    PayloadComponentsSchema,
    TLVItemSchema,
    VerifyQRRequest,
    VerifyQRResponse,
)
from .services.errors import ServiceError
from .services.generator import PayloadGenerator
from .services.inspector import PayloadInspector

app = FastAPI(title="vietqr", version="0.1.0")
app.add_middleware(RequestLoggingMiddleware)

logger = logging.getLogger("vietqr.api")


def _warn_insecure_defaults() -> None:
    if settings.api_key == "dev-secret-key":
        logger.warning(
            "api key is using the default value",
            extra={"config_key": "api_key"},
        )


@app.on_event("startup")
async def on_startup() -> None:
    configure_logging()
    _warn_insecure_defaults()


async def require_api_key(x_api_key: str = Header(...)) -> None:
    if x_api_key != settings.api_key:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid API key")


def get_payload_generator() -> PayloadGenerator:
    return PayloadGenerator()


def get_payload_inspector() -> PayloadInspector:
    return PayloadInspector()


@app.exception_handler(ServiceError)
async def service_error_handler(request: Request, exc: ServiceError) -> JSONResponse:
    path = route_path(request)
    logger.warning(
        "service error",
        extra={"code": exc.code, "path": path, "method": request.method},
    )
    record_service_error(exc.code, path)
    return JSONResponse(status_code=exc.status_code, content={"code": exc.code, "message": exc.message})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "unhandled exception",
        extra={"path": route_path(request), "method": request.method},
    )
    return JSONResponse(status_code=500, content={"code": "ERR_INTERNAL", "message": "Internal server error"})


@app.get("/health", tags=["system"])
async def health() -> dict[str, str]:
    return {"status": "ok"}


@app.get("/metrics", tags=["system"])
async def metrics() -> Response:
    payload, content_type = metrics_payload()
    return Response(content=payload, media_type=content_type)


@app.post("/v1/qr", response_model=GenerateQRResponse, tags=["qr"], dependencies=[Depends(require_api_key)])
async def generate_qr(
    payload: GenerateQRRequest,
    generator: PayloadGenerator = Depends(get_payload_generator),
) -> GenerateQRResponse:
    result = generator.create_payload(
        bank_bin=payload.bank_bin,
        account_identifier=payload.account_identifier,
        is_account=payload.is_account,
        initiation_type=payload.initiation_type.value if payload.initiation_type else None,
        amount=payload.amount,
        description=payload.description,
    )

    return GenerateQRResponse(
        payload=result.encoded.payload,
        crc=result.encoded.crc,
        bill_number=result.config.bill_number,
        initiation_type=InitiationTypeEnum(result.config.initiation_type.value),
        components=PayloadComponentsSchema(**result.components.to_dict()),
    )


@app.post("/v1/qr/verify", response_model=VerifyQRResponse, tags=["qr"], dependencies=[Depends(require_api_key)])
async def verify_qr(
    payload: VerifyQRRequest,
    inspector: PayloadInspector = Depends(get_payload_inspector),
) -> VerifyQRResponse:
    result = inspector.inspect(payload.payload)
    return VerifyQRResponse(
        valid=result.valid,
        expected_crc=result.expected_crc,
        actual_crc=result.actual_crc,
        tags=[TLVItemSchema(tag=item.tag, length=len(item.value), value=item.value) for item in result.items],
    )
