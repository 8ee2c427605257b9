"""
Method dispatch for the signing endpoint.

Transport adapters (the serverless entry point and the FastAPI app) turn
their native request into a HandlerRequest and render the HandlerResponse
back; everything between is decided here.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from spaces_signer.core.config import SignerConfig
from spaces_signer.core.error_codes import ErrorCode
from spaces_signer.core.errors import ApiError
from spaces_signer.core.security import now_utc
from spaces_signer.schemas.sign import HealthResponse, SignRequest
from spaces_signer.services.key_validator import validate_key
from spaces_signer.services.url_signer import (
    DEFAULT_TTL_SECONDS,
    MAX_TTL_SECONDS,
    MIN_TTL_SECONDS,
    sign_get_url,
)

logger = logging.getLogger(__name__)

ALLOW_METHODS = "GET, POST, OPTIONS"
ALLOW_HEADERS = "Content-Type, Authorization"
MAX_AGE_SECONDS = "86400"


class Method(str, Enum):
    OPTIONS = "OPTIONS"
    GET = "GET"
    POST = "POST"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, raw: Any) -> Method:
        value = str(raw or "").strip().upper()
        try:
            return cls(value)
        except ValueError:
            return cls.OTHER


@dataclass(frozen=True)
class HandlerRequest:
    method: str
    params: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class HandlerResponse:
    status_code: int
    headers: dict[str, str]
    body: dict[str, Any] | None = None


def cors_headers(config: SignerConfig, *, with_content_type: bool = True) -> dict[str, str]:
    headers = {
        "Access-Control-Allow-Origin": config.cors_allow_origin,
        "Access-Control-Allow-Methods": ALLOW_METHODS,
        "Access-Control-Allow-Headers": ALLOW_HEADERS,
        "Access-Control-Max-Age": MAX_AGE_SECONDS,
    }
    if with_content_type:
        headers["Content-Type"] = "application/json"
    return headers


def parse_ttl(raw: Any) -> int:
    """Coerce an untrusted ttlSec into whole seconds within the allowed range."""
    if raw is None:
        return DEFAULT_TTL_SECONDS

    # Booleans and blank strings count as 0 or 1 and clamp to the minimum.
    if isinstance(raw, bool):
        raw = int(raw)
    if isinstance(raw, int):
        return max(MIN_TTL_SECONDS, min(raw, MAX_TTL_SECONDS))

    if isinstance(raw, float):
        value = raw
    elif isinstance(raw, str):
        text = raw.strip()
        if not text:
            return MIN_TTL_SECONDS
        try:
            value = float(text)
        except ValueError:
            return DEFAULT_TTL_SECONDS
    else:
        return DEFAULT_TTL_SECONDS

    if math.isnan(value):
        return DEFAULT_TTL_SECONDS
    return math.floor(max(MIN_TTL_SECONDS, min(value, MAX_TTL_SECONDS)))


def _json(config: SignerConfig, status_code: int, body: dict[str, Any]) -> HandlerResponse:
    return HandlerResponse(status_code=status_code, headers=cors_headers(config), body=body)


def _error(config: SignerConfig, exc: ApiError) -> HandlerResponse:
    return _json(config, exc.status_code, exc.to_body())


def _health(config: SignerConfig) -> HandlerResponse:
    health = HealthResponse(
        bucket=config.bucket.bucket,
        region=config.bucket.region,
        access_key_suffix=config.credentials.access_key_suffix,
    )
    return _json(config, 200, health.model_dump(by_alias=True))


def _sign(config: SignerConfig, params: Mapping[str, Any], now: datetime) -> HandlerResponse:
    sign_request = SignRequest(
        key=validate_key(params.get("key"), prefix=config.key_prefix),
        ttl_sec=parse_ttl(params.get("ttlSec")),
    )

    result = sign_get_url(config.bucket, config.credentials, sign_request.key, sign_request.ttl_sec, now)
    logger.info("Signed GET url key=%s expires_at=%s", result.key, result.expires_at)
    return _json(config, 200, result.model_dump(by_alias=True))


def dispatch(request: HandlerRequest, config: SignerConfig, now: datetime | None = None) -> HandlerResponse:
    """Handle one invocation. Never raises; every outcome is a status + body pair."""
    try:
        if not config.is_configured:
            logger.error("Signer is missing bucket, region or credentials")
            raise ApiError(status_code=500, code=ErrorCode.SERVER_MISCONFIGURED, message="Server misconfiguration")

        match Method.parse(request.method):
            case Method.OPTIONS:
                return HandlerResponse(status_code=204, headers=cors_headers(config, with_content_type=False))
            case Method.GET:
                return _health(config)
            case Method.POST:
                return _sign(config, request.params, now or now_utc())
            case Method.OTHER:
                raise ApiError(status_code=405, code=ErrorCode.METHOD_NOT_ALLOWED, message="Method Not Allowed")
    except ApiError as exc:
        return _error(config, exc)
    except Exception:
        logger.exception("Unhandled error while signing")
        return _error(
            config,
            ApiError(status_code=500, code=ErrorCode.INTERNAL_ERROR, message="Internal server error"),
        )
