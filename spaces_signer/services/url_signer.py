"""
Signature V2 query-string authentication for S3-compatible GET URLs.
"""

from __future__ import annotations

import math
from datetime import datetime
from urllib.parse import quote

from spaces_signer.core.config import BucketConfig, Credentials
from spaces_signer.core.security import hmac_sha1_base64, to_iso_z
from spaces_signer.schemas.sign import SignedResult

MIN_TTL_SECONDS = 60
MAX_TTL_SECONDS = 24 * 3600
DEFAULT_TTL_SECONDS = 1800

# Characters encodeURIComponent leaves alone on top of quote()'s own safe set.
_URI_COMPONENT_SAFE = "!*'()"


def clamp_ttl(ttl_sec: int) -> int:
    return max(MIN_TTL_SECONDS, min(int(ttl_sec), MAX_TTL_SECONDS))


def encode_uri_component(value: str) -> str:
    return quote(value, safe=_URI_COMPONENT_SAFE)


def encode_key_path(key: str) -> str:
    return "/".join(encode_uri_component(segment) for segment in key.split("/"))


def build_string_to_sign(bucket: str, key: str, expires: int) -> str:
    canonical_resource = f"/{bucket}/{key}"
    return "\n".join(
        [
            "GET",
            "",  # Content-MD5
            "",  # Content-Type
            str(expires),
            canonical_resource,
        ]
    )


def compute_signature(secret_key: str, bucket: str, key: str, expires: int) -> str:
    return hmac_sha1_base64(secret_key, build_string_to_sign(bucket, key, expires))


def sign_get_url(
    bucket: BucketConfig,
    credentials: Credentials,
    key: str,
    ttl_sec: int,
    now: datetime,
) -> SignedResult:
    """
    Build a presigned GET URL for an already validated key.

    `expires` is derived once from `now` and shared by the signature, the URL
    and the reported expiry so the three can never disagree.
    """
    ttl = clamp_ttl(ttl_sec)
    expires = math.floor(now.timestamp()) + ttl

    signature = compute_signature(credentials.secret_key.get_secret_value(), bucket.bucket, key, expires)

    url = (
        f"https://{bucket.endpoint_host}/{encode_key_path(key)}"
        f"?AWSAccessKeyId={encode_uri_component(credentials.access_key)}"
        f"&Expires={expires}"
        f"&Signature={encode_uri_component(signature)}"
    )

    return SignedResult(url=url, expires_in=ttl, expires_at=to_iso_z(expires), key=key)
