"""
Object key gate for signing requests.

Only keys under a single prefix may be signed, so the signer can never be used
to mint read access to arbitrary objects in the bucket.
"""

from spaces_signer.core.error_codes import ErrorCode
from spaces_signer.core.errors import ApiError

DEFAULT_KEY_PREFIX = "uploads-shd/"


def validate_key(raw_key: object, prefix: str = DEFAULT_KEY_PREFIX) -> str:
    """Return the clean object key or raise ApiError(400)."""
    if not isinstance(raw_key, str) or not raw_key:
        raise ApiError(status_code=400, code=ErrorCode.MISSING_KEY, message="Missing 'key'")

    # Only leading slashes are normalized; the signed path must match the stored key byte for byte.
    key = raw_key.lstrip("/")

    if not key.startswith(prefix):
        raise ApiError(status_code=400, code=ErrorCode.INVALID_KEY_PREFIX, message="Invalid key prefix")

    if ".." in key:
        raise ApiError(status_code=400, code=ErrorCode.PATH_TRAVERSAL, message="Invalid key")

    return key
