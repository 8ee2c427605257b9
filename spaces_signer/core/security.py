import base64
import hashlib
import hmac
from datetime import datetime, timezone


def now_utc() -> datetime:
    return datetime.now(timezone.utc)


def hmac_sha1_base64(secret: str, message: str) -> str:
    digest = hmac.new(secret.encode("utf-8"), message.encode("utf-8"), hashlib.sha1).digest()
    return base64.b64encode(digest).decode("ascii")


def to_iso_z(epoch_seconds: int) -> str:
    """Format unix seconds as UTC ISO-8601 with millisecond precision, e.g. 2026-10-19T12:00:00.000Z."""
    moment = datetime.fromtimestamp(epoch_seconds, tz=timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")
