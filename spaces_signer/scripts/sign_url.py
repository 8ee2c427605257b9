#!/usr/bin/env python3
"""
Mint a presigned GET URL locally using the configured Spaces credentials.

Reads SPACES_BUCKET, SPACES_REGION, DO_ACCESS_KEY and DO_SECRET_KEY from the
environment (or .env), applies the same key checks as the HTTP endpoint and
prints the JSON result.

Usage:
    python -m spaces_signer.scripts.sign_url uploads-shd/video.mp4
    python -m spaces_signer.scripts.sign_url uploads-shd/video.mp4 --ttl 3600
"""

from __future__ import annotations

import argparse
import json
import sys

from spaces_signer.core.config import get_signer_config
from spaces_signer.services.dispatcher import HandlerRequest, dispatch
from spaces_signer.services.url_signer import DEFAULT_TTL_SECONDS


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Print a presigned GET URL for an object key",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("key", help="Object key, e.g. uploads-shd/video.mp4")
    parser.add_argument(
        "--ttl",
        type=int,
        default=DEFAULT_TTL_SECONDS,
        help=f"Lifetime in seconds, clamped to 60..86400 (default: {DEFAULT_TTL_SECONDS})",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    response = dispatch(
        HandlerRequest(method="POST", params={"key": args.key, "ttlSec": args.ttl}),
        get_signer_config(),
    )
    print(json.dumps(response.body, indent=2))
    if response.status_code != 200:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
