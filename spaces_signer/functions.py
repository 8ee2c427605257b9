"""
Serverless web-action entry point.

The runtime passes a single params dict: the HTTP method under `__ow_method`
and the JSON body fields merged in at the top level. The returned dict is
serialized by the runtime as the HTTP response.
"""

import json
from typing import Any

from spaces_signer.core.config import get_settings, get_signer_config
from spaces_signer.core.logging import setup_logging
from spaces_signer.services.dispatcher import HandlerRequest, HandlerResponse, dispatch


def to_web_action(response: HandlerResponse) -> dict[str, Any]:
    body = "" if response.body is None else json.dumps(response.body)
    return {"statusCode": response.status_code, "headers": response.headers, "body": body}


def main(params: dict[str, Any]) -> dict[str, Any]:
    setup_logging(get_settings().log_level)
    request = HandlerRequest(method=params.get("__ow_method", ""), params=params)
    return to_web_action(dispatch(request, get_signer_config()))
