from typing import Annotated, Any

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import JSONResponse

from spaces_signer.core.config import SignerConfig, get_signer_config
from spaces_signer.services.dispatcher import HandlerRequest, HandlerResponse, dispatch

router = APIRouter(tags=["sign"])

ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE", "CONNECT"]


async def _read_params(request: Request) -> dict[str, Any]:
    params: dict[str, Any] = dict(request.query_params)
    raw = await request.body()
    if not raw:
        return params
    try:
        payload = await request.json()
    except ValueError:
        return params
    if isinstance(payload, dict):
        params.update(payload)
    return params


def render(response: HandlerResponse) -> Response:
    if response.body is None:
        return Response(status_code=response.status_code, headers=response.headers)
    return JSONResponse(content=response.body, status_code=response.status_code, headers=response.headers)


@router.api_route("/", methods=ROUTED_METHODS)
@router.api_route("/sign", methods=ROUTED_METHODS)
async def sign_download(
    request: Request,
    config: Annotated[SignerConfig, Depends(get_signer_config)],
) -> Response:
    params = await _read_params(request)
    return render(dispatch(HandlerRequest(method=request.method, params=params), config))
