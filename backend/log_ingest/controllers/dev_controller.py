from fastapi import APIRouter, Request
from .gateway_controller import ALL_METHODS, forward, to_proxy_request

router = APIRouter(tags=["Dev"])

@router.api_route("/lambda", methods=ALL_METHODS)
async def dev_to_lambda(req: Request):
    """Emula il trigger API Gateway: ricostruisce la richiesta e la passa al controller."""
    # come net/http: Host non fa parte degli header inoltrati
    return await forward(req, await to_proxy_request(req, skip_headers=("Host",)))
