from fastapi import APIRouter, Request, Response
from fastapi.concurrency import run_in_threadpool
from ..models.schemas import ProxyRequest
from ..utils.http import first_values, flatten_headers

ALL_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"]

router = APIRouter(tags=["Gateway"])

async def to_proxy_request(req: Request, skip_headers=()) -> ProxyRequest:
    raw = await req.body()
    return ProxyRequest(
        method=req.method,
        headers=flatten_headers(req.headers.raw, skip=skip_headers),
        query_parameters=first_values(req.query_params.multi_items()),
        body=raw.decode("utf-8", errors="replace"),
    )

async def forward(req: Request, proxy_req: ProxyRequest) -> Response:
    # context Lambda (tempo residuo) messo nello scope da Mangum, assente in locale
    context = req.scope.get("aws.context")
    # insert bloccante (pymongo): fuori dall'event loop
    res = await run_in_threadpool(req.app.state.log_controller.handle, proxy_req, context)
    return Response(content=res.body, status_code=res.status_code, headers=res.headers)

@router.api_route("/{path:path}", methods=ALL_METHODS)
async def gateway_proxy(req: Request, path: str):
    """Qualsiasi path dell'API Gateway arriva al controller dei log."""
    return await forward(req, await to_proxy_request(req))
