# gp_relay/api/gp.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Request, Response
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from gp_relay.models.cors import CorsPolicy
from gp_relay.upstream.client import UpstreamError, UpstreamFetcher, get_fetcher

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json; charset=UTF-8"

# Methods the router never matches are answered by cors_method_not_allowed
ALL_METHODS = ["GET", "HEAD", "OPTIONS", "POST", "PUT", "PATCH", "DELETE", "TRACE"]

router = APIRouter(tags=["gp"])
cors_router = APIRouter(tags=["gp"])

cors_policy = CorsPolicy()


def _fetch_payload(fetcher: UpstreamFetcher) -> Optional[bytes]:
    """
    Fetch the upstream payload, or None when the fetch failed for any reason.
    """
    try:
        return fetcher.fetch()
    except UpstreamError as exc:
        logger.warning("Upstream fetch failed: %s", exc)
        return None


@router.get("/gp")
def relay_gp(fetcher: UpstreamFetcher = Depends(get_fetcher)) -> Response:
    """
    Relay the upstream feed as-is, without setting a content type.
    """
    payload = _fetch_payload(fetcher)
    if payload is None:
        return PlainTextResponse("Internal Server Error", status_code=500)

    return Response(content=payload)


@cors_router.api_route("/gp", methods=ALL_METHODS)
def relay_gp_cors(
    request: Request,
    fetcher: UpstreamFetcher = Depends(get_fetcher),
) -> Response:
    """
    Relay the upstream feed with permissive CORS headers; answers preflight without fetching.
    """
    headers = cors_policy.headers_for(request.headers)

    if request.method == "OPTIONS":
        return Response(status_code=204, headers=headers)

    if request.method != "GET":
        return Response(status_code=405, headers=headers)

    payload = _fetch_payload(fetcher)
    if payload is None:
        return Response(status_code=500, headers=headers)

    return Response(content=payload, media_type=JSON_CONTENT_TYPE, headers=headers)


def cors_method_not_allowed(request: Request, exc: StarletteHTTPException) -> Response:
    """
    Empty 405 with the CORS headers for any method outside ALL_METHODS.
    """
    return Response(status_code=405, headers=cors_policy.headers_for(request.headers))
