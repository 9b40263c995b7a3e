import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response

from app.config import Settings, get_settings
from app.models.rewrite_models import RewriteResult
from app.services.rewrite_service import RewriteError, rewrite_job_ad
from app.utils.cors import CorsPolicy
from app.utils.request_body import parse_json_body

logger = logging.getLogger(__name__)

router = APIRouter()

REWRITE_PATH = "/api/rewrite"


def _cors_headers(request: Request, settings: Settings) -> dict[str, str]:
    return CorsPolicy.from_settings(settings).headers(request.headers.get("origin"))


def method_not_allowed(request: Request) -> JSONResponse:
    """
    405 for any method other than POST/OPTIONS (TRACE, CONNECT and custom
    verbs included). Called from the app's HTTP exception handler.
    """
    resolve_settings = request.app.dependency_overrides.get(get_settings, get_settings)
    headers = _cors_headers(request, resolve_settings())
    return JSONResponse({"error": "POST only"}, status_code=405, headers=headers)


@router.api_route(
    "/rewrite",
    methods=["POST", "OPTIONS"],
    responses={200: {"model": RewriteResult}},
)
async def rewrite_endpoint(request: Request, settings: Settings = Depends(get_settings)):
    """
    Rewrite a job ad into inclusive, plain language.
    The model's JSON is relayed unchanged on success.
    """
    headers = _cors_headers(request, settings)

    if request.method == "OPTIONS":
        return Response(status_code=204, headers=headers)

    try:
        payload = parse_json_body(await request.body())
        result = await rewrite_job_ad(payload, api_key=settings.openai_api_key)
        return JSONResponse(result, headers=headers)
    except RewriteError as e:
        return JSONResponse(e.payload, status_code=e.status_code, headers=headers)
    except Exception as e:
        logger.exception("Job ad rewrite failed")
        return JSONResponse({"error": str(e) or "Server error"}, status_code=500, headers=headers)
