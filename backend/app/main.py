import logging

from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.config import get_settings
from app.api import rewrite_routes

settings = get_settings()

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(
    title=settings.app_name,
    version="0.1.0",
    description="Rewrites job ads into inclusive, plain-language versions",
)

# ── Routers ─────────────────────────────────────────────────────────────────
# CORS is negotiated inside the rewrite route (see app.utils.cors).

app.include_router(rewrite_routes.router, prefix="/api", tags=["Rewrite"])

# ── Error Handlers ──────────────────────────────────────────────────────────


@app.exception_handler(StarletteHTTPException)
async def rewrite_method_not_allowed(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 405 and request.url.path == rewrite_routes.REWRITE_PATH:
        return rewrite_routes.method_not_allowed(request)
    return await http_exception_handler(request, exc)


# ── Health Check ────────────────────────────────────────────────────────────


@app.get("/api/health")
async def health_check():
    return {"status": "healthy", "app": settings.app_name, "version": "0.1.0"}
