import time
from pathlib import Path
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exception_handlers import http_exception_handler
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from quillquest.agents.creative import CreativeService
from quillquest.agents.venice import VeniceClient
from quillquest.core.config import Settings, settings as env_settings
from quillquest.core.logger import get_logger, log_api_request
from quillquest.web import routes as web_routes

logger = get_logger("main")

BASE_DIR = Path(__file__).resolve().parent


async def not_found_handler(request: Request, exc: StarletteHTTPException):
    # Known paths hit with the wrong method are reported as missing too
    if exc.status_code in (404, 405):
        return PlainTextResponse("Not Found", status_code=404)
    return await http_exception_handler(request, exc)


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or env_settings

    app = FastAPI(
        title=f"{settings.PROJECT_NAME} API",
        version=settings.VERSION,
        docs_url=None, redoc_url=None, openapi_url=None,
    )
    app.state.settings = settings
    app.state.creative = CreativeService(VeniceClient(settings))

    if not settings.VENICE_API_KEY:
        logger.warning("VENICE_API_KEY is not set, provider calls will fail authentication")

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        start = time.perf_counter()
        response = await call_next(request)
        log_api_request(
            request.method, request.url.path, response.status_code,
            (time.perf_counter() - start) * 1000,
        )
        return response

    app.add_exception_handler(StarletteHTTPException, not_found_handler)

    #Mount Static Files
    app.mount("/static", StaticFiles(directory=str(BASE_DIR / "static")), name="static")

    #Include Routers
    app.include_router(web_routes.router)

    return app


app = create_app()


def run():
    """Console entry point."""
    logger.info(f"{env_settings.PROJECT_NAME} server started on http://localhost:{env_settings.PORT}")
    uvicorn.run(app, host=env_settings.HOST, port=env_settings.PORT, log_level=env_settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
