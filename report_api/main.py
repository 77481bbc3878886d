from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from report_api.core.settings import Settings, settings
from report_api.core.logger import logger, configure_logging
from report_api.v1_0.v1_router import v1_router
from report_api.app_containers import ApplicationContainer

METHOD_NOT_ALLOWED = "Method not allowed"


@asynccontextmanager
async def lifespan(app: FastAPI):
    cfg: Settings = app.state.settings
    logger.info("%s starting in %s", cfg.APP_NAME, cfg.APP_ENV)
    try:
        yield
    finally:
        count = app.state.container.api_container.purchase_repository().count()
        logger.info("%s shutdown, dropping %s purchase(s)", cfg.APP_NAME, count)


async def plain_text_http_error(request: Request, exc: StarletteHTTPException) -> PlainTextResponse:
    detail = METHOD_NOT_ALLOWED if exc.status_code == 405 else str(exc.detail)
    logger.debug(
        "[App] %s %s -> %s %s",
        request.method,
        request.url.path,
        exc.status_code,
        detail,
    )
    return PlainTextResponse(detail, status_code=exc.status_code, headers=exc.headers)


def create_app(app_settings: Optional[Settings] = None) -> FastAPI:
    cfg = app_settings or settings
    configure_logging(cfg.LOG_LEVEL)

    container = ApplicationContainer()
    container.config.from_dict(
        {
            "legacy_create_status": cfg.LEGACY_CREATE_STATUS,
            "api": {"id_policy": cfg.ID_POLICY},
        }
    )

    app = FastAPI(
        title=cfg.APP_NAME,
        version=cfg.APP_VERSION,
        debug=cfg.DEBUG,
        openapi_url="/openapi.json" if cfg.DEBUG else None,
        docs_url="/docs" if cfg.DEBUG else None,
        redoc_url=None,
        lifespan=lifespan,
        redirect_slashes=False,
    )

    app.state.container = container
    app.state.settings = cfg

    logger.info(
        "Store id_policy=%s legacy_create_status=%s",
        cfg.ID_POLICY,
        cfg.LEGACY_CREATE_STATUS,
    )

    app.add_exception_handler(StarletteHTTPException, plain_text_http_error)
    app.include_router(v1_router)

    return app


def run() -> None:
    logger.info("Starting server on %s", settings.ADDRESS)
    try:
        uvicorn.run(
            create_app(settings),
            host=settings.HOST,
            port=settings.PORT,
            log_config=None,
            log_level=settings.LOG_LEVEL.lower(),
        )
    except Exception as e:
        logger.critical("Server stopped: %s", e, exc_info=True)
        raise


if __name__ == "__main__":
    run()
