from groupie.server.config import config
from groupie.log import get_logger, configure_logging

configure_logging(config.log_level, config.log_file)

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles

from groupie.models.errors import GroupieError, UpstreamError
from groupie.server.api.pages import api_router as pages_router
from groupie.server.helpers import STATIC_DIR, templates
from groupie.upstream import close_upstream, setup_upstream

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):

    log.info(f"Reading artists from {config.artists_url}")
    setup_upstream(config.upstream_timeout)

    yield

    await close_upstream()


app = FastAPI(lifespan=lifespan, docs_url=None, redoc_url=None, openapi_url=None)

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")
app.include_router(pages_router)


@app.exception_handler(GroupieError)
async def groupie_error_page(request: Request, exc: GroupieError):
    if isinstance(exc, UpstreamError):
        log.error(f"{request.url.path}: {exc.message} ({exc.url})", exc_info=exc.__cause__)
    else:
        log.warning(f"{request.url.path}: {exc.message}")

    return templates.TemplateResponse(
        request,
        "error.html",
        {"error": exc.to_standard_error()},
        status_code=exc.code,
    )
