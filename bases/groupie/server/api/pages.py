from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from groupie.log import get_logger
from groupie.models.artists import Artist
from groupie.query import build_detail, filter_by_name_substring
from groupie.relation import RelationRepository
from groupie.server.helpers import templates, with_artists, with_relation_repository

_log = get_logger(__name__)

api_router = APIRouter()


@api_router.get("/", response_class=HTMLResponse)
async def index(
    request: Request, artists: Annotated[list[Artist], Depends(with_artists)]
):
    """All artists, in upstream order"""

    _log.info("index called")

    return templates.TemplateResponse(
        request, "index.html", {"artists": artists, "query": None}
    )


@api_router.get("/artistpage.html", response_class=HTMLResponse)
async def artist_page(
    request: Request,
    artists: Annotated[list[Artist], Depends(with_artists)],
    relations: Annotated[RelationRepository, Depends(with_relation_repository)],
    artist: str | None = None,
):
    _log.info(f"artist_page called: {artist}")

    detail = await build_detail(artists, artist, relations)

    _log.debug(f"artist_page/{artist} finished")
    return templates.TemplateResponse(
        request,
        "artistpage.html",
        {"artist": detail.artist, "relation": detail.relation},
    )


@api_router.get("/search", response_class=HTMLResponse)
async def search(
    request: Request,
    artists: Annotated[list[Artist], Depends(with_artists)],
    q: str = "",
):
    _log.info(f"search called: {q!r}")

    results = filter_by_name_substring(artists, q)

    _log.debug(f"search {q!r}: {len(results)} of {len(artists)} artists")
    return templates.TemplateResponse(
        request, "index.html", {"artists": results, "query": q}
    )
