from pathlib import Path
from typing import Annotated

from fastapi import Depends
from fastapi.templating import Jinja2Templates

from groupie.artist import ArtistRepository
from groupie.log import get_logger
from groupie.models.artists import Artist
from groupie.models.relations import format_location
from groupie.relation import RelationRepository
from groupie.server.config import config
from groupie.upstream import UpstreamClient, with_upstream

log = get_logger(__name__)

SERVER_DIR = Path(__file__).parent
STATIC_DIR = SERVER_DIR / "static"

templates = Jinja2Templates(directory=SERVER_DIR / "templates")
templates.env.filters["location"] = format_location


def with_artist_repository(
    client: Annotated[UpstreamClient, Depends(with_upstream)],
) -> ArtistRepository:
    return ArtistRepository(client, str(config.artists_url))


def with_relation_repository(
    client: Annotated[UpstreamClient, Depends(with_upstream)],
) -> RelationRepository:
    return RelationRepository(client, str(config.relation_url))


async def with_artists(
    repository: Annotated[ArtistRepository, Depends(with_artist_repository)],
) -> list[Artist]:
    log.debug("Loading artist collection")
    return await repository.list_artists()
