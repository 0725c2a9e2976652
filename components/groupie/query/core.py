from collections.abc import Sequence
from typing import Protocol

from groupie.log import get_logger
from groupie.models.artists import Artist
from groupie.models.errors import ArtistNotFound, BadRequest
from groupie.models.relations import ArtistDetail, Relation

_log = get_logger(__name__)


class RelationSource(Protocol):
    async def get_relation(self, artist_id: int) -> Relation: ...


def find_by_name(artists: Sequence[Artist], name: str | None) -> Artist:
    """
    Return the first artist whose name is exactly ``name``.

    Matching is case sensitive and follows the order of ``artists``, so
    duplicate names always resolve to the same artist.

    Raises
    ------
    BadRequest
        ``name`` is empty or missing.
    ArtistNotFound
        No artist carries that name.
    """
    if not name:
        raise BadRequest("Artist name not provided", parameter="artist")

    for artist in artists:
        if artist.name == name:
            return artist

    _log.warning(f"{name} requested, but not found")
    raise ArtistNotFound(name)


def filter_by_name_substring(
    artists: Sequence[Artist], query: str | None
) -> list[Artist]:
    """Artists whose name contains ``query``, ignoring case, in their original order.

    An empty query keeps every artist.
    """
    needle = (query or "").casefold()
    return [artist for artist in artists if needle in artist.name.casefold()]


async def build_detail(
    artists: Sequence[Artist], name: str | None, relations: RelationSource
) -> ArtistDetail:
    # Resolve first: a failed lookup must never reach the relation fetch
    artist = find_by_name(artists, name)
    relation = await relations.get_relation(artist.id)

    return ArtistDetail(artist=artist, relation=relation)
