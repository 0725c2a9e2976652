from groupie.log import get_logger
from groupie.models.artists import Artist
from groupie.upstream import UpstreamClient

_log = get_logger(__name__)


class ArtistRepository:
    def __init__(self, client: UpstreamClient, artists_url: str):
        self._client = client
        self.artists_url = artists_url

    async def list_artists(self) -> list[Artist]:
        """Fetch the full artist collection, in upstream order."""
        artists = await self._client.fetch(self.artists_url, list[Artist])
        _log.debug(f"Fetched {len(artists)} artists")
        return artists
