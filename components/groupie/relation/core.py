from groupie.log import get_logger
from groupie.models.relations import Relation
from groupie.upstream import UpstreamClient

_log = get_logger(__name__)


class RelationRepository:
    def __init__(self, client: UpstreamClient, relation_url: str):
        self._client = client
        self.relation_url = relation_url.rstrip("/")

    def url_for(self, artist_id: int) -> str:
        return f"{self.relation_url}/{artist_id}"

    async def get_relation(self, artist_id: int) -> Relation:
        """
        Fetch the date/location relation of one artist.

        An id upstream does not know surfaces as whatever the upstream client
        raises for that response (TransportError with the status, or
        DecodeError), never as an empty Relation.
        """
        relation = await self._client.fetch(self.url_for(artist_id), Relation)
        _log.debug(
            f"Relation {artist_id}: {len(relation.datesLocations)} locations"
        )
        return relation
