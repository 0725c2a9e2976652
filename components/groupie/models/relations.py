from collections.abc import Iterator

from pydantic import BaseModel, ConfigDict

from groupie.models.artists import Artist

# Country codes upstream writes in lower case, e.g. "usa", "uk"
_SHORT_COUNTRY = 3


def format_location(label: str) -> str:
    """Turn an upstream label like ``north_carolina-usa`` into ``North Carolina, USA``"""
    parts = [part.replace("_", " ").strip() for part in label.split("-")]
    pretty: list[str] = []
    for i, part in enumerate(parts):
        if i == len(parts) - 1 and i > 0 and len(part) <= _SHORT_COUNTRY:
            pretty.append(part.upper())
        else:
            pretty.append(part.title())
    return ", ".join(p for p in pretty if p)


class Relation(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int
    datesLocations: dict[str, list[str]] = {}

    def concerts(self) -> Iterator[tuple[str, list[str]]]:
        """Location/dates pairs ordered by location label.

        Upstream key order means nothing, this gives the page a stable order.
        """
        for location in sorted(self.datesLocations):
            yield location, self.datesLocations[location]


class ArtistDetail(BaseModel):
    model_config = ConfigDict(frozen=True)

    artist: Artist
    relation: Relation
