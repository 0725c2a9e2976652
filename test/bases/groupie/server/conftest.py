import httpx
from httpx import ASGITransport, AsyncClient
import pytest
import pytest_asyncio

from groupie.server.core import app
from groupie.upstream import UpstreamClient, with_upstream

ARTISTS = [
    {
        "id": 1,
        "image": "https://groupietrackers.herokuapp.com/api/images/queen.jpeg",
        "name": "Queen",
        "members": ["Freddie Mercury", "Brian May"],
        "creationDate": 1970,
        "firstAlbum": "14-12-1973",
        "locations": "https://groupietrackers.herokuapp.com/api/locations/1",
        "concertDates": "https://groupietrackers.herokuapp.com/api/dates/1",
        "relations": "https://groupietrackers.herokuapp.com/api/relation/1",
    },
    {
        "id": 2,
        "image": "https://groupietrackers.herokuapp.com/api/images/soja.jpeg",
        "name": "queens of the stone age",
        "members": ["Josh Homme"],
        "creationDate": 1996,
        "firstAlbum": "06-10-1998",
    },
    {
        "id": 3,
        "image": "https://groupietrackers.herokuapp.com/api/images/pinkfloyd.jpeg",
        "name": "Pink Floyd",
        "members": ["David Gilmour", "Roger Waters"],
        "creationDate": 1965,
        "firstAlbum": "05-08-1967",
    },
]

RELATIONS = {
    1: {
        "id": 1,
        "datesLocations": {
            "north_carolina-usa": ["28-01-2020"],
            "osaka-japan": ["14-02-2020", "15-02-2020"],
        },
    },
    3: {"id": 3, "datesLocations": {}},
}


@pytest.fixture
def upstream_calls() -> list[str]:
    """Paths requested from the fake upstream, in order"""
    return []


@pytest.fixture
def upstream_handler(upstream_calls):
    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        upstream_calls.append(path)

        if path == "/api/artists":
            return httpx.Response(200, json=ARTISTS)

        if path.startswith("/api/relation/"):
            artist_id = int(path.rsplit("/", 1)[1])
            if artist_id in RELATIONS:
                return httpx.Response(200, json=RELATIONS[artist_id])

        return httpx.Response(404, text="404 page not found")

    return handler


@pytest_asyncio.fixture
async def upstream(upstream_handler):
    client = UpstreamClient(
        httpx.AsyncClient(transport=httpx.MockTransport(upstream_handler))
    )
    app.dependency_overrides[with_upstream] = lambda: client
    yield client
    app.dependency_overrides.pop(with_upstream, None)
    await client.aclose()


@pytest_asyncio.fixture
async def httpx_client(upstream):
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as ac:
        yield ac
