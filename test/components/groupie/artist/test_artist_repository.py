import httpx
import pytest

from groupie.artist import ArtistRepository
from groupie.models.errors import DecodeError, TransportError
from groupie.upstream import UpstreamClient

ARTISTS_URL = "http://upstream.test/api/artists"


def make_repository(handler, seen: list[str] | None = None) -> ArtistRepository:
    def recording(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(str(request.url))
        return handler(request)

    http = httpx.AsyncClient(transport=httpx.MockTransport(recording))
    return ArtistRepository(UpstreamClient(http), ARTISTS_URL)


@pytest.mark.asyncio
async def test_list_artists_keeps_upstream_order():
    payload = [
        {"id": 3, "name": "Pink Floyd"},
        {"id": 1, "name": "Queen"},
        {"id": 2, "name": "SOJA"},
    ]
    repository = make_repository(lambda request: httpx.Response(200, json=payload))

    artists = await repository.list_artists()

    assert [a.id for a in artists] == [3, 1, 2]


@pytest.mark.asyncio
async def test_list_artists_refetches_every_call():
    seen: list[str] = []
    repository = make_repository(lambda request: httpx.Response(200, json=[]), seen)

    await repository.list_artists()
    await repository.list_artists()

    assert seen == [ARTISTS_URL, ARTISTS_URL]


@pytest.mark.asyncio
async def test_list_artists_tolerates_null_members():
    payload = [
        {"id": 1, "name": "Queen", "members": ["Freddie Mercury"]},
        {"id": 2, "name": "Solo Act", "members": None},
    ]
    repository = make_repository(lambda request: httpx.Response(200, json=payload))

    artists = await repository.list_artists()

    assert [a.id for a in artists] == [1, 2]
    assert artists[1].members == []


@pytest.mark.asyncio
async def test_list_artists_propagates_transport_error():
    repository = make_repository(lambda request: httpx.Response(500))

    with pytest.raises(TransportError) as exc_info:
        await repository.list_artists()

    assert exc_info.value.status_code == 500


@pytest.mark.asyncio
async def test_list_artists_propagates_decode_error():
    repository = make_repository(lambda request: httpx.Response(200, json=[{"id": "one"}]))

    with pytest.raises(DecodeError):
        await repository.list_artists()
