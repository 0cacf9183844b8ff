import base64

import httpx
import pytest

from texie.constants import ANNOTATION_URL, HOST_URL, REVOKE_URL, TOKEN_URL
from texie.errors import AuthMissing
from texie.models import AnnotationResult
from texie.service import TexieCloudService
from texie.token_store import JsonFileTokenStorage, MemoryTokenStorage


def _server(request: httpx.Request) -> httpx.Response:
    match str(request.url):
        case url if url == TOKEN_URL:
            return httpx.Response(200, json={"access_token": "T-svc"})
        case url if url == REVOKE_URL:
            return httpx.Response(200)
        case url if url.startswith(ANNOTATION_URL):
            return httpx.Response(201, json={"text": "hello", "image": "/img/1.jpg"})
        case _:
            return httpx.Response(404)


@pytest.fixture
def service(make_http):
    http, transport = make_http(_server)
    svc = TexieCloudService(storage=MemoryTokenStorage(), http_client=http)
    svc.transport = transport
    return svc


# ── image_url ─────────────────────────────────────────────────────────────────


def test_image_url_concatenates_host(service):
    url = service.image_url("/media/a.jpg")
    assert url == httpx.URL(HOST_URL + "/media/a.jpg")
    assert str(url) == "http://gw-q201.fit.vutbr.cz:8081/media/a.jpg"


def test_image_url_without_leading_slash_is_invalid(service):
    """Plain concatenation: a missing slash runs into the port and fails to parse."""
    assert service.image_url("media/a.jpg") is None


# ── delegation ────────────────────────────────────────────────────────────────


async def test_annotate_before_configure_is_auth_missing(service):
    assert await service.annotate(b"img") == AuthMissing()
    assert service.transport.requests == []


async def test_full_flow(service):
    service.configure("id", "secret")

    assert await service.authenticate() == "T-svc"
    assert service.access_token == "T-svc"

    result = await service.annotate(b"img", store=False)

    assert result == AnnotationResult(recognized_text="hello", stored_image_url="/img/1.jpg")
    upload = service.transport.requests[-1]
    assert upload.headers["Authorization"] == "Bearer T-svc"
    assert str(upload.url) == ANNOTATION_URL + "?store=false"


async def test_token_acquires_without_revoke(service):
    service.configure("id", "secret")

    assert await service.token() == "T-svc"
    assert [str(r.url) for r in service.transport.requests] == [TOKEN_URL]


async def test_revoke_clears_access_token(service):
    service.configure("id", "secret")
    await service.token()

    assert await service.revoke() is None
    assert service.access_token == ""


async def test_configure_overwrites_credentials(service):
    service.configure("id-1", "secret-1")
    service.configure("id-2", "secret-2")
    await service.token()

    expected = base64.b64encode(b"id-2:secret-2").decode()
    assert service.transport.requests[0].headers["Authorization"] == f"Basic {expected}"


# ── lifecycle ─────────────────────────────────────────────────────────────────


async def test_aclose_leaves_injected_client_open(make_http):
    http, _ = make_http(_server)
    svc = TexieCloudService(storage=MemoryTokenStorage(), http_client=http)

    await svc.aclose()

    assert not http.is_closed


async def test_context_manager_closes_owned_client():
    async with TexieCloudService(storage=MemoryTokenStorage()) as svc:
        http = svc._http
    assert http.is_closed


async def test_default_storage_is_json_file(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    async with TexieCloudService() as svc:
        assert isinstance(svc._credentials._storage, JsonFileTokenStorage)


async def test_token_survives_new_service(make_http, tmp_path):
    path = tmp_path / "token.json"
    http, _ = make_http(_server)
    first = TexieCloudService(storage=JsonFileTokenStorage(path), http_client=http)
    first.configure("id", "secret")
    await first.token()

    second = TexieCloudService(storage=JsonFileTokenStorage(path), http_client=http)

    assert second.access_token == "T-svc"
