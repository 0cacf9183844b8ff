"""TexieCloudService — the single entry point callers construct and keep."""
from typing import Optional

import httpx

from texie.annotation import AnnotationClient
from texie.constants import HOST_URL
from texie.credentials import CredentialStore
from texie.errors import ServiceError
from texie.models import AnnotationResult
from texie.token_manager import TokenManager
from texie.token_store import JsonFileTokenStorage, TokenStorage


class TexieCloudService:
    """Delegates to CredentialStore, TokenManager and AnnotationClient.

    Call configure() at startup, authenticate() before the first annotate().
    """

    def __init__(
        self,
        storage: Optional[TokenStorage] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._owns_http = http_client is None
        self._http = http_client or httpx.AsyncClient()
        self._credentials = CredentialStore(storage or JsonFileTokenStorage())
        self._tokens = TokenManager(self._credentials, self._http)
        self._annotations = AnnotationClient(self._credentials, self._http)

    async def __aenter__(self) -> "TexieCloudService":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    def configure(self, client_id: str, client_secret: str) -> None:
        self._credentials.set_credentials(client_id, client_secret)

    @property
    def access_token(self) -> str:
        return self._credentials.get_access_token()

    def image_url(self, relative_path: str) -> Optional[httpx.URL]:
        try:
            return httpx.URL(HOST_URL + relative_path)
        except httpx.InvalidURL:
            return None

    async def token(self) -> str | ServiceError:
        return await self._tokens.acquire_token()

    async def authenticate(self) -> str | ServiceError:
        return await self._tokens.authenticate()

    async def revoke(self) -> None | ServiceError:
        return await self._tokens.revoke_token()

    async def annotate(self, image: bytes, store: bool = True) -> AnnotationResult | ServiceError:
        return await self._annotations.annotate(image, store=store)

    async def aclose(self) -> None:
        match self._owns_http:
            case True:
                await self._http.aclose()
            case False:
                pass
