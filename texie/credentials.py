"""CredentialStore — client credentials in memory, access token in durable storage."""
from typing import Optional

from texie.constants import TOKEN_STORAGE_KEY
from texie.models import Credentials
from texie.token_store import TokenStorage


class CredentialStore:

    def __init__(self, storage: TokenStorage) -> None:
        self._storage = storage
        self._credentials: Optional[Credentials] = None

    def set_credentials(self, client_id: str, client_secret: str) -> None:
        self._credentials = Credentials(client_id=client_id, client_secret=client_secret)

    @property
    def credentials(self) -> Optional[Credentials]:
        return self._credentials

    @property
    def client_id(self) -> Optional[str]:
        match self._credentials:
            case None:
                return None
            case creds:
                return creds.client_id

    def get_access_token(self) -> str:
        """Stored token, or "" when never set (both mean unauthenticated)."""
        return self._storage.get(TOKEN_STORAGE_KEY) or ""

    def set_access_token(self, token: str) -> None:
        self._storage.set(TOKEN_STORAGE_KEY, token)

    def clear_access_token(self) -> None:
        self._storage.set(TOKEN_STORAGE_KEY, "")
