"""TokenManager — OAuth2 client-credentials exchange and token revocation."""
import asyncio
import logging

import httpx

from texie.constants import (
    ACCESS_TOKEN_FIELD,
    GRANT_TYPE_CLIENT_CREDENTIALS,
    GRANT_TYPE_FIELD,
    MSG_CREDENTIALS_MISSING,
    MSG_REVOKE_FAILED,
    MSG_REVOKE_IGNORED,
    MSG_TOKEN_ACQUIRED,
    MSG_TOKEN_FAILED,
    MSG_TOKEN_MALFORMED,
    MSG_TOKEN_REVOKED,
    REVOKE_CLIENT_ID_FIELD,
    REVOKE_TOKEN_FIELD,
    REVOKE_URL,
    TOKEN_TYPE_HINT_ACCESS,
    TOKEN_TYPE_HINT_FIELD,
    TOKEN_URL,
)
from texie.credentials import CredentialStore
from texie.errors import AuthMissing, MalformedResponse, NetworkFailure, ServiceError

logger = logging.getLogger(__name__)


def _token_tail(token: str) -> str:
    return token[-4:]


class TokenManager:
    """Obtains, stores and revokes the access token.

    Token operations share one asyncio.Lock, so overlapping authenticate()
    calls run back to back instead of interleaving revoke and acquire.
    """

    def __init__(self, store: CredentialStore, http: httpx.AsyncClient) -> None:
        self._store = store
        self._http = http
        self._lock = asyncio.Lock()

    async def acquire_token(self) -> str | ServiceError:
        async with self._lock:
            return await self._acquire()

    async def revoke_token(self) -> None | ServiceError:
        async with self._lock:
            return await self._revoke()

    async def authenticate(self) -> str | ServiceError:
        """Revoke the current token (outcome ignored) then acquire a new one."""
        async with self._lock:
            match await self._revoke():
                case None:
                    pass
                case error:
                    logger.debug(MSG_REVOKE_IGNORED, error)
            return await self._acquire()

    # ── unlocked bodies ───────────────────────────────────────────────────────

    async def _acquire(self) -> str | ServiceError:
        match self._store.credentials:
            case None:
                logger.warning(MSG_CREDENTIALS_MISSING)
                return AuthMissing()
            case creds:
                auth = httpx.BasicAuth(creds.client_id, creds.client_secret)

        try:
            response = await self._http.post(
                TOKEN_URL,
                data={GRANT_TYPE_FIELD: GRANT_TYPE_CLIENT_CREDENTIALS},
                auth=auth,
            )
            response.raise_for_status()
            body = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.error(MSG_TOKEN_FAILED, exc)
            return NetworkFailure(str(exc))

        match body:
            case {"access_token": str() as token}:
                self._store.set_access_token(token)
                logger.info(MSG_TOKEN_ACQUIRED, _token_tail(token))
                return token
            case _:
                logger.error(MSG_TOKEN_MALFORMED)
                return MalformedResponse(f"missing {ACCESS_TOKEN_FIELD}")

    async def _revoke(self) -> None | ServiceError:
        match self._store.client_id:
            case None:
                logger.warning(MSG_CREDENTIALS_MISSING)
                return AuthMissing()
            case client_id:
                form = {
                    REVOKE_TOKEN_FIELD: self._store.get_access_token(),
                    REVOKE_CLIENT_ID_FIELD: client_id,
                    TOKEN_TYPE_HINT_FIELD: TOKEN_TYPE_HINT_ACCESS,
                }

        try:
            response = await self._http.post(REVOKE_URL, data=form)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.error(MSG_REVOKE_FAILED, exc)
            return NetworkFailure(str(exc))

        self._store.clear_access_token()
        logger.info(MSG_TOKEN_REVOKED)
        return None
