"""AnnotationClient — authenticated multipart upload to the annotations endpoint."""
import logging

import httpx

from texie.constants import (
    ANNOTATION_CREATED_STATUS,
    ANNOTATION_URL,
    AUTHORIZATION_HEADER,
    BEARER_PREFIX,
    IMAGE_CONTENT_TYPE,
    IMAGE_FIELD,
    IMAGE_FILENAME,
    MSG_CREDENTIALS_MISSING,
    MSG_UPLOAD_ENCODING,
    MSG_UPLOAD_MALFORMED,
    MSG_UPLOAD_NETWORK,
    MSG_UPLOAD_OK,
    MSG_UPLOAD_STATUS,
    RESPONSE_TEXT_FIELD,
    STORE_DISABLED_QUERY,
)
from texie.credentials import CredentialStore
from texie.errors import (
    AuthMissing,
    EncodingFailure,
    HttpStatus,
    MalformedResponse,
    NetworkFailure,
    ServiceError,
)
from texie.models import AnnotationResult

logger = logging.getLogger(__name__)


def annotation_url(store: bool) -> str:
    match store:
        case False:
            return ANNOTATION_URL + STORE_DISABLED_QUERY
        case _:
            return ANNOTATION_URL


def parse_annotation(body: object) -> AnnotationResult | MalformedResponse:
    match body:
        case {"text": str() as text, "image": str() as url}:
            return AnnotationResult(recognized_text=text, stored_image_url=url)
        case {"text": str() as text}:
            return AnnotationResult(recognized_text=text)
        case _:
            return MalformedResponse(f"missing {RESPONSE_TEXT_FIELD}")


class AnnotationClient:
    """Uploads JPEG bytes and turns the service reply into an AnnotationResult.

    The bearer token is read from the CredentialStore at call time; callers
    authenticate first. Images are expected to be oriented already (see
    texie.imaging.prepare_image).
    """

    def __init__(self, store: CredentialStore, http: httpx.AsyncClient) -> None:
        self._store = store
        self._http = http

    async def annotate(self, image: bytes, store: bool = True) -> AnnotationResult | ServiceError:
        match self._store.credentials:
            case None:
                logger.warning(MSG_CREDENTIALS_MISSING)
                return AuthMissing()
            case _:
                pass

        headers = {AUTHORIZATION_HEADER: BEARER_PREFIX + self._store.get_access_token()}
        try:
            request = self._http.build_request(
                "POST",
                annotation_url(store),
                headers=headers,
                files={IMAGE_FIELD: (IMAGE_FILENAME, image, IMAGE_CONTENT_TYPE)},
            )
        except (TypeError, ValueError) as exc:
            logger.error(MSG_UPLOAD_ENCODING, exc)
            return EncodingFailure(str(exc))

        try:
            response = await self._http.send(request)
        except httpx.HTTPError as exc:
            logger.error(MSG_UPLOAD_NETWORK, exc)
            return NetworkFailure(str(exc))

        match response.status_code:
            case code if code == ANNOTATION_CREATED_STATUS:
                logger.info(MSG_UPLOAD_OK, len(image))
            case code:
                logger.error(MSG_UPLOAD_STATUS, code)
                return HttpStatus(code)

        try:
            body = response.json()
        except ValueError as exc:
            logger.error(MSG_UPLOAD_MALFORMED, exc)
            return MalformedResponse(str(exc))

        match parse_annotation(body):
            case MalformedResponse() as error:
                logger.error(MSG_UPLOAD_MALFORMED, error.detail)
                return error
            case result:
                return result
