"""ServiceError — failures returned (never raised) by network operations."""
from dataclasses import dataclass


@dataclass(frozen=True)
class AuthMissing:
    """No client credentials were configured."""

    def __str__(self) -> str:
        return "client credentials were not provided"


@dataclass(frozen=True)
class NetworkFailure:
    cause: str

    def __str__(self) -> str:
        return f"network failure: {self.cause}"


@dataclass(frozen=True)
class HttpStatus:
    code: int

    def __str__(self) -> str:
        return f"unexpected HTTP status {self.code}"


@dataclass(frozen=True)
class MalformedResponse:
    detail: str = ""

    def __str__(self) -> str:
        return f"malformed response: {self.detail}" if self.detail else "malformed response"


@dataclass(frozen=True)
class EncodingFailure:
    cause: str

    def __str__(self) -> str:
        return f"could not encode request: {self.cause}"


ServiceError = AuthMissing | NetworkFailure | HttpStatus | MalformedResponse | EncodingFailure
