from texie.errors import (
    AuthMissing,
    EncodingFailure,
    HttpStatus,
    MalformedResponse,
    NetworkFailure,
    ServiceError,
)
from texie.models import AnnotationResult


def test_errors_compare_by_value():
    assert HttpStatus(500) == HttpStatus(500)
    assert HttpStatus(500) != HttpStatus(404)
    assert AuthMissing() == AuthMissing()


def test_error_messages_are_readable():
    assert str(HttpStatus(500)) == "unexpected HTTP status 500"
    assert "refused" in str(NetworkFailure("refused"))
    assert str(MalformedResponse()) == "malformed response"
    assert "missing text" in str(MalformedResponse("missing text"))
    assert "bad body" in str(EncodingFailure("bad body"))


def test_service_error_union_matches_every_variant():
    variants = [AuthMissing(), NetworkFailure("x"), HttpStatus(500), MalformedResponse(), EncodingFailure("x")]
    assert all(isinstance(v, ServiceError) for v in variants)
    assert not isinstance(AnnotationResult(recognized_text="hello"), ServiceError)
