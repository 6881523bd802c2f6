"""Tests for bearer token verification."""

from datetime import timedelta

import pytest

from app.domain.exceptions import AuthenticationException
from app.infrastructure.security.jwt import decode_access_token
from tests.auth import issue_token


def test_returns_subject_as_user_id() -> None:
    assert decode_access_token(issue_token({"sub": "user-1"})) == "user-1"


def test_expired_token_rejected() -> None:
    token = issue_token({"sub": "user-1"}, expires_delta=timedelta(seconds=-10))
    with pytest.raises(AuthenticationException, match="Token is not valid"):
        decode_access_token(token)


def test_token_without_subject_rejected() -> None:
    with pytest.raises(AuthenticationException):
        decode_access_token(issue_token({"role": "x"}))


def test_empty_subject_rejected() -> None:
    with pytest.raises(AuthenticationException):
        decode_access_token(issue_token({"sub": ""}))


def test_token_signed_with_other_key_rejected() -> None:
    token = issue_token({"sub": "user-1"}, secret="other-key")
    with pytest.raises(AuthenticationException):
        decode_access_token(token)


def test_garbage_rejected() -> None:
    with pytest.raises(AuthenticationException):
        decode_access_token("not-a-jwt")
