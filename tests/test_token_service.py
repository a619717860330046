# tests/test_token_service.py

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from usertask_api.config import Settings
from usertask_api.services.errors import AuthError, AuthErrorKind
from usertask_api.services.token_service import TokenService


def test_issued_token_validates_to_same_identity(token_service: TokenService) -> None:
    token = token_service.issue(7, "ann@x.com")
    claims = token_service.validate(token)

    assert claims.user_id == 7
    assert claims.email == "ann@x.com"
    assert claims.token_id


def test_token_lives_for_one_hour(token_service: TokenService) -> None:
    issued = datetime(2030, 1, 1, 12, 0, tzinfo=timezone.utc)
    claims = token_service.validate(token_service.issue(1, "a@x.com", now=issued))

    assert claims.issued_at == issued
    assert claims.expires_at - claims.issued_at == timedelta(hours=1)


def test_each_token_has_unique_id(token_service: TokenService) -> None:
    first = token_service.validate(token_service.issue(1, "a@x.com"))
    second = token_service.validate(token_service.issue(1, "a@x.com"))
    assert first.token_id != second.token_id


def test_expired_token_is_invalid(token_service: TokenService) -> None:
    two_hours_ago = datetime.now(timezone.utc) - timedelta(hours=2)
    token = token_service.issue(1, "a@x.com", now=two_hours_ago)

    with pytest.raises(AuthError) as exc_info:
        token_service.validate(token)
    assert exc_info.value.kind == AuthErrorKind.INVALID_TOKEN


def test_tampered_token_is_invalid(token_service: TokenService) -> None:
    token = token_service.issue(1, "a@x.com")
    header, payload, signature = token.split(".")
    tampered = ".".join([header, payload, signature[::-1]])

    with pytest.raises(AuthError) as exc_info:
        token_service.validate(tampered)
    assert exc_info.value.kind == AuthErrorKind.INVALID_TOKEN


@pytest.mark.parametrize(
    "changes",
    [
        {"jwt_key": "another-key"},
        {"jwt_issuer": "SomeoneElse"},
        {"jwt_audience": "SomeoneElse"},
    ],
)
def test_token_from_foreign_configuration_is_invalid(settings: Settings, changes: dict) -> None:
    foreign = TokenService(replace(settings, **changes))
    token = foreign.issue(1, "a@x.com")

    with pytest.raises(AuthError) as exc_info:
        TokenService(settings).validate(token)
    assert exc_info.value.kind == AuthErrorKind.INVALID_TOKEN


def test_garbage_is_invalid(token_service: TokenService) -> None:
    with pytest.raises(AuthError):
        token_service.validate("not.a.token")
