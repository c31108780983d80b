"""
Tests for password hashing and signed tokens.
"""

from __future__ import annotations

import pytest

from app.application.exceptions import AuthenticationError
from app.infrastructure.security.passwords import hash_password, verify_password
from app.infrastructure.security.tokens import TokenSigner


def test_password_hash_is_salted_and_verifies():
    first = hash_password("secret", iterations=1000)
    second = hash_password("secret", iterations=1000)
    assert first != second
    assert verify_password("secret", first)
    assert not verify_password("Secret", first)
    assert not verify_password("secret", "garbage")


class FakeClock:
    def __init__(self, now: float) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def test_token_round_trip_and_expiry():
    clock = FakeClock(1_000_000)
    signer = TokenSigner(secret="s3cret", clock=clock)
    token = signer.sign({"id": "u1"}, expires_in_seconds=60)

    claims = signer.verify(token)
    assert claims["id"] == "u1"
    assert claims["exp"] == 1_000_060

    clock.now += 61
    with pytest.raises(AuthenticationError):
        signer.verify(token)


def test_token_rejects_tampering_and_other_secrets():
    signer = TokenSigner(secret="s3cret")
    token = signer.sign({"id": "u1"}, expires_in_seconds=60)

    header, payload, signature = token.split(".")
    forged = TokenSigner(secret="other").sign({"id": "admin"}, expires_in_seconds=60)
    with pytest.raises(AuthenticationError):
        signer.verify(f"{header}.{forged.split('.')[1]}.{signature}")
    with pytest.raises(AuthenticationError):
        signer.verify(forged)
    with pytest.raises(AuthenticationError):
        signer.verify("not-a-token")
    with pytest.raises(AuthenticationError):
        signer.verify(f"{header}.{payload}.sigé")


def test_token_signer_requires_secret():
    with pytest.raises(ValueError):
        TokenSigner(secret="")
