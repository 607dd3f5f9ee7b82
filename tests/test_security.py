from datetime import timedelta

import pytest
from bson import ObjectId

from earshop.core.security import (
    claims_for_user,
    create_access_token,
    decode_access_token,
    hash_password,
    verify_password,
)
from earshop.domain.errors import AuthError


def test_hash_is_salted_and_verifiable():
    first, second = hash_password("secret1"), hash_password("secret1")
    assert first != second
    assert "secret1" not in first
    assert verify_password("secret1", first)
    assert verify_password("secret1", second)
    assert not verify_password("secret2", first)


def test_verify_rejects_garbage_digest():
    assert not verify_password("secret1", "not-a-bcrypt-digest")


def test_token_round_trip():
    token = create_access_token({"sub": "abc", "username": "amy"})
    claims = decode_access_token(token)
    assert claims["sub"] == "abc"
    assert claims["username"] == "amy"
    assert claims["exp"] - claims["iat"] == 30 * 60


def test_expired_token_is_invalid():
    token = create_access_token({"sub": "abc"}, expires_delta=timedelta(minutes=-1))
    with pytest.raises(AuthError):
        decode_access_token(token)


def test_tampered_token_is_invalid():
    token = create_access_token({"sub": "abc"})
    head, body, sig = token.split(".")
    with pytest.raises(AuthError):
        decode_access_token(".".join([head, body, sig[:-2] + ("AA" if sig[-2:] != "AA" else "BB")]))


def test_claims_come_from_the_stored_user():
    oid = ObjectId()
    claims = claims_for_user({
        "_id": oid,
        "username": "amy",
        "firstname": "Amy",
        "lastname": "Lee",
        "email": "amy@mail.com",
        "password": "$2b$...",
    })
    assert claims == {
        "sub": str(oid),
        "username": "amy",
        "firstname": "Amy",
        "lastname": "Lee",
        "email": "amy@mail.com",
    }
