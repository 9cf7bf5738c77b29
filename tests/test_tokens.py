"""Sealing and opening OAuth token pairs."""

import pytest

from credential_cipher import (
    AuthenticationError,
    CredentialCipher,
    FormatError,
    SealedTokens,
    TokenPair,
    TokenSealingError,
    open_tokens,
    seal_tokens,
)


def test_seal_and_open_token_pair(cipher):
    tokens = TokenPair(access_token="CJSP-access-123", refresh_token="na1-refresh-456")
    sealed = seal_tokens(cipher, tokens)

    assert sealed.access_token != tokens.access_token
    assert sealed.refresh_token.count(":") == 3
    assert open_tokens(cipher, sealed) == tokens


def test_missing_refresh_token_stays_none(cipher):
    sealed = seal_tokens(cipher, TokenPair(access_token="ya29.access"))

    assert sealed.refresh_token is None
    assert open_tokens(cipher, sealed) == TokenPair(access_token="ya29.access")


def test_sealed_tokens_dict_round_trip(cipher):
    sealed = seal_tokens(cipher, TokenPair("access", "refresh"))
    restored = SealedTokens.from_dict(sealed.to_dict())

    assert restored == sealed
    assert SealedTokens.from_dict({"access_token": "a:b:c:d"}).refresh_token is None


def test_seal_without_key_raises_sealing_error():
    with pytest.raises(TokenSealingError, match="encryption key configuration"):
        seal_tokens(CredentialCipher(lambda: None), TokenPair("access", "refresh"))


def test_open_propagates_typed_errors(cipher, other_cipher):
    sealed = seal_tokens(cipher, TokenPair("access", "refresh"))

    with pytest.raises(AuthenticationError):
        open_tokens(other_cipher, sealed)
    with pytest.raises(FormatError):
        open_tokens(cipher, SealedTokens(access_token="corrupt"))
