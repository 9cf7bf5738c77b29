"""Shared fixtures for the credential cipher tests."""

import pytest

from credential_cipher import CredentialCipher

PASSPHRASE = "k3y-for-tests-0123456789-abcdefghijklmn"  # 40 characters
OTHER_PASSPHRASE = "another-test-key-9876543210-zyxwvutsrqp"


@pytest.fixture
def passphrase():
    return PASSPHRASE


@pytest.fixture
def cipher():
    return CredentialCipher(lambda: PASSPHRASE)


@pytest.fixture
def other_cipher():
    return CredentialCipher(lambda: OTHER_PASSPHRASE)
