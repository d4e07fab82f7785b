"""Shared fixtures for ydbauth tests."""

import json
from datetime import datetime, timedelta, timezone

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from ydbauth.credentials import IamCredentials


class FakeClock:
    """Clock that only moves when told to."""

    def __init__(self, start=None):
        self.current = start or datetime.now(timezone.utc)

    def now(self):
        return self.current

    def advance(self, seconds):
        self.current += timedelta(seconds=seconds)


class RecordingSleep:
    """Async sleep replacement that records requested delays."""

    def __init__(self):
        self.delays = []

    async def __call__(self, delay):
        self.delays.append(delay)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def sleeper():
    return RecordingSleep()


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def private_pem(rsa_key):
    return rsa_key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        serialization.NoEncryption(),
    )


@pytest.fixture
def iam_credentials(private_pem):
    return IamCredentials(
        service_account_id="sa-123",
        access_key_id="key-456",
        private_key=private_pem,
    )


@pytest.fixture
def key_file(tmp_path, private_pem):
    path = tmp_path / "authorized_key.json"
    path.write_text(
        json.dumps(
            {
                "id": "key-456",
                "service_account_id": "sa-123",
                "private_key": private_pem.decode(),
            }
        )
    )
    return path
