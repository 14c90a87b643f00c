"""Test configuration and fixtures for keymint test suite."""

import threading
from unittest import mock

import pytest
import requests

from keymint.config import TestingConfig
from keymint.keys import CredentialKeys
from keymint.services.key_pair import KeyPairGenerator
from keymint.services.listeners import KeyPairListener, PasswordListener
from keymint.services.local_password import LocalPasswordGenerator
from keymint.services.random_org import RandomOrgClient, RemotePasswordGenerator
from keymint.utils.crypto import SecureRandomSource


def make_response(status_code=200, json_body=None, text=None, json_error=False):
    """Build a stand-in for ``requests.Response``."""
    response = mock.Mock()
    response.status_code = status_code
    response.text = text if text is not None else str(json_body or "")
    if json_error:
        response.json.side_effect = ValueError("No JSON object could be decoded")
    else:
        response.json.return_value = json_body
    return response


def success_body(tokens):
    return {
        "jsonrpc": "2.0",
        "result": {
            "random": {"data": tokens, "completionTime": "2026-10-19 10:00:00Z"},
            "bitsUsed": 8 * len(tokens),
            "bitsLeft": 249000,
            "requestsLeft": 999,
        },
        "id": 1,
    }


class RecordingListener(PasswordListener, KeyPairListener):
    """Listener that records every call and signals when one arrives."""

    def __init__(self):
        self.generated = []
        self.failures = []
        self.called = threading.Event()

    def on_generated(self, value):
        self.generated.append(value)
        self.called.set()

    def on_failure(self, message, cause):
        self.failures.append((message, cause))
        self.called.set()

    def wait(self, timeout=5):
        assert self.called.wait(timeout), "listener was never called"


@pytest.fixture
def random_source():
    """Provide an isolated random source."""
    return SecureRandomSource()


@pytest.fixture
def local_generator(random_source):
    return LocalPasswordGenerator(random_source=random_source)


@pytest.fixture
def session():
    """Provide a fake HTTP session; tests set ``session.post.return_value``."""
    return mock.create_autospec(requests.Session, instance=True)


@pytest.fixture
def remote_generator(session):
    """Remote generator talking to the fake session."""
    client = RandomOrgClient(
        url=TestingConfig.RANDOM_ORG_URL,
        timeout=TestingConfig.RANDOM_ORG_TIMEOUT,
        session=session,
    )
    generator = RemotePasswordGenerator(
        client=client, api_key=TestingConfig.RANDOM_ORG_API_KEY, max_workers=2
    )
    yield generator
    generator.close()


@pytest.fixture
def key_pair_generator():
    generator = KeyPairGenerator(max_workers=2)
    yield generator
    generator.close()


@pytest.fixture
def keys(session, random_source):
    """Provide a fully wired ``CredentialKeys`` using the testing config."""
    credential_keys = CredentialKeys(
        TestingConfig, random_source=random_source, session=session
    )
    yield credential_keys
    credential_keys.close()


@pytest.fixture
def listener():
    return RecordingListener()
