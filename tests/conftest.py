"""Pytest fixtures for verification and transport tests."""

import pytest

from esclient.integrations.clients.mocks import MockTransport
from esclient.integrations.contracts.probe import ProbeResponse, ProbeStatus, VersionRecord

_ENV_VARS = (
    "ELASTICSEARCH_URL",
    "ELASTICSEARCH_API_KEY",
    "ELASTICSEARCH_USERNAME",
    "ELASTICSEARCH_PASSWORD",
    "ELASTICSEARCH_TIMEOUT",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep developer ELASTICSEARCH_* settings out of the tests."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def es8_transport():
    return MockTransport(flavour="8")


@pytest.fixture
def make_probe():
    def _make(number=None, tagline=None, build_flavor=None, headers=None, status=ProbeStatus.SUCCESS):
        version = None
        if number is not None or tagline is not None or build_flavor is not None:
            version = VersionRecord(number=number, tagline=tagline, build_flavor=build_flavor)
        return ProbeResponse(
            status=status,
            headers={k.lower(): v for k, v in (headers or {}).items()},
            version=version,
        )

    return _make
