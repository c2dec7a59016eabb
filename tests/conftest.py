"""Shared fixtures for verification tests."""
import pytest

from cacverify.core.verification import BusinessVerifier, build_override_table

from pages import FakeSearchClient, TABLE_PAGE, TEST_OVERRIDES


@pytest.fixture
def fake_client():
    return FakeSearchClient(TABLE_PAGE)


@pytest.fixture
def verifier(fake_client):
    return BusinessVerifier(fake_client, overrides=build_override_table(TEST_OVERRIDES))
