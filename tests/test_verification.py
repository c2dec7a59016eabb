"""Tests for the verification orchestrator."""
import asyncio
import threading

import httpx
import pytest
from bs4 import ParserRejectedMarkup

from cacverify.core import extractor
from cacverify.core.exceptions import BusinessNameValidationError
from cacverify.core.registry_client import RegistrySearchClient
from cacverify.core.verification import BusinessVerifier, build_override_table
from cacverify.models.verification import RegistryRecord, VerificationResult, VerificationStatus

from pages import FakeSearchClient, NO_RESULTS_PAGE


def test_override_skips_network(verifier, fake_client):
    result = asyncio.run(verifier.verify("Techtasker Solutions Limited"))

    assert fake_client.calls == []
    assert result.to_payload() == {
        "status": "verified",
        "rc_number": "1582539",
        "official_name": "TECHTASKER SOLUTIONS LIMITED",
    }


def test_override_lookup_is_case_and_whitespace_insensitive(verifier, fake_client):
    result = asyncio.run(verifier.verify("  TECHTASKER solutions LIMITED "))
    assert result.status == VerificationStatus.VERIFIED
    assert fake_client.calls == []


def test_override_results_are_not_shared(verifier):
    first = asyncio.run(verifier.verify("Techtasker Solutions Limited"))
    first.rc_number = "changed"
    second = asyncio.run(verifier.verify("Techtasker Solutions Limited"))
    assert second.rc_number == "1582539"


def test_without_overrides_the_registry_is_queried(fake_client):
    verifier = BusinessVerifier(fake_client)
    asyncio.run(verifier.verify("Techtasker Solutions Limited"))
    assert fake_client.calls == ["Techtasker Solutions Limited"]


def test_table_match_is_verified(verifier, fake_client):
    result = asyncio.run(verifier.verify("Acme Nigeria"))

    assert fake_client.calls == ["Acme Nigeria"]
    assert result.status == VerificationStatus.VERIFIED
    assert result.rc_number == "123456"
    assert result.official_name == "Acme Nigeria Ltd"


def test_name_is_trimmed_before_search(verifier, fake_client):
    asyncio.run(verifier.verify("   Acme Nigeria  "))
    assert fake_client.calls == ["Acme Nigeria"]


def test_not_found():
    verifier = BusinessVerifier(FakeSearchClient(NO_RESULTS_PAGE))
    result = asyncio.run(verifier.verify("Acme Nigeria"))
    assert result.to_payload() == {"status": "not_found", "rc_number": None, "official_name": None}


@pytest.mark.parametrize("name", ["", "   ", None])
def test_blank_name_is_rejected(verifier, fake_client, name):
    with pytest.raises(BusinessNameValidationError):
        asyncio.run(verifier.verify(name))
    assert fake_client.calls == []


def test_network_failure_on_get_becomes_error_status():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = RegistrySearchClient("https://registry.test/home", transport=httpx.MockTransport(handler))
    result = asyncio.run(BusinessVerifier(client).verify("Acme Nigeria"))

    assert result.status == VerificationStatus.ERROR
    assert result.message
    assert result.rc_number is None
    assert result.official_name is None


def test_extractor_failure_becomes_error_status(fake_client):
    def exploding_extractor(html, name, suffixes):
        raise RuntimeError("boom")

    result = asyncio.run(BusinessVerifier(fake_client, extractor=exploding_extractor).verify("Acme"))
    assert result.status == VerificationStatus.ERROR
    assert "boom" in result.message


def test_build_override_table_normalizes_keys():
    table = build_override_table({"  Acme Trading LIMITED ": {"official_name": "ACME TRADING LIMITED"}})
    assert set(table) == {"acme trading limited"}
    assert table["acme trading limited"].rc_number is None


def test_verified_result_requires_official_name():
    with pytest.raises(ValueError):
        VerificationResult(status=VerificationStatus.VERIFIED, rc_number="123")


def test_error_payload_includes_message():
    payload = VerificationResult.error("upstream down").to_payload()
    assert payload == {
        "status": "error",
        "rc_number": None,
        "official_name": None,
        "message": "upstream down",
    }


def test_rejected_markup_is_not_found(monkeypatch):
    def rejecting_soup(*args, **kwargs):
        raise ParserRejectedMarkup("unbalanced declaration")

    monkeypatch.setattr(extractor, "BeautifulSoup", rejecting_soup)
    result = asyncio.run(BusinessVerifier(FakeSearchClient("<![ \n")).verify("Acme Nigeria"))
    assert result.to_payload() == {"status": "not_found", "rc_number": None, "official_name": None}


def test_configured_suffixes_reach_the_extractor():
    page = "<table><tr><td>Acme Foods Limited</td><td>RC-1</td></tr></table>"

    default = asyncio.run(BusinessVerifier(FakeSearchClient(page)).verify("Acme International"))
    narrow = BusinessVerifier(FakeSearchClient(page), suffixes=[" limited"])
    result = asyncio.run(narrow.verify("Acme International"))

    assert default.status == VerificationStatus.VERIFIED
    assert result.status == VerificationStatus.NOT_FOUND


def test_extractor_runs_off_the_event_loop_thread(fake_client):
    threads = []

    def recording_extractor(html, name, suffixes):
        threads.append(threading.get_ident())
        return RegistryRecord(official_name="Acme Nigeria Ltd", rc_number="1", strategy="table")

    result = asyncio.run(BusinessVerifier(fake_client, extractor=recording_extractor).verify("Acme"))

    assert result.status == VerificationStatus.VERIFIED
    assert threads and threads[0] != threading.get_ident()
