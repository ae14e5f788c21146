import pytest
import requests

from ca_extractor.errors import DownloadError
from ca_extractor.fetcher import TrustedListClient, create_session
from ca_extractor.utils.settings import DEFAULT_BASE_URL
from samples import JSON_RESPONSE, VALID_XML


class FakeResponse:
    def __init__(self, content, status_code=200):
        self.content = content
        self.status_code = status_code

    @property
    def ok(self):
        return self.status_code < 400


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, timeout=None):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self):
        self.closed = True


def test_fetch_builds_country_url():
    session = FakeSession(FakeResponse(VALID_XML.encode("utf-8")))
    client = TrustedListClient(timeout=12, session=session)
    assert client.fetch("DE") == VALID_XML
    assert session.calls == [(DEFAULT_BASE_URL + "/DE", 12)]


def test_base_url_trailing_slash_ignored():
    client = TrustedListClient(base_url="http://localhost:8080/download/", session=FakeSession())
    assert client.url_for("FR") == "http://localhost:8080/download/FR"


def test_error_status_body_still_returned():
    session = FakeSession(FakeResponse(JSON_RESPONSE.encode("utf-8"), status_code=404))
    client = TrustedListClient(session=session)
    assert client.fetch("XX") == JSON_RESPONSE


def test_byte_order_mark_dropped():
    session = FakeSession(FakeResponse(b"\xef\xbb\xbf<root/>"))
    assert TrustedListClient(session=session).fetch("DE") == "<root/>"


def test_transport_error_raises_download_error():
    session = FakeSession(error=requests.ConnectionError("connection refused"))
    client = TrustedListClient(session=session)
    with pytest.raises(DownloadError) as exc:
        client.fetch("DE")
    assert exc.value.url == DEFAULT_BASE_URL + "/DE"
    assert "connection refused" in str(exc.value)
    assert isinstance(exc.value.__cause__, requests.ConnectionError)


def test_context_manager_closes_session():
    session = FakeSession(FakeResponse(b"<root/>"))
    with TrustedListClient(session=session) as client:
        client.fetch("DE")
    assert session.closed


def test_session_retries_and_user_agent():
    session = create_session(retries=5, user_agent="test-agent/0.1")
    try:
        adapter = session.get_adapter("https://eidas.ec.europa.eu/")
        assert adapter.max_retries.total == 5
        assert 503 in adapter.max_retries.status_forcelist
        assert session.headers["User-Agent"] == "test-agent/0.1"
    finally:
        session.close()
