# ca_extractor/fetcher.py

"""
Download of Trusted List documents from the eIDAS Trusted List browser.
"""

from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from ca_extractor.errors import DownloadError
from ca_extractor.utils.logger import get_logger
from ca_extractor.utils.settings import (
    DEFAULT_BASE_URL,
    DEFAULT_RETRIES,
    DEFAULT_TIMEOUT,
    DEFAULT_USER_AGENT,
    RETRY_STATUS_CODES,
)

LOG = get_logger(__name__)


def create_session(retries: int = DEFAULT_RETRIES, user_agent: str = DEFAULT_USER_AGENT) -> requests.Session:
    """Create a requests session that retries connection errors and gateway failures."""
    session = requests.Session()
    session.headers.update({"User-Agent": user_agent})

    retry = Retry(
        total=retries,
        backoff_factor=1,
        status_forcelist=RETRY_STATUS_CODES,
        allowed_methods=["GET"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("https://", adapter)
    session.mount("http://", adapter)
    return session


class TrustedListClient:
    """
    Fetches the Trusted List of one country as text.

    Non-2xx answers are not treated as failures: their body (usually a JSON
    error document) is returned so the extractor can report it.
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retries: int = DEFAULT_RETRIES,
        user_agent: str = DEFAULT_USER_AGENT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or create_session(retries, user_agent)

    def url_for(self, country: str) -> str:
        return f"{self.base_url}/{country}"

    def fetch(self, country: str) -> str:
        url = self.url_for(country)
        LOG.info("Downloading Trusted List from %s", url)
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as exc:
            LOG.error("Request to %s failed: %s", url, exc)
            raise DownloadError(url, str(exc)) from exc

        if not response.ok:
            LOG.warning("%s answered HTTP %d", url, response.status_code)

        body = response.content.decode("utf-8-sig", errors="replace")
        LOG.debug("Received %d characters", len(body))
        return body

    def close(self) -> None:
        self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
