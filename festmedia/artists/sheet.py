"""
Lineup spreadsheet client for FreakFest media.

Downloads the public Google Sheets CSV export. No API key needed: the sheet
is published, so a plain GET on the export URL works.
"""

import time
from dataclasses import dataclass

import requests

from .csv_parser import parse_csv
from .models import Artist, normalize_artists


@dataclass
class SheetClientConfig:
    """Configuration for SheetClient."""
    csv_url: str
    timeout: int = 30
    max_retries: int = 3


class SheetClient:
    """
    Fetches the lineup sheet and turns it into Artist records.
    """

    def __init__(self, config: SheetClientConfig, session: requests.Session = None):
        self.config = config
        self.session = session or requests.Session()
        self._requests = 0

    @property
    def request_count(self) -> int:
        """Total HTTP requests made by this client."""
        return self._requests

    def _request_with_retry(self, url: str, **kwargs) -> requests.Response:
        """GET with retry and exponential backoff on timeouts and HTTP errors."""
        timeout = kwargs.pop("timeout", self.config.timeout)

        for attempt in range(self.config.max_retries):
            try:
                response = self.session.get(url, timeout=timeout, **kwargs)
                self._requests += 1
                response.raise_for_status()
                return response
            except (requests.exceptions.Timeout, requests.exceptions.ConnectionError):
                if attempt < self.config.max_retries - 1:
                    time.sleep(2 ** attempt)
                    continue
                raise
            except requests.exceptions.HTTPError:
                if attempt < self.config.max_retries - 1:
                    time.sleep(2 ** attempt)
                    continue
                raise

        raise RuntimeError(f"Request failed after {self.config.max_retries} attempts")

    def fetch_csv(self) -> str:
        """Download the raw CSV export."""
        response = self._request_with_retry(
            self.config.csv_url,
            headers={"cache-control": "no-cache"},
        )
        # Sheets omits the charset; requests would fall back to latin-1
        if "charset" not in response.headers.get("content-type", "").lower():
            response.encoding = "utf-8"
        return response.text

    def fetch_artists(self) -> list[Artist]:
        """Download and normalize the lineup."""
        return normalize_artists(parse_csv(self.fetch_csv()))
