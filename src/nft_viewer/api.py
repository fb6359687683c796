"""Client for the random NFT endpoint.

Every call issues exactly one GET. Failures are logged and reported as
`None` so tool handlers can answer with a plain text message.
"""
from typing import Optional
import logging
import requests
from .config import Settings, SETTINGS
from .models import MalformedResponseError, NftRecord

LOG = logging.getLogger(__name__)


class NftApiClient:
    def __init__(self, url: str, user_agent: str, timeout: float = 30):
        self.url = url
        self.headers = {
            "User-Agent": user_agent,
            "Accept": "application/json",
        }
        self.timeout = timeout

    @classmethod
    def from_settings(cls, settings: Settings = SETTINGS) -> "NftApiClient":
        return cls(settings.url, settings.user_agent, settings.timeout)

    def fetch(self) -> Optional[NftRecord]:
        """Fetch one random record, or None if anything goes wrong."""
        try:
            resp = requests.get(self.url, headers=self.headers, timeout=self.timeout)
            resp.raise_for_status()
            payload = resp.json()
        except requests.RequestException as ex:
            LOG.error("Error making API request to %s: %s", self.url, ex)
            return None

        try:
            return NftRecord.from_payload(payload)
        except MalformedResponseError as ex:
            LOG.error("Unexpected response from %s: %s", self.url, ex)
            return None
