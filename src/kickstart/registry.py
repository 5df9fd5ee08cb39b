"""Client for the third-party template registry.

Community templates are GitHub repositories tagged with a fixed topic.
Discovery is best-effort: any failure yields an empty result so the
selector can still offer the official templates.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional

import httpx

from kickstart.catalog import TemplateDescriptor
from kickstart.config import Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RegistryTemplate:
    """A template discovered through the registry."""
    descriptor: TemplateDescriptor
    stars: int = 0


class RegistryClient:
    """Searches the registry for repositories tagged as templates."""

    SEARCH_PATH = "/search/repositories"

    def __init__(self, settings: Optional[Settings] = None, client: Optional[httpx.Client] = None):
        self.settings = settings or Settings()
        self._client = client

    @property
    def search_url(self) -> str:
        return self.settings.registry_url.rstrip("/") + self.SEARCH_PATH

    def _params(self) -> dict:
        return {
            "q": f"topic:{self.settings.registry_topic}",
            "sort": "stars",
            "order": "desc",
        }

    def _get(self) -> httpx.Response:
        headers = {"User-Agent": self.settings.user_agent}
        timeout = self.settings.registry_timeout
        if self._client is not None:
            return self._client.get(self.search_url, params=self._params(), headers=headers, timeout=timeout)
        with httpx.Client() as client:
            return client.get(self.search_url, params=self._params(), headers=headers, timeout=timeout)

    def search(self) -> List[RegistryTemplate]:
        """Query the registry, most starred first.

        Returns:
            Discovered templates, or an empty list if the registry could
            not be reached or answered with something unexpected.
        """
        try:
            response = self._get()
            if response.status_code != 200:
                logger.debug("Registry returned HTTP %s", response.status_code)
                return []
            items = response.json()["items"]
            return [_to_template(item) for item in items]
        except httpx.HTTPError as e:
            logger.debug("Registry request failed: %s", e)
        except (ValueError, KeyError, TypeError) as e:
            logger.debug("Registry response malformed: %s", e)
        return []


def _to_template(item: dict) -> RegistryTemplate:
    descriptor = TemplateDescriptor(name=item["name"], location=item["clone_url"])
    return RegistryTemplate(descriptor=descriptor, stars=int(item.get("stargazers_count") or 0))
