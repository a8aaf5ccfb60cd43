"""
Management API client.

Thin wrapper around a requests.Session with Basic auth preset on the session,
so every request carries the same Authorization header. No retries here: the
poller simply tries again on its next cycle.
"""

import logging
from typing import Any, List, Optional, Type, TypeVar

import requests
from pydantic import BaseModel, TypeAdapter, ValidationError
from requests.auth import HTTPBasicAuth

from jaildash.errors import FetchError, ParseError
from jaildash.models import Jail, Plugin

logger = logging.getLogger(__name__)

JAIL_ENDPOINT = "jail"
PLUGIN_ENDPOINT = "plugin"

ModelT = TypeVar("ModelT", bound=BaseModel)


class JailApiClient:
    """
    Client for the jail and plugin collections of the management API.

    Usage:
        client = JailApiClient(
            api_url_base="http://freenas.local:80/api/v2.0/",
            user="root",
            password="secret",
        )
        jails = client.fetch_jails()
        plugins = client.fetch_plugins()
    """

    def __init__(
        self,
        api_url_base: str,
        user: str,
        password: str,
        timeout: float = 10.0,
        session: Optional[requests.Session] = None,
    ):
        """
        Args:
            api_url_base: Base URL ending in the API prefix (e.g. 'http://host:80/api/v2.0/')
            user: Web UI user
            password: Web UI password
            timeout: Per-request timeout in seconds
            session: Optional pre-built session (tests)
        """
        if not api_url_base.endswith("/"):
            api_url_base += "/"
        self.api_url_base = api_url_base
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.auth = HTTPBasicAuth(user, password)

    def fetch_jails(self) -> List[Jail]:
        return self._fetch_list(JAIL_ENDPOINT, Jail)

    def fetch_plugins(self) -> List[Plugin]:
        return self._fetch_list(PLUGIN_ENDPOINT, Plugin)

    def close(self) -> None:
        self.session.close()

    def _get_json(self, endpoint: str) -> Any:
        url = f"{self.api_url_base}{endpoint}"
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise FetchError(f"GET {url} failed: {e}", url=url) from e

        if not 200 <= response.status_code < 300:
            raise FetchError(
                f"GET {url} returned HTTP {response.status_code}",
                url=url,
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise ParseError(f"GET {url} returned a non-JSON body: {e}", url=url) from e

    def _fetch_list(self, endpoint: str, model: Type[ModelT]) -> List[ModelT]:
        url = f"{self.api_url_base}{endpoint}"
        payload = self._get_json(endpoint)
        if not isinstance(payload, list):
            raise ParseError(
                f"GET {url} returned {type(payload).__name__}, expected a list",
                url=url,
            )
        try:
            items = TypeAdapter(List[model]).validate_python(payload)
        except ValidationError as e:
            raise ParseError(
                f"GET {url} returned unexpected {endpoint} objects: {e.error_count()} validation error(s)",
                url=url,
            ) from e
        logger.debug("Fetched %d %s object(s) from %s", len(items), endpoint, url)
        return items
