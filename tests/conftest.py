from __future__ import annotations

from typing import Any

import pytest

from jaildash.models import Jail, Plugin


class FakeResponse:
    def __init__(self, status_code: int = 200, payload: Any = None, text: str | None = None) -> None:
        self.status_code = status_code
        self._payload = payload
        self._text = text

    def json(self) -> Any:
        if self._text is not None:
            raise ValueError(f"Expecting value: {self._text[:20]!r}")
        return self._payload


class FakeClient:
    """Stands in for JailApiClient; each fetch pops the next queued result."""

    api_url_base = "http://nas.test:80/api/v2.0/"

    def __init__(self) -> None:
        self.jail_results: list[Any] = []
        self.plugin_results: list[Any] = []
        self.calls: list[str] = []

    def _next(self, queue: list[Any]) -> Any:
        result = queue.pop(0) if len(queue) > 1 else queue[0]
        if isinstance(result, BaseException):
            raise result
        return result

    def fetch_jails(self) -> list[Jail]:
        self.calls.append("jail")
        return self._next(self.jail_results)

    def fetch_plugins(self) -> list[Plugin]:
        self.calls.append("plugin")
        return self._next(self.plugin_results)


@pytest.fixture
def plex_jail() -> Jail:
    return Jail.model_validate({"id": "plex", "ip4_addr": "10.0.0.5"})


@pytest.fixture
def plex_plugin() -> Plugin:
    return Plugin.model_validate(
        {
            "name": "plexmediaserver",
            "admin_portals": ["http://10.0.0.5:32400"],
            "plugin_repository": "https://github.com/org/plex.git",
        }
    )


@pytest.fixture
def fake_client() -> FakeClient:
    return FakeClient()
