"""URL building for request form links."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from .const import DEFAULT_SEARCH_BACKEND
from .models.request import RequestDetails


@runtime_checkable
class Router(Protocol):
    def from_route(
        self,
        name: str,
        params: dict[str, str],
        query: str | None = None,
        fragment: str | None = None,
    ) -> str: ...


class RecordRouter:
    """Router for record routes of the form ``{base}/{prefix}/{id}/{Action}``.

    The prefix depends on the record source, e.g. "Record" for the default
    backend and "SummonRecord" for Summon.
    """

    def __init__(
        self,
        base_url: str = "",
        prefixes: dict[str, str] | None = None,
        default_prefix: str = "Record",
    ):
        self.base_url = base_url.rstrip("/")
        self.prefixes = dict(prefixes or {})
        self.default_prefix = default_prefix

    def from_route(
        self,
        name: str,
        params: dict[str, str],
        query: str | None = None,
        fragment: str | None = None,
    ) -> str:
        # Route names look like "record-hold"; the action is the part after the dash
        _, _, action = name.partition("-")
        if not action:
            raise ValueError(f"Unknown route: {name}")
        source = params.get("source") or DEFAULT_SEARCH_BACKEND
        prefix = self.prefixes.get(source, self.default_prefix)
        url = f"{self.base_url}/{prefix}/{params['id']}/{params.get('action', action)}"
        if query:
            url += f"?{query}"
        if fragment:
            url += f"#{fragment.lstrip('#')}"
        return url


def url_for_request(router: Router, details: RequestDetails) -> str:
    """Resolve request details to the URL of the request form."""
    return router.from_route(
        f"record-{details.action.lower()}",
        {"id": details.record, "source": details.source, "action": details.action},
        query=details.query,
        fragment=details.anchor,
    )
