"""Protocols for the catalog connection and the patron authenticator."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class CatalogConnection(Protocol):
    """Catalog (ILS) connection consumed by the hold logic.

    Implementations raise ILSError when the backend cannot be reached.
    Holdings results are mappings with a ``total`` count and a ``holdings``
    list of item records.
    """

    def get_holding(
        self,
        id: str,
        patron: dict[str, Any] | None = None,
        options: dict[str, Any] | None = None,
    ) -> dict[str, Any]: ...

    def get_consortial_holdings(
        self,
        id: str,
        patron: dict[str, Any] | None = None,
        ids: list[str] | None = None,
    ) -> dict[str, Any]: ...

    def check_function(
        self, function: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any] | None:
        """Return the function config (e.g. ``function`` and ``HMACKeys``) or None if disabled."""
        ...

    def check_capability(self, method: str, params: dict[str, Any] | None = None) -> bool: ...

    def get_request_blocks(self, patron: dict[str, Any]) -> list[str] | None: ...

    def get_holds_mode(self) -> str: ...

    def get_title_holds_mode(self) -> str: ...

    def get_holdings_text_field_names(self) -> list[str]: ...

    def get_hold_link(self, id: str, details: Any) -> str: ...

    def check_request_is_valid(
        self, id: str, data: dict[str, Any], patron: dict[str, Any]
    ) -> bool: ...


@runtime_checkable
class ILSAuthenticator(Protocol):
    """Source of the logged in patron's catalog credentials."""

    def stored_catalog_login(self) -> dict[str, Any] | None:
        """Return the patron record, or None when nobody is logged in to the catalog."""
        ...
