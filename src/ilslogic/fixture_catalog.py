"""YAML fixture backed catalog connection.

Serves holdings, request function configs and patron accounts from a
fixture file, for the CLI and for tests. Example::

    functions:
      Holds:
        function: placeHold
        HMACKeys: [id, item_id]
    records:
      "1001":
        - {id: "1001", item_id: "1", location: Main, availability: true}
    patrons:
      reader:
        fines: [{balance: 150}]
    patron: reader
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Any

import yaml

from .config import LogicConfig
from .const import DEFAULT_HOLDINGS_TEXT_FIELDS
from .exceptions import FixtureError, ILSError

_LOGGER = logging.getLogger(__name__)


class FixtureCatalog:
    name = "fixture"

    def __init__(self, data: dict[str, Any], config: LogicConfig | None = None):
        self._data = data
        self.config = config or LogicConfig()

    @classmethod
    def from_file(cls, fixture_path: str | Path, config: LogicConfig | None = None) -> "FixtureCatalog":
        p = Path(fixture_path)
        if not p.exists():
            raise FixtureError(f"Fixture file not found: {p}")
        try:
            data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        except yaml.YAMLError as e:
            raise FixtureError(f"Invalid fixture file {p}: {e}") from e
        if not isinstance(data, dict):
            raise FixtureError(f"Fixture file {p} must contain a mapping")
        return cls(data, config)

    def _ensure_online(self) -> None:
        if self._data.get("offline"):
            raise ILSError("Catalog is offline")

    def get_holding(
        self,
        id: str,
        patron: dict[str, Any] | None = None,
        options: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        self._ensure_online()
        records = self._data.get("records") or {}
        holdings = copy.deepcopy(records.get(str(id)) or [])
        _LOGGER.debug("Fixture holdings for %s: %d items", id, len(holdings))
        return {"total": len(holdings), "holdings": holdings}

    def get_consortial_holdings(
        self,
        id: str,
        patron: dict[str, Any] | None = None,
        ids: list[str] | None = None,
    ) -> dict[str, Any]:
        self._ensure_online()
        records = self._data.get("records") or {}
        holdings: list[dict[str, Any]] = []
        for source_id in ids or [id]:
            holdings.extend(copy.deepcopy(records.get(str(source_id)) or []))
        return {"total": len(holdings), "holdings": holdings}

    def check_function(
        self, function: str, params: dict[str, Any] | None = None
    ) -> dict[str, Any] | None:
        self._ensure_online()
        functions = self._data.get("functions") or {}
        return functions.get(function) or None

    def check_capability(self, method: str, params: dict[str, Any] | None = None) -> bool:
        if method == "getRequestBlocks":
            return "request_blocks" in self._data
        return False

    def get_request_blocks(self, patron: dict[str, Any]) -> list[str] | None:
        blocks = self._data.get("request_blocks") or {}
        return blocks.get(patron.get("cat_username")) or None

    def get_holds_mode(self) -> str:
        return str(self._data.get("holds_mode") or self.config.holds_mode)

    def get_title_holds_mode(self) -> str:
        return str(self._data.get("title_holds_mode") or self.config.title_level_holds_mode)

    def get_holdings_text_field_names(self) -> list[str]:
        return list(self._data.get("holdings_text_fields") or DEFAULT_HOLDINGS_TEXT_FIELDS)

    def get_hold_link(self, id: str, details: Any) -> str:
        template = self._data.get("hold_link_template")
        if not template:
            raise FixtureError("Fixture has no hold_link_template")
        return template.format(id=id)

    def check_request_is_valid(
        self, id: str, data: dict[str, Any], patron: dict[str, Any]
    ) -> bool:
        self._ensure_online()
        valid = self._data.get("valid_requests")
        if valid is None:
            return True
        return str(id) in [str(v) for v in valid]

    def get_patron(self, username: str) -> dict[str, Any] | None:
        patrons = self._data.get("patrons") or {}
        account = patrons.get(username)
        if account is None:
            return None
        return {"cat_username": username, **account}

    def get_default_patron(self) -> dict[str, Any] | None:
        username = self._data.get("patron")
        return self.get_patron(username) if username else None


class StaticAuthenticator:
    """Authenticator returning a fixed patron (or nobody)."""

    def __init__(self, patron: dict[str, Any] | None = None):
        self.patron = patron

    def stored_catalog_login(self) -> dict[str, Any] | None:
        return self.patron
