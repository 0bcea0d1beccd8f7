"""Item level hold logic.

Fetches holdings for a record from the catalog, hides suppressed locations,
groups the copies and decides per copy whether a hold (or storage
retrieval / ILL request) link is offered, depending on the holds mode.
"""

import logging
from typing import Any, Optional

from ..connection import CatalogConnection, ILSAuthenticator
from ..config import LogicConfig
from ..const import (
    ACTION_BLOCKED_HOLD,
    ACTION_HOLD,
    ACTION_ILL_REQUEST,
    ACTION_STORAGE_RETRIEVAL_REQUEST,
    CAPABILITY_REQUEST_BLOCKS,
    FUNCTION_GET_HOLD_LINK,
    FUNCTION_HOLDS,
    FUNCTION_ILL_REQUESTS,
    FUNCTION_STORAGE_RETRIEVAL_REQUESTS,
    HoldsMode,
)
from ..crypt import HMAC
from ..exceptions import ILSError
from ..models.holding import HoldingItem, HoldingsGroup, HoldingsResult
from ..routing import RecordRouter, Router, url_for_request
from .requests import RequestLinkBuilder

_LOGGER = logging.getLogger(__name__)

Grouped = dict[str, list[HoldingItem]]

_NOTE_FIELDS = ("notes", "holdings_notes")


class Holds(RequestLinkBuilder):
    """Hold logic for the copies of one record."""

    def __init__(
        self,
        ils_auth: ILSAuthenticator,
        catalog: Optional[CatalogConnection],
        hmac: HMAC,
        config: LogicConfig,
        router: Optional[Router] = None,
    ):
        super().__init__(hmac, router or RecordRouter(), config.default_search_backend)
        self.ils_auth = ils_auth
        self.catalog = catalog
        self.config = config
        self.hide_holdings = list(config.hide_holdings)

    def get_suppressed_locations(self) -> list[str]:
        return self.hide_holdings

    def get_holdings(
        self,
        id: str,
        ids: Optional[list[str]] = None,
        options: Optional[dict[str, Any]] = None,
    ) -> HoldingsResult:
        """Get the holdings of a record with request links attached.

        Args:
            id: Bib ID
            ids: Source record IDs, for consortial catalogs
            options: Extra options passed on to the catalog

        Returns:
            Holdings grouped by location. Empty if there is no catalog or the
            catalog fails.
        """
        if not self.catalog:
            return HoldingsResult()

        # Stored patron credentials are optional; the view tells the user
        # when they are needed.
        try:
            patron = self.ils_auth.stored_catalog_login()
            hold_config = self.catalog.check_function(
                FUNCTION_HOLDS, {"id": id, "patron": patron}
            )
        except ILSError as e:
            _LOGGER.warning("Could not check hold support for %s: %s", id, e)
            patron = None
            hold_config = None

        try:
            if hold_config and hold_config.get("consortium"):
                result = self.catalog.get_consortial_holdings(id, patron or None, ids)
            else:
                result = self.catalog.get_holding(id, patron or None, options or {})
            blocks = None
            if patron and self.catalog.check_capability(
                CAPABILITY_REQUEST_BLOCKS, {"patron": patron}
            ):
                blocks = self.catalog.get_request_blocks(patron) or None
            raw_mode = self.catalog.get_holds_mode()
        except ILSError as e:
            _LOGGER.warning("Could not load holdings for %s: %s", id, e)
            return HoldingsResult()

        result = result or {}
        requests_blocked = bool(blocks)
        copies = [
            item if isinstance(item, HoldingItem) else HoldingItem.from_dict(item)
            for item in (result.get("holdings") or [])
        ] if result.get("total") else []

        mode = HoldsMode.parse(raw_mode)
        _LOGGER.debug("Holds mode for %s: %s", id, raw_mode)
        if mode is HoldsMode.DISABLED:
            holdings = self.standard_holdings(copies)
        elif mode is HoldsMode.DRIVER:
            holdings = self.driver_holdings(copies, hold_config, requests_blocked)
        else:
            holdings = self.generate_holdings(copies, raw_mode, hold_config)

        self.process_storage_retrieval_requests(holdings, id, patron, requests_blocked)
        self.process_ill_requests(holdings, id, patron, requests_blocked)

        try:
            formatted = self.format_holdings(holdings)
        except ILSError as e:
            _LOGGER.warning("Could not format holdings for %s: %s", id, e)
            return HoldingsResult()

        return HoldingsResult(
            total=int(result.get("total") or 0),
            holdings=formatted,
            blocks=blocks,
            _raw=result,
        )

    def is_shown(self, copy: HoldingItem) -> bool:
        return copy.location not in self.hide_holdings

    def standard_holdings(self, copies: list[HoldingItem]) -> Grouped:
        """Group the shown copies without adding any links."""
        holdings: Grouped = {}
        for copy in copies:
            if self.is_shown(copy):
                holdings.setdefault(self.get_holdings_group_key(copy), []).append(copy)
        return holdings

    def driver_holdings(
        self,
        copies: list[HoldingItem],
        hold_config: Optional[dict[str, Any]],
        requests_blocked: bool,
    ) -> Grouped:
        """Group the shown copies, linking the ones the catalog flags as holdable."""
        holdings: Grouped = {}
        for copy in copies:
            if not self.is_shown(copy):
                continue
            if (
                hold_config
                and not requests_blocked
                and copy.add_link
                and copy.is_holdable is not False
            ):
                if copy.add_link == "block":
                    copy.link = self.get_blocked_details(copy)
                else:
                    copy.link = self.get_hold_details(copy, hold_config.get("HMACKeys", []))
                    copy.link_lightbox = True
                    # Resolved later by an asynchronous check when the catalog is unsure
                    copy.check = copy.add_link == "check"
            holdings.setdefault(self.get_holdings_group_key(copy), []).append(copy)
        return holdings

    def generate_holdings(
        self,
        copies: list[HoldingItem],
        mode: str,
        hold_config: Optional[dict[str, Any]],
    ) -> Grouped:
        """Group the shown copies and link them according to a generated holds mode.

        Args:
            copies: Copies reported by the catalog
            mode: One of all, holds, recalls or availability; anything else
                denies every link
            hold_config: Hold function config from the catalog

        Returns:
            Copies by group key
        """
        holdings = self.standard_holdings(copies)
        any_available = any(
            copy.availability is not None and copy.availability.is_available()
            for group in holdings.values()
            for copy in group
        )
        if not hold_config:
            return holdings

        for group in holdings.values():
            for copy in group:
                current_mode = mode
                if self.config.allow_holds_override and copy.hold_override is not None:
                    current_mode = copy.hold_override
                add_link = self.should_link_copy(copy, current_mode, any_available)
                if not add_link or copy.is_holdable is False:
                    continue
                if hold_config.get("function") == FUNCTION_GET_HOLD_LINK:
                    try:
                        copy.link = self.catalog.get_hold_link(copy.id, copy)
                    except ILSError as e:
                        _LOGGER.warning("Could not get OPAC hold link for %s: %s", copy.id, e)
                        continue
                    copy.link_lightbox = False
                else:
                    copy.link = self.get_hold_details(copy, hold_config.get("HMACKeys", []))
                    copy.link_lightbox = True
        return holdings

    def should_link_copy(self, copy: HoldingItem, mode: str, any_available: bool) -> bool:
        """Decide whether a generated holds mode offers a link for one copy."""
        available = copy.availability is not None and copy.availability.is_available()
        parsed = HoldsMode.parse(mode)
        if parsed is HoldsMode.ALL:
            return True
        if parsed is HoldsMode.HOLDS:
            return available
        if parsed is HoldsMode.RECALLS:
            return not available
        if parsed is HoldsMode.AVAILABILITY:
            return not available and not any_available
        # disabled, driver and unknown modes never link here
        if parsed is None:
            _LOGGER.warning("Unknown holds mode %r, not offering a hold link", mode)
        return False

    def process_storage_retrieval_requests(
        self,
        holdings: Grouped,
        id: str,
        patron: Optional[dict[str, Any]],
        requests_blocked: bool,
    ) -> Grouped:
        """Attach storage retrieval request links to the copies flagged for them."""
        request_config = self._request_config(FUNCTION_STORAGE_RETRIEVAL_REQUESTS, id, patron)
        if not request_config:
            return holdings
        for group in holdings.values():
            for copy in group:
                if not requests_blocked and copy.add_storage_retrieval_request_link:
                    copy.storage_retrieval_request_link = self.get_request_url(
                        copy, request_config.get("HMACKeys", []), ACTION_STORAGE_RETRIEVAL_REQUEST
                    )
                    copy.check_storage_retrieval_request = (
                        copy.add_storage_retrieval_request_link == "check"
                    )
        return holdings

    def process_ill_requests(
        self,
        holdings: Grouped,
        id: str,
        patron: Optional[dict[str, Any]],
        requests_blocked: bool,
    ) -> Grouped:
        """Attach ILL request links to the copies flagged for them."""
        request_config = self._request_config(FUNCTION_ILL_REQUESTS, id, patron)
        if not request_config:
            return holdings
        for group in holdings.values():
            for copy in group:
                if not requests_blocked and copy.add_ill_request_link:
                    copy.ill_request_link = self.get_request_url(
                        copy, request_config.get("HMACKeys", []), ACTION_ILL_REQUEST
                    )
                    copy.check_ill_request = copy.add_ill_request_link == "check"
        return holdings

    def _request_config(
        self, function: str, id: str, patron: Optional[dict[str, Any]]
    ) -> Optional[dict[str, Any]]:
        try:
            return self.catalog.check_function(function, {"id": id, "patron": patron})
        except ILSError as e:
            _LOGGER.warning("Could not check %s support for %s: %s", function, id, e)
            return None

    def format_holdings(self, holdings: Grouped) -> dict[str, HoldingsGroup]:
        """Collect de-duplicated text fields and purchase history per group.

        Args:
            holdings: Copies by group key

        Returns:
            Groups keyed like the input, each keeping its full item list
        """
        text_field_names = self.catalog.get_holdings_text_field_names() or list(
            self.config.holdings_text_fields
        )
        formatted: dict[str, HoldingsGroup] = {}
        for group_key, items in holdings.items():
            group = HoldingsGroup(
                items=items,
                location=items[0].location if items else "",
                locationhref=items[0].locationhref if items else "",
            )
            for item in items:
                for field_name in text_field_names:
                    values = self._text_field_values(item, field_name)
                    if values:
                        _append_unique(group.textfields.setdefault(field_name, []), values)
                _append_unique(group.purchase_history, item.purchase_history)
            formatted[group_key] = group
        return formatted

    @staticmethod
    def _text_field_values(item: HoldingItem, field_name: str) -> list:
        value = item.get(field_name)
        if not value and field_name in _NOTE_FIELDS:
            # notes and holdings_notes stand in for each other
            other = _NOTE_FIELDS[1] if field_name == _NOTE_FIELDS[0] else _NOTE_FIELDS[0]
            value = item.get(other)
        if not value:
            return []
        return list(value) if isinstance(value, (list, tuple)) else [value]

    def get_holdings_group_key(self, copy: HoldingItem) -> str:
        """Build the group key from the configured grouping fields.

        ``location_name`` is accepted as an alias of ``location``.
        """
        parts = []
        for key in (k.strip() for k in self.config.holdings_grouping.split(",")):
            if key == "location_name":
                key = "location"
            value = copy.get(key)
            if value is not None and value != "":
                parts.append(str(value))
        return "|".join(parts) or copy.location

    def get_hold_details(self, item: HoldingItem, hmac_keys: list[str]) -> str:
        """Return the signed URL of the hold form for a copy."""
        return self.get_request_url(item, hmac_keys, ACTION_HOLD)

    def get_blocked_details(self, item: HoldingItem) -> str:
        """Return the URL of the page explaining that holds are blocked."""
        return self.router.from_route(
            "record-blockedhold",
            {
                "id": item.id,
                "source": item.source or self.default_search_backend,
                "action": ACTION_BLOCKED_HOLD,
            },
        )

    def get_request_url(self, item: HoldingItem, hmac_keys: list[str], action: str) -> str:
        return url_for_request(self.router, self.get_request_details(item, hmac_keys, action))


def _append_unique(target: list, values) -> None:
    for value in values:
        if value not in target:
            target.append(value)
