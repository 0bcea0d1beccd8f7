"""Title level hold logic."""

import logging
from typing import Any, Optional

from ..connection import CatalogConnection, ILSAuthenticator
from ..config import LogicConfig
from ..const import ACTION_HOLD, FUNCTION_GET_HOLD_LINK, FUNCTION_HOLDS, TitleHoldsMode
from ..crypt import HMAC
from ..exceptions import ILSError
from ..models.holding import HoldingItem
from ..models.request import NoHoldReason, TitleHoldResult
from ..routing import RecordRouter, Router, url_for_request
from .requests import RequestLinkBuilder

_LOGGER = logging.getLogger(__name__)


class TitleHolds(RequestLinkBuilder):
    """Decides whether a hold can be placed on a record as a whole."""

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
        self._holdings: dict[str, list[HoldingItem]] = {}

    def get_hold(self, id: str, ids: Optional[list[str]] = None) -> TitleHoldResult:
        """Get the title level hold link for a record.

        Args:
            id: Bib ID
            ids: Source record IDs, for consortial catalogs

        Returns:
            The link, or the reason no title hold is offered
        """
        if not self.catalog:
            return TitleHoldResult.denied(NoHoldReason.NO_CATALOG)

        raw_mode = self.catalog.get_title_holds_mode()
        mode = TitleHoldsMode.parse(raw_mode)
        _LOGGER.debug("Title holds mode for %s: %s", id, raw_mode)

        if mode is None:
            _LOGGER.warning("Unknown title holds mode %r, not offering a hold link", raw_mode)
            return TitleHoldResult.denied(NoHoldReason.UNKNOWN_MODE)
        if mode is TitleHoldsMode.DISABLED:
            return TitleHoldResult.denied(NoHoldReason.DISABLED)

        if mode is TitleHoldsMode.DRIVER:
            try:
                patron = self.ils_auth.stored_catalog_login()
                if not patron:
                    return TitleHoldResult.denied(NoHoldReason.NO_PATRON)
                return self.driver_hold(id, patron)
            except ILSError as e:
                _LOGGER.warning("Title hold check failed for %s: %s", id, e)
                return TitleHoldResult.denied(NoHoldReason.CATALOG_ERROR)

        try:
            patron = self.ils_auth.stored_catalog_login()
        except ILSError:
            patron = None
        try:
            mode = self.check_override_mode(id, mode)
            return self.generate_hold(id, mode, patron, ids)
        except ILSError as e:
            _LOGGER.warning("Title hold check failed for %s: %s", id, e)
            return TitleHoldResult.denied(NoHoldReason.CATALOG_ERROR)

    def check_override_mode(self, id: str, mode: TitleHoldsMode) -> TitleHoldsMode:
        """Disable title holds when every copy's hold override is "disabled"."""
        if not self.config.allow_holds_override:
            return mode
        holdings = self.get_holdings(id)
        if all(item.hold_override == "disabled" for item in holdings):
            return TitleHoldsMode.DISABLED
        return mode

    def get_holdings(self, id: str, ids: Optional[list[str]] = None) -> list[HoldingItem]:
        """Get the copies of a record, loading them once per instance."""
        if id not in self._holdings:
            if ids:
                result = self.catalog.get_consortial_holdings(id, None, ids)
            else:
                result = self.catalog.get_holding(id)
            self._holdings[id] = [
                item if isinstance(item, HoldingItem) else HoldingItem.from_dict(item)
                for item in ((result or {}).get("holdings") or [])
            ]
        return self._holdings[id]

    def driver_hold(self, id: str, patron: dict[str, Any]) -> TitleHoldResult:
        """Let the catalog decide whether the patron may place a title hold."""
        hold_config = self.catalog.check_function(FUNCTION_HOLDS, {"id": id, "patron": patron})
        if not hold_config or "HMACKeys" not in hold_config:
            return TitleHoldResult.denied(NoHoldReason.NOT_SUPPORTED)
        data = {"id": id, "level": "title"}
        if not self.catalog.check_request_is_valid(id, data, patron):
            return TitleHoldResult.denied(NoHoldReason.INVALID_REQUEST)
        return TitleHoldResult.linked(self.get_hold_details(data, hold_config["HMACKeys"]))

    def generate_hold(
        self,
        id: str,
        mode: TitleHoldsMode,
        patron: Optional[dict[str, Any]] = None,
        ids: Optional[list[str]] = None,
    ) -> TitleHoldResult:
        """Offer a title hold according to a generated title holds mode.

        ``always`` links whenever the catalog supports holds; ``availability``
        links only when none of the shown copies is available.
        """
        if mode is TitleHoldsMode.DISABLED:
            return TitleHoldResult.denied(NoHoldReason.DISABLED)
        data = {"id": id, "level": "title"}
        hold_config = self.catalog.check_function(FUNCTION_HOLDS, {"id": id, "patron": patron})
        if not hold_config:
            return TitleHoldResult.denied(NoHoldReason.NOT_SUPPORTED)

        if mode is TitleHoldsMode.AVAILABILITY:
            any_available = any(
                item.availability is not None
                and item.availability.is_available()
                and item.location not in self.hide_holdings
                for item in self.get_holdings(id, ids)
            )
            if any_available:
                return TitleHoldResult.denied(NoHoldReason.AVAILABLE)
        elif mode is not TitleHoldsMode.ALWAYS:
            return TitleHoldResult.denied(NoHoldReason.UNKNOWN_MODE)

        if hold_config.get("function") == FUNCTION_GET_HOLD_LINK:
            return TitleHoldResult.linked(self.catalog.get_hold_link(id, data))
        return TitleHoldResult.linked(self.get_hold_details(data, hold_config.get("HMACKeys", [])))

    def get_hold_details(self, data: dict[str, Any], hmac_keys: list[str]) -> str:
        """Return the signed URL of the title hold form."""
        return url_for_request(self.router, self.get_request_details(data, hmac_keys, ACTION_HOLD))
