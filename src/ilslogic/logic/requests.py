"""Signed request links shared by the item and title level hold logic."""

from collections.abc import Mapping
from typing import Any

from ..availability import AvailabilityStatusInterface
from ..crypt import HMAC, urlencode_value
from ..models.holding import HoldingItem
from ..models.request import RequestDetails
from ..routing import Router


class RequestLinkBuilder:
    """Builds request form parameters protected by an HMAC.

    Only the fields named in the catalog's HMAC key list are put in the
    query string, in the order they appear in the record, followed by
    ``hashKey``. The request form recomputes the HMAC over the same fields.
    """

    def __init__(self, hmac: HMAC, router: Router, default_search_backend: str):
        self.hmac = hmac
        self.router = router
        self.default_search_backend = default_search_backend

    def get_request_details(
        self,
        record: HoldingItem | Mapping[str, Any],
        hmac_keys: list[str],
        action: str,
    ) -> RequestDetails:
        """Build the signed request parameters for a copy or a title.

        Copies also carry the request type and, when the catalog gave no
        status text, the availability description.
        """
        if isinstance(record, HoldingItem):
            details = record.to_details()
            details["requestType"] = action
            availability = details.get("availability")
            if isinstance(availability, AvailabilityStatusInterface) and not details.get("status"):
                details["status"] = availability.get_status_description()
        else:
            details = dict(record)

        return RequestDetails(
            action=action,
            record=str(details.get("id", "")),
            source=details.get("source") or self.default_search_backend,
            query=self.build_query(details, hmac_keys),
        )

    def build_query(self, details: Mapping[str, Any], hmac_keys: list[str]) -> str:
        hmac_keys = _key_list(hmac_keys)
        digest = self.hmac.generate(hmac_keys, details)
        params = [
            f"{key}={urlencode_value(value)}"
            for key, value in details.items()
            if key in hmac_keys
        ]
        params.append(f"hashKey={urlencode_value(digest)}")
        return "&".join(params)


def _key_list(hmac_keys: Any) -> list[str]:
    # Catalog configs may give the keys as a colon separated string
    if isinstance(hmac_keys, str):
        return [key for key in hmac_keys.split(":") if key]
    return list(hmac_keys or [])
