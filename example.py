"""
Basic example running the hold logic against the sample fixture catalog.

Set ILSLOGIC_HMAC_KEY (or Security.HMACkey in config.yaml) before running.
"""

import os

from ilslogic import AvailabilityStatusManager, Holds, TitleHolds
from ilslogic.config import LogicConfig
from ilslogic.crypt import HMAC
from ilslogic.fixture_catalog import FixtureCatalog, StaticAuthenticator


def main():
    config = LogicConfig(
        hmac_key=os.environ.get("ILSLOGIC_HMAC_KEY", "example-key"),
        title_level_holds_mode="availability",
    )
    catalog = FixtureCatalog.from_file("example_catalog.yaml", config)
    auth = StaticAuthenticator(catalog.get_default_patron())
    hmac = HMAC(config.hmac_key)

    holds = Holds(auth, catalog, hmac, config)
    result = holds.get_holdings("1001")
    print(f"Record 1001: {result.total} copies")
    for group_key, group in result.holdings.items():
        print(f" - {group.location} ({group_key})")
        for item in group.items:
            print(f"   {item.callnumber}: {item.availability}")
            if item.link:
                print(f"     hold: {item.link}")
            if item.ill_request_link:
                print(f"     ILL: {item.ill_request_link}")

    # Best status across all copies
    best = AvailabilityStatusManager().combine(result.items)
    print(f"Best copy: {best.availability}")

    title_holds = TitleHolds(auth, catalog, hmac, config)
    for bib_id in ("1001", "2002"):
        hold = title_holds.get_hold(bib_id)
        print(f"Title hold for {bib_id}: {hold.link or hold.reason.value}")


if __name__ == "__main__":
    main()
