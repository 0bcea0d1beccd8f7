"""Pytest configuration and fixtures for ilslogic tests."""
from pathlib import Path
from typing import Any

import pytest
import yaml

from ilslogic.config import LogicConfig
from ilslogic.crypt import HMAC
from ilslogic.fixture_catalog import FixtureCatalog, StaticAuthenticator

HMAC_KEY = "test_hmac_key"


@pytest.fixture
def hmac_key() -> str:
    return HMAC_KEY


@pytest.fixture
def hmac_generator() -> HMAC:
    return HMAC(HMAC_KEY)


@pytest.fixture
def logic_config() -> LogicConfig:
    return LogicConfig(hmac_key=HMAC_KEY)


@pytest.fixture
def fixture_data() -> dict[str, Any]:
    """Return catalog fixture data with two records and one patron."""
    return {
        "functions": {
            "Holds": {"function": "placeHold", "HMACKeys": ["id", "item_id"]},
        },
        "records": {
            "1001": [
                {"id": "1001", "item_id": "1", "location": "Main", "availability": True,
                 "callnumber": "QA76 .A1", "notes": ["Ask at desk"]},
                {"id": "1001", "item_id": "2", "location": "Branch", "availability": False},
            ],
            "2002": [
                {"id": "2002", "item_id": "3", "location": "Main", "availability": False},
                {"id": "2002", "item_id": "4", "location": "Branch", "availability": False},
            ],
        },
        "patrons": {
            "reader": {
                "fines": [{"balance": 150}, {"balance": 50}],
                "holds": [{"available": True}, {"in_transit": True}, {}],
                "transactions": [{"dueStatus": "due"}, {"dueStatus": "overdue"}, {}],
            },
        },
        "patron": "reader",
    }


@pytest.fixture
def catalog(fixture_data: dict[str, Any], logic_config: LogicConfig) -> FixtureCatalog:
    return FixtureCatalog(fixture_data, logic_config)


@pytest.fixture
def patron_auth(catalog: FixtureCatalog) -> StaticAuthenticator:
    return StaticAuthenticator(catalog.get_default_patron())


@pytest.fixture
def fixture_file(tmp_path: Path, fixture_data: dict[str, Any]) -> Path:
    """Write the fixture data to a YAML file."""
    path = tmp_path / "catalog.yaml"
    path.write_text(yaml.safe_dump(fixture_data), encoding="utf-8")
    return path
