"""Tests for ilslogic.crypt."""

import hashlib
import hmac

import pytest

from ilslogic.crypt import HMAC, stringify, urlencode_value
from ilslogic.exceptions import ConfigError


def _expected(key: str, message: str) -> str:
    return hmac.new(key.encode(), message.encode(), hashlib.md5).hexdigest()


class TestGenerate:
    def test_signs_selected_keys_in_order(self, hmac_generator, hmac_key):
        record = {"item_id": "7", "id": "1001", "location": "Main"}
        digest = hmac_generator.generate(["id", "item_id"], record)
        assert digest == _expected(hmac_key, "id=1001|item_id=7|")

    def test_missing_values_hash_as_empty(self, hmac_generator, hmac_key):
        digest = hmac_generator.generate(["id", "level"], {"id": "1"})
        assert digest == _expected(hmac_key, "id=1|level=|")

    def test_deterministic(self, hmac_generator):
        record = {"id": "1001", "item_id": "7"}
        assert hmac_generator.generate(["id"], record) == hmac_generator.generate(["id"], record)

    def test_key_order_matters(self, hmac_generator):
        record = {"id": "1001", "item_id": "7"}
        assert hmac_generator.generate(["id", "item_id"], record) != hmac_generator.generate(
            ["item_id", "id"], record
        )

    def test_empty_key_rejected(self):
        with pytest.raises(ConfigError):
            HMAC("")


class TestVerify:
    def test_accepts_matching_digest(self, hmac_generator):
        record = {"id": "1001"}
        digest = hmac_generator.generate(["id"], record)
        assert hmac_generator.verify(["id"], record, digest)

    def test_rejects_tampered_record(self, hmac_generator):
        digest = hmac_generator.generate(["id"], {"id": "1001"})
        assert not hmac_generator.verify(["id"], {"id": "1002"}, digest)


class TestStringify:
    def test_booleans_and_none(self):
        assert stringify(True) == "1"
        assert stringify(False) == ""
        assert stringify(None) == ""

    def test_numbers(self):
        assert stringify(3) == "3"
        assert stringify(2.0) == "2"
        assert stringify(2.5) == "2.5"


class TestUrlencodeValue:
    def test_spaces_and_reserved(self):
        assert urlencode_value("a b/c") == "a+b%2Fc"

    def test_tilde_is_encoded(self):
        assert urlencode_value("~x") == "%7Ex"
