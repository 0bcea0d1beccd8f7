"""Keyed hashing of request parameters."""

import hashlib
import hmac
import logging
from collections.abc import Iterable, Mapping
from typing import Any
from urllib.parse import quote_plus

from .exceptions import ConfigError

_LOGGER = logging.getLogger(__name__)


def stringify(value: Any) -> str:
    """Render a parameter value the way the receiving request form expects.

    None and False become an empty string, True becomes "1" and whole
    floats lose their fractional part.
    """
    if value is None or value is False:
        return ""
    if value is True:
        return "1"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def urlencode_value(value: Any) -> str:
    """Form-encode a single value: spaces as "+" and "~" percent-encoded."""
    return quote_plus(stringify(value), safe="").replace("~", "%7E")


class HMAC:
    """HMAC generator for signed request links.

    The message is ``key=value|`` for every key in the given order, so the
    receiving side can verify the same subset of fields.
    """

    def __init__(self, key: str):
        if not key:
            raise ConfigError("An HMAC key is required to sign request links")
        self._key = key.encode("utf-8")

    def generate(self, keys_to_hash: Iterable[str], values: Mapping[str, Any]) -> str:
        """Generate an HMAC over the selected fields of a record.

        Args:
            keys_to_hash: Field names to include, in signing order
            values: Record holding the field values; missing fields hash as empty

        Returns:
            Hex digest
        """
        message = "".join(
            f"{key}={stringify(values.get(key))}|" for key in keys_to_hash
        )
        return hmac.new(self._key, message.encode("utf-8"), hashlib.md5).hexdigest()

    def verify(self, keys_to_hash: Iterable[str], values: Mapping[str, Any], digest: str) -> bool:
        """Check a digest received back from a request link."""
        keys_to_hash = list(keys_to_hash)
        expected = self.generate(keys_to_hash, values)
        valid = hmac.compare_digest(expected, digest or "")
        if not valid:
            _LOGGER.warning("HMAC mismatch for keys %s", keys_to_hash)
        return valid
