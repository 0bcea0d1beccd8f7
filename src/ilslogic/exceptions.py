"""Exception classes for the ILS logic layer."""


class ILSLogicError(Exception):
    """Base exception for ilslogic errors."""

    pass


class ILSError(ILSLogicError):
    """Exception raised by catalog connections and authenticators.

    The hold logic treats this as "catalog unavailable" and degrades to
    empty holdings or no hold link instead of propagating it.
    """

    pass


class ConfigError(ILSLogicError):
    """Exception raised when the configuration cannot be used."""

    pass


class FixtureError(ILSError):
    """Exception raised when a fixture catalog file is missing or malformed."""

    pass
