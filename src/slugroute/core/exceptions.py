"""Core exceptions for slugroute."""


class SlugrouteError(Exception):
    """Base exception for all slugroute errors."""


class InvalidInputError(SlugrouteError):
    """Raised when the input to a function is invalid."""


class ConfigurationError(SlugrouteError):
    """Raised at startup when an addressing rule is missing a required option."""


class TreeIntegrityError(SlugrouteError):
    """Raised when category intervals violate the nested-set invariant.

    Ancestry computed over a broken tree would be wrong, so this is never
    turned into a "not found" result.
    """


class AddressingError(SlugrouteError):
    """Raised when the active rule cannot express an entity as a URL."""
