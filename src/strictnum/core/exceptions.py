"""strictnum exception hierarchy."""

from __future__ import annotations

from enum import Enum


class StrictNumError(Exception):
    """Base exception for all strictnum errors."""


class ConfigError(StrictNumError):
    """Missing or malformed configuration."""


class TextLookupError(StrictNumError, ValueError):
    """Unsafe or malformed text catalog file name or layer."""


class CatalogError(StrictNumError):
    """Text catalog could not be read or parsed."""


class CatalogNotFoundError(CatalogError):
    """Text catalog does not exist in the store."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Catalog not found: {path!r}")


class ErrorKind(str, Enum):
    """Stable machine-readable reasons a number string was rejected."""

    INVALID_PRECISION = "InvalidPrecision"
    INVALID_SCALE = "InvalidScale"
    SIGN_WITHOUT_DIGITS = "SignWithoutDigits"
    UNSUPPORTED_CHARS = "UnsupportedChars"
    MULTIPLE_DECIMAL_SEPARATORS = "MultipleDecimalSeparators"
    DOT_DECIMAL_NOT_SUPPORTED = "DotDecimalNotSupported"
    DECIMALS_NOT_ALLOWED_FOR_SCALE_ZERO = "DecimalsNotAllowedForScaleZero"
    MISSING_INTEGER_PART = "MissingIntegerPart"
    MISSING_INTEGER_DIGITS = "MissingIntegerDigits"
    MIXED_THOUSANDS_SEPARATORS = "MixedThousandsSeparators"
    DOT_GROUPING_MALFORMED = "DotGroupingMalformed"
    SPACE_GROUPING_MALFORMED = "SpaceGroupingMalformed"
    INTEGER_MUST_BE_DIGITS = "IntegerMustBeDigits"
    FRACTION_MUST_BE_DIGITS = "FractionMustBeDigits"
    TOO_MANY_FRACTION_DIGITS = "TooManyFractionDigits"
    TOO_MANY_INTEGER_DIGITS = "TooManyIntegerDigits"
    INVALID_SCALE_FROM_DB = "InvalidScaleFromDb"
    DB_SIGN_WITHOUT_DIGITS = "DbSignWithoutDigits"
    DB_INVALID_FORMAT = "DbInvalidFormat"
    DB_TOO_MANY_FRACTION_DIGITS = "DbTooManyFractionDigits"
    INVALID_THOUSANDS_SEP = "InvalidThousandsSep"
    INVALID_DECIMAL_SEP = "InvalidDecimalSep"
    SEPARATORS_MUST_DIFFER = "SeparatorsMustDiffer"


class NumberFormatError(StrictNumError, ValueError):
    """A number string or formatter argument failed strict validation."""

    def __init__(
        self, kind: ErrorKind, key: str, message: str, variables: dict[str, str] | None = None
    ) -> None:
        self.kind = kind
        self.key = key
        self.message = message
        self.variables = variables or {}
        super().__init__(message)
