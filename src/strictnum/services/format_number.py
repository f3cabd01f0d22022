"""NumberFormatter: strict UI <-> DB conversion for decimal strings.

Converts user-facing continental formats ("1.234,56", "1 234,56") into
dot-decimal strings ready for DECIMAL(precision, scale) columns ("1234.56"),
and back again.

Behavior:
- No floats and no Decimal: values stay strings end to end.
- Fail fast: invalid or ambiguous input raises NumberFormatError.
- Strict parsing: no auto-detection, no tolerant whitespace, no rounding.
- Empty input: to_db() returns None, from_db() returns "".

UI input accepts only "," as decimal separator, and either "." or a single
ASCII space (never both) as thousands separator. DB input accepts only "."
as decimal separator and no grouping.

Typical usage:

    fmt = NumberFormatter(text_service)
    fmt.to_db("1.234,56", 14, 2)           # "1234.56"
    fmt.from_db("1234.5", 2, " ", ",")     # "1 234,50"
"""

from __future__ import annotations

import re
from typing import Any

from strictnum.core.exceptions import ErrorKind, NumberFormatError
from strictnum.core.protocols import ITextLookup
from strictnum.core.types import DbNumber, UiNumber
from strictnum.services.txt import FallbackText

UI_THOUSANDS_DOT = "."
UI_THOUSANDS_SPACE = " "
UI_DECIMAL_COMMA = ","
DB_DECIMAL_DOT = "."

TEXT_FILE = "format_number"
TEXT_LAYER = "strictnum/core"

# PHP trim() set: NBSP and other unicode spaces are not trimmed.
_TRIM_CHARS = " \t\n\r\0\x0b"

_UNSUPPORTED_CHAR = re.compile(r"[^0-9,. ]")
_DOT_DECIMAL = re.compile(r"[0-9]+\.[0-9]+")
_DOT_GROUPED = re.compile(r"[0-9]{1,3}(?:\.[0-9]{3})*")
_SPACE_GROUPED = re.compile(r"[0-9]{1,3}(?: [0-9]{3})*")
_DIGITS = re.compile(r"[0-9]+")
_DB_NUMBER = re.compile(r"[0-9]+(?:\.[0-9]+)?")

_THOUSANDS_SEPS = ("", UI_THOUSANDS_DOT, UI_THOUSANDS_SPACE)
_DECIMAL_SEPS = (UI_DECIMAL_COMMA, DB_DECIMAL_DOT)

# kind -> (catalog key, English default)
MESSAGES: dict[ErrorKind, tuple[str, str]] = {
    ErrorKind.INVALID_PRECISION: (
        "err_format_number_invalid_precision",
        "Invalid precision: Must be >= 1.",
    ),
    ErrorKind.INVALID_SCALE: (
        "err_format_number_invalid_scale",
        "Invalid scale: Must be between 0 and precision.",
    ),
    ErrorKind.SIGN_WITHOUT_DIGITS: (
        "err_format_number_sign_without_digits",
        "Invalid number: Sign without digits.",
    ),
    ErrorKind.UNSUPPORTED_CHARS: (
        "err_format_number_unsupported_chars",
        "Invalid number: Unsupported characters.",
    ),
    ErrorKind.MULTIPLE_DECIMAL_SEPARATORS: (
        "err_format_number_multiple_decimal_separators",
        "Invalid number: Multiple decimal separators.",
    ),
    ErrorKind.DOT_DECIMAL_NOT_SUPPORTED: (
        "err_format_number_dot_decimal_not_supported",
        "Invalid number: Dot-decimal UI input is not supported. Use comma as decimal separator.",
    ),
    ErrorKind.DECIMALS_NOT_ALLOWED_FOR_SCALE_ZERO: (
        "err_format_number_decimals_not_allowed_scale0",
        "Invalid number: Decimals are not allowed for scale=0.",
    ),
    ErrorKind.MISSING_INTEGER_PART: (
        "err_format_number_missing_integer_part",
        "Invalid number: Missing integer part.",
    ),
    ErrorKind.MISSING_INTEGER_DIGITS: (
        "err_format_number_missing_integer_digits",
        "Invalid number: Missing integer digits.",
    ),
    ErrorKind.MIXED_THOUSANDS_SEPARATORS: (
        "err_format_number_mixed_thousands_seps",
        "Invalid number: Mixed thousands separators are not supported.",
    ),
    ErrorKind.DOT_GROUPING_MALFORMED: (
        "err_format_number_dot_grouping_malformed",
        'Invalid number: Thousands grouping with "." is malformed.',
    ),
    ErrorKind.SPACE_GROUPING_MALFORMED: (
        "err_format_number_space_grouping_malformed",
        "Invalid number: Thousands grouping with space is malformed.",
    ),
    ErrorKind.INTEGER_MUST_BE_DIGITS: (
        "err_format_number_integer_must_be_digits",
        "Invalid number: Integer part must be digits.",
    ),
    ErrorKind.FRACTION_MUST_BE_DIGITS: (
        "err_format_number_fraction_must_be_digits",
        "Invalid number: Fractional part must be digits only.",
    ),
    ErrorKind.TOO_MANY_FRACTION_DIGITS: (
        "err_format_number_too_many_fraction_digits",
        "Invalid number: Too many fractional digits for scale=%SCALE%.",
    ),
    ErrorKind.TOO_MANY_INTEGER_DIGITS: (
        "err_format_number_too_many_integer_digits",
        "Invalid number: Too many integer digits for DECIMAL(%PRECISION%,%SCALE%).",
    ),
    ErrorKind.INVALID_SCALE_FROM_DB: (
        "err_format_number_invalid_scale_fromdb",
        "Invalid scale: Must be >= 0.",
    ),
    ErrorKind.DB_SIGN_WITHOUT_DIGITS: (
        "err_format_number_db_sign_without_digits",
        "Invalid DB number: Sign without digits.",
    ),
    ErrorKind.DB_INVALID_FORMAT: (
        "err_format_number_db_invalid_format",
        "Invalid DB number: Expected dot-decimal without thousands separators.",
    ),
    ErrorKind.DB_TOO_MANY_FRACTION_DIGITS: (
        "err_format_number_db_too_many_fraction_digits",
        "Invalid DB number: Too many fractional digits for requested scale=%SCALE%.",
    ),
    ErrorKind.INVALID_THOUSANDS_SEP: (
        "err_format_number_invalid_thousands_sep",
        'Invalid thousands separator: Must be "", ".", or " ".',
    ),
    ErrorKind.INVALID_DECIMAL_SEP: (
        "err_format_number_invalid_decimal_sep",
        'Invalid decimal separator: Must be "," or ".".',
    ),
    ErrorKind.SEPARATORS_MUST_DIFFER: (
        "err_format_number_invalid_separators_same",
        "Invalid separators: Thousands and decimal separators must differ.",
    ),
}


def _strip_leading_zeros(digits: str) -> str:
    return digits.lstrip("0") or "0"


def _add_thousands(digits: str, sep: str) -> str:
    if sep == "" or len(digits) <= 3:
        return digits
    head = len(digits) % 3 or 3
    groups = [digits[:head]]
    groups.extend(digits[i:i + 3] for i in range(head, len(digits), 3))
    return sep.join(groups)


class NumberFormatter:
    """Stateless strict formatter; the text lookup only renders error messages."""

    def __init__(self, text: ITextLookup | None = None) -> None:
        self._text = text if text is not None else FallbackText()

    def _error(self, kind: ErrorKind, **variables: Any) -> NumberFormatError:
        key, default = MESSAGES[kind]
        values = {name: str(value) for name, value in variables.items()}
        message = self._text.get(key, TEXT_FILE, TEXT_LAYER, default, values)
        return NumberFormatError(kind, key, message, values)

    # ------------------------------------------------------------------
    # UI -> DB
    # ------------------------------------------------------------------

    def to_db(self, raw: UiNumber | None, precision: int, scale: int) -> DbNumber | None:
        """Convert a UI number string to a DB dot-decimal string.

        Accepts "1234,56", "1.234,56", "1 234,56", "1234" and ",50".
        Rejects dot-decimal input ("1234.56"), mixed grouping, and more
        fractional digits than ``scale``. Pads the fraction with zeros to
        ``scale`` digits.

        Returns:
            The DB string, or None when ``raw`` is None or blank.

        Raises:
            NumberFormatError: Invalid precision/scale or malformed input.
        """
        raw = "" if raw is None else raw.strip(_TRIM_CHARS)
        if raw == "":
            return None

        self._check_precision_scale(precision, scale)

        sign = ""
        if raw[0] in ("-", "+"):
            sign = "-" if raw[0] == "-" else ""
            raw = raw[1:].strip(_TRIM_CHARS)
            if raw == "":
                raise self._error(ErrorKind.SIGN_WITHOUT_DIGITS)

        if _UNSUPPORTED_CHAR.search(raw):
            raise self._error(ErrorKind.UNSUPPORTED_CHARS)

        comma_count = raw.count(UI_DECIMAL_COMMA)
        if comma_count > 1:
            raise self._error(ErrorKind.MULTIPLE_DECIMAL_SEPARATORS)

        # Without a comma a single "digits.digits" could be decimal or grouping.
        if comma_count == 0 and _DOT_DECIMAL.fullmatch(raw):
            raise self._error(ErrorKind.DOT_DECIMAL_NOT_SUPPORTED)

        if comma_count == 1:
            int_part, frac = raw.split(UI_DECIMAL_COMMA, 1)
        else:
            int_part, frac = raw, ""

        if scale == 0 and comma_count == 1:
            raise self._error(ErrorKind.DECIMALS_NOT_ALLOWED_FOR_SCALE_ZERO)

        if int_part == "" and comma_count == 1:
            int_part = "0"

        self._check_grouping(int_part)

        int_digits = int_part.replace(UI_THOUSANDS_DOT, "").replace(UI_THOUSANDS_SPACE, "")
        if int_digits == "":
            raise self._error(ErrorKind.MISSING_INTEGER_DIGITS)
        int_digits = _strip_leading_zeros(int_digits)

        if frac and not _DIGITS.fullmatch(frac):
            raise self._error(ErrorKind.FRACTION_MUST_BE_DIGITS)
        if len(frac) > scale:
            raise self._error(ErrorKind.TOO_MANY_FRACTION_DIGITS, scale=scale)

        if len(int_digits) > precision - scale:
            raise self._error(
                ErrorKind.TOO_MANY_INTEGER_DIGITS, precision=precision, scale=scale
            )

        out = sign + int_digits
        if scale > 0:
            out += DB_DECIMAL_DOT + frac.ljust(scale, "0")
        return out

    # ------------------------------------------------------------------
    # DB -> UI
    # ------------------------------------------------------------------

    def from_db(
        self,
        db: DbNumber | None,
        scale: int = 2,
        thousands_sep: str = UI_THOUSANDS_DOT,
        decimal_sep: str = UI_DECIMAL_COMMA,
    ) -> UiNumber:
        """Convert a DB dot-decimal string to a UI string.

        Always renders exactly ``scale`` fractional digits and inserts
        ``thousands_sep`` every three integer digits.

        Returns:
            The UI string, or "" when ``db`` is None or blank.

        Raises:
            NumberFormatError: Invalid scale, separators, or DB input.
        """
        db = "" if db is None else db.strip(_TRIM_CHARS)
        if db == "":
            return ""

        if scale < 0:
            raise self._error(ErrorKind.INVALID_SCALE_FROM_DB)

        self._check_separators(thousands_sep, decimal_sep)

        sign = ""
        if db[0] in ("-", "+"):
            sign = "-" if db[0] == "-" else ""
            db = db[1:]
            if db == "":
                raise self._error(ErrorKind.DB_SIGN_WITHOUT_DIGITS)

        if not _DB_NUMBER.fullmatch(db):
            raise self._error(ErrorKind.DB_INVALID_FORMAT)

        int_digits, _, frac = db.partition(DB_DECIMAL_DOT)
        int_digits = _strip_leading_zeros(int_digits)

        if len(frac) > scale:
            raise self._error(ErrorKind.DB_TOO_MANY_FRACTION_DIGITS, scale=scale)

        grouped = _add_thousands(int_digits, thousands_sep)
        if scale == 0:
            return sign + grouped
        return sign + grouped + decimal_sep + frac.ljust(scale, "0")

    # ------------------------------------------------------------------
    # Validation helpers
    # ------------------------------------------------------------------

    def _check_precision_scale(self, precision: int, scale: int) -> None:
        if precision < 1:
            raise self._error(ErrorKind.INVALID_PRECISION)
        if scale < 0 or scale > precision:
            raise self._error(ErrorKind.INVALID_SCALE)

    def _check_separators(self, thousands_sep: str, decimal_sep: str) -> None:
        if thousands_sep not in _THOUSANDS_SEPS:
            raise self._error(ErrorKind.INVALID_THOUSANDS_SEP)
        if decimal_sep not in _DECIMAL_SEPS:
            raise self._error(ErrorKind.INVALID_DECIMAL_SEP)
        if thousands_sep != "" and thousands_sep == decimal_sep:
            raise self._error(ErrorKind.SEPARATORS_MUST_DIFFER)

    def _check_grouping(self, int_part: str) -> None:
        """Integer part is digits only, or 1-3 digits then (sep + 3 digits)*."""
        if int_part == "":
            raise self._error(ErrorKind.MISSING_INTEGER_PART)

        has_dot = UI_THOUSANDS_DOT in int_part
        has_space = UI_THOUSANDS_SPACE in int_part
        if has_dot and has_space:
            raise self._error(ErrorKind.MIXED_THOUSANDS_SEPARATORS)

        if has_dot:
            if not _DOT_GROUPED.fullmatch(int_part):
                raise self._error(ErrorKind.DOT_GROUPING_MALFORMED)
            return

        if has_space:
            if not _SPACE_GROUPED.fullmatch(int_part):
                raise self._error(ErrorKind.SPACE_GROUPING_MALFORMED)
            return

        if not _DIGITS.fullmatch(int_part):
            raise self._error(ErrorKind.INTEGER_MUST_BE_DIGITS)


_default_formatter = NumberFormatter()


def to_db(raw: UiNumber | None, precision: int, scale: int) -> DbNumber | None:
    """Module-level :meth:`NumberFormatter.to_db` with English messages."""
    return _default_formatter.to_db(raw, precision, scale)


def from_db(
    db: DbNumber | None,
    scale: int = 2,
    thousands_sep: str = UI_THOUSANDS_DOT,
    decimal_sep: str = UI_DECIMAL_COMMA,
) -> UiNumber:
    """Module-level :meth:`NumberFormatter.from_db` with English messages."""
    return _default_formatter.from_db(db, scale, thousands_sep, decimal_sep)
