"""Format specifiers for table cell values.

Specifiers follow the familiar en-US conventions used by spreadsheet and
reporting tools:

- Numeric: `C` (currency), `N` (grouped number), `F` (fixed point),
  `D` (zero-padded integer), `P` (percent), each with an optional precision
  of up to two digits (e.g. `C0`, `N2`, `D4`).
- Anything else is a custom date pattern (e.g. `dd-MMM-yyyy`).

Parsing is strict and value-independent, so a malformed specifier can be
rejected when a table is configured. Applying a valid specifier to a value of
the wrong kind raises `ValueFormatError` at render time.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date, datetime, time
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from functools import lru_cache
from typing import Any, Final, Literal

NumericKind = Literal["currency", "number", "fixed", "decimal", "percent"]

CURRENCY_SYMBOL: Final[str] = "$"

_NUMERIC_KINDS: Final[dict[str, NumericKind]] = {
    "c": "currency",
    "n": "number",
    "f": "fixed",
    "d": "decimal",
    "p": "percent",
}

_DEFAULT_PRECISION: Final[dict[NumericKind, int]] = {
    "currency": 2,
    "number": 2,
    "fixed": 2,
    "decimal": 0,
    "percent": 2,
}

_NUMERIC_RE: Final[re.Pattern[str]] = re.compile(r"^([CcNnFfDdPp])(\d{0,2})$")

_DATE_FIELD_CHARS: Final[str] = "yMdHhmst"
_LITERAL_CHARS: Final[frozenset[str]] = frozenset(" -/:.,")

MONTH_NAMES: Final[tuple[str, ...]] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)
DAY_NAMES: Final[tuple[str, ...]] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)


class FormatSpecifierError(ValueError):
    """Raised when a format specifier cannot be parsed."""

    def __init__(self, *, spec: str, reason: str) -> None:
        """Initialize the error.

        Args:
            spec: The offending specifier.
            reason: Human readable description of the problem.
        """

        super().__init__(f"Unsupported format specifier {spec!r}: {reason}.")
        self.spec = spec
        self.reason = reason


class ValueFormatError(ValueError):
    """Raised when a valid specifier cannot be applied to a value."""

    def __init__(self, *, spec: str, value: Any, reason: str) -> None:
        """Initialize the error.

        Args:
            spec: The specifier being applied.
            value: The raw value that could not be formatted.
            reason: Human readable description of the problem.
        """

        super().__init__(f"Cannot apply format {spec!r} to {value!r}: {reason}.")
        self.spec = spec
        self.value = value
        self.reason = reason


@dataclass(frozen=True, slots=True)
class NumericFormat:
    """A parsed numeric specifier.

    Args:
        spec: Original specifier text.
        kind: Numeric conversion rule.
        precision: Decimal places, or minimum digits for `decimal`.
    """

    spec: str
    kind: NumericKind
    precision: int


@dataclass(frozen=True, slots=True)
class DateToken:
    """One piece of a date pattern: a field (e.g. `MMM`) or literal text."""

    text: str
    is_field: bool


@dataclass(frozen=True, slots=True)
class DatePattern:
    """A parsed custom date pattern."""

    spec: str
    tokens: tuple[DateToken, ...]


FormatSpec = NumericFormat | DatePattern


@lru_cache(maxsize=256)
def parse_format(spec: str) -> FormatSpec:
    """Parse a format specifier.

    Args:
        spec: Specifier text such as `C2`, `N0`, or `dd-MMM-yyyy`.

    Returns:
        A NumericFormat or DatePattern.

    Raises:
        FormatSpecifierError: When the specifier is empty or malformed.
    """

    if not isinstance(spec, str) or not spec.strip():
        raise FormatSpecifierError(spec=str(spec), reason="specifier must be a non-empty string")

    match = _NUMERIC_RE.match(spec)
    if match:
        kind = _NUMERIC_KINDS[match.group(1).lower()]
        digits = match.group(2)
        precision = int(digits) if digits else _DEFAULT_PRECISION[kind]
        return NumericFormat(spec=spec, kind=kind, precision=precision)

    return DatePattern(spec=spec, tokens=_tokenize_date_pattern(spec))


def format_value(value: Any, spec: str | FormatSpec) -> str:
    """Apply a format specifier to a raw value.

    Args:
        value: Raw record value.
        spec: Specifier text or an already parsed specifier.

    Returns:
        The display string.

    Raises:
        FormatSpecifierError: When `spec` is text that cannot be parsed.
        ValueFormatError: When the value is incompatible with the specifier.
    """

    parsed = parse_format(spec) if isinstance(spec, str) else spec
    if isinstance(parsed, NumericFormat):
        return _format_numeric(value, parsed)
    return _format_date(value, parsed)


def default_display(value: Any) -> str:
    """Return the default string conversion used for unformatted cells."""

    if value is None:
        return ""
    return str(value)


def _tokenize_date_pattern(spec: str) -> tuple[DateToken, ...]:
    """Split a custom date pattern into field and literal tokens."""

    tokens: list[DateToken] = []
    idx = 0
    while idx < len(spec):
        char = spec[idx]
        if char in _DATE_FIELD_CHARS:
            end = idx
            while end < len(spec) and spec[end] == char:
                end += 1
            tokens.append(DateToken(text=spec[idx:end], is_field=True))
            idx = end
        elif char in ("'", '"'):
            end = spec.find(char, idx + 1)
            if end == -1:
                raise FormatSpecifierError(spec=spec, reason=f"unterminated quoted literal at position {idx}")
            tokens.append(DateToken(text=spec[idx + 1 : end], is_field=False))
            idx = end + 1
        elif char == "\\":
            if idx + 1 >= len(spec):
                raise FormatSpecifierError(spec=spec, reason="trailing escape character")
            tokens.append(DateToken(text=spec[idx + 1], is_field=False))
            idx += 2
        elif char in _LITERAL_CHARS:
            tokens.append(DateToken(text=char, is_field=False))
            idx += 1
        else:
            raise FormatSpecifierError(spec=spec, reason=f"unsupported character {char!r} at position {idx}")

    if not any(token.is_field for token in tokens):
        raise FormatSpecifierError(spec=spec, reason="date pattern must contain at least one date field")
    return tuple(tokens)


def _format_numeric(value: Any, fmt: NumericFormat) -> str:
    """Format a numeric value according to a NumericFormat."""

    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        raise ValueFormatError(spec=fmt.spec, value=value, reason="value is not a number")

    number = value if isinstance(value, Decimal) else Decimal(str(value))
    if not number.is_finite():
        raise ValueFormatError(spec=fmt.spec, value=value, reason="value is not finite")

    if fmt.kind == "decimal":
        if number != number.to_integral_value():
            raise ValueFormatError(spec=fmt.spec, value=value, reason="value is not an integer")
        digits = f"{abs(int(number)):0{fmt.precision}d}"
        return f"-{digits}" if number < 0 else digits

    if fmt.kind == "percent":
        number = number * 100

    try:
        rounded = number.quantize(Decimal(1).scaleb(-fmt.precision), rounding=ROUND_HALF_UP)
    except InvalidOperation as exc:
        raise ValueFormatError(spec=fmt.spec, value=value, reason="value exceeds supported precision") from exc

    grouping = "" if fmt.kind == "fixed" else ","
    body = f"{abs(rounded):{grouping}.{fmt.precision}f}"
    sign = "-" if rounded < 0 else ""

    if fmt.kind == "currency":
        return f"{sign}{CURRENCY_SYMBOL}{body}"
    if fmt.kind == "percent":
        return f"{sign}{body}%"
    return f"{sign}{body}"


def _format_date(value: Any, pattern: DatePattern) -> str:
    """Format a date or datetime according to a DatePattern."""

    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        moment = datetime.combine(value, time())
    else:
        raise ValueFormatError(spec=pattern.spec, value=value, reason="value is not a date")

    return "".join(_render_date_token(token, moment) if token.is_field else token.text for token in pattern.tokens)


def _render_date_token(token: DateToken, moment: datetime) -> str:
    """Render a single date field token."""

    char = token.text[0]
    width = len(token.text)

    if char == "y":
        if width == 1:
            return str(moment.year % 100)
        if width == 2:
            return f"{moment.year % 100:02d}"
        return f"{moment.year:0{width}d}"
    if char == "M":
        if width >= 4:
            return MONTH_NAMES[moment.month - 1]
        if width == 3:
            return MONTH_NAMES[moment.month - 1][:3]
        return _pad(moment.month, width)
    if char == "d":
        if width >= 4:
            return DAY_NAMES[moment.weekday()]
        if width == 3:
            return DAY_NAMES[moment.weekday()][:3]
        return _pad(moment.day, width)
    if char == "H":
        return _pad(moment.hour, width)
    if char == "h":
        return _pad(moment.hour % 12 or 12, width)
    if char == "m":
        return _pad(moment.minute, width)
    if char == "s":
        return _pad(moment.second, width)
    # "t": AM/PM designator
    designator = "AM" if moment.hour < 12 else "PM"
    return designator[0] if width == 1 else designator


def _pad(number: int, width: int) -> str:
    """Render a date component: unpadded for width 1, two digits otherwise."""

    return str(number) if width == 1 else f"{number:02d}"
