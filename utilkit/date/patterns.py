"""Custom pattern grammar.

A pattern is "<date token>[ <time token>]".

Date tokens are YYYY, MM and DD joined by "-" or "/" in one of the orders
Y, M, D, Y-M, M-D, D-M, Y-M-D, M-D-Y, D-M-Y (e.g. "DD/MM/YYYY").

Time tokens are HH, MM and SS joined by ":" in one of the orders H-M-S, H,
H-M, M, M-S, S. Tokens ending in seconds carry a "Z" suffix ("HH:MM:SSZ",
"MM:SSZ", "SSZ"); only the full H-M-S form renders milliseconds after a dot.

Anything else does not parse, and renders as an empty string.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..numbers import pad_number
from .civil import DateFields

DATE_ORDERS = {
    ("Y",),
    ("M",),
    ("D",),
    ("Y", "M"),
    ("M", "D"),
    ("D", "M"),
    ("Y", "M", "D"),
    ("M", "D", "Y"),
    ("D", "M", "Y"),
}

TIME_ORDERS = {
    ("H", "M", "S"),
    ("H",),
    ("H", "M"),
    ("M",),
    ("M", "S"),
    ("S",),
}

_DATE_TOKENS = {"YYYY": "Y", "MM": "M", "DD": "D"}
_TIME_TOKENS = {"HH": "H", "MM": "M", "SS": "S"}

DEFAULT_PATTERN = "YYYY-MM-DD HH:MM:SS"


@dataclass(frozen=True)
class DateShape:
    order: tuple[str, ...]
    sep: str = "-"

    @classmethod
    def parse(cls, token: str | None) -> "DateShape | None":
        if not token:
            return None
        sep = "/" if "/" in token else "-"
        order = tuple(_DATE_TOKENS.get(part, "?") for part in token.split(sep))
        if order not in DATE_ORDERS:
            return None
        return cls(order=order, sep=sep)

    def render(self, f: DateFields) -> str:
        pieces = {
            "Y": pad_number(f.year, 4),
            "M": pad_number(f.month + 1, 2),
            "D": pad_number(f.day, 2),
        }
        return self.sep.join(pieces[k] for k in self.order)


@dataclass(frozen=True)
class TimeShape:
    order: tuple[str, ...]
    with_ms: bool = False

    @classmethod
    def parse(cls, token: str | None) -> "TimeShape | None":
        if not token:
            return None
        z = token.endswith("Z")
        body = token[:-1] if z else token
        order = tuple(_TIME_TOKENS.get(part, "?") for part in body.split(":"))
        if order not in TIME_ORDERS:
            return None
        # The Z suffix goes with (and only with) a trailing seconds field.
        if z != (order[-1] == "S"):
            return None
        return cls(order=order, with_ms=len(order) == 3)

    def render(self, f: DateFields) -> str:
        pieces = {
            "H": pad_number(f.hours, 2),
            "M": pad_number(f.minutes, 2),
            "S": pad_number(f.seconds, 2),
        }
        out = ":".join(pieces[k] for k in self.order)
        if self.with_ms:
            out += f".{f.milliseconds}"
        return out


DEFAULT_DATE = DateShape(order=("Y", "M", "D"), sep="-")
DEFAULT_TIME = TimeShape(order=("H", "M", "S"), with_ms=False)


def split_pattern(pattern: str) -> tuple[str, str | None]:
    parts = pattern.split(" ")
    date_tok = parts[0].strip()
    time_tok = parts[1].strip() if len(parts) > 1 else None
    return date_tok, time_tok


def render_date_token(f: DateFields, token: str | None) -> str:
    shape = DateShape.parse(token)
    return shape.render(f) if shape else ""


def render_time_token(f: DateFields, token: str | None) -> str:
    shape = TimeShape.parse(token)
    return shape.render(f) if shape else ""


def render_pattern(f: DateFields, pattern: str | None = None) -> str:
    """Render fields with a custom pattern; no pattern means DEFAULT_PATTERN."""
    if not pattern:
        return f"{DEFAULT_DATE.render(f)} {DEFAULT_TIME.render(f)}"
    date_tok, time_tok = split_pattern(pattern)
    return f"{render_date_token(f, date_tok)} {render_time_token(f, time_tok)}".strip()
