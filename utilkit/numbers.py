from __future__ import annotations

import warnings


def _pad_start(text: str, length: int, fill: str) -> str:
    need = length - len(text)
    if need <= 0 or not fill:
        return text
    return (fill * (need // len(fill) + 1))[:need] + text


def pad_number(value: int, length: int = 4, fill: str = "0") -> str:
    """Left-pad the decimal text of value to length characters.

    pad_number(1)          -> "0001"
    pad_number(1, 2)       -> "01"
    pad_number(-5, 3)      -> "-05"
    pad_number(12345, 3)   -> "12345" (never truncates)
    """
    if value < 0:
        return "-" + _pad_start(str(abs(value)), length - 1, fill)
    return _pad_start(str(value), length, fill)


def fill_a_number_with_characters(value: int, length: int = 4, fill: str = "0") -> str:
    warnings.warn(
        "fill_a_number_with_characters() is deprecated; use pad_number()",
        DeprecationWarning,
        stacklevel=2,
    )
    return pad_number(value, length, fill)
