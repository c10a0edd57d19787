"""Natural ordering of strings, with embedded numbers compared by value."""

from __future__ import annotations

from functools import cmp_to_key

_DIGITS = "0123456789"


def _is_digit(ch: str) -> bool:
    return ch != "" and ch in _DIGITS


def _digit_run(text: str, start: int) -> int:
    end = start
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    return end


def compare_natural(a, b) -> int:
    """Three-way natural comparison: negative, zero or positive.

    ``None`` sorts before any string. Numbers come before other characters,
    equal numbers with fewer digits come first, and other characters compare
    by code point.
    """
    if a is None or b is None:
        if a is not None:
            return 1
        return -1 if b is not None else 0

    i = j = 0
    while True:
        ca = a[i] if i < len(a) else ""
        cb = b[j] if j < len(b) else ""

        if _is_digit(ca) and _is_digit(cb):
            end_a = _digit_run(a, i)
            end_b = _digit_run(b, j)
            val_a = int(a[i:end_a])
            val_b = int(b[j:end_b])
            if val_a != val_b:
                return val_a - val_b
            len_a = end_a - i
            len_b = end_b - j
            if len_a != len_b:
                return len_a - len_b
            i, j = end_a, end_b
            continue

        if _is_digit(ca) or _is_digit(cb):
            return -1 if _is_digit(ca) else 1

        hit_digit = False
        while ca and cb:
            if _is_digit(ca) or _is_digit(cb):
                hit_digit = True
                break
            if ca != cb:
                return ord(ca) - ord(cb)
            i += 1
            j += 1
            ca = a[i] if i < len(a) else ""
            cb = b[j] if j < len(b) else ""
        if hit_digit:
            continue
        if ca:
            return 1
        return -1 if cb else 0


def natural_less(lhs, rhs) -> bool:
    """True when ``lhs`` sorts strictly before ``rhs``."""
    return compare_natural(lhs, rhs) < 0


def natural_sorted(items) -> list:
    """Return the items in natural order."""
    return sorted(items, key=cmp_to_key(compare_natural))