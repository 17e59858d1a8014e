r"""@package mathfuncs.functions.printing

Helpers for the human readable text of functions.

The text produced by the function classes is meant for people (and tests),
not for parsing. Numbers are printed compactly (integral values without a
decimal point) and exponents use Unicode superscript characters.
"""


__all__ = [
    "print_value",
    "print_coefficient",
    "print_shift",
    "superscript",
]


_SUPERSCRIPT = str.maketrans(
    "0123456789+-.,()=abcdefghijklmnoprstuvwxyzABDEGHIJKLMNOPRTUVW",
    "⁰¹²³⁴⁵⁶⁷⁸⁹⁺⁻·ʾ⁽⁾⁼ᵃᵇᶜᵈᵉᶠᵍʰⁱʲᵏˡᵐⁿᵒᵖʳˢᵗᵘᵛʷˣʸᶻᴬᴮᴰᴱᴳᴴᴵᴶᴷᴸᴹᴺᴼᴾᴿᵀᵁⱽᵂ",
)

_LONG_MIN = -2.0**63
_LONG_MAX = 2.0**63


def print_value(value):
    r"""Return a compact text of a number.

    Integral values within the range of 64 bit integers are printed without
    decimal point, e.g. `3` instead of `3.0`. All other values (including
    infinities and NaN) are printed with `repr()`.
    """
    value = float(value)
    if _LONG_MIN <= value < _LONG_MAX and value == int(value):
        return "%d" % value
    return repr(value)


def superscript(text):
    r"""Translate digits, signs and letters to superscript characters.

    Characters without superscript counterpart are left unchanged.
    """
    return text.translate(_SUPERSCRIPT)


def print_coefficient(value):
    r"""Return the text of a leading coefficient.

    A coefficient of `1` is omitted entirely and `-1` is printed as a sign.
    """
    if value == 1.0:
        return ""
    if value == -1.0:
        return "-"
    return print_value(value)


def print_shift(value):
    r"""Return the text of an additive term with explicit sign.

    A zero shift is omitted entirely.
    """
    if value == 0.0:
        return ""
    text = print_value(value)
    return text if text.startswith("-") else "+" + text
