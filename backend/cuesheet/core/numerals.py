"""Localized digit handling for user-entered serials and order indexes."""

BENGALI_DIGITS = "০১২৩৪৫৬৭৮৯"

_TO_ASCII = str.maketrans(BENGALI_DIGITS, "0123456789")


def is_localized_number(value) -> bool:
    return isinstance(value, str) and bool(value) and all(ch in BENGALI_DIGITS for ch in value)


def normalize_localized_digits(value):
    """Return the ASCII form of a Bengali digit string.

    Only strings made up entirely of Bengali digits are converted; anything
    else, including non-string values, is returned as given.
    """
    if is_localized_number(value):
        return value.translate(_TO_ASCII)
    return value
