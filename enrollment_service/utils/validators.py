# enrollment_service/utils/validators.py
"""
Input validation helpers for Brazilian document and postal data.
"""

import re

_LEADING_INTEGER = re.compile(r"^\s*[+-]?\d")


def parses_as_integer(value: str) -> bool:
    """
    True when the string starts with an integer after optional whitespace
    and sign. Trailing characters are ignored, so "1234abcd" is accepted.
    """
    return bool(_LEADING_INTEGER.match(value))


def only_digits(value: str) -> str:
    return re.sub(r"\D", "", value)


def is_valid_cpf(value: str) -> bool:
    """
    Validate a CPF number using its two check digits.

    Accepts punctuated ("123.456.789-09") or bare input. Sequences of a
    single repeated digit pass the checksum but are not valid CPFs.

    Args:
        value: CPF to validate

    Returns:
        Whether the CPF is valid
    """
    digits = only_digits(value)
    if len(digits) != 11 or digits == digits[0] * 11:
        return False

    for position in (9, 10):
        total = sum(
            int(digit) * weight
            for digit, weight in zip(digits[:position], range(position + 1, 1, -1))
        )
        check = (total * 10) % 11 % 10
        if check != int(digits[position]):
            return False

    return True
