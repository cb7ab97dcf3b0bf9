"""CPF check-digit validation"""

import re

CPF_LENGTH = 11

# Positions (0-indexed) of the two trailing check digits
CHECK_DIGIT_POSITIONS = (9, 10)

_NON_DIGIT_RE = re.compile(r'[^0-9]')


def clean_cpf(value: str) -> str:
    """Strip every character that is not an ASCII digit.

    Example: '529.982.247-25' -> '52998224725'
    """
    return _NON_DIGIT_RE.sub('', value)


def calculate_check_digit(digits: str, position: int) -> int:
    """Compute the check digit expected at `position` from the digits before it.

    Weights run from position + 1 down to 2. A result of 10 maps to 0.
    """
    total = sum(int(digits[j]) * (position + 1 - j) for j in range(position))
    check = (total * 10) % 11
    if check == 10:
        check = 0
    return check


def validate_cpf(value: str) -> bool:
    """
    Validate a CPF string.

    Formatting characters (dots, dashes, spaces) are ignored. Anything that
    does not clean down to 11 digits, or that is one digit repeated 11 times,
    is invalid.

    Args:
        value: Raw CPF text, formatted or not

    Returns:
        True if both check digits match, False otherwise
    """
    if not isinstance(value, str):
        return False

    digits = clean_cpf(value)
    if len(digits) != CPF_LENGTH or len(set(digits)) == 1:
        return False

    for position in CHECK_DIGIT_POSITIONS:
        if calculate_check_digit(digits, position) != int(digits[position]):
            return False
    return True
