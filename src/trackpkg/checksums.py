"""Check digit algorithms for carrier tracking numbers.

Every function here is pure and total over ``str`` input: malformed
numbers simply fail validation. Leading and trailing whitespace is
trimmed; anything else (internal spaces, dashes, non-ASCII digits)
makes a number invalid.
"""

import string

DIGITS = frozenset(string.digits)
LETTERS = frozenset(string.ascii_letters)

UPS_PREFIX = "1Z"
UPS_LENGTH = 18

FEDEX_EXPRESS_LENGTH = 12
FEDEX_EXPRESS_WEIGHTS = (3, 1, 7)


def _is_digits(value: str) -> bool:
    return all(char in DIGITS for char in value)


def _fold_letter(char: str) -> int:
    """Map a letter onto 0-9 the way UPS folds its alphabet."""
    return (ord(char) - 63) % 10


def is_valid_ups(number: str) -> bool:
    """Validate a UPS ``1Z`` tracking number.

    The 15 characters between the prefix and the check character are
    weighted by their 1-indexed position. Digits at even positions are
    doubled; letters at even positions are folded but not doubled.
    Letters at odd positions use the folded value's doubled digit sum.

    Two quirks of the UPS scheme are reproduced as-is: a running total
    divisible by 10 accepts any check character, and otherwise both
    ``digit`` and ``10 - digit`` are accepted.
    """
    number = number.strip()
    if len(number) != UPS_LENGTH or not number.startswith(UPS_PREFIX):
        return False

    body = number[2:17]
    check = number[17]

    total = 0
    for position, char in enumerate(body, start=1):
        if char in DIGITS:
            value = int(char)
            total += 2 * value if position % 2 == 0 else value
        elif char in LETTERS:
            folded = _fold_letter(char)
            if position % 2 == 0:
                total += folded
            else:
                total += 2 * folded - 9 * (folded // 5)
        else:
            return False

    digit = total % 10
    if digit == 0:
        return True
    if check not in DIGITS:
        return False

    expected = digit if digit == int(check) else 10 - digit
    return expected == int(check)


def is_valid_fedex_express(number: str) -> bool:
    """Validate a 12 digit FedEx Express tracking number (weighted mod 11)."""
    number = number.strip()
    if len(number) != FEDEX_EXPRESS_LENGTH or not _is_digits(number[:11]):
        return False

    total = sum(
        int(char) * FEDEX_EXPRESS_WEIGHTS[index % 3]
        for index, char in enumerate(number[:11])
    )
    check = total % 11
    if check == 10:
        check = 0

    return str(check) == number[11]


def mod10_check_digit(digits: str) -> int:
    """Compute the right-to-left mod 10 check digit shared by FedEx Ground and USPS.

    Positions are counted from the right with the (absent) check digit as
    position 1, so the digit immediately left of it is weighted 3, the next
    one 1, and so on.

    Args:
        digits: The digits preceding the check character.

    Returns:
        The check digit, 0-9.

    Raises:
        ValueError: If ``digits`` contains anything other than 0-9.
    """
    if not _is_digits(digits):
        raise ValueError(f"Not a digit string: {digits!r}")

    even_total = 0
    odd_total = 0
    for position, char in enumerate(reversed(digits), start=2):
        if position % 2 == 0:
            even_total += int(char)
        else:
            odd_total += int(char)

    total = even_total * 3 + odd_total
    # Reduced mod 10: a total divisible by 10 gives check digit 0, never 10
    return (10 - total % 10) % 10


def is_valid_mod10(
    number: str,
    window: int,
    prefixes: list[str] | tuple[str, ...],
    excluded_prefixes: list[str] | tuple[str, ...] = (),
) -> bool:
    """Validate a prefixed number against the right-to-left mod 10 scheme.

    Only the rightmost ``window`` characters are checked; longer barcodes
    carry extra leading data. The prefix gates apply to the full number.
    """
    number = number.strip()
    if window < 2 or len(number) < window or number[:2] not in prefixes:
        return False
    if any(number.startswith(prefix) for prefix in excluded_prefixes):
        return False

    number = number[-window:]
    body, check = number[:-1], number[-1]
    if not _is_digits(body):
        return False

    return str(mod10_check_digit(body)) == check
