"""Digit counting and zero-padding utilities."""


def digit_count(value: int) -> int:
    """Return the number of decimal digits needed to print `value` without leading zeroes.

    Matches `ceil(log10(value + 1))` exactly, so `digit_count(0) == 0`. Integer arithmetic
    is used instead of floating point to stay exact for large values.
    """
    if value < 0:
        raise ValueError(f"Value must not be negative, got {value}")
    if value == 0:
        return 0
    return len(str(value))


def leading_zero_count(value: int, target_width: int) -> int:
    """Return how many zeroes must be prepended to `value` to reach `target_width` digits.

    Raises:
        ValueError: If `value` already needs more digits than `target_width`.
    """
    width = digit_count(value)
    if width > target_width:
        raise ValueError(f"Value {value} has {width} digits which exceeds the target width of {target_width}")
    return target_width - width


def pad_number(value: int, target_width: int) -> str:
    """Render `value` with as many leading zeroes as `leading_zero_count` demands."""
    return "0" * leading_zero_count(value, target_width) + str(value)
