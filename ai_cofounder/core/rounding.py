"""
Rounding used for scores and money figures.

Halves round towards positive infinity (2.5 -> 3, -2.5 -> -2), unlike the
built-in round() which rounds halves to even.
"""

import math
from typing import Union


def round_half_up(value: float, ndigits: int = 0) -> Union[int, float]:
    """
    Round `value` to `ndigits` decimals, halves up.

    Returns an int when `ndigits` is 0.
    """
    if ndigits == 0:
        return math.floor(value + 0.5)
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor
