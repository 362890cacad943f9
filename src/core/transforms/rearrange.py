"""Order-changing transforms: reverse and shuffle."""
from __future__ import annotations

import random
from typing import Optional


def reverse(text: str) -> str:
    return text[::-1]


def shuffle(text: str, rng: Optional[random.Random] = None) -> str:
    """Fisher-Yates shuffle of the code points of ``text``.

    Pass a seeded ``random.Random`` for reproducible output; without one a
    fresh, unseeded generator is used for this call only.
    """

    if not text:
        return text
    generator = rng if rng is not None else random.Random()
    chars = list(text)
    for index in range(len(chars) - 1, 0, -1):
        swap_with = generator.randrange(index + 1)
        chars[index], chars[swap_with] = chars[swap_with], chars[index]
    return "".join(chars)
