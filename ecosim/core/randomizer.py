"""
Shared random source

Every entity draws from the same process-wide generator so that
distribution tests see one stream.
"""

import random
from typing import List, MutableSequence

_rand = random.Random()


def uniform_double() -> float:
    """Uniform float in [0, 1)."""
    return _rand.random()


def uniform_int(bound: int) -> int:
    """Uniform int in [0, bound)."""
    assert bound > 0, f"bound must be positive, got {bound}"
    return _rand.randrange(bound)


def random_bool() -> bool:
    return _rand.random() < 0.5


def shuffle(seq: MutableSequence) -> None:
    """Shuffle a list in place using the shared generator."""
    _rand.shuffle(seq)


def choice(options: List):
    return options[uniform_int(len(options))]
