"""Injected randomness capability.

The generator never reads the process-wide :mod:`random` state. It only asks
a :class:`RandomSource` for uniform indices, so two runs fed the same values
produce the same maze.
"""

import random
from typing import Iterable, Optional, Protocol, runtime_checkable

from pyrsistent import pvector
from pyrsistent.typing import PVector

from .errors import RandomSourceExhaustedError


@runtime_checkable
class RandomSource(Protocol):
    def random_index(self, n: int) -> int:
        """Return an integer uniformly distributed in ``[0, n)``."""
        ...


class RandomSourceAdapter:
    """:class:`RandomSource` backed by a private ``random.Random`` instance.

    Arguments:
        seed: Seed for a new generator. Ignored when ``rng`` is given.
        rng: Existing generator to draw from (shared with the caller).
    """

    def __init__(self, seed: Optional[int] = None, rng: Optional[random.Random] = None):
        self.rng: random.Random = rng if rng is not None else random.Random(seed)

    def random_index(self, n: int) -> int:
        if n < 1:
            raise ValueError(f"random_index requires n >= 1, got {n}")
        return self.rng.randrange(n)


class SequenceRandomSource:
    """Replays a fixed sequence of values, each reduced modulo ``n``.

    Useful to pin generation down exactly in tests. Raises
    :class:`RandomSourceExhaustedError` once the values run out.
    """

    def __init__(self, values: Iterable[int]):
        self.values: PVector[int] = pvector(values)
        self.position = 0

    @property
    def consumed(self) -> int:
        return self.position

    def random_index(self, n: int) -> int:
        if n < 1:
            raise ValueError(f"random_index requires n >= 1, got {n}")
        if self.position >= len(self.values):
            raise RandomSourceExhaustedError(
                f"Sequence exhausted after {self.position} values"
            )
        value = self.values[self.position]
        self.position += 1
        return value % n
