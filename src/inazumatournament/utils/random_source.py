"""Injectable source of randomness for pairing and match resolution."""

# Inazuma Tournament
# Copyright (C) 2025  Inazuma Tournament developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import random
from typing import List, MutableSequence, Optional, Sequence, TypeVar

T = TypeVar("T")


class RandomSource:
    """Uniform random source used by the tournament engine.

    Wraps :class:`random.Random`. Pass a ``seed`` for reproducible runs;
    without one the generator is seeded from the OS, so every instance
    behaves independently. Tests may subclass and override the three
    operations to script outcomes.
    """

    def __init__(self, seed: Optional[int] = None):
        self.random = random.Random(seed) if seed is not None else random.Random()

    def shuffle(self, items: MutableSequence[T]) -> None:
        """Shuffle ``items`` in place."""
        self.random.shuffle(items)

    def choose_without_replacement(self, items: Sequence[T], k: int) -> List[T]:
        """Pick ``k`` distinct entries of ``items`` uniformly at random."""
        return self.random.sample(list(items), k)

    def chance(self, probability: float) -> bool:
        """Return True with the given probability."""
        return self.random.random() < probability


def ensure_random_source(rng: Optional[RandomSource]) -> RandomSource:
    """Return ``rng`` or a freshly seeded source when None."""
    return rng if rng is not None else RandomSource()
