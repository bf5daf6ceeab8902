"""Injectable RNG wrapper for part shuffling."""

import random
from typing import Optional


class ShipRNG:
    """Wrapper around Python's random.Random used by the ship builder.

    Production runs leave the seed unset so every build draws from system
    entropy. Tests pass a seed to make the shuffle reproducible.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize RNG.

        Args:
            seed: Integer seed for a reproducible shuffle, or None for
                system entropy
        """
        self.seed = seed
        self.rng = random.Random(seed)

    def shuffle(self, seq):
        """Shuffle sequence in place.

        Args:
            seq: Sequence to shuffle
        """
        self.rng.shuffle(seq)
