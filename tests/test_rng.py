"""Tests for the injectable RNG wrapper."""

from spaceship.utils import ShipRNG


def test_seeded_shuffle_is_reproducible():
    """Same seed, same permutation."""
    a = list(range(20))
    b = list(range(20))
    ShipRNG(42).shuffle(a)
    ShipRNG(42).shuffle(b)
    assert a == b


def test_shuffle_is_a_permutation():
    """Shuffling keeps every element."""
    items = [f"part {i}" for i in range(20)]
    shuffled = list(items)
    ShipRNG(7).shuffle(shuffled)
    assert sorted(shuffled) == sorted(items)


def test_unseeded_rng():
    """Omitting the seed uses system entropy."""
    rng = ShipRNG()
    assert rng.seed is None
    items = [1, 2, 3]
    rng.shuffle(items)
    assert sorted(items) == [1, 2, 3]
