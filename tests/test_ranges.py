import pytest

from stormphrax.ranges import Range


@pytest.fixture
def hash_range():
    return Range(1, 67108864)


def test_contains_bounds(hash_range):
    assert hash_range.contains(1)
    assert hash_range.contains(67108864)
    assert not hash_range.contains(0)
    assert not hash_range.contains(67108865)


def test_clamp_inside(hash_range):
    assert hash_range.clamp(64) == 64


def test_clamp_below_and_above(hash_range):
    assert hash_range.clamp(-5) == 1
    assert hash_range.clamp(10**12) == 67108864


def test_clamp_always_contained():
    r = Range(-1000, 1000)
    for v in range(-3000, 3001, 137):
        assert r.contains(r.clamp(v))


def test_fields():
    r = Range(-1000, 1000)
    assert (r.min, r.max) == (-1000, 1000)


def test_float_range():
    r = Range(0.5, 1.0)
    assert r.clamp(2.0) == 1.0
    assert r.contains(0.75)