import pytest

from ogbcore.lcg import INCREMENT, Lcg


def test_zero_seed_first_value_is_increment():
    assert Lcg(0).get_random() == 1442695040888963407
    assert Lcg(0).peek_random() == INCREMENT


def test_peek_does_not_advance():
    rng = Lcg(42)
    peeked = rng.peek_random()
    assert rng.peek_random() == peeked
    assert rng.get_random() == peeked
    assert rng.seed == peeked


def test_same_seed_same_sequence():
    a = Lcg(7)
    b = Lcg(7)
    assert [a.get_random() for _ in range(20)] == [b.get_random() for _ in range(20)]


def test_values_stay_64_bit():
    rng = Lcg(123456789)
    for _ in range(200):
        value = rng.get_random()
        assert 0 <= value < 2**64


def test_default_seed_matches_one():
    assert Lcg().get_random() == Lcg(1).get_random()


def test_float_ranges():
    rng = Lcg(99)
    for _ in range(200):
        assert 0.0 <= rng.random_float32() <= 1.0
        assert 0.0 <= rng.random_float64() <= 1.0


@pytest.mark.parametrize("lo,hi", [(-5.0, 5.0), (10.0, 20.0)])
def test_float_in_range(lo, hi):
    rng = Lcg(5)
    for _ in range(200):
        assert lo <= rng.float64_in_range(lo, hi) <= hi
        assert lo <= rng.float32_in_range(lo, hi) <= hi


def test_int_in_range_inclusive_bounds():
    rng = Lcg(3)
    seen = {rng.int_in_range(1, 3) for _ in range(500)}
    assert seen == {1, 2, 3}


def test_int_in_range_swaps_reversed_bounds():
    rng = Lcg(11)
    for _ in range(200):
        assert -4 <= rng.int_in_range(4, -4) <= 4


def test_int_in_range_equal_bounds_gives_zero():
    rng = Lcg(11)
    assert rng.int_in_range(9, 9) == 0