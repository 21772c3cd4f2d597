import pytest

from mazegen.rng import PMRandom, low16_magnitude, make_rng, normalize_seed, pm_next

def test_low16_magnitude():
    assert low16_magnitude(0x7FFF0000) == 0
    assert low16_magnitude(0x00017FFF) == 0x7FFF
    assert low16_magnitude(0x00008000) == 0x8000
    assert low16_magnitude(0x1234FFFE) == 2

def test_park_miller_step():
    assert pm_next(1) == 16807
    assert PMRandom(1).next32() == 16807

def test_zero_seed_is_normalized():
    assert normalize_seed(0) == 1
    assert normalize_seed(0x7FFFFFFF) == 1
    assert PMRandom(0).state == 1

def test_same_seed_same_stream():
    a, b = PMRandom(1234), PMRandom(1234)
    assert [a.randrange(4) for _ in range(50)] == [b.randrange(4) for _ in range(50)]

def test_randrange_bounds():
    r = make_rng(99)
    for n in (1, 2, 3, 4):
        for _ in range(200):
            assert 0 <= r.randrange(n) < n

def test_randrange_rejects_empty_range():
    with pytest.raises(ValueError):
        PMRandom(5).randrange(0)

def test_clock_seed_is_valid_state():
    r = make_rng()
    assert 1 <= r.state < 0x7FFFFFFF

def test_candidate_draws_are_roughly_even():
    r = PMRandom(2024)
    counts = [0, 0, 0]
    for _ in range(30000):
        counts[r.randrange(3)] += 1
    assert all(9000 < c < 11000 for c in counts)
