import pytest

from dominionsim.rngs import A256, CHECK, DEFAULT, MODULUS, MULTIPLIER, StreamRandom


def test_self_test_passes():
    assert StreamRandom().self_test() is True


def test_reference_state_after_10000_draws():
    rng = StreamRandom()
    rng.select_stream(0)
    rng.put_seed(1)
    for _ in range(10000):
        rng.random()
    assert rng.get_seed() == CHECK


def test_first_draw_from_seed_one():
    rng = StreamRandom()
    rng.put_seed(1)
    value = rng.random()
    assert rng.get_seed() == MULTIPLIER
    assert value == pytest.approx(MULTIPLIER / MODULUS)


def test_plant_seeds_sets_stream_one_to_jump_multiplier():
    rng = StreamRandom()
    rng.select_stream(1)
    rng.plant_seeds(1)
    assert rng.get_seed() == A256
    assert rng.stream == 1


def test_default_seed_on_stream_zero():
    assert StreamRandom().get_seed() == DEFAULT


def test_values_in_open_unit_interval():
    rng = StreamRandom()
    rng.put_seed(42)
    values = [rng.random() for _ in range(1000)]
    assert all(0.0 < v < 1.0 for v in values)


def test_same_seed_same_sequence():
    a, b = StreamRandom(), StreamRandom()
    a.select_stream(2)
    b.select_stream(2)
    a.put_seed(3)
    b.put_seed(3)
    assert [a.random() for _ in range(50)] == [b.random() for _ in range(50)]


def test_streams_are_independent():
    rng = StreamRandom()
    rng.plant_seeds(7)
    rng.select_stream(5)
    before = rng.get_seed()
    rng.select_stream(6)
    rng.random()
    rng.select_stream(5)
    assert rng.get_seed() == before


def test_large_seed_reduced_modulo():
    rng = StreamRandom()
    rng.put_seed(MODULUS + 5)
    assert rng.get_seed() == 5


def test_negative_stream_index_wraps():
    rng = StreamRandom()
    rng.plant_seeds(11)
    rng.select_stream(255)
    expected = rng.get_seed()
    rng.select_stream(-1)
    assert rng.stream == 255
    assert rng.get_seed() == expected


def test_negative_seed_uses_clock():
    rng = StreamRandom()
    rng.put_seed(-1)
    assert 0 <= rng.get_seed() < MODULUS


def test_zero_seed_asks_until_valid():
    replies = iter(["abc", "0", str(MODULUS), "77"])
    prompts = []

    def ask(prompt):
        prompts.append(prompt)
        return next(replies)

    rng = StreamRandom(ask=ask)
    rng.put_seed(0)
    assert rng.get_seed() == 77
    assert len(prompts) == 4