import pytest

from dominionsim.rngs import StreamRandom
from dominionsim.rt import SCALE, find_value, main


def _draws(seed, count):
    rng = StreamRandom()
    rng.select_stream(1)
    rng.put_seed(seed)
    return [int(rng.random() * SCALE) for _ in range(count)]


def test_first_draw_found_at_once():
    first = _draws(7, 1)[0]
    assert find_value(7, first) == 1


@pytest.mark.parametrize("position", [1, 2, 4])
def test_later_draws_found_at_their_position(position):
    values = _draws(11, 5)
    target = values[position]
    assert find_value(11, target) == values.index(target) + 1


@pytest.mark.parametrize("target", [-1, SCALE])
def test_out_of_range_target_rejected(target):
    with pytest.raises(ValueError):
        find_value(7, target)


def test_main_reports_find(capsys):
    target = _draws(9, 1)[0]
    assert main(["9", str(target)]) == 0
    assert capsys.readouterr().out == "Found the bug!\n"


def test_main_needs_two_inputs(capsys):
    assert main(["9"]) == 1
    assert capsys.readouterr().out == "Not enough inputs:  seed target\n"