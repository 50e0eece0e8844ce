import pytest

from utilbox.sampler import Sampler


def _within_one(actual, goal):
    if actual > int(goal):
        actual -= 1
    if actual < int(goal):
        actual += 1
    return actual


@pytest.mark.parametrize("goal", [50, 95.1])
def test_accept(goal):
    sampler = Sampler(goal, seed=11)
    count = 100000
    accepted = sum(1 for _ in range(count) if sampler.accept())
    actual = int(100.0 * accepted / count)
    assert _within_one(actual, goal) == int(goal)


def test_accept_with_threshold():
    sampler = Sampler(100, seed=3)
    count = 100000
    accepted = sum(1 for _ in range(count) if sampler.accept_with_threshold(50.0))
    actual = int(100.0 * accepted / count)
    assert _within_one(actual, 50) == 50


def test_extremes():
    assert not any(Sampler(0, seed=1).accept() for _ in range(1000))
    assert all(Sampler(100, seed=1).accept() for _ in range(1000))