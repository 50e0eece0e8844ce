from datetime import datetime, timedelta, timezone

import pytest

from utilbox.predicates import (
    InPredicate,
    new_between_predicate,
    new_comparable_predicate,
    new_in_predicate,
    new_like_predicate,
    new_nil_predicate,
    new_within_predicate,
    true_provider,
)


def _unix(seconds):
    return datetime.fromtimestamp(seconds, timezone.utc)


def test_within_predicate():
    predicate = new_within_predicate(_unix(1465009041), 2, "")
    assert predicate.apply(_unix(1465009042)) is True
    assert predicate.apply(_unix(1465009044)) is False


def test_within_predicate_records_elapsed_on_failure():
    predicate = new_within_predicate(_unix(1465009041), 2, "")
    predicate.apply(_unix(1465009044))
    assert predicate.elapsed == timedelta(seconds=3)
    assert predicate.max_allowed_delay == timedelta(seconds=2)


def test_within_predicate_accepts_epoch_and_rejects_garbage():
    predicate = new_within_predicate(_unix(1465009041), 2)
    assert predicate.apply(1465009040) is True
    assert predicate.apply("garbage") is False


def test_within_predicate_with_layout():
    predicate = new_within_predicate(datetime(2020, 1, 2, 3, 4, 5), 10, "%Y-%m-%d %H:%M:%S")
    assert predicate.apply("2020-01-02 03:04:10") is True
    assert predicate.apply("2020-01-02 03:05:10") is False


def test_between_predicate():
    predicate = new_between_predicate(10, 20)
    assert predicate.apply(9) is False
    assert predicate.apply(10) is True
    assert predicate.apply(11) is True
    assert predicate.apply(21) is False


def test_between_predicate_text():
    assert str(new_between_predicate(10, 20)) == "x BETWEEN 10 AND 20"


def test_in_predicate_mixed():
    predicate = new_in_predicate("10", 20, "a")
    assert predicate.apply(9) is False
    assert predicate.apply(10) is True
    assert predicate.apply(15) is False
    assert predicate.apply("a") is True
    assert predicate.apply(20) is True
    assert predicate.apply(21) is False


def test_in_predicate_floats():
    predicate = new_in_predicate(1.2, 1.5)
    assert predicate.apply("1.2") is True
    assert predicate.apply("1.1") is False


def test_in_predicate_ints():
    predicate = new_in_predicate(1, 2, "3")
    assert isinstance(predicate, InPredicate)
    assert predicate.apply("3") is True
    assert predicate.apply(2.0) is True
    assert predicate.apply(4) is False


@pytest.mark.parametrize(
    "operator, operand, accepted, rejected",
    [
        (">", "1", 3, 1),
        ("<", "1", 0, 3),
        ("!=", "1", 0, 1),
        ("=", "abc", "abc", "abdc"),
        ("!=", "abc", "abcc", "abc"),
        (">=", 3, 10, 1),
        ("<=", 3, 1, 10),
    ],
)
def test_comparable_predicate(operator, operand, accepted, rejected):
    predicate = new_comparable_predicate(operator, operand)
    assert predicate.apply(accepted) is True
    assert predicate.apply(rejected) is False


def test_comparable_predicate_numeric_text_operand_compares_numbers():
    predicate = new_comparable_predicate(">", "9")
    assert predicate.apply("10") is True
    assert predicate.apply("8.5") is False


def test_comparable_predicate_text_operand_compares_exactly():
    predicate = new_comparable_predicate("=", "abc")
    assert predicate.apply("ABC") is False


def test_comparable_predicate_unknown_operator():
    assert new_comparable_predicate("~", 1).apply(1) is False
    assert new_comparable_predicate(">", "abc").apply("abd") is False


def test_like_predicate():
    predicate = new_like_predicate("abc%efg")
    assert predicate.apply("abefg") is False
    assert predicate.apply("abcefg") is True
    assert new_like_predicate("abc%").apply("abcfg") is True


def test_like_predicate_ignores_case():
    assert new_like_predicate("ABC%xyz").apply("zzabcQQXYZ") is True


def test_nil_predicate():
    predicate = new_nil_predicate()
    assert predicate.apply(None) is True
    assert predicate.apply(0) is False
    assert predicate(None) is True


def test_true_provider():
    assert true_provider(None) is True
    assert true_provider(0) is True