"""Tests for dictbench/cases.py -- the two dict-building strategies."""

from __future__ import annotations

from dictbench.cases import default_cases, fast, slow
from dictbench.config import KEYS

EXPECTED = {e: e for e in range(1, 101)}


def test_fast_builds_identity_mapping() -> None:
    assert fast() == EXPECTED


def test_slow_builds_identity_mapping() -> None:
    assert slow() == EXPECTED


def test_fast_and_slow_agree() -> None:
    assert fast() == slow()
    assert len(fast()) == len(slow()) == 100


def test_every_key_maps_to_itself() -> None:
    built_fast = fast()
    built_slow = slow()
    for e in KEYS:
        assert built_fast[e] == e
        assert built_slow[e] == e


def test_keys_are_explicit_parameter() -> None:
    assert fast([3, 1, 2]) == {1: 1, 2: 2, 3: 3}
    assert slow([3, 1, 2]) == {1: 1, 2: 2, 3: 3}
    assert fast([]) == slow([]) == {}


def test_each_call_returns_fresh_mapping() -> None:
    first = fast()
    first[0] = 0
    assert 0 not in fast()


def test_key_range_is_one_to_hundred() -> None:
    assert KEYS[0] == 1
    assert KEYS[-1] == 100
    assert len(KEYS) == 100


# ---------------------------------------------------------------------------
# default_cases
# ---------------------------------------------------------------------------


def test_default_cases_fast_first() -> None:
    cases = default_cases()
    assert [c.name for c in cases] == ["fast", "slow"]
    assert [c.label for c in cases] == ["dict[k] = v", "dict.update"]


def test_default_cases_are_zero_argument() -> None:
    for case in default_cases():
        assert case.func() == EXPECTED
