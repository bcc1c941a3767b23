"""
Tests for round construction and the arrangement check.

Covers:
  • Fisher–Yates shuffle keeps the elements and is roughly uniform
  • build_round: left in pair order, right is a permutation, item ids
  • check_arrangement: per-row flags, matched count, all_correct
"""

from __future__ import annotations

import random
from collections import Counter

import pytest

from src.matching_pairs_game.domain import (
    Side,
    build_items,
    build_round,
    check_arrangement,
    shuffle_in_place,
)


# ---------------------------------------------------------------------------
# Shuffle
# ---------------------------------------------------------------------------

class TestShuffle:
    def test_keeps_elements(self, rng):
        items = list(range(20))
        shuffle_in_place(items, rng)
        assert sorted(items) == list(range(20))

    def test_empty_and_single(self, rng):
        empty: list[int] = []
        shuffle_in_place(empty, rng)
        assert empty == []
        one = ["x"]
        shuffle_in_place(one, rng)
        assert one == ["x"]

    def test_all_permutations_roughly_uniform(self):
        r = random.Random(42)
        counts: Counter[tuple[int, ...]] = Counter()
        trials = 6000
        for _ in range(trials):
            items = [0, 1, 2]
            shuffle_in_place(items, r)
            counts[tuple(items)] += 1
        assert len(counts) == 6
        for c in counts.values():
            assert 800 < c < 1200


# ---------------------------------------------------------------------------
# Round construction
# ---------------------------------------------------------------------------

class TestBuildRound:
    def test_left_in_pair_order(self, make_pairs, rng):
        pairs = make_pairs(("Cat", "Meow"), ("Dog", "Bark"), ("Sun", "Hot"))
        rnd = build_round(pairs, rng)
        assert [i.pair_index for i in rnd.left_items] == [0, 1, 2]
        assert [i.text for i in rnd.left_items] == ["Cat", "Dog", "Sun"]
        assert all(i.side is Side.LEFT for i in rnd.left_items)

    def test_right_is_permutation(self, make_pairs, rng):
        pairs = make_pairs(*[(f"a{i}", f"b{i}") for i in range(10)])
        rnd = build_round(pairs, rng)
        tags = [i.pair_index for i in rnd.right_in_order()]
        assert sorted(tags) == list(range(10))
        assert all(i.side is Side.RIGHT for i in rnd.right_in_order())

    def test_item_ids(self, make_pairs):
        items = build_items(make_pairs(("A", "B"), ("C", "D")), Side.RIGHT)
        assert [i.item_id for i in items] == ["0_2", "1_2"]
        assert [i.text for i in items] == ["B", "D"]

    def test_empty_pairs_rejected(self, rng):
        with pytest.raises(ValueError):
            build_round([], rng)


# ---------------------------------------------------------------------------
# Arrangement check
# ---------------------------------------------------------------------------

class TestCheckArrangement:
    def test_all_correct(self, make_pairs):
        pairs = make_pairs(("Cat", "Meow"), ("Dog", "Bark"))
        left = build_items(pairs, Side.LEFT)
        right = build_items(pairs, Side.RIGHT)
        result = check_arrangement(left, right)
        assert result.matched == (True, True)
        assert result.matched_count == 2
        assert result.all_correct

    def test_swapped(self, make_pairs):
        pairs = make_pairs(("Cat", "Meow"), ("Dog", "Bark"))
        left = build_items(pairs, Side.LEFT)
        right = list(reversed(build_items(pairs, Side.RIGHT)))
        result = check_arrangement(left, right)
        assert result.matched == (False, False)
        assert result.matched_count == 0
        assert not result.all_correct

    def test_partial(self, make_pairs):
        pairs = make_pairs(("a", "1"), ("b", "2"), ("c", "3"))
        left = build_items(pairs, Side.LEFT)
        r = build_items(pairs, Side.RIGHT)
        result = check_arrangement(left, [r[0], r[2], r[1]])
        assert result.matched == (True, False, False)
        assert result.matched_count == 1

    def test_length_mismatch(self, make_pairs):
        pairs = make_pairs(("a", "1"), ("b", "2"))
        with pytest.raises(ValueError):
            check_arrangement(build_items(pairs, Side.LEFT), build_items(pairs[:1], Side.RIGHT))
