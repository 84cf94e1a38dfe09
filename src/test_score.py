import itertools

import numpy as np
import pytest

from score import (
    CATEGORIES, RULES, calculate_score, calculate_total_score, evaluate, get_rule, potential_scores
)


def test_number_categories_score_face_times_count():
    for dice in itertools.product(range(1, 7), repeat=5):
        for value, name in enumerate(CATEGORIES[:6], start=1):
            assert calculate_score(list(dice), name) == value * dice.count(value)


def test_ones():
    assert calculate_score([1, 1, 3, 4, 5], "ones") == 2


def test_three_of_a_kind():
    assert calculate_score([2, 2, 2, 5, 6], "three_of_a_kind") == 17
    assert calculate_score([2, 2, 5, 5, 6], "three_of_a_kind") == 0
    # four and five of a kind also hold three of a kind
    assert calculate_score([3, 3, 3, 3, 1], "three_of_a_kind") == 13
    assert calculate_score([6, 6, 6, 6, 6], "three_of_a_kind") == 30


def test_four_of_a_kind():
    assert calculate_score([4, 4, 4, 6, 4], "four_of_a_kind") == 22
    assert calculate_score([4, 4, 4, 6, 6], "four_of_a_kind") == 0


def test_full_house():
    assert calculate_score([1, 1, 1, 2, 2], "full_house") == 25
    assert calculate_score([5, 6, 5, 6, 5], "full_house") == 25
    assert calculate_score([3, 3, 3, 3, 3], "full_house") == 0
    assert calculate_score([1, 2, 3, 4, 5], "full_house") == 0
    assert calculate_score([2, 2, 3, 3, 4], "full_house") == 0


def test_small_straight():
    assert calculate_score([1, 2, 3, 4, 6], "small_straight") == 30
    assert calculate_score([1, 2, 3, 5, 6], "small_straight") == 0
    assert calculate_score([4, 3, 2, 1, 1], "small_straight") == 30
    assert calculate_score([3, 4, 5, 6, 6], "small_straight") == 30
    assert calculate_score([1, 2, 3, 4, 5], "small_straight") == 30
    assert calculate_score([2, 3, 4, 5, 6], "small_straight") == 30
    assert calculate_score([1, 3, 4, 5, 6], "small_straight") == 30
    assert calculate_score([1, 1, 2, 2, 3], "small_straight") == 0
    # five different values with a gap in the middle hold no four in a row
    assert calculate_score([1, 2, 4, 5, 6], "small_straight") == 0


def test_large_straight():
    assert calculate_score([1, 2, 3, 4, 5], "large_straight") == 40
    assert calculate_score([6, 5, 4, 3, 2], "large_straight") == 40
    assert calculate_score([1, 2, 3, 4, 6], "large_straight") == 0
    assert calculate_score([2, 3, 4, 5, 5], "large_straight") == 0


def test_yahtzee():
    assert calculate_score([4, 4, 4, 4, 4], "yahtzee") == 50
    assert calculate_score([4, 4, 4, 4, 3], "yahtzee") == 0


def test_chance_always_scores_the_sum():
    assert calculate_score([1, 2, 3, 4, 6], "chance") == 16
    assert calculate_score([6, 6, 6, 6, 6], "chance") == 30


def test_category_by_index_matches_name():
    dice = [2, 3, 4, 5, 5]
    for index, name in enumerate(CATEGORIES):
        assert calculate_score(dice, index) == calculate_score(dice, name)


def test_accepts_numpy_dice_and_indices():
    dice = np.array([3, 3, 3, 2, 2])
    assert calculate_score(dice, np.int64(8)) == 25
    assert calculate_score(dice, "chance") == 13


def test_unknown_category_scores_zero():
    assert calculate_score([1, 1, 1, 1, 1], 13) == 0
    assert calculate_score([1, 1, 1, 1, 1], -1) == 0
    assert calculate_score([1, 1, 1, 1, 1], "bonus") == 0


def test_get_rule_raises_for_unknown_category():
    with pytest.raises(KeyError):
        get_rule("bonus")
    with pytest.raises(KeyError):
        get_rule(True)


def test_rules_have_descriptions():
    assert len(RULES) == 13
    assert get_rule("ones").description == "Score 1 for every 1"
    assert get_rule("three_of_a_kind").description == "If 3+ of one value, score sum of all dice (else 0)"
    assert get_rule("chance").description == "Score sum of all dice"
    assert all(rule.description for rule in RULES)


def test_evaluate_is_deterministic():
    dice = [1, 2, 2, 2, 6]
    for rule in RULES:
        assert evaluate(rule, dice) == evaluate(rule, list(dice))


def test_potential_scores():
    result = potential_scores([1, 2, 3, 4, 5])
    assert list(result) == list(CATEGORIES)
    assert result["ones"] == 1
    assert result["fives"] == 5
    assert result["small_straight"] == 30
    assert result["large_straight"] == 40
    assert result["full_house"] == 0
    assert result["chance"] == 15


def test_total_score_ignores_unset_categories():
    assert calculate_total_score([None] * 13) == 0
    assert calculate_total_score([3, None, 9] + [None] * 9 + [20]) == 32
    assert calculate_total_score({"ones": 2, "yahtzee": 50, "chance": None}) == 52
