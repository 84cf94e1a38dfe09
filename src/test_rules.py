from rules import (
    validate_dice_categories, validate_dice_reroll, validate_score_category, validate_toggle_lock
)


def test_validate_dice_categories():
    scores = [None] * 13

    # Large Straight
    result = validate_dice_categories([1, 2, 3, 4, 5], scores)
    assert result == [1, 1, 1, 1, 1, 0,
                      0, 0, 0, 1, 1, 0, 1]

    # Small Straight
    result = validate_dice_categories([2, 3, 4, 5, 2], scores)
    assert result == [0, 1, 1, 1, 1, 0,
                      0, 0, 0, 1, 0, 0, 1]

    # Yahtzee
    result = validate_dice_categories([1, 1, 1, 1, 1], scores)
    assert result == [1, 0, 0, 0, 0, 0,
                      1, 1, 0, 0, 0, 1, 1]


def test_validate_dice_categories_skips_filled():
    scores = [None] * 13
    scores[11] = 50
    scores[0] = 5
    result = validate_dice_categories([1, 1, 1, 1, 1], scores)
    assert result == [0, 0, 0, 0, 0, 0,
                      1, 1, 0, 0, 0, 0, 1]


def test_validate_dice_reroll():
    assert validate_dice_reroll([False] * 5, 2)
    assert validate_dice_reroll([True, True, True, True, False], 1)
    assert not validate_dice_reroll([True] * 5, 2)
    assert not validate_dice_reroll([False] * 5, 0)
    assert not validate_dice_reroll([False] * 5, 2, is_rolling=True)
    assert not validate_dice_reroll([False] * 4, 2)


def test_validate_toggle_lock():
    assert validate_toggle_lock(0, 2, 13)
    assert validate_toggle_lock(4, 1, 1)
    assert not validate_toggle_lock(5, 2, 13)
    assert not validate_toggle_lock(-1, 2, 13)
    assert not validate_toggle_lock(0, 0, 13)
    assert not validate_toggle_lock(0, 2, 0)


def test_validate_score_category():
    scores = [None] * 13
    assert validate_score_category(0, scores)
    assert validate_score_category("chance", scores)
    scores[12] = 17
    assert not validate_score_category("chance", scores)
    assert not validate_score_category(12, scores)
    assert not validate_score_category(13, scores)
    assert not validate_score_category("bonus", scores)
