import numbers
from typing import Sequence, Union

from score import NUM_CATEGORIES, RULES, evaluate, get_rule


NUM_DICE = 5


def validate_dice_categories(dice: list[int], scores: Sequence) -> list[int]:
    """
    Validate the current dice roll against all 13 score categories.

    Parameters:
    dice (list): A list of 5 integers representing the dice roll (values between 1 and 6).
    scores (list): The 13 scorecard slots, None for a category that is still open.

    Returns:
    valid_categories (list): A binary list of length 13 where 1 means the category is open
    and the dice would score more than 0 in it.
    """
    valid_categories = [0] * NUM_CATEGORIES

    for i, rule in enumerate(RULES):
        if scores[i] is None and evaluate(rule, dice) > 0:
            valid_categories[i] = 1

    return valid_categories


def validate_dice_reroll(locked: Sequence[bool], rolls_left: int, is_rolling: bool = False) -> bool:
    """
    Validate if a re-roll is allowed.

    Parameters:
    locked (list): 5 flags, True for every die that is held.
    rolls_left (int): Number of rolls left in this round.
    is_rolling (bool): True while the previous roll is still being animated.

    Returns:
    valid (bool): True if the roll may happen.
    """
    # Re-roll is valid only if there are rolls left
    if rolls_left <= 0:
        return False

    # Ensure decision has correct dimensions (5 dice)
    if len(locked) != NUM_DICE:
        return False

    if all(locked):
        return False

    return not is_rolling


def validate_toggle_lock(index: int, rolls_left: int, turns_left: int) -> bool:
    """Locks can only change while the round still has rolls left and the game is not over."""
    if not isinstance(index, numbers.Integral) or isinstance(index, bool):
        return False
    if index < 0 or index >= NUM_DICE:
        return False
    return rolls_left >= 1 and turns_left > 0


def validate_score_category(selection: Union[int, str], scores: Sequence) -> bool:
    """
    Validate if the score category selected is available.

    Parameters:
    selection (int or str): The index (0-12) or name of the selected score category.
    scores (list): The 13 scorecard slots, None for a category that is still open.

    Returns:
    valid (bool): True if the score category is known and still unset.
    """
    try:
        rule = get_rule(selection)
    except KeyError:
        return False

    return scores[RULES.index(rule)] is None

