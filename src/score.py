"""
0 Ones = Any, The sum of dice with the number 1
1 Twos = Any, The sum of dice with the number 2
2 Threes = Any, The sum of dice with the number 3
3 Fours = Any, The sum of dice with the number 4
4 Fives = Any, The sum of dice with the number 5
5 Sixes = Any, The sum of dice with the number 6

6 Three of a kind = At least three dice the same, Sum of all Dice
7 Four of a kind = At least four dice the same, Sum of all Dice
8 Full House = Three of one number and two of another, 25
9 Small Straight = Four sequential dice, 30
10 Large Straight = Five sequential dice, 40
11 Yahtzee, All Five Dice the Same, 50
12 Chance = Any, Sum of all dice
"""

import numbers
from collections import Counter
from dataclasses import dataclass
from typing import Optional, Union

TOTAL_ONE_NUMBER = "total_one_number"
SUM_DISTRO = "sum_distro"
FULL_HOUSE = "full_house"
SMALL_STRAIGHT = "small_straight"
LARGE_STRAIGHT = "large_straight"
YAHTZEE = "yahtzee"


@dataclass(frozen=True)
class Rule:
    """A scoring category: which evaluator to use and the parameters it needs."""

    name: str
    label: str
    kind: str
    description: str
    value: Optional[int] = None  # face value for the number categories
    count: Optional[int] = None  # same-value threshold for sum_distro
    score: Optional[int] = None  # flat score for the pattern categories


def _number(name: str, label: str, value: int) -> Rule:
    return Rule(name, label, TOTAL_ONE_NUMBER, f"Score {value} for every {value}", value=value)


def _distro(name: str, label: str, count: int) -> Rule:
    return Rule(name, label, SUM_DISTRO,
                f"If {count}+ of one value, score sum of all dice (else 0)", count=count)


RULES = (
    _number("ones", "Ones", 1),
    _number("twos", "Twos", 2),
    _number("threes", "Threes", 3),
    _number("fours", "Fours", 4),
    _number("fives", "Fives", 5),
    _number("sixes", "Sixes", 6),
    _distro("three_of_a_kind", "Three of a kind", 3),
    _distro("four_of_a_kind", "Four of a kind", 4),
    Rule("full_house", "Full House", FULL_HOUSE,
         "If 3 of a kind and 2 of another kind, score 25 pts (else 0)", score=25),
    Rule("small_straight", "Small Straight", SMALL_STRAIGHT,
         "If 4+ values in a row, score 30 pts (else 0)", score=30),
    Rule("large_straight", "Large Straight", LARGE_STRAIGHT,
         "If 5 values in a row, score 40 pts (else 0)", score=40),
    Rule("yahtzee", "Yahtzee", YAHTZEE,
         "If all values match, score 50 pts (else 0)", score=50),
    # chance is a sum_distro that needs zero dice of a kind
    Rule("chance", "Chance", SUM_DISTRO, "Score sum of all dice", count=0),
)

CATEGORIES = tuple(rule.name for rule in RULES)
NUM_CATEGORIES = len(RULES)

_RULES_BY_NAME = {rule.name: rule for rule in RULES}


def get_rule(category: Union[int, str]) -> Rule:
    """
    Look up a rule by its index (0-12) or its name.

    Raises:
    KeyError: if the category is unknown.
    """
    if isinstance(category, str):
        return _RULES_BY_NAME[category]
    if isinstance(category, numbers.Integral) and not isinstance(category, bool) and 0 <= category < NUM_CATEGORIES:
        return RULES[int(category)]
    raise KeyError(category)


def category_index(category: Union[int, str]) -> int:
    return CATEGORIES.index(get_rule(category).name)


def _is_small_straight(dice: list[int]) -> bool:
    """Four sequential values anywhere in the roll, a large straight included."""
    unique_dice = set(dice)
    straights = [{1, 2, 3, 4}, {2, 3, 4, 5}, {3, 4, 5, 6}]
    return any(straight.issubset(unique_dice) for straight in straights)


def _is_large_straight(dice: list[int]) -> bool:
    unique_dice = set(dice)
    return len(unique_dice) == 5 and not {1, 6}.issubset(unique_dice)


def evaluate(rule: Rule, dice: list[int]) -> int:
    """
    Score the dice for a single rule.

    Parameters:
    rule (Rule): One of the entries of RULES.
    dice (list): 5 integers between 1 and 6. Not validated here.

    Returns:
    int: The score the dice would earn in that category.
    """
    dice = [int(d) for d in dice]
    dice_counter = Counter(dice)

    if rule.kind == TOTAL_ONE_NUMBER:
        return dice_counter[rule.value] * rule.value

    if rule.kind == SUM_DISTRO:
        if max(dice_counter.values()) >= rule.count:
            return sum(dice)
        return 0

    if rule.kind == FULL_HOUSE:
        repeat_counts = dice_counter.values()
        if 2 in repeat_counts and 3 in repeat_counts:
            return rule.score
        return 0

    if rule.kind == SMALL_STRAIGHT:
        return rule.score if _is_small_straight(dice) else 0

    if rule.kind == LARGE_STRAIGHT:
        return rule.score if _is_large_straight(dice) else 0

    if rule.kind == YAHTZEE:
        return rule.score if len(dice_counter) == 1 else 0

    raise ValueError(f"unknown rule kind: {rule.kind}")


def calculate_score(dice: list[int], category: Union[int, str]) -> int:
    """
    Calculate the score for the selected category based on the current dice.

    Parameters:
    dice (list): A list of 5 integers representing the current dice roll (values between 1 and 6).
    category (int or str): The index (0-12) or name of the category selected.

    Returns:
    int: The calculated score for the selected category, 0 for an unknown category.
    """
    try:
        rule = get_rule(category)
    except KeyError:
        return 0
    return evaluate(rule, dice)


def potential_scores(dice: list[int]) -> dict[str, int]:
    """What the dice would earn in every category."""
    return {rule.name: evaluate(rule, dice) for rule in RULES}


def calculate_total_score(scores_achieved) -> int:
    """
    Sums up all achieved scores on the scorecard.

    Parameters:
    scores_achieved: A list of 13 scores or a {name: score} mapping. Unset
    categories are None and count as 0.

    Returns:
    Total Score
    """
    if isinstance(scores_achieved, dict):
        scores_achieved = scores_achieved.values()
    return sum(score for score in scores_achieved if score is not None)
