from typing import Sequence

from score import RULES


def format_dice(dice: Sequence[int]) -> str:
    """Compact form of the dice for the logs, e.g. [1 3 3 5 6]"""
    return "[%s]" % " ".join(str(int(d)) for d in dice)


def format_score_action(index: int) -> str:
    """
    Translates the score index to a human readable info

    0 Ones, 1 Twos, 2 Threes, 3 Fours, 4 Fives, 5 Sixes,
    6 Three of a kind, 7 Four of a kind, 8 Full House,
    9 Small Straight, 10 Large Straight, 11 Yahtzee, 12 Chance
    """
    return RULES[index].label


def format_score_table(state) -> list[dict]:
    """
    Rows of the score table in category order.

    An open category shows its description as a hint, a used one shows its score.
    """
    rows = []
    for rule, score in zip(RULES, state.scores):
        active = score is None
        rows.append({
            "name": rule.name,
            "label": rule.label,
            "score": score,
            "active": active,
            "text": "%s - %s" % (rule.label, rule.description) if active else rule.label,
        })
    return rows
