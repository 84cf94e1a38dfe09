from typing import Optional, Sequence

import numpy as np


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Seeded generator for reproducible games, fresh OS entropy when seed is None."""
    return np.random.default_rng(seed)


def roll_dice(rng: np.random.Generator, count: int = 5) -> tuple[int, ...]:
    """Roll `count` fresh dice."""
    return tuple(int(d) for d in rng.integers(1, 7, size=count))


def reroll_dice(dice: Sequence[int], decisions: Sequence[bool], rng: np.random.Generator) -> tuple[int, ...]:
    """
    Re-roll the dice based on the re-roll decisions.

    Parameters:
    dice (list): The current dice values.
    decisions (list): A binary list indicating which dice to re-roll (1 to re-roll, 0 to hold).
    rng (Generator): Source of the new values.

    Returns:
    new_dice (tuple): The dice after re-rolling. The input is left untouched.
    """
    new_dice = list(dice)
    for i in range(len(new_dice)):
        if decisions[i]:  # If decision is 1, re-roll this die
            new_dice[i] = int(rng.integers(1, 7))
    return tuple(new_dice)
