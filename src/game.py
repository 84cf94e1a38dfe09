"""
Turn controller for a single-player game of Yahtzee.

The game state is an immutable GameState. Every user intent (roll, toggle a lock,
assign a score, restart) is a small record that `apply` turns into the next state.
The Game class owns the current state together with the random generator and the
timer that lowers the "rolling" flag again after the dice animation.
"""

import logging
import threading
from dataclasses import dataclass, replace
from typing import Callable, Optional, Union

import numpy as np

from dice import make_rng, reroll_dice, roll_dice
from rules import NUM_DICE, validate_dice_categories, validate_dice_reroll, validate_score_category, validate_toggle_lock
from score import CATEGORIES, NUM_CATEGORIES, calculate_total_score, category_index, evaluate, get_rule
from settings import DEFAULT_SETTINGS, validate_settings
from utils import format_dice, format_score_action, format_score_table


NUM_ROLLS = 3
MAX_TURNS = 13


@dataclass(frozen=True)
class GameState:
    dice: tuple
    locked: tuple = (False,) * NUM_DICE
    rolls_left: int = NUM_ROLLS - 1  # the opening roll of a round is done for the player
    turns_left: int = MAX_TURNS
    scores: tuple = (None,) * NUM_CATEGORIES
    is_rolling: bool = False

    @property
    def dice_to_roll(self) -> tuple:
        """Rendering hint for the dice that the next roll will change."""
        return tuple(not x for x in self.locked)

    @property
    def scorecard(self) -> dict:
        return dict(zip(CATEGORIES, self.scores))

    @property
    def total_score(self) -> int:
        return calculate_total_score(self.scores)

    @property
    def is_over(self) -> bool:
        return self.turns_left == 0


@dataclass(frozen=True)
class Roll:
    pass


@dataclass(frozen=True)
class ToggleLock:
    index: int


@dataclass(frozen=True)
class AssignScore:
    category: Union[int, str]


@dataclass(frozen=True)
class Restart:
    pass


@dataclass(frozen=True)
class FinishRolling:
    pass


def new_game(rng: np.random.Generator) -> GameState:
    return GameState(dice=roll_dice(rng, NUM_DICE))


def _roll(state: GameState, rng: np.random.Generator) -> GameState:
    dice = reroll_dice(state.dice, state.dice_to_roll, rng)
    # after the last roll of a round every die is held, the player has to score
    locked = state.locked if state.rolls_left > 1 else (True,) * NUM_DICE
    return replace(state, dice=dice, locked=locked, rolls_left=state.rolls_left - 1, is_rolling=True)


def _assign_score(state: GameState, category: Union[int, str], rng: np.random.Generator) -> GameState:
    rule = get_rule(category)
    index = category_index(category)
    score = evaluate(rule, state.dice)

    scores = list(state.scores)
    scores[index] = score
    final_turn = state.turns_left == 1

    logging.debug("%s scored with dice %s: %s" % (format_score_action(index), format_dice(state.dice), score))

    state = replace(
        state,
        scores=tuple(scores),
        rolls_left=NUM_ROLLS,
        turns_left=state.turns_left - 1,
        locked=(final_turn,) * NUM_DICE,
    )

    if final_turn:
        logging.info("Game over - Total score: %s" % state.total_score)

    # opening roll of the next round; at the end of the game all dice are held and stay as they are
    return _roll(state, rng)


def apply(state: GameState, intent, rng: np.random.Generator) -> GameState:
    """
    Compute the state that follows an intent.

    Intents that are not allowed in the given state leave it unchanged, the same
    object is returned. Only Roll and AssignScore draw from `rng`.
    """
    if isinstance(intent, Roll):
        if not validate_dice_reroll(state.locked, state.rolls_left, state.is_rolling):
            logging.debug("roll rejected: locked %s, rolls left %s, rolling %s" % (
                state.locked, state.rolls_left, state.is_rolling))
            return state
        new_state = _roll(state, rng)
        logging.debug("rolled %s -> %s, rolls left: %s" % (
            format_dice(state.dice), format_dice(new_state.dice), new_state.rolls_left))
        return new_state

    if isinstance(intent, ToggleLock):
        if not validate_toggle_lock(intent.index, state.rolls_left, state.turns_left):
            logging.debug("lock toggle of die %s rejected" % (intent.index,))
            return state
        locked = list(state.locked)
        index = int(intent.index)
        locked[index] = not locked[index]
        logging.debug("die %s %s" % (index, "locked" if locked[index] else "unlocked"))
        return replace(state, locked=tuple(locked))

    if isinstance(intent, AssignScore):
        if state.is_over or not validate_score_category(intent.category, state.scores):
            logging.debug("score for %s rejected" % (intent.category,))
            return state
        return _assign_score(state, intent.category, rng)

    if isinstance(intent, Restart):
        logging.info("Restarting game")
        return new_game(rng)

    if isinstance(intent, FinishRolling):
        if not state.is_rolling:
            return state
        return replace(state, is_rolling=False)

    raise TypeError("unknown intent: %r" % (intent,))


class Game:
    """
    Holds the state of one game and applies the player's intents to it.

    The intent methods return nothing, read the accessors afterwards or
    subscribe to be called with every new state.
    """

    def __init__(self, settings: Optional[dict] = None, seed: Optional[int] = None,
                 rng: Optional[np.random.Generator] = None):
        self.settings = validate_settings({**DEFAULT_SETTINGS, **(settings or {})})

        if rng is None:
            rng = make_rng(seed if seed is not None else self.settings["seed"])
        self._rng = rng

        self._lock = threading.RLock()
        self._timer: Optional[threading.Timer] = None
        self._roll_generation = 0
        self._subscribers: list[Callable[[GameState], None]] = []
        self._state = new_game(self._rng)

    # --- read accessors ---

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def dice(self) -> tuple:
        return self._state.dice

    @property
    def locked(self) -> tuple:
        return self._state.locked

    @property
    def dice_to_roll(self) -> tuple:
        return self._state.dice_to_roll

    @property
    def rolls_left(self) -> int:
        return self._state.rolls_left

    @property
    def turns_left(self) -> int:
        return self._state.turns_left

    @property
    def is_rolling(self) -> bool:
        return self._state.is_rolling

    @property
    def scores(self) -> dict:
        return self._state.scorecard

    @property
    def total_score(self) -> int:
        return self._state.total_score

    @property
    def is_over(self) -> bool:
        return self._state.is_over

    def score_table(self) -> list[dict]:
        return format_score_table(self._state)

    def scorable_categories(self) -> list[str]:
        """Open categories the current dice would score points in, for hints."""
        valid_categories = validate_dice_categories(self._state.dice, self._state.scores)
        return [name for name, valid in zip(CATEGORIES, valid_categories) if valid]

    # --- intents ---

    def roll(self) -> None:
        self._dispatch(Roll())

    def toggle_locked(self, index: int) -> None:
        self._dispatch(ToggleLock(index))

    def assign_score(self, category: Union[int, str]) -> None:
        self._dispatch(AssignScore(category))

    def restart(self) -> None:
        with self._lock:
            self._cancel_timer()
        self._dispatch(Restart())

    def close(self) -> None:
        """Stop a pending rolling timer."""
        with self._lock:
            self._cancel_timer()

    # --- notifications ---

    def subscribe(self, callback: Callable[[GameState], None]) -> Callable[[], None]:
        """Call `callback` with the new state after every change. Returns a function that unsubscribes."""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    # --- internals ---

    def _dispatch(self, intent, generation: Optional[int] = None) -> None:
        # subscribers run under the lock so they see the changes in the order they happened
        with self._lock:
            if generation is not None and generation != self._roll_generation:
                # a newer roll or a restart took over this timer's job
                return
            previous = self._state
            self._state = apply(previous, intent, self._rng)
            state = self._state

            if state is previous:
                return

            clear_inline = False
            if isinstance(intent, (Roll, AssignScore)):
                clear_inline = self._schedule_finish_rolling()
            generation = self._roll_generation

            try:
                for callback in list(self._subscribers):
                    callback(state)
            finally:
                # the rolling flag comes down even when a subscriber fails
                if clear_inline:
                    self._dispatch(FinishRolling(), generation)

    def _schedule_finish_rolling(self) -> bool:
        """Start the timer that lowers the rolling flag. True when there is no delay and the caller clears it."""
        delay = self.settings["roll_delay"]
        self._cancel_timer()
        if delay <= 0:
            return True
        self._timer = threading.Timer(delay, self._dispatch, args=(FinishRolling(), self._roll_generation))
        self._timer.daemon = True
        self._timer.start()
        return False

    def _cancel_timer(self) -> None:
        self._roll_generation += 1
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
