"""Tests for the game engine loop with scripted and seeded dice."""

import random
import unittest

from gammonmax.core.board import Player, BAR, OFF
from gammonmax.core.engine import GameEngine, RandomDice
from gammonmax.core.moves import TurnMove
from gammonmax.core.rules import InvalidDiceError
from gammonmax.core.state import Position
from gammonmax.players.human import HumanPlayer
from gammonmax.players.random import RandomPlayer


def scripted(*rolls):
    """Dice source returning the given rolls in order."""
    it = iter(rolls)
    return lambda: next(it)


def random_players(seed=0):
    return RandomPlayer(Player.WHITE, random.Random(seed)), RandomPlayer(Player.BLACK, random.Random(seed + 1))


class GameEngineTests(unittest.TestCase):

    def test_last_stone_wins_the_game(self):
        position = Position.from_list([[(0, 1), (OFF, 14)], [(23, 1), (OFF, 14)]])
        engine = GameEngine(*random_players(), position=position, dice_source=scripted((1, 2)))

        events = list(engine.play_from_state(stepwise=True))

        self.assertEqual(
            [event["type"] for event in events],
            ["turn_start", "roll_dice", "chosen_move", "apply_move", "turn_end", "game_over"],
        )
        self.assertEqual(events[-1]["winner"], Player.WHITE)
        result = engine.game_finished()
        self.assertEqual(result.winner, Player.WHITE)
        self.assertEqual(result.turns, 1)

    def test_start_roll_rerolls_doubles(self):
        engine = GameEngine(*random_players(), dice_source=scripted((3, 3), (2, 5)))
        self.assertEqual(engine.roll_start_dice(), (2, 5))
        self.assertEqual(engine.turn, Player.BLACK)

    def test_dice_unset_until_first_turn_roll(self):
        engine = GameEngine(*random_players(), dice_source=scripted((4, 1), (6, 5)))
        self.assertIsNone(engine.dice)
        engine.roll_start_dice()
        self.assertIsNone(engine.dice)
        engine.roll_dice()
        self.assertEqual(engine.dice, (6, 5))

    def test_player_without_moves_passes(self):
        position = Position.from_list([
            [(BAR, 1), (5, 14)],
            [(18, 2), (19, 2), (20, 2), (21, 2), (22, 2), (23, 2), (0, 3)],
        ])
        engine = GameEngine(*random_players(), position=position, dice_source=scripted((6, 5)))

        events = list(engine.play_from_state(max_turns=1))

        self.assertEqual([event["type"] for event in events], ["turn_start", "roll_dice", "no_moves", "turn_end"])
        self.assertEqual(engine.turn, Player.BLACK)
        self.assertEqual(engine.position, position)

    def test_invalid_dice_source_rejected(self):
        engine = GameEngine(*random_players(), dice_source=lambda: (0, 7))
        with self.assertRaises(InvalidDiceError):
            list(engine.play_from_state())

    def test_illegal_selection_rejected(self):
        human = HumanPlayer(Player.WHITE, input_func=lambda moves, position, dice: TurnMove())
        engine = GameEngine(human, RandomPlayer(Player.BLACK), dice_source=scripted((6, 5)))
        with self.assertRaises(ValueError):
            list(engine.play_from_state())

    def test_events_can_be_disabled(self):
        engine = GameEngine(*random_players(), dice_source=scripted((6, 5)), emit_enabled=False)
        self.assertEqual(list(engine.play_from_state(max_turns=1)), [])
        self.assertEqual(engine.turns_played, 1)
        self.assertEqual(engine.position.pip_count(Player.WHITE), 167 - 11)

    def test_random_game_finishes_and_conserves_stones(self):
        engine = GameEngine(
            *random_players(3),
            position=Position.initial(debug=True),
            dice_source=RandomDice(random.Random(7)),
            emit_enabled=False,
        )
        result = engine.run(max_turns=5000)

        self.assertIsNotNone(result)
        self.assertEqual(engine.position.off_count(result.winner), 15)
        self.assertEqual(engine.position.winner(), result.winner)

    def test_random_dice_range(self):
        dice = RandomDice(random.Random(0))
        for _ in range(200):
            d1, d2 = dice()
            self.assertTrue(1 <= d1 <= 6 and 1 <= d2 <= 6)


if __name__ == "__main__":
    unittest.main()
