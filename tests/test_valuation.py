"""Tests for the linear position evaluation."""

import unittest

from gammonmax.core.board import Player, BAR, OFF
from gammonmax.core.state import Position
from gammonmax.players.valuation import EvaluationWeights, Valuation, verdict


class ValuationTests(unittest.TestCase):

    def setUp(self):
        self.valuation = Valuation()

    def test_initial_position_is_balanced(self):
        position = Position.initial()
        self.assertEqual(self.valuation.evaluate(position, Player.WHITE), 0)
        self.assertEqual(self.valuation.evaluate(position, Player.BLACK), 0)

    def test_win_and_loss_sentinels(self):
        position = Position.from_list([[(OFF, 15)], [(BAR, 3), (18, 12)]])
        self.assertEqual(self.valuation.evaluate(position, Player.WHITE), 100000)
        self.assertEqual(self.valuation.evaluate(position, Player.BLACK), -100000)

    def test_blot_penalty(self):
        # pips 89 vs 90, one White blot
        position = Position.from_list([[(5, 14), (4, 1)], [(18, 15)]])
        self.assertEqual(self.valuation.evaluate(position, Player.WHITE), 1 - 2)
        self.assertEqual(self.valuation.evaluate(position, Player.BLACK), -1 + 2)

    def test_bar_penalty(self):
        # pips 109 vs 90, one White stone on the bar
        position = Position.from_list([[(BAR, 1), (5, 14)], [(18, 15)]])
        self.assertEqual(self.valuation.evaluate(position, Player.WHITE), -19 - 25)

    def test_prime_and_off_terms(self):
        position = Position.from_list([
            [(3, 2), (4, 2), (5, 2), (OFF, 9)],
            [(18, 14), (OFF, 1)],
        ])
        valuation = Valuation(EvaluationWeights(pip=0))
        # prime 3 vs 1, off 9 vs 1
        self.assertEqual(valuation.evaluate(position, Player.WHITE), 3 * (3 - 1) + 5 * (9 - 1))

    def test_custom_weights(self):
        position = Position.from_list([[(BAR, 1), (5, 14)], [(18, 15)]])
        valuation = Valuation(EvaluationWeights(bar=0))
        self.assertEqual(valuation.evaluate(position, Player.WHITE), -19)

    def test_results_are_cached(self):
        position = Position.initial()
        self.valuation.evaluate(position, Player.WHITE)
        self.assertIn((position.key(), Player.WHITE), self.valuation.eval_cache)
        self.valuation.clear_cache()
        self.assertEqual(self.valuation.eval_cache, {})

    def test_verdict(self):
        self.assertEqual(verdict(0), "Balanced game.")
        self.assertEqual(verdict(10), "Slightly better: White.")
        self.assertEqual(verdict(51), "Clear advantage: White.")
        self.assertEqual(verdict(-10), "Slightly better: Black.")
        self.assertEqual(verdict(-51), "Clear advantage: Black.")


if __name__ == "__main__":
    unittest.main()
