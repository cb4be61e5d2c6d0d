"""Tests for positions: queries, serialization and move application."""

import unittest

import numpy as np

from gammonmax.core.board import Player, BAR, OFF
from gammonmax.core.moves import SingleMove, SingleMoveType
from gammonmax.core.state import Position, IllegalMoveError
from gammonmax.core.state_invariants import assert_state_invariant


class InitialPositionTests(unittest.TestCase):

    def setUp(self):
        self.position = Position.initial()

    def test_standard_layout(self):
        self.assertEqual(self.position.num_of_stones(23, Player.WHITE), 2)
        self.assertEqual(self.position.num_of_stones(12, Player.WHITE), 5)
        self.assertEqual(self.position.num_of_stones(7, Player.WHITE), 3)
        self.assertEqual(self.position.num_of_stones(5, Player.WHITE), 5)
        self.assertEqual(self.position.num_of_stones(0, Player.BLACK), 2)
        self.assertEqual(self.position.num_of_stones(11, Player.BLACK), 5)
        self.assertEqual(self.position.num_of_stones(16, Player.BLACK), 3)
        self.assertEqual(self.position.num_of_stones(18, Player.BLACK), 5)
        self.assertEqual(self.position.num_of_stones(5, Player.BLACK), 0)

    def test_pip_counts_are_167(self):
        self.assertEqual(self.position.pip_count(Player.WHITE), 167)
        self.assertEqual(self.position.pip_count(Player.BLACK), 167)

    def test_no_blots_and_no_adjacent_points(self):
        for player in Player:
            self.assertEqual(self.position.blots(player), 0)
            self.assertEqual(self.position.prime_length(player), 1)

    def test_not_terminal(self):
        self.assertFalse(self.position.is_terminal())
        self.assertIsNone(self.position.winner())

    def test_invariants_hold(self):
        assert_state_invariant(self.position, "initial")

    def test_arrays_are_read_only(self):
        with self.assertRaises(ValueError):
            self.position.points[0] = 3


class SerializationTests(unittest.TestCase):

    def test_round_trip_with_bar_and_off(self):
        layout = [
            [(5, 10), (BAR, 2), (OFF, 3)],
            [(18, 14), (OFF, 1)],
        ]
        position = Position.from_list(layout)
        self.assertEqual(position.bar_count(Player.WHITE), 2)
        self.assertEqual(position.off_count(Player.WHITE), 3)
        self.assertEqual(position.off_count(Player.BLACK), 1)
        self.assertEqual(Position.from_list(position.to_list()), position)

    def test_wrong_stone_count_rejected(self):
        with self.assertRaises(ValueError):
            Position.from_list([[(5, 14)], [(18, 15)]])

    def test_shared_point_rejected(self):
        with self.assertRaises(ValueError):
            Position.from_list([[(5, 15)], [(5, 1), (18, 14)]])

    def test_invalid_point_rejected(self):
        with self.assertRaises(ValueError):
            Position.from_list([[(24, 15)], [(18, 15)]])


class QueryTests(unittest.TestCase):

    def test_bar_counts_25_pips(self):
        position = Position.from_list([[(BAR, 1), (5, 14)], [(18, 15)]])
        self.assertEqual(position.pip_count(Player.WHITE), 25 + 6 * 14)

    def test_black_pip_distance(self):
        position = Position.from_list([[(5, 15)], [(23, 1), (18, 14)]])
        self.assertEqual(position.pip_count(Player.BLACK), 1 + 6 * 14)

    def test_blots_and_prime_length(self):
        position = Position.from_list([
            [(3, 2), (4, 2), (5, 2), (7, 2), (9, 1), (12, 6)],
            [(18, 2), (20, 1), (21, 1), (OFF, 11)],
        ])
        self.assertEqual(position.blots(Player.WHITE), 1)
        self.assertEqual(position.blots(Player.BLACK), 2)
        self.assertEqual(position.prime_length(Player.WHITE), 3)
        self.assertEqual(position.prime_length(Player.BLACK), 1)

    def test_blocked_mask_marks_opposing_points(self):
        position = Position.initial()
        blocked = position.blocked_mask(Player.WHITE)
        for point in (0, 11, 16, 18):
            self.assertTrue(blocked & (1 << point))
        self.assertFalse(blocked & (1 << 5))

    def test_equal_positions_share_hash(self):
        a = Position.initial()
        b = Position.from_list(a.to_list())
        self.assertEqual(a, b)
        self.assertEqual(hash(a), hash(b))
        self.assertEqual(len({a, b}), 1)

    def test_terminal_and_winner(self):
        position = Position.from_list([[(OFF, 15)], [(18, 15)]])
        self.assertTrue(position.is_terminal())
        self.assertEqual(position.winner(), Player.WHITE)
        position = Position.from_list([[(5, 15)], [(OFF, 15)]])
        self.assertEqual(position.winner(), Player.BLACK)


class ApplyMoveTests(unittest.TestCase):

    def test_normal_move_returns_new_position(self):
        position = Position.initial(debug=True)
        moved = position.apply_move(Player.WHITE, SingleMove(23, 17, SingleMoveType.NORMAL, 6))
        self.assertEqual(moved.num_of_stones(23, Player.WHITE), 1)
        self.assertEqual(moved.num_of_stones(17, Player.WHITE), 1)
        # source untouched
        self.assertEqual(position.num_of_stones(23, Player.WHITE), 2)
        self.assertEqual(position, Position.initial())
        self.assertEqual(moved.pip_count(Player.WHITE), 167 - 6)

    def test_hit_sends_blot_to_bar(self):
        position = Position.from_list([
            [(23, 2), (12, 5), (7, 3), (5, 5)],
            [(17, 1), (0, 1), (11, 5), (16, 3), (18, 5)],
        ], debug=True)
        moved = position.apply_move(Player.WHITE, SingleMove(23, 17, SingleMoveType.HIT, 6))
        self.assertEqual(moved.bar_count(Player.BLACK), 1)
        self.assertEqual(moved.num_of_stones(17, Player.WHITE), 1)
        self.assertEqual(moved.num_of_stones(17, Player.BLACK), 0)

    def test_enter_from_bar(self):
        position = Position.from_list([[(BAR, 1), (5, 14)], [(0, 1), (18, 14)]], debug=True)
        moved = position.apply_move(Player.WHITE, SingleMove(BAR, 21, SingleMoveType.NORMAL, 3))
        self.assertEqual(moved.bar_count(Player.WHITE), 0)
        self.assertEqual(moved.num_of_stones(21, Player.WHITE), 1)
        self.assertEqual(moved.pip_count(Player.WHITE), position.pip_count(Player.WHITE) - 3)

    def test_black_enters_and_hits(self):
        position = Position.from_list([[(2, 1), (5, 14)], [(BAR, 1), (18, 14)]], debug=True)
        moved = position.apply_move(Player.BLACK, SingleMove(BAR, 2, SingleMoveType.HIT, 3))
        self.assertEqual(moved.bar_count(Player.BLACK), 0)
        self.assertEqual(moved.bar_count(Player.WHITE), 1)
        self.assertEqual(moved.num_of_stones(2, Player.BLACK), 1)

    def test_bear_off(self):
        position = Position.from_list([[(2, 1), (OFF, 14)], [(18, 15)]], debug=True)
        moved = position.apply_move(Player.WHITE, SingleMove(2, OFF, SingleMoveType.BEAR_OFF, 5))
        self.assertEqual(moved.off_count(Player.WHITE), 15)
        self.assertEqual(moved.winner(), Player.WHITE)

    def test_move_from_empty_point_rejected(self):
        with self.assertRaises(IllegalMoveError):
            Position.initial().apply_move(Player.WHITE, SingleMove(20, 15, SingleMoveType.NORMAL, 5))

    def test_move_onto_blocked_point_rejected(self):
        with self.assertRaises(IllegalMoveError):
            Position.initial().apply_move(Player.WHITE, SingleMove(23, 18, SingleMoveType.NORMAL, 5))

    def test_enter_with_empty_bar_rejected(self):
        with self.assertRaises(IllegalMoveError):
            Position.initial().apply_move(Player.WHITE, SingleMove(BAR, 20, SingleMoveType.NORMAL, 4))

    def test_apply_empty_turn_returns_same_position(self):
        position = Position.initial()
        self.assertIs(position.apply_turn(Player.WHITE, ()), position)

    def test_debug_mode_catches_lost_stones(self):
        position = Position(np.zeros(24), debug=True)
        with self.assertRaises(AssertionError):
            position._assert("empty board")


if __name__ == "__main__":
    unittest.main()
