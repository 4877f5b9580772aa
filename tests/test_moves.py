import unittest

from game import (
    DISCARD,
    DRAW,
    PAIR,
    REMOVE,
    InvalidMoveError,
    Move,
    PyramidSolitaire,
    apply_move,
    build_deck,
    legal_moves,
    move_from_json,
    move_to_json,
    new_game,
    parse_card,
)


def ordered_deck(*labels):
    front = [parse_card(x) for x in labels]
    return front + [c for c in build_deck() if c not in front]


class TestLegalMoves(unittest.TestCase):
    def setUp(self):
        # Bottom row K♥ 6♥ 7♥; draws 6♣ 8♣ (8♣ pairs with nothing uncovered).
        self.game = PyramidSolitaire()
        self.game.start(ordered_deck("K♠", "2♠", "3♠", "K♥", "6♥", "7♥", "6♣", "8♣"), False, 3, 2)

    def test_given_layout_when_listing_moves_then_every_kind_found(self):
        moves = legal_moves(self.game)
        self.assertEqual(moves, [
            Move(REMOVE, ((2, 0),)),
            Move(PAIR, ((2, 1), (2, 2))),
            Move(DRAW, ((2, 2),), 0),
            Move(DISCARD, (), 0),
            Move(DISCARD, (), 1),
        ])

    def test_given_listed_moves_when_applied_then_each_succeeds(self):
        for move in legal_moves(self.game):
            game = PyramidSolitaire()
            game.start(ordered_deck("K♠", "2♠", "3♠", "K♥", "6♥", "7♥", "6♣", "8♣"), False, 3, 2)
            apply_move(game, move)

    def test_given_malformed_move_when_applied_then_invalid_move(self):
        for bad in [Move(REMOVE), Move(PAIR, ((2, 1),)), Move(DRAW, ((2, 2),)), Move(DISCARD), Move("fly")]:
            with self.assertRaises(InvalidMoveError):
                apply_move(self.game, bad)

    def test_given_nothing_pairs_when_listing_then_only_discards_remain(self):
        game = new_game(1, 2, shuffle=False)  # A♥ alone, draws 2♥ 3♥
        self.assertEqual([m.kind for m in legal_moves(game)], [DISCARD, DISCARD])


class TestMoveJson(unittest.TestCase):
    def test_given_move_when_converting_then_json_shape(self):
        data = move_to_json(Move(DRAW, ((2, 2),), 0))
        self.assertEqual(data, {"kind": "draw", "positions": [[2, 2]], "drawIndex": 0})
        self.assertEqual(move_from_json(data), Move(DRAW, ((2, 2),), 0))
        self.assertEqual(move_from_json({"kind": "discard", "drawIndex": "1"}), Move(DISCARD, (), 1))

    def test_given_bad_json_when_parsing_then_value_error(self):
        with self.assertRaises(ValueError):
            move_from_json({"kind": "teleport"})
        with self.assertRaises(ValueError):
            move_from_json({"kind": "remove", "positions": [[1, 2, 3]]})
        with self.assertRaises(ValueError):
            move_from_json({"kind": "remove", "positions": [["a", "b"]]})


if __name__ == '__main__':
    unittest.main(verbosity=2)
