import random
import unittest

from game import (
    DeckValidator,
    PyramidSolitaire,
    apply_move,
    build_deck,
    legal_moves,
    parse_card,
)


class LooseDeckValidator(DeckValidator):
    """Accepts any short run of distinct cards so small end-game positions can be dealt."""

    def reference_deck(self):
        return build_deck()

    def is_valid(self, deck):
        return bool(deck) and len(set(deck)) == len(deck)


def small_game(labels, rows, draws):
    game = PyramidSolitaire(validator=LooseDeckValidator())
    game.start([parse_card(x) for x in labels], False, rows, draws)
    return game


def count_cards(game):
    pyramid = sum(1 for row in game.get_pyramid() for card in row if card is not None)
    draws = sum(1 for card in game.get_draw_cards() if card is not None)
    return pyramid + draws + game.stock_size()


class TestGameOver(unittest.TestCase):
    def test_given_no_pairs_and_no_stock_when_checking_then_game_over(self):
        # A♥ on top of 2♥ A♠: nothing pairs to 13 and there is nothing to draw.
        game = small_game(["A♥", "2♥", "A♠"], 2, 0)
        self.assertTrue(game.is_game_over())
        self.assertFalse(game.is_game_won())
        self.assertEqual(game.score(), 4)

    def test_given_stock_and_draw_slot_when_checking_then_not_over(self):
        game = small_game(["A♥", "2♥", "A♠", "3♣", "4♣"], 2, 1)
        self.assertEqual(game.stock_size(), 1)
        self.assertFalse(game.is_game_over())

    def test_given_stock_but_no_draw_slots_when_checking_then_over(self):
        game = small_game(["A♥", "2♥", "A♠", "3♣", "4♣"], 2, 0)
        self.assertEqual(game.stock_size(), 2)
        self.assertTrue(game.is_game_over())

    def test_given_uncovered_king_when_checking_then_not_over(self):
        game = small_game(["A♥", "2♥", "K♠"], 2, 0)
        self.assertFalse(game.is_game_over())

    def test_given_uncovered_pair_when_checking_then_not_over(self):
        game = small_game(["A♥", "6♥", "7♠"], 2, 0)
        self.assertFalse(game.is_game_over())

    def test_given_covered_king_only_when_checking_then_over(self):
        game = small_game(["K♥", "2♥", "A♠"], 2, 0)
        self.assertTrue(game.is_game_over())

    def test_given_draw_card_pairing_with_pyramid_when_checking_then_not_over(self):
        game = small_game(["A♥", "2♥", "A♠", "Q♣"], 2, 1)
        self.assertEqual(game.stock_size(), 0)
        self.assertFalse(game.is_game_over())

    def test_given_two_draw_cards_summing_to_13_when_checking_then_not_over(self):
        game = small_game(["A♥", "2♥", "A♠", "6♣", "7♣"], 2, 2)
        self.assertFalse(game.is_game_over())

    def test_given_cleared_pyramid_when_checking_then_won_with_zero_score(self):
        game = small_game(["K♥", "Q♣", "A♣"], 1, 1)
        game.remove(0, 0)
        self.assertTrue(game.is_game_won())
        self.assertTrue(game.is_game_over())
        self.assertEqual(game.score(), 0)
        self.assertEqual(game.stock_size(), 1)

    def test_given_partially_cleared_pyramid_when_checking_then_not_won(self):
        game = small_game(["A♥", "6♥", "7♠"], 2, 0)
        game.remove_two(1, 0, 1, 1)
        self.assertFalse(game.is_game_won())
        self.assertEqual(game.score(), 1)


class TestConservation(unittest.TestCase):
    def test_given_seeded_games_when_playing_legal_moves_then_cards_only_leave_through_moves(self):
        removed_by_kind = {"remove": 1, "pair": 2, "draw": 2, "discard": 1}
        for seed in range(5):
            rng = random.Random(seed)
            game = PyramidSolitaire(rng=random.Random(seed))
            game.start(build_deck(), True, 7, 3)
            gone = 0
            for _ in range(200):
                if game.is_game_over():
                    break
                moves = legal_moves(game)
                self.assertTrue(moves, "not over but no legal move")
                # Prefer removals over discards so games progress.
                removals = [m for m in moves if m.kind != "discard"]
                move = rng.choice(removals or moves)
                apply_move(game, move)
                gone += removed_by_kind[move.kind]
                self.assertEqual(count_cards(game), 52 - gone)
                self.assertEqual(game.get_num_draw(), 3)
                self.assertEqual([game.get_row_width(r) for r in range(7)], list(range(1, 8)))
            self.assertTrue(game.is_game_over())


if __name__ == '__main__':
    unittest.main(verbosity=2)
