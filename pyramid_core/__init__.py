"""
Pyramid solitaire core Python package.

Pure game logic with no I/O, used by the CLI driver and the Flask API.
Modules:
- cards.py: Suit, Card, build_deck, parse_card
- board.py: Coord, text rendering
- deal.py: deck validation, dealing strategies, shuffling
- engine.py: PyramidSolitaire rules engine
- moves.py: Move, legal_moves, apply_move
"""
