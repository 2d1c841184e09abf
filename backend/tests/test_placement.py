import unittest

from hotseat_chess.core import Color, Game, LayoutError, PieceKind, STANDARD_LAYOUT, build_pieces
from hotseat_chess.placement import parse_placement, placement_of, STARTPOS_PLACEMENT


class TestPlacement(unittest.TestCase):
    def test_startpos_matches_standard_layout(self):
        parsed = Game()
        parsed.initialize(parse_placement(STARTPOS_PLACEMENT))
        standard = Game()
        standard.initialize(STANDARD_LAYOUT)
        self.assertEqual(placement_of(parsed.board), placement_of(standard.board))
        self.assertEqual(placement_of(standard.board), STARTPOS_PLACEMENT)

    def test_full_fen_fields_are_ignored(self):
        grid = parse_placement(STARTPOS_PLACEMENT + " w KQkq - 0 1")
        self.assertEqual(grid, parse_placement(STARTPOS_PLACEMENT))

    def test_row_zero_is_rank_eight(self):
        grid = parse_placement("k7/8/8/8/8/8/8/7K")
        self.assertEqual(grid[0][0], (PieceKind.KING, Color.BLACK))
        self.assertEqual(grid[7][7], (PieceKind.KING, Color.WHITE))

    def test_reflects_moves(self):
        g = Game()
        g.initialize(STANDARD_LAYOUT)
        g.handle_click(4, 6)
        g.handle_click(4, 4)
        self.assertEqual(placement_of(g.board), "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR")

    def test_invalid_cases(self):
        invalid_cases = (
            "",
            "8/8/8/8/8/8/8",  # seven ranks
            "8/8/8/8/8/8/8/8/8",  # nine ranks
            "9/8/8/8/8/8/8/8",  # run too long
            "0p6/8/8/8/8/8/8/8",  # zero run
            "7/8/8/8/8/8/8/8",  # short rank
            "ppppppppp/8/8/8/8/8/8/8",  # wide rank
            "x7/8/8/8/8/8/8/8",  # unknown piece
        )
        for text in invalid_cases:
            with self.subTest(placement=text):
                with self.assertRaises(LayoutError):
                    parse_placement(text)

    def test_non_ascii_digits_are_layout_errors(self):
        for text in ("²7/8/8/8/8/8/8/8", "٨/8/8/8/8/8/8/8", "4４/8/8/8/8/8/8/8"):
            with self.subTest(placement=text):
                with self.assertRaisesRegex(LayoutError, "empty-square run"):
                    parse_placement(text)


class TestLayoutGrids(unittest.TestCase):
    def test_character_rows_like_the_standard_layout(self):
        pieces = build_pieces(["r.......", "        "] + ["........"] * 5 + ["......K."])
        self.assertEqual([(p.symbol, p.x, p.y) for p in pieces], [("r", 0, 0), ("K", 6, 7)])

    def test_bad_shapes_and_cells(self):
        bad = (
            ["........"] * 7,
            ["........"] * 7 + ["......."],
            ["........"] * 7 + [[None] * 7 + [("Q", "W")]],
            ["........"] * 7 + [[None] * 7 + ["qq"]],
        )
        for layout in bad:
            with self.subTest(layout=layout[-1]):
                with self.assertRaises(LayoutError):
                    build_pieces(layout)

    def test_layout_error_leaves_game_untouched(self):
        g = Game()
        g.initialize(STANDARD_LAYOUT)
        board = g.board
        with self.assertRaises(LayoutError):
            g.initialize(["z" * 8] * 8)
        self.assertIs(g.board, board)


if __name__ == "__main__":
    unittest.main()
