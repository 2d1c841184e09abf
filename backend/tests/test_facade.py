import unittest

from hotseat_chess.api import ChessSession, diff, dict_to_layout
from hotseat_chess.core import Color, InvalidCoordinateError, LayoutError, PieceKind


class TestChessSession(unittest.TestCase):
    def test_state_shape(self):
        s = ChessSession()
        state = s.state()
        self.assertEqual(len(state["pieces"]), 32)
        self.assertIsNone(state["selected"])
        self.assertEqual(state["state"], "idle")
        self.assertEqual(state["targets"], [])
        a1 = next(p for p in state["pieces"] if p["cell"] == "a1")
        self.assertEqual((a1["type"], a1["color"], a1["x"], a1["y"]), ("Rook", "WHITE", 0, 7))

    def test_select_reports_targets(self):
        s = ChessSession()
        res = s.click(4, 6)
        self.assertEqual(res["meta"]["action"], "selected")
        self.assertEqual(res["meta"]["click"]["cell"], "e2")
        self.assertEqual(res["after"]["selected"], {"x": 4, "y": 6, "cell": "e2"})
        self.assertEqual([t["cell"] for t in res["after"]["targets"]], ["e4", "e3"])
        self.assertEqual(s.targets(), res["after"]["targets"])
        self.assertEqual(res["diff"]["moved"], [])

    def test_move_diff(self):
        s = ChessSession()
        s.click(4, 6)
        res = s.click(4, 4)
        self.assertEqual(res["meta"]["action"], "moved")
        self.assertEqual(len(res["diff"]["moved"]), 1)
        mv = res["diff"]["moved"][0]
        self.assertEqual((mv["from"], mv["to"], mv["type"]), ("e2", "e4", "Pawn"))
        self.assertEqual(res["diff"]["removed"], [])
        self.assertEqual(res["diff"]["selection"]["before"]["cell"], "e2")
        self.assertIsNone(res["diff"]["selection"]["after"])

    def test_capture_diff(self):
        s = ChessSession.from_dict({"placement": "8/8/8/1p6/P7/8/8/8"})
        s.click(0, 4)
        res = s.click(1, 3)
        self.assertEqual(res["meta"]["action"], "captured")
        self.assertEqual([p["cell"] for p in res["diff"]["removed"]], ["b5"])
        self.assertEqual(res["diff"]["moved"][0]["to"], "b5")
        self.assertEqual(len(res["after"]["pieces"]), 1)

    def test_deselect_and_noop_actions(self):
        s = ChessSession()
        self.assertEqual(s.click(4, 4)["meta"]["action"], "none")
        s.click(2, 7)
        self.assertEqual(s.click(2, 4)["meta"]["action"], "deselected")

    def test_invalid_click_propagates(self):
        s = ChessSession()
        with self.assertRaises(InvalidCoordinateError):
            s.click(8, 0)

    def test_diff_of_identical_snapshots(self):
        s = ChessSession()
        st = s.state()
        d = diff(st, st)
        self.assertEqual((d["removed"], d["moved"]), ([], []))


class TestLayoutDecode(unittest.TestCase):
    def test_missing_keys_mean_standard(self):
        self.assertIsNone(dict_to_layout({}))
        self.assertEqual(len(ChessSession.from_dict({}).state()["pieces"]), 32)

    def test_layout_rows_of_dicts_and_chars(self):
        rows = [[None] * 8 for _ in range(8)]
        rows[0][4] = {"type": "King", "color": "black"}
        rows[7][4] = "K"
        grid = dict_to_layout({"layout": rows})
        self.assertEqual(grid[0][4], (PieceKind.KING, Color.BLACK))
        self.assertEqual(grid[7][4], (PieceKind.KING, Color.WHITE))

    def test_string_rows(self):
        grid = dict_to_layout({"layout": ["rnbqkbnr"] + ["        "] * 7})
        self.assertEqual(grid[0][3], (PieceKind.QUEEN, Color.BLACK))

    def test_bad_layouts(self):
        bad = (
            {"layout": "rnbqkbnr"},
            {"layout": [[None] * 8] * 7},
            {"layout": [[None] * 8] * 7 + [[{"type": "Wizard", "color": "WHITE"}] + [None] * 7]},
            {"layout": [[None] * 8] * 7 + [[{"type": "Pawn", "color": "red"}] + [None] * 7]},
            {"layout": [[None] * 8] * 7 + [[5] + [None] * 7]},
            {"placement": "nope"},
        )
        for d in bad:
            with self.subTest(d=d):
                with self.assertRaises(LayoutError):
                    dict_to_layout(d)


if __name__ == "__main__":
    unittest.main()
