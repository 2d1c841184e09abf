import threading
import unittest

from hotseat_chess.core import Board, Color, Piece, PieceKind


def _board():
    a = Piece(PieceKind.ROOK, Color.WHITE, 0, 7)
    b = Piece(PieceKind.ROOK, Color.BLACK, 0, 0)
    return Board([a, b]), a, b


class TestBoard(unittest.TestCase):
    def test_board_starts_with_no_selection(self):
        board, _, b = _board()
        self.assertIsNone(board.selected)
        self.assertEqual(board.find(b.uid), b)
        self.assertIsNone(board.find(-1))

    def test_select_replaces_previous_selection(self):
        board, a, b = _board()
        board.select(a)
        board.select(b)
        self.assertIs(board.selected, b)
        self.assertFalse(a.selected)
        self.assertTrue(b.selected)

    def test_removing_selected_piece_clears_selection(self):
        board, a, b = _board()
        board.select(b)
        board.remove_piece(b)
        self.assertIsNone(board.selected)
        self.assertFalse(b.selected)
        self.assertEqual(board.pieces, [a])

    def test_removing_other_piece_keeps_selection(self):
        board, a, b = _board()
        board.select(a)
        board.remove_piece(b)
        self.assertIs(board.selected, a)

    def test_remove_unknown_piece_raises(self):
        board, _, _ = _board()
        with self.assertRaises(ValueError):
            board.remove_piece(Piece(PieceKind.KING, Color.WHITE, 4, 4))

    def test_remove_uses_identity_not_equality(self):
        board, a, _ = _board()
        twin = Piece(a.kind, a.color, a.x, a.y, uid=a.uid)
        with self.assertRaises(ValueError):
            board.remove_piece(twin)
        self.assertEqual(len(board), 2)

    def test_order_is_stable(self):
        board, a, b = _board()
        board.move_piece(a, 3, 3)
        self.assertEqual([p.uid for p in board], [a.uid, b.uid])
        self.assertIs(board.piece_at(3, 3), a)
        self.assertIsNone(board.piece_at(0, 7))

    def test_uids_are_unique_across_threads(self):
        results = []
        lock = threading.Lock()

        def build():
            uids = [Piece(PieceKind.PAWN, Color.WHITE, 0, 0).uid for _ in range(2000)]
            with lock:
                results.extend(uids)

        threads = [threading.Thread(target=build) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertEqual(len(results), len(set(results)))


if __name__ == "__main__":
    unittest.main()
