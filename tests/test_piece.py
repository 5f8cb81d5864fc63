import random
import unittest

from tests.fakes import RecordingCanvas
from tetris_piece import SHAPES, Piece, rotate_ccw


class RotateTests(unittest.TestCase):
    def test_transpose_then_reverse_rows(self):
        self.assertEqual(rotate_ccw(((1, 2), (3, 4))), ((2, 4), (1, 3)))

    def test_four_rotations_restore_every_shape(self):
        for name, shape in SHAPES.items():
            s = shape
            for _ in range(4):
                s = rotate_ccw(s)
            self.assertEqual(s, shape, name)

    def test_non_square_dimensions_swap(self):
        s = SHAPES["I"]
        self.assertEqual((len(s), len(s[0])), (1, 4))
        s = rotate_ccw(s)
        self.assertEqual((len(s), len(s[0])), (4, 1))

    def test_rotation_returns_new_value(self):
        shape = SHAPES["T"]
        rotate_ccw(shape)
        self.assertEqual(shape, ((1, 1, 1), (0, 1, 0)))


class PieceTests(unittest.TestCase):
    def setUp(self):
        self.piece = Piece.create(60, 30, SHAPES["T"], random.Random(1), cell=30)

    def test_color_channels_in_range(self):
        rng = random.Random(7)
        for _ in range(50):
            color = Piece.create(0, 0, SHAPES["O"], rng, cell=30).color
            self.assertEqual(len(color), 3)
            self.assertTrue(all(0 <= ch <= 255 for ch in color))

    def test_move_shifts_by_whole_cells(self):
        shape, color = self.piece.shape, self.piece.color
        self.piece.move(-1, 2)
        self.assertEqual((self.piece.x, self.piece.y), (30, 90))
        self.assertEqual(self.piece.shape, shape)
        self.assertEqual(self.piece.color, color)

    def test_rotate_replaces_shape(self):
        before = self.piece.shape
        self.piece.rotate()
        self.assertEqual(self.piece.shape, ((1, 0), (1, 1), (1, 0)))
        self.assertEqual(before, SHAPES["T"])

    def test_pieces_never_share_catalog_rows(self):
        other = Piece.create(0, 0, SHAPES["T"], random.Random(2), cell=30)
        self.piece.rotate()
        self.assertEqual(other.shape, SHAPES["T"])

    def test_cells(self):
        self.assertEqual(self.piece.cells(), [(2, 1), (3, 1), (4, 1), (3, 2)])
        self.assertEqual(self.piece.cells(1, 1), [(3, 2), (4, 2), (5, 2), (4, 3)])

    def test_draw_paints_occupied_cells(self):
        canvas = RecordingCanvas()
        self.piece.draw(canvas)
        c = self.piece.color
        self.assertEqual(canvas.rects, [
            (60, 30, 30, 30, c), (90, 30, 30, 30, c), (120, 30, 30, 30, c),
            (90, 60, 30, 30, c),
        ])


if __name__ == "__main__":
    unittest.main()
