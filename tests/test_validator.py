import unittest

from wordsearch.core.constants import Bounds
from wordsearch.core.models import Board, CellCoord, PlacedWord
from wordsearch.engine.validator import BoardValidator


def word(value, *cells):
    return PlacedWord(value=value, path=tuple(CellCoord(r, c) for r, c in cells))


class BoardValidatorTests(unittest.TestCase):
    def setUp(self) -> None:
        self.validator = BoardValidator()
        self.bounds = Bounds(rows=2, cols=3)

    def test_valid_board_passes(self) -> None:
        board = Board(
            grid=(("S", "U", None), (None, "N", None)),
            words=(word("SUN", (0, 0), (0, 1), (1, 1)),),
        )
        result = self.validator.validate(board, self.bounds)
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_dimension_mismatch(self) -> None:
        board = Board(grid=((None, None),))
        result = self.validator.validate(board, self.bounds)
        self.assertFalse(result.ok)
        self.assertIn("rows", result.messages[0])

    def test_leftward_step_is_rejected(self) -> None:
        board = Board(
            grid=(("U", "S", None), (None, None, None)),
            words=(word("SU", (0, 1), (0, 0)),),
        )
        self.assertFalse(self.validator.validate(board, self.bounds).ok)

    def test_shared_cell_is_rejected(self) -> None:
        board = Board(
            grid=(("A", "B", None), (None, None, None)),
            words=(word("AB", (0, 0), (0, 1)), word("B", (0, 1))),
        )
        result = self.validator.validate(board, self.bounds)
        self.assertFalse(result.ok)
        self.assertIn("shared", result.messages[0])

    def test_stray_letter_is_rejected(self) -> None:
        board = Board(
            grid=(("A", "B", "Q"), (None, None, None)),
            words=(word("AB", (0, 0), (0, 1)),),
        )
        result = self.validator.validate(board, self.bounds)
        self.assertFalse(result.ok)
        self.assertIn("Stray", result.messages[0])

    def test_path_length_mismatch(self) -> None:
        board = Board(
            grid=(("A", None, None), (None, None, None)),
            words=(word("AB", (0, 0)),),
        )
        self.assertFalse(self.validator.validate(board, self.bounds).ok)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
