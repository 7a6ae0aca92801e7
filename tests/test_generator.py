import unittest
from unittest.mock import MagicMock

from wordsearch.core.constants import GRID_SIZES, Bounds, DictionaryMode, GridSize
from wordsearch.core.exceptions import BoardIntegrityError, ConfigurationError
from wordsearch.core.models import AttemptResult, Board, CellCoord, PlacedWord, WordEntry
from wordsearch.engine.finalizer import finalize_grid
from wordsearch.engine.generator import GeneratorConfig, WordSearchGenerator, generate_board
from wordsearch.engine.validator import BoardValidator


WORDS = [
    WordEntry(str(index), value)
    for index, value in enumerate(
        ["apple", "house", "tree", "moon", "sun", "cat", "dog", "river", "stone", "bird", "fish"]
    )
]


class GeneratorTests(unittest.TestCase):
    def test_every_size_has_documented_dimensions(self) -> None:
        expected = {GridSize.SMALL: (5, 5), GridSize.MEDIUM: (6, 6), GridSize.LARGE: (7, 7)}
        for size, (rows, cols) in expected.items():
            with self.subTest(size=size):
                board = generate_board(WORDS, grid_size=size, seed=3)
                self.assertEqual(board.rows, rows)
                self.assertEqual(board.cols, cols)
                self.assertTrue(all(len(row) == cols for row in board.grid))
                self.assertTrue(BoardValidator().validate(board, GRID_SIZES[size]).ok)
                self.assertGreater(len(board.words), 0)

    def test_cat_and_dog_both_placed_on_small_board(self) -> None:
        board = generate_board([WordEntry("1", "cat"), WordEntry("2", "dog")], grid_size="small", seed=1)
        self.assertEqual(sorted(w.value for w in board.words), ["CAT", "DOG"])
        for word in board.words:
            for prev, nxt in zip(word.path, word.path[1:]):
                self.assertIn((nxt.row - prev.row, nxt.col - prev.col), {(0, 1), (1, 0)})

    def test_empty_candidate_pool_gives_empty_board(self) -> None:
        board = generate_board([WordEntry("1", "no way"), WordEntry("2", "123")], grid_size="medium")
        self.assertEqual(board.words, ())
        self.assertEqual(board.rows, 6)
        self.assertTrue(all(value is None for row in board.grid for value in row))

    def test_unplaced_cells_are_empty(self) -> None:
        board = generate_board([WordEntry("1", "sun")], grid_size="large", seed=2)
        letters = sum(1 for row in board.grid for value in row if value is not None)
        self.assertEqual(letters, 3)

    def test_same_seed_gives_same_board(self) -> None:
        first = generate_board(WORDS, grid_size="medium", seed=42)
        second = generate_board(WORDS, grid_size="medium", seed=42)
        self.assertEqual(first, second)

    def test_allow_empty_cells_flag_has_no_effect(self) -> None:
        with_flag = generate_board(WORDS, seed=8, allow_empty_cells=True)
        without_flag = generate_board(WORDS, seed=8, allow_empty_cells=False)
        self.assertEqual(with_flag, without_flag)

    def test_secondary_mode_uses_secondary_words(self) -> None:
        config = GeneratorConfig(grid_size="small", mode=DictionaryMode.SECONDARY, seed=4)
        board = WordSearchGenerator(config).generate(WORDS, [WordEntry("u1", "owl")])
        self.assertEqual([w.value for w in board.words], ["OWL"])

    def test_unknown_grid_size_raises(self) -> None:
        with self.assertRaises(ConfigurationError):
            GeneratorConfig(grid_size="huge")
        with self.assertRaises(ConfigurationError):
            GeneratorConfig(mode="everyone")

    def test_integrity_violation_raises(self) -> None:
        grid = [[None] * 5 for _ in range(5)]
        grid[0][0], grid[1][1] = "A", "B"
        broken = AttemptResult(
            grid=grid,
            placed_words=[PlacedWord(value="AB", path=(CellCoord(0, 0), CellCoord(1, 1)))],
            filled_cells=2,
        )
        engine = MagicMock()
        engine.place_best.return_value = broken
        generator = WordSearchGenerator(GeneratorConfig(grid_size="small"), engine=engine)
        with self.assertRaises(BoardIntegrityError):
            generator.generate([WordEntry("1", "ab")])

    def test_integrity_check_can_be_disabled(self) -> None:
        engine = MagicMock()
        engine.place_best.return_value = AttemptResult(grid=[["Z"]])
        generator = WordSearchGenerator(GeneratorConfig(check_integrity=False), engine=engine)
        board = generator.generate([WordEntry("1", "z")])
        self.assertEqual(board.grid, (("Z",),))


class FinalizerTests(unittest.TestCase):
    def test_returns_independent_immutable_copy(self) -> None:
        source = [["A", None], ["", "B"]]
        grid = finalize_grid(source)
        source[0][0] = "X"
        self.assertEqual(grid, (("A", None), (None, "B")))
        self.assertIsInstance(grid[0], tuple)


class BoardSerializationTests(unittest.TestCase):
    def test_to_jsonable(self) -> None:
        word = PlacedWord(value="HI", path=(CellCoord(0, 0), CellCoord(0, 1)))
        board = Board(grid=(("H", "I"), (None, None)), words=(word,))
        self.assertEqual(
            board.to_jsonable(),
            {
                "rows": 2,
                "cols": 2,
                "grid": [["H", "I"], [None, None]],
                "words": [{"id": "HI:0:0|0:1", "value": "HI", "path": [[0, 0], [0, 1]]}],
            },
        )

    def test_bounds_area(self) -> None:
        self.assertEqual(Bounds(rows=3, cols=4).area, 12)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
