import random
import unittest
from unittest.mock import MagicMock

from wordhunt.core.constants import FALLBACK_WORD, ClickOutcome
from wordhunt.core.models import GenerationResult, PlacedWord
from wordhunt.data.word_bank import WordBank
from wordhunt.engine.filler import SymbolFiller
from wordhunt.engine.generator import GeneratorConfig
from wordhunt.engine.grid import WordHuntGrid
from wordhunt.engine.session import GameSession, SessionConfig


def dog_grid() -> WordHuntGrid:
    grid = WordHuntGrid()
    grid.place_word(5, 0, "DOG")
    SymbolFiller(random.Random(0)).fill(grid)
    return grid


class SessionInitializeTests(unittest.TestCase):
    def test_initialize_builds_playable_round(self) -> None:
        for seed in range(10):
            session = GameSession(SessionConfig(seed=seed))
            grid = session.initialize()
            self.assertFalse(session.is_fallback)
            self.assertEqual((grid.height, grid.width), (17, 12))
            self.assertEqual(grid.placeholder_cells(), [])
            self.assertEqual(len(session.words), 15)
            self.assertIn(session.correct_word, session.words)
            target = next(p for p in session.placed_words if p.text == session.correct_word)
            self.assertEqual(grid.word_at(target.row, target.col), (target.col, session.correct_word))

    def test_small_catalog_offers_every_word(self) -> None:
        bank = WordBank(["MAP", "DOG", "CAT"], rng=random.Random(1))
        session = GameSession(SessionConfig(seed=1), word_bank=bank)
        session.initialize()
        self.assertEqual(sorted(session.words), ["CAT", "DOG", "MAP"])

    def test_selection_is_reset_each_round(self) -> None:
        session = GameSession(SessionConfig(seed=3))
        session.initialize()
        session.selected_positions.add((0, 0))
        session.initialize()
        self.assertEqual(session.selected_positions, set())


class SessionFallbackTests(unittest.TestCase):
    def assertFallbackGrid(self, session: GameSession, word: str) -> None:
        assert session.grid is not None
        self.assertTrue(session.is_fallback)
        self.assertEqual(session.correct_word, word)
        self.assertEqual(session.grid.word_at(0, 0), (0, word))
        self.assertEqual(session.grid.placeholder_cells(), [])

    def test_empty_catalog_uses_default_word(self) -> None:
        bank = WordBank([])
        session = GameSession(SessionConfig(seed=1), word_bank=bank)
        self.assertIs(session.word_bank, bank)
        with self.assertLogs("wordhunt.engine.session", level="ERROR"):
            session.initialize()
        self.assertFallbackGrid(session, FALLBACK_WORD)

    def test_generator_failure_uses_first_catalog_word(self) -> None:
        session = GameSession(SessionConfig(seed=1))
        session.generator.build = MagicMock(side_effect=RuntimeError("boom"))
        with self.assertLogs("wordhunt.engine.session", level="ERROR"):
            session.initialize()
        self.assertFallbackGrid(session, "STORY")

    def test_unplaceable_words_retry_then_fall_back(self) -> None:
        config = SessionConfig(seed=2, generator=GeneratorConfig(max_placement_attempts=0))
        session = GameSession(config)
        with self.assertLogs("wordhunt.engine.session", level="WARNING") as logs:
            session.initialize()
        retries = [line for line in logs.output if "Generation attempt" in line]
        self.assertEqual(len(retries), config.retry_limit)
        self.assertFallbackGrid(session, "STORY")

    def test_fused_words_are_never_designated(self) -> None:
        grid = WordHuntGrid.from_rows(["CATDOG#MAP$%"])
        placed = [PlacedWord("CAT", 0, 0), PlacedWord("DOG", 0, 3), PlacedWord("MAP", 0, 7)]
        session = GameSession(SessionConfig(seed=4))
        session.generator.build = MagicMock(return_value=GenerationResult(grid=grid, placed_words=placed))
        for _ in range(5):
            self.assertIs(session.initialize(), grid)
            self.assertFalse(session.is_fallback)
            self.assertEqual(session.correct_word, "MAP")

    def test_only_fused_words_falls_back(self) -> None:
        grid = WordHuntGrid.from_rows(["CATDOG######"])
        placed = [PlacedWord("CAT", 0, 0), PlacedWord("DOG", 0, 3)]
        session = GameSession(SessionConfig(seed=4))
        session.generator.build = MagicMock(return_value=GenerationResult(grid=grid, placed_words=placed))
        with self.assertLogs("wordhunt.engine.session", level="WARNING") as logs:
            session.initialize()
        self.assertEqual(len([line for line in logs.output if "clicked on its own" in line]), 3)
        self.assertFallbackGrid(session, "STORY")

    def test_fallback_is_replaced_by_next_round(self) -> None:
        session = GameSession(SessionConfig(seed=5))
        original_build = session.generator.build
        session.generator.build = MagicMock(side_effect=RuntimeError("boom"))
        with self.assertLogs("wordhunt.engine.session", level="ERROR"):
            session.initialize()
        session.generator.build = original_build
        session.initialize()
        self.assertFalse(session.is_fallback)


class SessionClickTests(unittest.TestCase):
    def setUp(self) -> None:
        self.session = GameSession(SessionConfig(seed=11))
        self.solved = []
        self.session.on_solved(self.solved.append)

    def test_clicking_correct_word_regenerates(self) -> None:
        grid = dog_grid()
        self.session.load(grid, "DOG")
        result = self.session.click(5, 1)
        self.assertEqual(result.outcome, ClickOutcome.WIN)
        self.assertEqual(self.solved, ["DOG"])
        self.assertIsNot(self.session.grid, grid)
        self.assertIn(self.session.correct_word, self.session.words)

    def test_every_letter_of_correct_word_wins(self) -> None:
        for col in range(3):
            grid = dog_grid()
            self.session.load(grid, "DOG")
            self.assertTrue(self.session.click(5, col).is_win)
            self.assertIsNot(self.session.grid, grid)
        self.assertEqual(self.solved, ["DOG"] * 3)

    def test_symbol_click_leaves_grid_untouched(self) -> None:
        grid = dog_grid()
        self.session.load(grid, "DOG")
        before = self.session.snapshot()
        result = self.session.click(0, 0)
        self.assertEqual(result.outcome, ClickOutcome.NOOP)
        self.assertIs(self.session.grid, grid)
        self.assertEqual(self.session.snapshot(), before)
        self.assertEqual(self.solved, [])

    def test_bracket_click_erases_interior_word(self) -> None:
        grid = WordHuntGrid.from_rows(["[MAP]#DOG%!?"])
        self.session.load(grid, "DOG")
        result = self.session.click(0, 0)
        self.assertEqual(result.outcome, ClickOutcome.BRACKET_MATCH)
        self.assertEqual(grid.rows(), ["[...]#DOG%!?"])
        self.assertIs(self.session.grid, grid)

    def test_listener_failure_does_not_break_click(self) -> None:
        self.session.on_solved(MagicMock(side_effect=RuntimeError("ui gone")))
        self.session.load(dog_grid(), "DOG")
        with self.assertLogs("wordhunt.engine.session", level="ERROR"):
            result = self.session.click(5, 2)
        self.assertTrue(result.is_win)
        self.assertEqual(self.solved, ["DOG"])

    def test_board_starts_first_round_once(self) -> None:
        grid = self.session.board
        self.assertEqual(self.session.round, 1)
        self.assertIs(self.session.board, grid)
        self.assertEqual(self.session.snapshot(), grid.snapshot())
        self.assertEqual(self.session.round, 1)

    def test_click_before_initialize_starts_a_round(self) -> None:
        result = self.session.click(0, 0)
        self.assertIsNotNone(self.session.grid)
        self.assertIn(result.outcome, set(ClickOutcome))


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
