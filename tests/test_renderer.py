import unittest
from unittest.mock import MagicMock

from calcudoku.core.constants import DisplayMode, Edge, MergeDirection
from calcudoku.core.models import Cage, GridCoordinate
from calcudoku.engine.partition import degenerate_merge_partition
from calcudoku.render.renderer import GridRenderer
from calcudoku.render.text_surface import TextGridSurface


SOLUTION = [[1, 2], [2, 1]]


class GridRendererTests(unittest.TestCase):
    def setUp(self) -> None:
        self.surface = TextGridSurface()
        self.cages = degenerate_merge_partition(2, MergeDirection.DOWN, (0, 0))

    def test_groups_and_numbers_shows_text_and_borders(self) -> None:
        renderer = GridRenderer(self.surface)
        renderer.set_puzzle(SOLUTION, self.cages)
        self.assertEqual(self.surface.text(0, 1), "2")
        self.assertEqual(self.surface.text(1, 1), "1")
        self.assertTrue(self.surface.edge_visible(0, 0, Edge.TOP))
        self.assertFalse(self.surface.edge_visible(0, 0, Edge.BOTTOM))
        self.assertTrue(self.surface.edge_visible(0, 0, Edge.RIGHT))

    def test_groups_mode_hides_numbers(self) -> None:
        renderer = GridRenderer(self.surface, mode=DisplayMode.GROUPS)
        renderer.set_puzzle(SOLUTION, self.cages)
        self.assertEqual(self.surface.text(0, 0), "")
        self.assertTrue(self.surface.edge_visible(1, 1, Edge.LEFT))

    def test_game_mode_shows_nothing(self) -> None:
        renderer = GridRenderer(self.surface, mode=DisplayMode.GAME)
        renderer.set_puzzle(SOLUTION, self.cages)
        for r in range(2):
            for c in range(2):
                self.assertEqual(self.surface.text(r, c), "")
                for edge in Edge:
                    self.assertFalse(self.surface.edge_visible(r, c, edge))

    def test_switching_mode_redraws(self) -> None:
        renderer = GridRenderer(self.surface)
        renderer.set_puzzle(SOLUTION, self.cages)
        renderer.set_mode(DisplayMode.GROUPS)
        self.assertEqual(self.surface.text(0, 0), "")
        renderer.set_mode("groups_and_numbers")
        self.assertEqual(self.surface.text(0, 0), "1")

    def test_redraw_without_puzzle_is_noop(self) -> None:
        surface = MagicMock()
        renderer = GridRenderer(surface)
        renderer.set_mode(DisplayMode.GROUPS)
        surface.set_text.assert_not_called()
        surface.set_edge_visible.assert_not_called()

    def test_uses_only_surface_primitives(self) -> None:
        surface = MagicMock()
        renderer = GridRenderer(surface)
        renderer.set_puzzle(SOLUTION, self.cages)
        surface.build.assert_called_once_with(2)
        surface.set_text.assert_any_call(1, 0, "2")
        surface.set_edge_visible.assert_any_call(1, 0, Edge.TOP, False)


class TextGridSurfaceTests(unittest.TestCase):
    def test_render_single_cage(self) -> None:
        surface = TextGridSurface()
        renderer = GridRenderer(surface, mode=DisplayMode.GROUPS)
        cells = [GridCoordinate(r, c) for r in range(2) for c in range(2)]
        renderer.set_puzzle(SOLUTION, [Cage(cells=cells)])
        expected = "\n".join(
            [
                "+---+---+",
                "|       |",
                "+   +   +",
                "|       |",
                "+---+---+",
            ]
        )
        self.assertEqual(surface.render(), expected)

    def test_render_numbers_centered(self) -> None:
        surface = TextGridSurface()
        GridRenderer(surface).set_puzzle([[1]], [Cage(cells=[GridCoordinate(0, 0)])])
        self.assertEqual(surface.render(), "+---+\n| 1 |\n+---+")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
