import unittest

import numpy as np

from rubik_core.cube import CubeState
from rubik_core.engine import rotate_clockwise
from rubik_core.errors import IndexOutOfRange, MalformedState
from rubik_core.facelets import SOLVED_COLORS, Color, Face


def solved_grid():
    return [[[SOLVED_COLORS[face]] * 3 for _ in range(3)] for face in Face]


class TestCubeState(unittest.TestCase):
    def test_new_uses_canonical_colors(self):
        cube = CubeState.new()
        for face, color in SOLVED_COLORS.items():
            self.assertEqual(cube.get_face(face), [[color] * 3 for _ in range(3)])
        self.assertIs(cube.get_color(Face.FRONT, 1, 1), Color.GREEN)
        self.assertIs(cube.get_color(Face.UP, 0, 2), Color.WHITE)

    def test_from_facelets_deep_copies_input(self):
        grid = solved_grid()
        cube = CubeState.from_facelets(grid)
        grid[0][0][0] = Color.WHITE
        self.assertIs(cube.get_color(Face.FRONT, 0, 0), Color.GREEN)

        arr = np.asarray(CubeState())
        cube = CubeState.from_facelets(arr)
        arr[:] = Color.RED
        self.assertTrue(cube == CubeState())

    def test_from_facelets_rejects_bad_dimensions(self):
        bad_grids = [
            solved_grid()[:5],
            [[row[:2] for row in face] for face in solved_grid()],
            [face[:2] for face in solved_grid()],
            [[[Color.RED] * 3, [Color.RED] * 3, [Color.RED] * 2]] + solved_grid()[1:],
            [],
            np.zeros((6, 9), dtype=np.int8),
        ]
        for grid in bad_grids:
            with self.assertRaises(MalformedState):
                CubeState.from_facelets(grid)

    def test_from_facelets_rejects_non_colors(self):
        grid = solved_grid()
        grid[2][1][1] = 9
        with self.assertRaises(MalformedState):
            CubeState.from_facelets(grid)
        grid[2][1][1] = "G"
        with self.assertRaises(MalformedState):
            CubeState.from_facelets(grid)

    def test_from_facelets_rejects_floats_and_oversized_ints(self):
        floats = [[[4.9] * 3 for _ in range(3)] for _ in range(6)]
        with self.assertRaises(MalformedState):
            CubeState.from_facelets(floats)

        grid = solved_grid()
        grid[0][0][0] = 70000
        with self.assertRaises(MalformedState):
            CubeState.from_facelets(grid)

        cube = CubeState()
        with self.assertRaises(MalformedState):
            cube.set_face(Face.UP, [[4.9] * 3 for _ in range(3)])
        self.assertTrue(cube.is_solved())

    def test_set_color_rejects_non_colors(self):
        cube = CubeState()
        for value in (9, -1, "G", 4.0, None):
            with self.assertRaises(MalformedState):
                cube.set_color(Face.FRONT, 0, 0, value)
        self.assertEqual(cube, CubeState())

    def test_get_set_color(self):
        cube = CubeState()
        cube.set_color(Face.RIGHT, 2, 0, Color.BLUE)
        self.assertIs(cube.get_color(Face.RIGHT, 2, 0), Color.BLUE)
        self.assertEqual(cube.color_counts()[Color.BLUE], 10)
        self.assertEqual(cube.color_counts()[Color.RED], 8)

    def test_out_of_range_access_raises(self):
        cube = CubeState()
        with self.assertRaises(IndexOutOfRange):
            cube.get_color(Face.FRONT, 3, 0)
        for row, col in ((-1, 0), (0, 3), (0, -1), (1.0, 1), (True, 0)):
            with self.assertRaises(IndexOutOfRange):
                cube.get_color(Face.FRONT, row, col)
            with self.assertRaises(IndexOutOfRange):
                cube.set_color(Face.FRONT, row, col, Color.RED)
        self.assertTrue(issubclass(IndexOutOfRange, IndexError))
        self.assertTrue(cube.is_solved())

    def test_get_face_returns_independent_copy(self):
        cube = CubeState()
        face = cube.get_face(Face.DOWN)
        face[0][0] = Color.RED
        self.assertIs(cube.get_color(Face.DOWN, 0, 0), Color.YELLOW)

    def test_set_face_replaces_all_nine(self):
        cube = CubeState()
        grid = [[Color.RED, Color.GREEN, Color.BLUE] for _ in range(3)]
        cube.set_face(Face.UP, grid)
        self.assertEqual(cube.get_face(Face.UP), grid)
        # No multiset validation on bulk replace.
        self.assertEqual(cube.color_counts()[Color.WHITE], 0)

    def test_set_face_rejects_bad_shape(self):
        cube = CubeState()
        with self.assertRaises(MalformedState):
            cube.set_face(Face.UP, [[Color.RED] * 3] * 2)
        self.assertTrue(cube.is_solved())

    def test_copy_is_independent(self):
        cube = CubeState()
        clone = cube.copy()
        rotate_clockwise(clone, Face.UP)
        clone.set_color(Face.FRONT, 1, 1, Color.WHITE)
        self.assertTrue(cube.is_solved())
        self.assertEqual(cube, CubeState())
        self.assertNotEqual(clone, cube)

    def test_as_array_is_a_copy(self):
        cube = CubeState()
        arr = cube.as_array()
        self.assertEqual(arr.shape, (6, 3, 3))
        arr[:] = 0
        self.assertTrue(cube.is_solved())
        self.assertIs(cube.get_color(Face.BACK, 0, 0), Color.BLUE)


if __name__ == "__main__":
    unittest.main()
