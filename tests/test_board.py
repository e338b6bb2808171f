# -*-  coding: utf-8 -*-
"""
Set of test for GridState and SpawnPolicy.
"""
from unittest import TestCase, main
from unittest.mock import Mock

import numpy as np

from slide2048.animation.operations import MergeNotice, Pop, Zoom
from slide2048.core.gridstate import GridState
from slide2048.core.spawn import SpawnPolicy


def fixed_generator(*indices: int) -> Mock:
    """Generator stub whose ``integers`` returns the given indices in turn."""
    generator = Mock()
    generator.integers.side_effect = list(indices)
    return generator


class TestGridState(TestCase):
    """
    Test for the GridState class.
    """

    def setUp(self):
        """Initialize a new grid before each test."""
        self.grid = GridState(3, 4)

    def test_init(self):
        """The grid starts empty with the requested shape."""
        self.assertEqual(self.grid.shape, (3, 4))
        self.assertEqual(self.grid.total(), 0)
        self.assertEqual(len(self.grid.empty_cells()), 12)

    def test_invalid_dimensions(self):
        """Non-positive dimensions are rejected."""
        with self.assertRaises(ValueError):
            GridState(0, 4)
        with self.assertRaises(ValueError):
            GridState(4, -1)

    def test_get_set(self):
        """Values written are read back."""
        self.grid.set(2, 3, 8)
        self.assertEqual(self.grid.get(2, 3), 8)
        self.assertEqual(self.grid.filled_cells(), [(2, 3)])
        self.assertEqual(self.grid.max_tile(), 8)

    def test_in_range(self):
        """Bounds are checked on both axes."""
        self.assertTrue(self.grid.in_range(0, 0))
        self.assertTrue(self.grid.in_range(2, 3))
        self.assertFalse(self.grid.in_range(3, 0))
        self.assertFalse(self.grid.in_range(0, -1))

    def test_snapshot_is_read_only_copy(self):
        """Snapshots never alias the grid."""
        snapshot = self.grid.snapshot()
        with self.assertRaises(ValueError):
            snapshot[0, 0] = 2

        self.grid.set(0, 0, 2)
        self.assertEqual(snapshot[0, 0], 0)

    def test_load(self):
        """Loading replaces every cell, and the shape must match."""
        self.grid.load([[2, 0, 0, 0], [0, 4, 0, 0], [0, 0, 8, 0]])
        self.assertEqual(self.grid.total(), 14)
        with self.assertRaises(ValueError):
            self.grid.load([[2, 2], [2, 2]])

    def test_reset(self):
        """Reset empties the grid."""
        self.grid.set(1, 1, 4)
        self.grid.reset()
        self.assertEqual(self.grid.total(), 0)


class TestSpawnPolicy(TestCase):
    """
    Test for the SpawnPolicy class.
    """

    def setUp(self):
        """Initialize a new grid before each test."""
        self.grid = GridState(4, 4)

    def test_spawn_in_empty_cell(self):
        """A random spawn fills one empty cell with a 2 or a 4, shown by a zoom."""
        policy = SpawnPolicy(seed=42)
        spawned = policy.spawn(self.grid)

        self.assertIn(spawned.value, (2, 4))
        self.assertEqual(self.grid.get(*spawned.cell), spawned.value)
        self.assertEqual(spawned.operation, Zoom(target=spawned.cell, value=spawned.value))
        self.assertIsNone(spawned.merge)
        self.assertEqual(np.count_nonzero(self.grid.snapshot()), 1)

    def test_spawn_never_overwrites(self):
        """Without an explicit position, only empty cells are chosen."""
        policy = SpawnPolicy(seed=0)
        for _ in range(16):
            before = self.grid.snapshot()
            spawned = policy.spawn(self.grid)
            self.assertEqual(before[spawned.cell], 0)
        self.assertEqual(len(self.grid.empty_cells()), 0)

    def test_spawn_on_full_grid(self):
        """A full grid receives nothing."""
        self.grid.load(np.full((4, 4), 2))
        self.assertIsNone(SpawnPolicy(seed=0).spawn(self.grid))
        self.assertEqual(self.grid.total(), 32)

    def test_spawn_values_are_balanced(self):
        """2 and 4 are drawn with equal probability."""
        policy = SpawnPolicy(seed=1234)
        values = []
        for _ in range(1000):
            grid = GridState(1, 1)
            values.append(policy.spawn(grid).value)
        self.assertTrue(400 < values.count(2) < 600)
        self.assertEqual(values.count(2) + values.count(4), 1000)

    def test_spawn_uses_injected_generator(self):
        """Position and value come from the injected generator."""
        self.grid.set(0, 0, 2)
        spawned = SpawnPolicy(generator=fixed_generator(0, 1)).spawn(self.grid)

        # ##>: First empty cell is (0, 1), value index 1 is a 4.
        self.assertEqual(spawned.cell, (0, 1))
        self.assertEqual(spawned.value, 4)

    def test_explicit_value(self):
        """An explicit value is used as given."""
        spawned = SpawnPolicy(seed=0).spawn(self.grid, (1, 2), 8)
        self.assertEqual(self.grid.get(1, 2), 8)
        self.assertEqual(spawned.operation, Zoom(target=(1, 2), value=8))

    def test_explicit_occupied_cell_is_incremented(self):
        """An explicit occupied cell gets the value added, with a pop and a merge notice on itself."""
        policy = SpawnPolicy(seed=0)
        policy.spawn(self.grid, (0, 0), 2)
        spawned = policy.spawn(self.grid, (0, 0), 2)

        self.assertEqual(self.grid.get(0, 0), 4)
        self.assertEqual(spawned.operation, Pop(target=(0, 0)))
        self.assertEqual(spawned.merge, MergeNotice(source=(0, 0), destination=(0, 0), value=4))

    def test_explicit_position_out_of_range(self):
        """A position outside the grid is ignored."""
        self.assertIsNone(SpawnPolicy(seed=0).spawn(self.grid, (4, 0), 2))
        self.assertEqual(self.grid.total(), 0)

    def test_remove(self):
        """Removing a tile clears it with a reversed zoom."""
        self.grid.set(3, 3, 16)
        operation = SpawnPolicy(seed=0).remove(self.grid, (3, 3))
        self.assertEqual(operation, Zoom(target=(3, 3), reverse=True))
        self.assertEqual(self.grid.total(), 0)

    def test_remove_random_tile(self):
        """Without a position, an occupied cell is chosen."""
        self.grid.set(1, 1, 2)
        self.grid.set(2, 2, 4)
        operation = SpawnPolicy(generator=fixed_generator(1)).remove(self.grid)
        self.assertEqual(operation.target, (2, 2))
        self.assertEqual(self.grid.get(2, 2), 0)
        self.assertEqual(self.grid.get(1, 1), 2)

    def test_remove_nothing(self):
        """Removing from an empty cell, an empty grid or outside the grid does nothing."""
        policy = SpawnPolicy(seed=0)
        self.assertIsNone(policy.remove(self.grid))
        self.assertIsNone(policy.remove(self.grid, (0, 0)))
        self.assertIsNone(policy.remove(self.grid, (-1, 0)))


if __name__ == '__main__':
    main()
