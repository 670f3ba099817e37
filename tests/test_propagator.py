import unittest
import numpy as np

from cpsudoku.grid import Grid
from cpsudoku.constraints import ConstraintSet
from cpsudoku.propagator import propagate, PropagationOutcome

from utils import WIKI, WIKI_SOLUTION, INKALA, EMPTY


class TestPropagate(unittest.TestCase):

    def setUp(self):
        self.cons = ConstraintSet.build()

    def test_sound(self):
        grid = Grid.initialize(WIKI)
        outcome = propagate(grid, self.cons)
        self.assertIn(outcome, (PropagationOutcome.PROGRESSED, PropagationOutcome.COMPLETE))
        # the solution is unique, so every fixed cell must match it
        values = grid.to_array()
        self.assertTrue((values[values != 0] == WIKI_SOLUTION[values != 0]).all())
        # and open cells keep the solution value as candidate
        for r, c in grid.open_cells():
            self.assertIn(WIKI_SOLUTION[r, c], grid.get_domain(r, c))
            self.assertGreater(grid.domain_size(r, c), 1)

    def test_peers_eliminated(self):
        grid = Grid.initialize(INKALA)
        propagate(grid, self.cons)
        for r, c in grid.fixed_cells():
            for pr, pc in self.cons.peers_of(r, c):
                self.assertNotIn(grid.value(r, c), grid.get_domain(pr, pc))

    def test_idempotent(self):
        for puzzle in (WIKI, INKALA, EMPTY):
            grid = Grid.initialize(puzzle)
            first = propagate(grid, self.cons)
            values, candidates = grid.snapshot()

            second = propagate(grid, self.cons)
            self.assertEqual(first, second)
            self.assertTrue((grid.values == values).all())
            self.assertTrue((grid.candidates == candidates).all())

    def test_naked_single(self):
        puzzle = EMPTY.copy()
        puzzle[0, :8] = [1, 2, 3, 4, 5, 6, 7, 8]
        grid = Grid.initialize(puzzle)
        self.assertEqual(propagate(grid, self.cons), PropagationOutcome.PROGRESSED)
        self.assertEqual(grid.value(0, 8), 9)
        self.assertFalse(grid.is_given(0, 8))
        # and the new value is propagated further
        self.assertNotIn(9, grid.get_domain(5, 8))
        self.assertNotIn(9, grid.get_domain(1, 6))

    def test_contradiction(self):
        # no candidate left for (0, 8), without duplicate givens
        puzzle = EMPTY.copy()
        puzzle[0, :8] = [1, 2, 3, 4, 5, 6, 7, 8]
        puzzle[5, 8] = 9
        grid = Grid.initialize(puzzle)
        self.assertEqual(propagate(grid, self.cons), PropagationOutcome.CONTRADICTION)

    def test_duplicate_givens(self):
        puzzle = WIKI.copy()
        puzzle[0, 2] = 5
        grid = Grid.initialize(puzzle)
        self.assertEqual(propagate(grid, self.cons), PropagationOutcome.CONTRADICTION)

    def test_complete(self):
        grid = Grid.initialize(WIKI_SOLUTION)
        self.assertEqual(propagate(grid, self.cons), PropagationOutcome.COMPLETE)

        # one blank cell
        puzzle = WIKI_SOLUTION.copy()
        puzzle[4, 4] = 0
        grid = Grid.initialize(puzzle)
        self.assertEqual(propagate(grid, self.cons), PropagationOutcome.COMPLETE)
        self.assertEqual(grid.value(4, 4), 5)

    def test_queue(self):
        grid = Grid.initialize(EMPTY)
        grid.assign(3, 3, 4)
        grid.assign(8, 8, 1)
        # only the queued cell is propagated
        self.assertEqual(propagate(grid, self.cons, queue=[(3, 3)]), PropagationOutcome.PROGRESSED)
        self.assertNotIn(4, grid.get_domain(3, 0))
        self.assertNotIn(4, grid.get_domain(5, 5))
        self.assertIn(1, grid.get_domain(8, 0))

    def test_default_constraints(self):
        grid = Grid.initialize(WIKI)
        expected = Grid.initialize(WIKI)
        self.assertEqual(propagate(grid), propagate(expected, self.cons))
        self.assertTrue(np.array_equal(grid.candidates, expected.candidates))

    def test_open_cell_in_queue(self):
        grid = Grid.initialize(EMPTY)
        self.assertEqual(propagate(grid, self.cons, queue=[(0, 0)]), PropagationOutcome.PROGRESSED)
        # an open cell has no value to remove from its peers
        self.assertTrue(grid.candidates.all())
