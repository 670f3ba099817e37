#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## grid.py
##
"""
    The grid of cell variables, each with a domain of candidate values.

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        validate_puzzle

    ===============
    List of classes
    ===============
    .. autosummary::
        :nosignatures:

        Grid

    ==================
    Module description
    ==================

    A `Grid` of size `n` (with `n = block_size**2`, so 9 for a classical sudoku) stores its
    state in two numpy arrays:

    - `values`: shape (n, n), the fixed value of every cell, or 0 for an open cell
    - `candidates`: shape (n, n, n), `candidates[r, c, v-1]` is True iff `v` is still in the
      domain of cell (r, c)

    A fixed cell always has the singleton domain of its value. Cells fixed by the input puzzle
    are called *givens* and are marked in the `givens` mask.

    The grid only knows about domains, not about the constraints between cells;
    see `cpsudoku.constraints` for those and `cpsudoku.propagator` for how they are enforced.
"""
import numpy as np

from .exceptions import InvalidPuzzle, Contradiction


def validate_puzzle(puzzle, block_size=3):
    """
        Check that `puzzle` is a (block_size**2 x block_size**2) integer grid
        with values in [0, block_size**2], 0 meaning blank.

        :param puzzle: nested list/tuple or numpy array
        :param block_size: size of the blocks, 3 for a classical sudoku

        :return: a fresh numpy array of ints
        :raises InvalidPuzzle: if the shape or the values are wrong
    """
    size = block_size * block_size
    try:
        arr = np.array(puzzle)
    except (ValueError, TypeError) as e:
        # ragged nested lists on recent numpy versions
        raise InvalidPuzzle(f"Puzzle is not a rectangular grid: {e}") from e

    if arr.shape != (size, size):
        raise InvalidPuzzle(f"Puzzle should have shape {(size, size)}, got {arr.shape}")
    if arr.dtype == np.bool_ or not np.issubdtype(arr.dtype, np.integer):
        raise InvalidPuzzle(f"Puzzle should only contain integers, got values of type {arr.dtype}")
    if arr.min() < 0 or arr.max() > size:
        raise InvalidPuzzle(f"Puzzle values should be in [0, {size}], got values in [{arr.min()}, {arr.max()}]")

    return arr.astype(int)


class Grid(object):
    """
        Cell variables of a sudoku, with their domains.

        Create one from a puzzle with `Grid.initialize(puzzle)`.
    """

    def __init__(self, block_size=3):
        """
            An empty grid: every cell open with the full domain {1..size}
        """
        self.block_size = block_size
        self.size = block_size * block_size

        n = self.size
        self.values = np.zeros((n, n), dtype=int)
        self.candidates = np.ones((n, n, n), dtype=bool)
        self.givens = np.zeros((n, n), dtype=bool)

    @classmethod
    def initialize(cls, puzzle, block_size=3):
        """
            Build the grid of a puzzle, nonzero values become fixed givens.

            Duplicate givens are not checked here, they are detected by propagation
            (or upfront with `ConstraintSet.conflicts()`).

            :raises InvalidPuzzle: see `validate_puzzle()`
        """
        arr = validate_puzzle(puzzle, block_size=block_size)
        grid = cls(block_size=block_size)
        for r, c in np.argwhere(arr != 0):
            grid.assign(r, c, arr[r, c])
        grid.givens = arr != 0
        return grid

    # domains

    def get_domain(self, row, col):
        """ set of candidate values of a cell """
        return {int(v) + 1 for v in np.flatnonzero(self.candidates[row, col])}

    def domain_size(self, row, col):
        return int(self.candidates[row, col].sum())

    def value(self, row, col):
        """ the fixed value of a cell, or 0 if it is open """
        return int(self.values[row, col])

    def is_fixed(self, row, col):
        return self.values[row, col] != 0

    def is_given(self, row, col):
        return bool(self.givens[row, col])

    def assign(self, row, col, value):
        """
            Fix a cell to `value`, its domain becomes the singleton {value}

            :raises Contradiction: if `value` is not in the domain of the cell
        """
        value = int(value)
        if not 1 <= value <= self.size or not self.candidates[row, col, value-1]:
            raise Contradiction(f"Can not assign {value} to cell {(row, col)}, domain is {self.get_domain(row, col)}")
        self.values[row, col] = value
        self.candidates[row, col] = False
        self.candidates[row, col, value-1] = True

    def eliminate(self, row, col, value):
        """
            Remove `value` from the domain of an open cell

            :return: True if the domain changed, False if `value` was not in it
            :raises Contradiction: if the domain becomes empty,
                                   or if the cell is already fixed to `value`
        """
        if not self.candidates[row, col, value-1]:
            return False
        if self.values[row, col] != 0:
            raise Contradiction(f"Cell {(row, col)} is fixed to {value}, which is also fixed in one of its peers")

        self.candidates[row, col, value-1] = False
        if not self.candidates[row, col].any():
            raise Contradiction(f"Empty domain for cell {(row, col)}")
        return True

    # whole-grid helpers

    def open_cells(self):
        """ coordinates of all open cells, in row-major order """
        return [(int(r), int(c)) for r, c in np.argwhere(self.values == 0)]

    def fixed_cells(self):
        """ coordinates of all fixed cells, in row-major order """
        return [(int(r), int(c)) for r, c in np.argwhere(self.values != 0)]

    def is_complete(self):
        return bool((self.values != 0).all())

    def snapshot(self):
        """ copy of the mutable state, to be given to `restore()` """
        return self.values.copy(), self.candidates.copy()

    def restore(self, snapshot):
        values, candidates = snapshot
        self.values[...] = values
        self.candidates[...] = candidates

    def to_array(self):
        """ the fixed values as a fresh numpy array, 0 for open cells """
        return self.values.copy()

    def __repr__(self):
        return "Grid(size={}, open={})".format(self.size, int((self.values == 0).sum()))
