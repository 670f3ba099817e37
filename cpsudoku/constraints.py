#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## constraints.py
##
"""
    The all-different constraints of a sudoku and the peer relation they induce.

    ===============
    List of classes
    ===============
    .. autosummary::
        :nosignatures:

        AllDifferent
        ConstraintSet

    ==================
    Module description
    ==================

    A sudoku of size `n = block_size**2` has `3*n` constraints: one per row, one per column
    and one per block, each over exactly `n` cells. Every cell is part of exactly three
    constraints, one of each family.

    Constraints only hold cell coordinates, they are pure data and never change after
    `ConstraintSet.build()`. The values they are checked against are numpy arrays
    as produced by `Grid.to_array()`.
"""
import numpy as np


class AllDifferent(object):
    """
        The cells in `cells` must take pairwise different values
    """

    def __init__(self, family, index, cells):
        self.family = family  # "row", "column" or "block"
        self.index = index
        self.cells = tuple(cells)

    def duplicates(self, values):
        """
            Values that are fixed more than once in this constraint (0 is ignored)

            :param values: numpy array of cell values, 0 for open cells
        """
        seen, dups = set(), set()
        for r, c in self.cells:
            v = int(values[r, c])
            if v == 0:
                continue
            if v in seen:
                dups.add(v)
            seen.add(v)
        return dups

    def is_satisfied(self, values):
        """ all cells fixed and pairwise different """
        vals = [int(values[r, c]) for r, c in self.cells]
        return 0 not in vals and len(set(vals)) == len(vals)

    def __contains__(self, cell):
        return tuple(cell) in self.cells

    def __iter__(self):
        return iter(self.cells)

    def __len__(self):
        return len(self.cells)

    def __repr__(self):
        return "AllDifferent({} {})".format(self.family, self.index)


class ConstraintSet(object):
    """
        Immutable collection of the row, column and block constraints of a grid.

        Use `ConstraintSet.build()` to create one.
    """

    def __init__(self, grid_size, block_size, constraints):
        self.grid_size = grid_size
        self.block_size = block_size
        self._constraints = tuple(constraints)

        # the (three) constraints every cell is part of
        units = {}
        for cons in self._constraints:
            for cell in cons:
                units.setdefault(cell, []).append(cons)
        self._units = {cell: tuple(lst) for cell, lst in units.items()}

        # union of those constraints, minus the cell itself
        self._peers = {}
        for cell, cons_list in self._units.items():
            peers = set()
            for cons in cons_list:
                peers.update(cons.cells)
            peers.discard(cell)
            self._peers[cell] = frozenset(peers)

    @classmethod
    def build(cls, grid_size=9, block_size=3):
        """
            Create the row, column and block constraints (in that order)

            :raises ValueError: if grid_size is not block_size squared
        """
        if grid_size != block_size * block_size:
            raise ValueError(f"Grid size {grid_size} does not match block size {block_size}")

        n, b = grid_size, block_size
        constraints = []
        for r in range(n):
            constraints.append(AllDifferent("row", r, [(r, c) for c in range(n)]))
        for c in range(n):
            constraints.append(AllDifferent("column", c, [(r, c) for r in range(n)]))
        for i, (br, bc) in enumerate((br, bc) for br in range(0, n, b) for bc in range(0, n, b)):
            constraints.append(AllDifferent("block", i, [(br + dr, bc + dc) for dr in range(b) for dc in range(b)]))
        return cls(grid_size, block_size, constraints)

    def peers_of(self, row, col):
        """ all other cells that share a row, column or block with (row, col) """
        return self._peers[(row, col)]

    def constraints_of(self, row, col):
        """ the constraints (row, column, block) that contain (row, col) """
        return self._units[(row, col)]

    def _family(self, name):
        return [cons for cons in self._constraints if cons.family == name]

    @property
    def rows(self):
        return self._family("row")

    @property
    def columns(self):
        return self._family("column")

    @property
    def blocks(self):
        return self._family("block")

    def conflicts(self, values):
        """
            Constraints that have the same value fixed in more than one of their cells

            :param values: numpy array of cell values, 0 for open cells
        """
        values = np.asarray(values)
        return [cons for cons in self._constraints if len(cons.duplicates(values))]

    def is_solution(self, values):
        """ every constraint satisfied by a completely filled grid """
        values = np.asarray(values)
        return all(cons.is_satisfied(values) for cons in self._constraints)

    def __iter__(self):
        return iter(self._constraints)

    def __len__(self):
        return len(self._constraints)

    def __repr__(self):
        return "ConstraintSet(grid_size={}, {} constraints)".format(self.grid_size, len(self))
