#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## search.py
##
"""
    Depth-first backtracking search with propagation after every trial assignment.

    ===============
    List of classes
    ===============
    .. autosummary::
        :nosignatures:

        SearchEngine
        TrailEntry

    ==================
    Module description
    ==================

    The search repeatedly selects the open cell with the fewest candidates (minimum remaining
    values, ties broken by lowest row then lowest column) and tries its candidates in ascending
    order. Every trial is recorded on the trail together with a snapshot of the grid, so that
    it can be undone exactly when it leads to a contradiction.

    The grid given to the engine is expected to be at a propagation fixpoint already,
    which is what the native solver ensures before starting the search.

    Optional budgets (`time_limit` in seconds and `max_steps` branch attempts) are checked
    between branch attempts. Running out of budget stops the search and sets `limit_reached`,
    which callers must distinguish from an exhausted (unsatisfiable) search.
"""
import logging
import time

import numpy as np

from .propagator import propagate, PropagationOutcome

logger = logging.getLogger(__name__)


class TrailEntry(object):
    """
        A tentative assignment of `value` to `cell`, with the grid state before it
    """

    def __init__(self, cell, value, snapshot):
        self.cell = cell
        self.value = value
        self.snapshot = snapshot

    def __repr__(self):
        return "TrailEntry({} = {})".format(self.cell, self.value)


class SearchEngine(object):
    """
        Backtracking search over a propagated grid.

        Creates the following attributes:
        - trail: list of TrailEntry, the current branch of the search
        - steps: number of branch attempts (trial assignments)
        - backtracks: number of trial assignments that led to a contradiction
        - max_depth: length of the longest trail
        - limit_reached: True if the search was stopped by `time_limit` or `max_steps`
    """

    def __init__(self, grid, constraints, time_limit=None, max_steps=None):
        """
            - grid: Grid, at a propagation fixpoint
            - constraints: ConstraintSet of the grid
            - time_limit: optional, wall-clock budget in seconds
            - max_steps: optional, maximum number of branch attempts
        """
        self.grid = grid
        self.constraints = constraints
        self.time_limit = time_limit
        self.max_steps = max_steps

        self.trail = []
        self.steps = 0
        self.backtracks = 0
        self.max_depth = 0
        self.limit_reached = False
        self._deadline = None

    def select(self):
        """
            The open cell with the smallest domain, lowest (row, col) on ties.

            :return: (row, col) or None if all cells are fixed
        """
        sizes = self.grid.candidates.sum(axis=2)
        sizes[self.grid.values != 0] = self.grid.size + 1
        if sizes.min() > self.grid.size:
            return None
        # argmin returns the first minimum in row-major order
        row, col = np.unravel_index(np.argmin(sizes), sizes.shape)
        return int(row), int(col)

    def push(self, cell, value):
        self.trail.append(TrailEntry(cell, value, self.grid.snapshot()))
        self.max_depth = max(self.max_depth, len(self.trail))

    def pop(self):
        entry = self.trail.pop()
        self.grid.restore(entry.snapshot)
        return entry

    def search(self):
        """
            Find the first solution

            :return: numpy array of the solved grid, or None if there is none
                     (or if the budget ran out, check `limit_reached`)
        """
        return next(self.solutions(), None)

    def solutions(self):
        """
            Generator over all solutions, in a deterministic order.

            The grid is left as it was when the generator is exhausted.
        """
        if self.time_limit is not None:
            self._deadline = time.time() + self.time_limit
        yield from self._search()

    def _out_of_budget(self):
        if self.max_steps is not None and self.steps >= self.max_steps:
            return True
        if self._deadline is not None and time.time() >= self._deadline:
            return True
        return False

    def _search(self):
        cell = self.select()
        if cell is None:
            yield self.grid.to_array()
            return

        row, col = cell
        for value in sorted(self.grid.get_domain(row, col)):
            if self.limit_reached or self._out_of_budget():
                if not self.limit_reached:
                    logger.debug("Search budget exhausted after %d steps", self.steps)
                self.limit_reached = True
                return

            self.steps += 1
            self.push(cell, value)
            self.grid.assign(row, col, value)
            outcome = propagate(self.grid, self.constraints, queue=[cell])

            if outcome == PropagationOutcome.COMPLETE:
                yield self.grid.to_array()
            elif outcome == PropagationOutcome.PROGRESSED:
                yield from self._search()
            else:
                self.backtracks += 1
            self.pop()
        # exhausted: the caller pops the trail entry that led here
