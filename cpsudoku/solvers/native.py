#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## native.py
##
"""
    Interface to cpsudoku's own propagation and search engine

    The native solver needs no external decision procedure: it builds the grid and its
    all-different constraints, propagates them to fixpoint and then runs a backtracking
    search that propagates after every trial assignment.

    It is the default solver.

    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        CPS_native
"""
import logging
import time
import warnings

from .solver_interface import SolverInterface, SolverStatus, ExitStatus
from ..constraints import ConstraintSet
from ..exceptions import NotSupportedError
from ..grid import Grid
from ..propagator import propagate, PropagationOutcome
from ..search import SearchEngine

logger = logging.getLogger(__name__)


class CPS_native(SolverInterface):
    """
    Propagation and backtracking search, implemented in cpsudoku itself

    Creates the following attributes (see parent constructor for more):
    engine: the SearchEngine of the latest run, None if the puzzle was decided before searching
    """

    @staticmethod
    def supported():
        return True

    def __init__(self, sudoku_model=None, subsolver=None):
        """
        Constructor of the native solver object

        Arguments:
        - sudoku_model: Model(), a cpsudoku Model() (optional)
        - subsolver: None
        """
        assert(subsolver is None)
        self.engine = None
        super().__init__(name="native", sudoku_model=sudoku_model)

    def solve(self, time_limit=None, max_steps=None, **kwargs):
        """
            Call the native propagation and search engine

            Arguments:
            - time_limit:  maximum solve time in seconds (float, optional)
            - max_steps:   maximum number of trial assignments during search (int, optional)

            Reaching either limit before a solution is found gives ExitStatus.UNKNOWN.
        """
        if len(kwargs):
            raise NotSupportedError(f"Native solver does not support arguments {sorted(kwargs)}")
        self._check_puzzle()

        start = time.time()
        self.cps_status = SolverStatus(self.name)
        self._solution = next(self._solutions(start, time_limit, max_steps), None)
        self.cps_status.runtime = time.time() - start

        if self._solution is not None:
            self.cps_status.exitstatus = ExitStatus.FEASIBLE
        elif self.engine is not None and self.engine.limit_reached:
            self.cps_status.exitstatus = ExitStatus.UNKNOWN
        else:
            self.cps_status.exitstatus = ExitStatus.UNSATISFIABLE
        self._log_run()

        return self._solve_return(self.cps_status)

    def solveAll(self, display=None, time_limit=None, solution_limit=None, max_steps=None, **kwargs):
        """
            Enumerate solutions with the native search, in the same order as `solve()` would find them.

            Arguments:
                - display: a callback function, called with every solution (a numpy array)
                - time_limit: stop after this many seconds (default: None)
                - solution_limit: stop after this many solutions (default: None)
                - max_steps: stop after this many trial assignments (default: None)

            Returns: number of solutions found
        """
        if len(kwargs):
            raise NotSupportedError(f"Native solver does not support arguments {sorted(kwargs)}")
        self._check_puzzle()
        if solution_limit is None:
            warnings.warn("Enumerating all solutions without a solution_limit, this may take very long for puzzles with few givens")

        start = time.time()
        self.cps_status = SolverStatus(self.name)
        self._solution = None
        solution_count = 0
        for sol in self._solutions(start, time_limit, max_steps):
            self._solution = sol
            if display is not None:
                display(sol)

            solution_count += 1
            if solution_count == solution_limit:
                break
        self.cps_status.runtime = time.time() - start

        if solution_count > 0:
            self.cps_status.exitstatus = ExitStatus.FEASIBLE
        elif self.engine is not None and self.engine.limit_reached:
            self.cps_status.exitstatus = ExitStatus.UNKNOWN
        else:
            self.cps_status.exitstatus = ExitStatus.UNSATISFIABLE
        self._log_run()

        return solution_count

    def _solutions(self, start, time_limit, max_steps):
        """
            Generator over the solutions of the puzzle: load, sanity check, propagate, search.

            A fresh grid and constraint set are created for every call.
        """
        self.engine = None
        grid = Grid.initialize(self.puzzle, block_size=self.block_size)
        constraints = ConstraintSet.build(grid.size, grid.block_size)

        # duplicate givens: no need to propagate or search
        conflicts = constraints.conflicts(grid.values)
        if len(conflicts):
            logger.debug("Duplicate givens in %s, puzzle is unsatisfiable", conflicts)
            return

        if propagate(grid, constraints) == PropagationOutcome.CONTRADICTION:
            logger.debug("Initial propagation failed, puzzle is unsatisfiable")
            return

        if time_limit is not None:
            time_limit = max(0, time_limit - (time.time() - start))
        self.engine = SearchEngine(grid, constraints, time_limit=time_limit, max_steps=max_steps)
        yield from self.engine.solutions()

    def _log_run(self):
        if self.engine is None:
            logger.debug("%s: %s without search", self.name, self.cps_status)
        else:
            logger.debug("%s: %s, %d steps, %d backtracks, depth %d", self.name, self.cps_status,
                         self.engine.steps, self.engine.backtracks, self.engine.max_depth)
