#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## ortools.py
##
"""
    Interface to ortools' CP-SAT Python API

    Google OR-Tools is open source software for combinatorial optimization, which seeks
    to find the best solution to a problem out of a very large set of possible solutions.
    The OR-Tools CP-SAT solver is an award-winning constraint programming solver
    that uses SAT (satisfiability) methods and lazy-clause generation.

    The puzzle is posted as one integer variable per cell, one `AddAllDifferent` per
    row, column and block constraint, and an equality for every given.

    Documentation of the solver's own Python API:
    https://google.github.io/or-tools/python/ortools/sat/python/cp_model.html

    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        CPS_ortools
"""
import sys  # for stdout checking

import numpy as np

from .solver_interface import SolverInterface, SolverStatus, ExitStatus
from ..constraints import ConstraintSet
from ..exceptions import NotSupportedError


class CPS_ortools(SolverInterface):
    """
    Interface to the python 'ortools' CP-SAT API

    Requires that the 'ortools' python package is installed:
    $ pip install ortools

    See detailed installation instructions at:
    https://developers.google.com/optimization/install

    Creates the following attributes (see parent constructor for more):
    ort_model: the ortools.sat.python.cp_model.CpModel() with the puzzle posted
    ort_solver: the ortools cp_model.CpSolver() instance used in solve()
    ort_vars: numpy array (of objects) with the CP-SAT variable of every cell
    """

    @staticmethod
    def supported():
        # try to import the package
        try:
            import ortools
            return True
        except ImportError:
            return False

    def __init__(self, sudoku_model=None, subsolver=None):
        """
        Constructor of the ortools solver object

        Arguments:
        - sudoku_model: Model(), a cpsudoku Model() (optional)
        - subsolver: None
        """
        if not self.supported():
            raise NotSupportedError("Install the python 'ortools' package to use this solver interface")

        from ortools.sat.python import cp_model as ort

        assert(subsolver is None)

        # initialise the native solver objects
        self.ort_model = ort.CpModel()
        self.ort_solver = ort.CpSolver()
        self.ort_vars = None

        # initialise everything else and post the puzzle
        super().__init__(name="ortools", sudoku_model=sudoku_model)
        if self.puzzle is not None:
            self._post_puzzle()

    def _post_puzzle(self):
        n = self.puzzle.shape[0]
        self.ort_vars = np.empty((n, n), dtype=object)
        for r in range(n):
            for c in range(n):
                self.ort_vars[r, c] = self.ort_model.NewIntVar(1, n, f"cell_{r}_{c}")

        for cons in ConstraintSet.build(n, self.block_size):
            self.ort_model.AddAllDifferent([self.ort_vars[r, c] for r, c in cons])

        for r, c in np.argwhere(self.puzzle != 0):
            self.ort_model.Add(self.ort_vars[r, c] == int(self.puzzle[r, c]))

    def solve(self, time_limit=None, solution_callback=None, **kwargs):
        """
            Call the CP-SAT solver

            Arguments:
            - time_limit:  maximum solve time in seconds (float, optional)
            - solution_callback: an `ort.CpSolverSolutionCallback` object, see `OrtSolutionCollector`

            Additional keyword arguments:
            The ortools solver parameters are defined in its 'sat_parameters.proto' description:
            https://github.com/google/or-tools/blob/stable/ortools/sat/sat_parameters.proto

            You can use any of these parameters as keyword argument to `solve()` and they will
            be forwarded to the solver. Examples include:
                - num_search_workers=8          number of parallel workers (default: 8)
                - log_search_progress=True      to log the search process to stdout (default: False)
                - cp_model_presolve=False       to disable presolve (default: True, almost always beneficial)

            example:
            o.solve(num_search_workers=1, log_search_progress=True)
        """
        from ortools.sat.python import cp_model as ort
        self._check_puzzle()

        # set time limit?
        if time_limit is not None:
            self.ort_solver.parameters.max_time_in_seconds = float(time_limit)

        # set additional keyword arguments in sat_parameters.proto
        for (kw, val) in kwargs.items():
            setattr(self.ort_solver.parameters, kw, val)

        if 'log_search_progress' in kwargs and hasattr(self.ort_solver, "log_callback") \
                and (sys.stdout != sys.__stdout__):
            # ortools>9.0, for IPython use, force output redirecting
            # but only if a nonstandard stdout, otherwise duplicate output
            self.ort_solver.log_callback = print

        # call the solver, with parameters
        self.ort_status = self.ort_solver.Solve(self.ort_model, solution_callback)

        # new status, translate runtime
        self.cps_status = SolverStatus(self.name)
        self.cps_status.runtime = self.ort_solver.WallTime()

        # translate exit status, without objective OPTIMAL means a solution was found
        if self.ort_status in (ort.FEASIBLE, ort.OPTIMAL):
            self.cps_status.exitstatus = ExitStatus.FEASIBLE
        elif self.ort_status == ort.INFEASIBLE:
            self.cps_status.exitstatus = ExitStatus.UNSATISFIABLE
        elif self.ort_status == ort.MODEL_INVALID:
            raise Exception("OR-Tools says: model invalid:", self.ort_model.Validate())
        elif self.ort_status == ort.UNKNOWN:
            # can happen when timeout is reached...
            self.cps_status.exitstatus = ExitStatus.UNKNOWN
        else:  # another?
            raise NotImplementedError(self.ort_status)  # a new status type was introduced

        # True/False depending on self.cps_status
        has_sol = self._solve_return(self.cps_status)

        self._solution = None
        if has_sol:
            self._solution = np.array([[self.ort_solver.Value(v) for v in row] for row in self.ort_vars], dtype=int)

        return has_sol

    def solveAll(self, display=None, time_limit=None, solution_limit=None, **kwargs):
        """
            A shorthand to (efficiently) compute all solutions and optionally display them.

            It is just a wrapper around the use of `OrtSolutionCollector()` in fact.

            Arguments:
                - display: a callback function, called with every solution (a numpy array)
                        default/None: nothing displayed
                - solution_limit: stop after this many solutions (default: None)

            Returns: number of solutions found
        """
        self._check_puzzle()
        cb = OrtSolutionCollector(self, display=display, solution_limit=solution_limit)
        self.solve(enumerate_all_solutions=True, solution_callback=cb, time_limit=time_limit, **kwargs)
        if cb.solution_count() > 0:
            # the solver's own Value() is only defined for the last solution it reports
            self._solution = cb.last_solution
            self.cps_status.exitstatus = ExitStatus.FEASIBLE
        return cb.solution_count()


# solvers are optional, so this file should be interpretable
# even if ortools is not installed...
try:
    from ortools.sat.python import cp_model as ort


    class OrtSolutionCollector(ort.CpSolverSolutionCallback):
        """
            Native or-tools callback for solution counting and displaying.

            use with CPS_ortools as follows:
            `cb = OrtSolutionCollector(s, display=print)`
            `s.solve(enumerate_all_solutions=True, solution_callback=cb)`

            then retrieve the solution count with `cb.solution_count()`

            Arguments:
                - solver: the CPS_ortools object whose variables to read
                - display: a callback function, called with every solution (a numpy array)
                - solution_limit: stop after this many solutions (default: None)
        """
        def __init__(self, solver, display=None, solution_limit=None):
            super().__init__()
            self.__solution_count = 0
            self._solution_limit = solution_limit
            self._ort_vars = solver.ort_vars
            self._display = display
            self.last_solution = None

        def on_solution_callback(self):
            """Called on each new solution."""
            self.__solution_count += 1
            self.last_solution = np.array([[self.Value(v) for v in row] for row in self._ort_vars], dtype=int)
            if self._display is not None:
                self._display(self.last_solution)

            # check for count limit
            if self.__solution_count == self._solution_limit:
                self.StopSearch()

        def solution_count(self):
            """Returns the number of solutions found."""
            return self.__solution_count

except ImportError:
    pass  # Ok, no ortools installed...
