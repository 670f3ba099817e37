#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## model.py
##
"""
    The `Model` class is a container for a sudoku puzzle.

    It validates the puzzle when it is created, and only starts processing when solve()
    is called; solving never modifies the stored puzzle, so a model can be solved multiple
    times, with different solvers.

    See the examples for basic usage, which involves:

    - creation, e.g. m = Model(puzzle)
    - solving, e.g. m.solve()
    - retrieving the solved grid, e.g. m.solution()
    - optionally, checking status/runtime, e.g. m.status()

    For one-off use, `solve(puzzle)` does all of this and returns a `SolveResult`.

    ===============
    List of classes
    ===============
    .. autosummary::
        :nosignatures:

        Model
        SolveResult

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        solve
"""
from .grid import validate_puzzle
from .solvers.utils import SolverLookup
from .solvers.solver_interface import SolverInterface, SolverStatus, ExitStatus


class Model(object):
    """
    cpsudoku Model object, contains the puzzle to solve
    """

    def __init__(self, puzzle, block_size=3):
        """
            Arguments of constructor:

            - `puzzle`: (block_size**2 x block_size**2) integer grid, 0 for blank cells
            - `block_size`: size of the blocks, 3 for a classical sudoku

            :raises InvalidPuzzle: if the shape or the values of `puzzle` are wrong
        """
        self.block_size = block_size
        self.puzzle = validate_puzzle(puzzle, block_size=block_size)
        self.cps_status = SolverStatus("Model") # status of solving this model, will be replaced
        self._solution = None

    def _get_solver(self, solver):
        if isinstance(solver, type) and issubclass(solver, SolverInterface):
            # for advanced use, call its constructor with this model
            return solver(self)
        return SolverLookup.get(solver, self)

    # solver: name of supported solver or any SolverInterface class
    def solve(self, solver=None, time_limit=None, **kwargs):
        """ Send the puzzle to a solver and get the result

        :param solver: name of a solver to use. Run SolverLookup.solvernames() to find out the valid solver names on your system. (default: None = the native solver)
        :type string: None (default) or a name in SolverLookup.solvernames() or a SolverInterface class (Class, not object!)

        :param time_limit: optional, time limit in seconds
        :type time_limit: int or float

        :param kwargs: any other keyword argument is passed to the solver's solve()

        :return: Bool: the computed output:
            - True      if a solution is found
            - False     if no solution is found (see status() for whether it is unsatisfiable or timed out)
        """
        s = self._get_solver(solver)

        # call solver
        ret = s.solve(time_limit=time_limit, **kwargs)
        # store status and solution (s object has no further use)
        self.cps_status = s.status()
        self._solution = s.solution()
        return ret

    def solveAll(self, solver=None, display=None, time_limit=None, solution_limit=None, **kwargs):
        """
            Compute all solutions and optionally display the solutions.

            Delegated to the solver, who might implement this efficiently

            Arguments:
                - display: a callback function, called with every solution (a numpy array)
                        default/None: nothing displayed
                - solution_limit: stop after this many solutions (default: None)

            Returns: number of solutions found
        """
        s = self._get_solver(solver)

        # call solver
        ret = s.solveAll(display=display, time_limit=time_limit, solution_limit=solution_limit, **kwargs)
        # store status and (last) solution (s object has no further use)
        self.cps_status = s.status()
        self._solution = s.solution()
        return ret

    def status(self):
        """
            Returns the status of the latest solver run on this model

            Status information includes exit status and runtime.

        :return: an object of :class:`SolverStatus`
        """
        return self.cps_status

    def solution(self):
        """
            Returns the solved grid of the latest solver run on this model

        :return: numpy array, or None if not run or no solution was found
        """
        if self._solution is None:
            return None
        return self._solution.copy()

    def __repr__(self):
        return "Model(size={}, givens={})".format(self.puzzle.shape[0], int((self.puzzle != 0).sum()))


class SolveResult(object):
    """
        Terminal result of `solve()`: a solved grid, or an explicit 'no solution'

        - status: SolverStatus of the run
        - solution: numpy array of the solved grid, None unless `status.exitstatus` is FEASIBLE
    """

    def __init__(self, status, solution):
        self.status = status
        self.solution = solution

    @property
    def exitstatus(self):
        return self.status.exitstatus

    @property
    def solved(self):
        return self.exitstatus == ExitStatus.FEASIBLE

    @property
    def unsatisfiable(self):
        return self.exitstatus == ExitStatus.UNSATISFIABLE

    @property
    def timed_out(self):
        """ the time limit or step budget ran out before the puzzle was decided """
        return self.exitstatus == ExitStatus.UNKNOWN

    def __repr__(self):
        return "SolveResult({})".format(self.status)


def solve(puzzle, solver=None, time_limit=None, block_size=3, **kwargs):
    """
        Solve a sudoku puzzle

        :param puzzle: (block_size**2 x block_size**2) integer grid, 0 for blank cells
        :param solver: name of the solver to use, default the native solver
        :param time_limit: optional, time limit in seconds
        :param block_size: size of the blocks, 3 for a classical sudoku
        :param kwargs: any other keyword argument is passed to the solver's solve()

        :return: SolveResult
        :raises InvalidPuzzle: if the shape or the values of `puzzle` are wrong
    """
    model = Model(puzzle, block_size=block_size)
    model.solve(solver=solver, time_limit=time_limit, **kwargs)
    return SolveResult(model.status(), model.solution())
