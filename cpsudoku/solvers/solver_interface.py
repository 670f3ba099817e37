"""
    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        SolverInterface
        SolverStatus
        ExitStatus

    ==================
    Module description
    ==================
    Contains the abstract class `SolverInterface` for defining solver interfaces,
    as well as a class `SolverStatus` that collects solver statistics,
    and the `ExitStatus` class that represents possible exit statuses.

    Each solver has its own class that inherits from `SolverInterface`.

"""
import time
from enum import Enum

from ..exceptions import NotSupportedError


class SolverInterface(object):
    """
        Abstract class for defining solver interfaces. All classes implementing
        the ``SolverInterface``
    """

    # REQUIRED functions:

    @staticmethod
    def supported():
        """
            Check for support in current system setup. Return True if the system
            has package installed or supports solver, else returns False.

        Returns:
            [bool]: Solver support by current system setup.
        """
        return False

    def __init__(self, name="dummy", sudoku_model=None, subsolver=None):
        """
            Initalize solver interface

            - name: str: name of this solver
            - sudoku_model: cpsudoku Model() object, optional: the puzzle to solve
            - subsolver: string: not used/allowed here

            Creates the following attributes:
            - name: str, name of the solver
            - cps_status: SolverStatus(), the status after a `solve()`
            - puzzle: numpy array of the (validated) puzzle, or None
            - block_size: int, block size of the puzzle
        """
        assert(subsolver is None)

        self.name = name
        self.cps_status = SolverStatus(self.name) # status of solving this puzzle
        self._solution = None

        self.puzzle = None
        self.block_size = 3
        if sudoku_model is not None:
            self.puzzle = sudoku_model.puzzle
            self.block_size = sudoku_model.block_size

    def status(self):
        return self.cps_status

    def solve(self, time_limit=None, **kwargs):
        """
            Solve the puzzle and return whether a solution was found

            Overwrites self.cps_status

        :param time_limit: optional, time limit in seconds
        :type time_limit: int or float

        :return: Bool:
            - True      if a solution is found
            - False     if no solution is found (unsatisfiable, or the time limit was reached)
        """
        return False

    def solution(self):
        """
            The solved grid of the latest solver run

        :return: numpy array of shape (n, n) with values in [1, n], or None if there is no solution
        """
        if self._solution is None:
            return None
        return self._solution.copy()

    # OPTIONAL functions

    def solveAll(self, display=None, time_limit=None, solution_limit=None, **kwargs):
        """
            Compute all solutions and optionally display the solutions.

            Arguments:
                - display: a callback function, called with every solution (a numpy array)
                        default/None: nothing displayed
                - time_limit: stop after this many seconds (default: None)
                - solution_limit: stop after this many solutions (default: None)
                - any other keyword argument

            Returns: number of solutions found
        """
        raise NotSupportedError(f"Solver of type {self} does not support finding all solutions")

    # shared helper functions

    def _check_puzzle(self):
        if self.puzzle is None:
            raise ValueError(f"No puzzle given to solver {self.name}, create it with a Model")

    def _solve_return(self, cps_status):
        """
            Take a SolverStatus object and return the proper answer (True/False)

        :param cps_status: status extracted from the solver
        :type cps_status: SolverStatus

        :return: Bool
            - True      if a solution is found
            - False     if no solution is found
        """
        return cps_status.exitstatus == ExitStatus.FEASIBLE

    def __repr__(self):
        return "{}({})".format(type(self).__name__, self.name)


#==============================================================================
class ExitStatus(Enum):
    """
    Exit status of the solver

    Attributes:

        `NOT_RUN`: Has not been run

        `FEASIBLE`: A solution of the puzzle was found

        `UNSATISFIABLE`: No solution exists

        `ERROR`: Some error occured (solver should have thrown Exception)

        `UNKNOWN`: Outcome unknown, for example when timeout is reached
    """
    NOT_RUN = 1
    FEASIBLE = 2
    UNSATISFIABLE = 3
    ERROR = 4
    UNKNOWN = 5

#==============================================================================
class SolverStatus(object):
    """
        Status and statistics of a solver run
    """
    exitstatus: ExitStatus
    runtime: time

    def __init__(self, name):
        self.solver_name = name
        self.exitstatus = ExitStatus.NOT_RUN
        self.runtime = None

    def __repr__(self):
        return "{} ({} seconds)".format(self.exitstatus, self.runtime)
