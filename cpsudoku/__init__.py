"""
    cpsudoku is a numpy-based constraint solver for sudoku puzzles.

    It solves a puzzle with its own propagation and backtracking search engine,
    or hands the same model to OR-Tools' CP-SAT solver.

    The package consists of these modules:
    - `grid`: the cell variables and their domains of candidate values
    - `constraints`: the row, column and block all-different constraints and the peers of every cell
    - `propagator`: propagation of the constraints to fixpoint, without search
    - `search`: backtracking search with propagation after every trial assignment
    - `model`: a container for a puzzle, that can call any of the `solvers`
    - `solvers`: classes that solve a model, with the native engine or an external solver
"""

__version__ = "0.1.0"


from .exceptions import InvalidPuzzle
from .grid import Grid
from .constraints import AllDifferent, ConstraintSet
from .propagator import propagate, PropagationOutcome
from .search import SearchEngine
from .model import Model, SolveResult, solve
from .solvers.utils import SolverLookup
from .solvers.solver_interface import ExitStatus, SolverStatus
