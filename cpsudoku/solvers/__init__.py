"""
    cpsudoku interfaces to solvers

    Every solver takes a `Model` holding a validated puzzle and returns the solved grid
    as a numpy array, through the common `SolverInterface`.

    =========================
    List of helper submodules
    =========================
    .. autosummary::
        :nosignatures:

        solver_interface
        utils

    =========================
    List of solver submodules
    =========================
    .. autosummary::
        :nosignatures:

        native
        ortools
"""

from .utils import SolverLookup
from .native import CPS_native
from .ortools import CPS_ortools
