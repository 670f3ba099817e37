"""
Tests all examples in the `examples` folder

Run from the cpsudoku root directory with `python3 -m pytest tests/` to make
sure that you are testing your local version.

Will only run solver tests on solvers that are installed
"""
from glob import glob
from os.path import join, dirname, abspath
import sys

import runpy
import pytest
from cpsudoku import SolverLookup
import itertools

EXAMPLES = sorted(glob(join(dirname(dirname(abspath(__file__))), "examples", "*.py")))

SOLVERS = [
    "native",
    "ortools",
]

@pytest.mark.parametrize(("solver", "example"), list(itertools.product(SOLVERS, EXAMPLES)))  # run the test for each combination of solver and example
@pytest.mark.timeout(60)  # 60-second timeout for each test
def test_example(solver, example):
    """Loads the example file and executes its __main__ block with the given solver being set as default.

    Args:
        solver ([string]): Loaded with parametrized solver name
        example ([string]): Loaded with parametrized example filename
    """
    base_solvers = SolverLookup.base_solvers
    try:
        solver_class = SolverLookup.lookup(solver)
        if not solver_class.supported():
            # check this here, as unsupported solvers can fail the example for various reasons
            return pytest.skip(reason=f"solver {solver} not supported")

        # Overwrite SolverLookup.base_solvers to set the target solver first, making it the default
        SolverLookup.base_solvers = lambda: sorted(base_solvers(), key=lambda s: s[0] == solver, reverse=True)
        sys.argv = [example]  # avoid pytest arguments being passed the executed module
        runpy.run_path(example, run_name="__main__")
    finally:
        SolverLookup.base_solvers = base_solvers
