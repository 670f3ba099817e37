import pytest
import cpsudoku as cs
import warnings
import logging
from typing import Optional

logger = logging.getLogger(__name__)

def _parse_solver_option(solver_option: Optional[str], filter_not_installed: bool = True) -> Optional[list]:
    """
    Parse the --solver option into a list of solvers.
    Returns 'None' if no solver was specified, otherwise returns a list of solver names.
    Supports the special "all" keyword to expand to all installed solvers.

    Arguments:
        solver_option (str): The solver option string from command line
        filter_not_installed (bool): If True, filter out non-installed solvers from the result

    Returns:
        list[str] | None:
            A list of solver names, or 'None' if no solver was specified
            Returns empty list [] if solvers were specified but all were filtered out
    """
    if solver_option is None:
        return None

    # Split by comma and strip whitespace
    original_solvers = [s.strip() for s in solver_option.split(",") if s.strip()]
    if not original_solvers: # no solver specified
        warnings.warn('--solver option set, but no solver specified. Using default solver (native).')
        return None

    # Expand "all" to all installed solvers
    if "all" in original_solvers:
        solvers = cs.SolverLookup.supported()
    else:
        solvers = original_solvers.copy()
        # Filter out non-installed solvers if requested
        if filter_not_installed:
            solvers = [s for s in solvers if s in cs.SolverLookup.supported()]

    return solvers

def pytest_addoption(parser):
    """
    Adds cli arguments to the pytest command
    """
    parser.addoption(
        "--solver", type=str, action="store", default=None, help="Only run the tests on these solvers. Can be a single solver, a comma-separated list (e.g., 'native,ortools') or 'all' to use all installed solvers."
    )

@pytest.fixture
def solver(request):
    """
    Limit tests to specific solvers.

    By providing the cli argument `--solver=<SOLVER_NAME>`, `--solver=<SOLVER1,SOLVER2,...>` or `--solver=all`,
    tests using this fixture run against the specified solvers instead of just the default (native) solver.
    """
    if hasattr(request, "param"):
        solver_value = request.param
    else:
        parsed_solvers = _parse_solver_option(request.config.getoption("--solver"))
        solver_value = parsed_solvers[0] if parsed_solvers else None

    # Set solver value on class if available (for tests using self.solver)
    if hasattr(request, "cls") and request.cls:
        request.cls.solver = solver_value

    return solver_value

def pytest_configure(config):
    # Configure logging for test filtering information
    logging.basicConfig(
        level=logging.INFO,
        format='%(levelname)s: %(message)s'
    )

    # Register custom marker for pytest test collecting
    config.addinivalue_line(
        "markers",
        "requires_solver(name): mark test as requiring a specific solver", # to filter tests when required solver is not installed
    )

    solver_option = config.getoption("--solver")
    if solver_option:
        parsed_solvers_unfiltered = _parse_solver_option(solver_option, filter_not_installed=False)
        if parsed_solvers_unfiltered:
            not_installed_solvers = list(set(parsed_solvers_unfiltered) - set(cs.SolverLookup.supported()))
            if not_installed_solvers:
                warnings.warn(
                    f"The following solvers are not installed and will not be tested: {', '.join(not_installed_solvers)}.",
                    UserWarning,
                    stacklevel=2
                )
            logger.info(f"Using solvers: {', '.join(parsed_solvers_unfiltered)}")

def pytest_generate_tests(metafunc):
    """
    Parametrize tests that use the 'solver' fixture with all solvers given on the command line.
    """
    if "solver" not in metafunc.fixturenames:
        return
    # explicitly parametrized tests keep their own solvers
    for marker in metafunc.definition.iter_markers("parametrize"):
        argnames = marker.args[0] if marker.args else None
        if argnames == "solver" or (isinstance(argnames, (tuple, list)) and "solver" in argnames):
            return

    parsed_solvers = _parse_solver_option(metafunc.config.getoption("--solver"))
    # Only parametrize when we have 2+ solvers explicitly specified
    if parsed_solvers is not None and len(parsed_solvers) > 1:
        metafunc.parametrize("solver", parsed_solvers)

def pytest_collection_modifyitems(config, items):
    """
    Skip solver-specific tests whose solver is not installed.
    """
    supported = cs.SolverLookup.supported()
    for item in items:
        marker = item.get_closest_marker("requires_solver")
        if marker and not all(name in supported for name in marker.args):
            item.add_marker(pytest.mark.skip(reason=f"Solver {marker.args} not installed"))
