"""
Puzzles and helpers shared by the tests
"""
import numpy as np

e = 0

# the puzzle of the sudoku article on wikipedia, with a unique solution
WIKI = np.array([
    [5, 3, e,  e, 7, e,  e, e, e],
    [6, e, e,  1, 9, 5,  e, e, e],
    [e, 9, 8,  e, e, e,  e, 6, e],

    [8, e, e,  e, 6, e,  e, e, 3],
    [4, e, e,  8, e, 3,  e, e, 1],
    [7, e, e,  e, 2, e,  e, e, 6],

    [e, 6, e,  e, e, e,  2, 8, e],
    [e, e, e,  4, 1, 9,  e, e, 5],
    [e, e, e,  e, 8, e,  e, 7, 9]])

WIKI_SOLUTION = np.array([
    [5, 3, 4,  6, 7, 8,  9, 1, 2],
    [6, 7, 2,  1, 9, 5,  3, 4, 8],
    [1, 9, 8,  3, 4, 2,  5, 6, 7],

    [8, 5, 9,  7, 6, 1,  4, 2, 3],
    [4, 2, 6,  8, 5, 3,  7, 9, 1],
    [7, 1, 3,  9, 2, 4,  8, 5, 6],

    [9, 6, 1,  5, 3, 7,  2, 8, 4],
    [2, 8, 7,  4, 1, 9,  6, 3, 5],
    [3, 4, 5,  2, 8, 6,  1, 7, 9]])

# Arto Inkala's puzzle, 21 givens, needs search on top of naked singles
INKALA = np.array([
    [8, e, e,  e, e, e,  e, e, e],
    [e, e, 3,  6, e, e,  e, e, e],
    [e, 7, e,  e, 9, e,  2, e, e],

    [e, 5, e,  e, e, 7,  e, e, e],
    [e, e, e,  e, 4, 5,  7, e, e],
    [e, e, e,  1, e, e,  e, 3, e],

    [e, e, 1,  e, e, e,  e, 6, 8],
    [e, e, 8,  5, e, e,  e, 1, e],
    [e, 9, e,  e, e, e,  4, e, e]])

EMPTY = np.zeros((9, 9), dtype=int)


def is_valid_solution(grid):
    """ every row, column and 3x3 block holds 1..9 exactly once """
    grid = np.asarray(grid)
    if grid.shape != (9, 9):
        return False
    digits = set(range(1, 10))
    for i in range(9):
        if set(grid[i, :].tolist()) != digits or set(grid[:, i].tolist()) != digits:
            return False
    for br in range(0, 9, 3):
        for bc in range(0, 9, 3):
            if set(grid[br:br+3, bc:bc+3].flatten().tolist()) != digits:
                return False
    return True


def keeps_givens(puzzle, grid):
    """ every given of the puzzle has the same value in grid """
    puzzle, grid = np.asarray(puzzle), np.asarray(grid)
    return bool((grid[puzzle != 0] == puzzle[puzzle != 0]).all())
