#!/usr/bin/python3
"""
Counting the solutions of an under-constrained sudoku

Removing givens from a proper puzzle (one with a unique solution) quickly
gives a puzzle with many solutions. `solveAll()` enumerates them, here up to a limit.
"""
import numpy as np
import cpsudoku as cs

e = 0 # value for empty cells
given = np.array([
    [e, e, e,  2, e, 5,  e, e, e],
    [e, 9, e,  e, e, e,  7, 3, e],
    [e, e, 2,  e, e, 9,  e, 6, e],

    [2, e, e,  e, e, e,  4, e, 9],
    [e, e, e,  e, 7, e,  e, e, e],
    [6, e, 9,  e, e, e,  e, e, 1],

    [e, 8, e,  4, e, e,  1, e, e],
    [e, 6, 3,  e, e, e,  e, 8, e],
    [e, e, e,  6, e, 8,  e, e, e]])

model = cs.Model(given)
print("Solutions of the full puzzle:", model.solveAll(solution_limit=10))

# forget the givens of the first row
given[0, :] = e
model = cs.Model(given)
n = model.solveAll(solution_limit=10, display=lambda sol: print(sol[0]))
print(f"Solutions without the first row (at most 10): {n}")
