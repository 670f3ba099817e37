#!/usr/bin/python3
"""
Sudoku problem in cpsudoku
"""

# load the libraries
import numpy as np
from cpsudoku import *

e = 0 # value for empty cells
given = np.array([
    [5, 3, e,  e, 7, e,  e, e, e],
    [6, e, e,  1, 9, 5,  e, e, e],
    [e, 9, 8,  e, e, e,  e, 6, e],

    [8, e, e,  e, 6, e,  e, e, 3],
    [4, e, e,  8, e, 3,  e, e, 1],
    [7, e, e,  e, 2, e,  e, e, 6],

    [e, 6, e,  e, e, e,  2, 8, e],
    [e, e, e,  4, 1, 9,  e, e, 5],
    [e, e, e,  e, 8, e,  e, 7, 9]])


model = Model(given)

# Solve and print
if model.solve():
    solution = model.solution()
    # pretty print, mark givens with *
    out = ""
    for r in range(0,9):
        for c in range(0,9):
            out += str(solution[r,c])
            out += '* ' if given[r,c] else '  '
            if (c+1) % 3 == 0 and c != 8: # end of block
                out += '| '
        out += '\n'
        if (r+1) % 3 == 0 and r != 8: # end of block
            out += ('-'*9)+'+-'+('-'*9)+'+'+('-'*9)+'\n'
    print(out)
    print(model.status())
else:
    print("No solution found")
