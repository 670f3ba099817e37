'''
Custom exception classes, for finer grained error handling
'''


class CPSudokuException(Exception):
    '''Parent class for all our exceptions'''
    pass


class InvalidPuzzle(CPSudokuException, ValueError):
    '''Raised when the puzzle is not a square integer grid with values in [0, size]'''
    pass


class Contradiction(CPSudokuException):
    '''Raised when a domain runs empty or two peers are fixed to the same value.

    Internal to propagation and search, it never reaches the caller of `solve()`'''
    pass


class NotSupportedError(CPSudokuException):
    '''Raised when a solver is not available or does not support a certain feature'''
    pass
