#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## propagator.py
##
"""
    Constraint propagation on a grid, without search.

    =================
    List of functions
    =================
    .. autosummary::
        :nosignatures:

        propagate

    ===============
    List of classes
    ===============
    .. autosummary::
        :nosignatures:

        PropagationOutcome

    ==================
    Module description
    ==================

    Propagation keeps a work-queue of cells whose value was just fixed. The value of every
    dequeued cell is eliminated from the domains of all its peers; a peer that is left with a
    single candidate is fixed to it (the *naked single* rule) and enqueued in turn.

    This continues until the queue is empty (a fixpoint) or until a domain runs empty.
    Propagation only ever shrinks domains and fixes singleton cells, it never guesses.
"""
from collections import deque
from enum import Enum

from .constraints import ConstraintSet
from .exceptions import Contradiction


class PropagationOutcome(Enum):
    """
    Outcome of `propagate()`

    Attributes:

        `PROGRESSED`: Fixpoint reached, some cells are still open

        `CONTRADICTION`: A domain became empty, the current (partial) assignment is infeasible

        `COMPLETE`: Fixpoint reached and every cell is fixed
    """
    PROGRESSED = 1
    CONTRADICTION = 2
    COMPLETE = 3


def propagate(grid, constraints=None, queue=None):
    """
        Propagate the all-different constraints on `grid` to fixpoint, in place.

        :param grid: the Grid to propagate on
        :param constraints: ConstraintSet of the grid, built from the grid's dimensions if None
        :param queue: cells that were just fixed; if None, start from all fixed cells of the grid

        :return: PropagationOutcome
    """
    if constraints is None:
        constraints = ConstraintSet.build(grid.size, grid.block_size)
    if queue is None:
        queue = grid.fixed_cells()
    queue = deque(queue)

    try:
        while queue:
            row, col = queue.popleft()
            value = grid.value(row, col)
            if value == 0:
                # open cell, nothing to remove from its peers
                continue
            for (prow, pcol) in constraints.peers_of(row, col):
                if grid.eliminate(prow, pcol, value) and grid.domain_size(prow, pcol) == 1:
                    # naked single
                    (single,) = grid.get_domain(prow, pcol)
                    grid.assign(prow, pcol, single)
                    queue.append((prow, pcol))
    except Contradiction:
        return PropagationOutcome.CONTRADICTION

    if grid.is_complete():
        return PropagationOutcome.COMPLETE
    return PropagationOutcome.PROGRESSED
