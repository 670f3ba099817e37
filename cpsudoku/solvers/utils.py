#!/usr/bin/env python
#-*- coding:utf-8 -*-
##
## utils.py
##
"""
    Utilities for handling solvers

    ===============
    List of classes
    ===============

    .. autosummary::
        :nosignatures:

        SolverLookup
"""

from .native import CPS_native
from .ortools import CPS_ortools


class SolverLookup():
    @classmethod
    def base_solvers(cls):
        """
            Return ordered list of (name, class) of base cpsudoku
            solvers

            First one is default
        """
        return [
                ("native", CPS_native),
                ("ortools", CPS_ortools),
               ]

    @classmethod
    def print_status(cls):
        """
            Print all cpsudoku solvers and their installation status on this system.
        """
        for (basename, CPS_slv) in cls.base_solvers():
            if CPS_slv.supported():
                print(f"{basename}: Supported, ready to use.")
            else:
                print(f"{basename}: Not supported (missing Python package).")

    @classmethod
    def supported(cls):
        """
            Return the list of names of all solvers supported on this system.

            Typical use case is to use these names in `SolverLookup.get(name)`.
        """
        return [basename for (basename, CPS_slv) in cls.base_solvers() if CPS_slv.supported()]

    @classmethod
    def solvernames(cls):
        """ Names of the solvers supported on this system, as accepted by `Model.solve()` """
        return cls.supported()

    @classmethod
    def get(cls, name=None, model=None, **init_kwargs):
        """
            get a specific solver (by name), with 'model' passed to its constructor

            This is the preferred way to initialise a solver from its name

            :param name: name of the solver to use
            :param model: Model to pass to the solver constructor
            :param init_kwargs: additional keyword arguments to pass to the solver constructor
        """
        solver_cls = cls.lookup(name=name)
        return solver_cls(model, **init_kwargs)

    @classmethod
    def lookup(cls, name=None):
        """
            lookup a solver _class_ by its name

            warning: returns a 'class', not an object!
            see get() for normal uses
        """
        if name is None:
            # first solver class
            return cls.base_solvers()[0][1]

        for (basename, CPS_slv) in cls.base_solvers():
            if basename == name:
                # found the right solver
                return CPS_slv
        raise ValueError(f"Unknown solver '{name}', choose from {cls.solvernames()}")
