"""
================================
Solvers (:mod:`rootsolve.solve`)
================================

.. currentmodule:: rootsolve.solve

Functions for finding the root of a scalar function :math:`f(x) = 0`.

Functions
---------

.. autosummary::
    :toctree:

    bisection
    newton
    robust
    converged
    check_mode

Results
-------

.. autosummary::
    :toctree:

    CheckMode
    RootResults
    RobustResults

Exceptions
----------

.. autosummary::
    :toctree:

    SolverError
    BracketError
    ZeroDerivativeError

"""

from .exception import BracketError, SolverError, ZeroDerivativeError
from .convergence import CheckMode, check_mode, converged
from .results import (CONVERGED, MAXITER_REACHED, ZERO_DERIVATIVE,
                      NAN_VALUE, RobustResults, RootResults)
from .bisection import bisection
from .newton import newton
from .robust import robust
