"""
.. This module acts as the top-level API documentation.

.. module: rootsolve

Scalar root finding by bisection, Newton-Raphson and a robust two stage
combination of both.

.. autosummary::
    :toctree: generated/

    solve
    demo

"""

__version__ = "0.1.0"

import sys

from .solve import (CheckMode, RobustResults, RootResults, SolverError,
                    bisection, converged, newton, robust)

# ======================================================================

assert sys.version_info >= (3, 10)
