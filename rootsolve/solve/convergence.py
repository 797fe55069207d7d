"""
Stopping criteria shared by the iterative solvers.
"""
from enum import Enum


# ======================================================================

class CheckMode(Enum):
    """
    Selects which quantity is compared against the tolerance when
    deciding whether an iteration has converged.
    """
    INCREMENT = 'increment'  # Difference between successive iterates.
    RESIDUAL = 'residual'  # Function value at the current iterate.
    BOTH = 'both'  # Both of the above.


# ----------------------------------------------------------------------

def check_mode(mode: CheckMode | str) -> CheckMode:
    """
    Return `mode` as a `CheckMode`.  Strings are matched (case
    insensitive) against the member names, e.g. ``'residual'``.

    Raises
    ------
    ValueError
        If `mode` is not a `CheckMode` or the name of one.
    """
    if isinstance(mode, CheckMode):
        return mode

    if isinstance(mode, str):
        try:
            return CheckMode[mode.upper()]
        except KeyError:
            pass

    raise ValueError(f"Unknown convergence check mode: {mode!r}.  Expected "
                     f"one of {[m.name.lower() for m in CheckMode]}.")


def converged(increment: float, residual: float, tol: float,
              mode: CheckMode) -> bool:
    r"""
    Compare the increment and / or residual magnitudes against `tol`:

        - ``CheckMode.INCREMENT``: :math:`|\Delta x| < tol`.
        - ``CheckMode.RESIDUAL``: :math:`|f(x)| < tol`.
        - ``CheckMode.BOTH``: Both conditions must hold.

    Any other value of `mode` returns False.

    Examples
    --------
    >>> converged(1e-9, 0.1, 1e-8, CheckMode.INCREMENT)
    True
    >>> converged(1e-9, 0.1, 1e-8, CheckMode.BOTH)
    False
    """
    if mode is CheckMode.INCREMENT:
        return bool(abs(increment) < tol)
    elif mode is CheckMode.RESIDUAL:
        return bool(abs(residual) < tol)
    elif mode is CheckMode.BOTH:
        return bool(abs(increment) < tol and abs(residual) < tol)
    else:
        return False
