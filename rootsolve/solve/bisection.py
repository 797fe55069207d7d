import operator
import warnings
from collections.abc import Callable

import numpy as np

from rootsolve.solve.convergence import CheckMode, check_mode, converged
from rootsolve.solve.exception import BracketError, SolverError
from rootsolve.solve.results import (CONVERGED, MAXITER_REACHED,
                                     NAN_VALUE, RootResults)


# ======================================================================

def bisection(func: Callable[..., float], a: float, b: float, *,
              args=(), tol: float = 1e-8, maxiter: int = 100,
              mode: CheckMode | str = CheckMode.INCREMENT,
              disp: bool = False, verbose: bool = False) -> RootResults:
    r"""
    Approximate solution of :math:`f(x) = 0` on the interval between `a`
    and `b` by the bisection method.  For bisection to work
    :math:`f(x)` must change sign across the interval, i.e. ``func(a)``
    and ``func(b)`` must return values of strictly opposite sign.

    The interval length is tracked separately from the endpoints and is
    halved on every iteration, whichever half of the bracket is kept.
    The new midpoint is always measured from the retained left endpoint
    `a` (``c = a + length``).

    Examples
    --------
    >>> res = bisection(lambda x: x**2 - 0.5, 0.0, 1.0)
    >>> res.iterations, res.converged
    (27, True)
    >>> root, its = bisection(lambda x: (2*x - 1)*(x - 3), 0.0, 1.0)
    >>> root, its  # Only 1 it. (soln was in centre).
    (0.5, 1)

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function which we are searching for root.
    a, b : float
        Each end of the search interval.  ``b < a`` is allowed.
    args : tuple, optional
        Extra arguments passed to `func`.
    tol : float, default = 1e-8
        Tolerance used by the convergence check.  For
        ``CheckMode.INCREMENT`` this is compared against the current
        interval length.
    maxiter : int, default = 100
        Maximum number of bisections.
    mode : CheckMode or str, default = CheckMode.INCREMENT
        Quantity checked against `tol`, refer to
        :func:`rootsolve.solve.converged`.
    disp : bool, default = False
        If True, raise `SolverError` when `maxiter` is reached.
        Otherwise a `RuntimeWarning` is issued and the unconverged
        result returned.
    verbose : bool, default = False
        If True, print progress statements.

    Returns
    -------
    result : RootResults
        `root` is the last midpoint computed.  `flag` is
        ``MAXITER_REACHED`` if the iteration limit was hit first.

    Raises
    ------
    BracketError
        If ``func(a)`` and ``func(b)`` do not have opposite signs.
    ValueError
        Illegal `tol`, `maxiter` or `mode`.
    SolverError
        If `maxiter` is reached and ``disp=True``, or `func` returns NaN
        at a midpoint.
    """
    if tol <= 0:
        raise ValueError(f"tol too small ({tol} <= 0).")

    maxiter = operator.index(maxiter)
    if maxiter < 1:
        raise ValueError("maxiter must be greater than 0.")

    mode = check_mode(mode)

    fa, fb = func(a, *args), func(b, *args)
    fcalls = 2

    # Compare signs rather than the product f(a)*f(b), which can overflow
    # or underflow.  Written positively so that NaN fails the check.
    if not (np.sign(fa) * np.sign(fb) < 0):
        raise BracketError("f(a) and f(b) must have opposite sign.",
                           a=a, b=b, fa=fa, fb=fb)

    if verbose:
        print(f"Bisecting Root:")

    length = b - a
    c, fc = a, fa
    for it in range(1, maxiter + 1):
        length *= 0.5
        c = a + length
        fc = func(c, *args)
        fcalls += 1

        if np.isnan(fc):
            raise SolverError(f"Function returned NaN at x = {c}.",
                              flag=NAN_VALUE, details="function returned NaN",
                              x=c, fval=fc, iterations=it)

        if verbose:
            print(f"... Iteration {it}: x = [{a}, {c}, {a + 2 * length}], "
                  f"f = [{fa}, {fc}], length = {abs(length):.3E}")

        # An exact zero is accepted whatever the mode.
        if fc == 0 or converged(length, fc, tol, mode):
            if verbose:
                print(f"... Converged.")
            return RootResults(root=c, iterations=it, function_calls=fcalls,
                               flag=CONVERGED, method='bisection')

        # Narrow interval.  If f(a), f(c) differ in sign the root is in
        # [a, c] and only the length changes, otherwise move up to c.
        if not (np.sign(fa) * np.sign(fc) < 0):
            a, fa = c, fc

    msg = f"Bisection reached {maxiter} iteration limit."
    if disp:
        raise SolverError(msg, flag=MAXITER_REACHED,
                          details="maximum iterations reached", x=c,
                          fval=fc, iterations=maxiter)

    warnings.warn(msg, RuntimeWarning)
    return RootResults(root=c, iterations=maxiter, function_calls=fcalls,
                       flag=MAXITER_REACHED, method='bisection')
