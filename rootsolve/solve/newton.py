import operator
import warnings
from collections.abc import Callable

from rootsolve.solve.convergence import CheckMode, check_mode, converged
from rootsolve.solve.exception import SolverError, ZeroDerivativeError
from rootsolve.solve.results import (CONVERGED, MAXITER_REACHED,
                                     ZERO_DERIVATIVE, RootResults)


# ======================================================================

def newton(func: Callable[..., float], fprime: Callable[..., float],
           x0: float, *, args=(), tol: float = 1e-8, maxiter: int = 100,
           mode: CheckMode | str = CheckMode.INCREMENT,
           disp: bool = False, verbose: bool = False) -> RootResults:
    r"""
    Find a zero of a scalar function using the Newton-Raphson method,
    starting from `x0`.  Each step linearises `func` at the current
    point :math:`x_p` using the derivative `fprime`:

    .. math:: x_{new} = x_p - f(x_p) / f'(x_p)

    Examples
    --------
    >>> res = newton(lambda x: x**2 - 0.5, lambda x: 2*x, 0.1)
    >>> print(f"{res.root:.8f}", res.iterations)
    0.70710678 8

    Parameters
    ----------
    func : Callable[[float, ...], float]
        Function which we are searching for root.
    fprime : Callable[[float, ...], float]
        First derivative of `func`.
    x0 : float
        Initial estimate of the root.
    args : tuple, optional
        Extra arguments passed to `func` and `fprime`.
    tol : float, default = 1e-8
        Tolerance used by the convergence check.  For
        ``CheckMode.INCREMENT`` this is compared against
        :math:`|x_{new} - x_p|`.
    maxiter : int, default = 100
        Maximum number of Newton steps.
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
        `root` is the last point computed.  `flag` is
        ``MAXITER_REACHED`` if the iteration limit was hit first.

    Raises
    ------
    ZeroDerivativeError
        If `fprime` returns exactly zero at an iterate.
    ValueError
        Illegal `tol`, `maxiter` or `mode`.
    SolverError
        If `maxiter` is reached and ``disp=True``.
    """
    if tol <= 0:
        raise ValueError(f"tol too small ({tol} <= 0).")

    maxiter = operator.index(maxiter)
    if maxiter < 1:
        raise ValueError("maxiter must be greater than 0.")

    mode = check_mode(mode)

    if verbose:
        print(f"Newton-Raphson Root:")

    p0 = 1.0 * x0
    fval = func(p0, *args)
    fcalls = 1
    p = p0

    for it in range(1, maxiter + 1):
        fder = fprime(p0, *args)
        fcalls += 1

        if fder == 0:
            # Reached a level state -> df/dx = 0.
            raise ZeroDerivativeError(
                "Division by 0 occurred in Newton algorithm.",
                flag=ZERO_DERIVATIVE, details="derivative was zero",
                x=p0, fval=fval, iterations=it - 1)

        p = p0 - fval / fder
        fval = func(p, *args)
        fcalls += 1

        if verbose:
            print(f"... Iteration {it}: x = {p}, f = {fval}, "
                  f"dx = {abs(p - p0):.3E}")

        if converged(p - p0, fval, tol, mode):
            if verbose:
                print(f"... Converged.")
            return RootResults(root=p, iterations=it, function_calls=fcalls,
                               flag=CONVERGED, method='newton')
        p0 = p

    msg = f"Newton reached {maxiter} iteration limit."
    if disp:
        raise SolverError(msg, flag=MAXITER_REACHED,
                          details="maximum iterations reached", x=p,
                          fval=fval, iterations=maxiter)

    warnings.warn(msg, RuntimeWarning)
    return RootResults(root=p, iterations=maxiter, function_calls=fcalls,
                       flag=MAXITER_REACHED, method='newton')
