from collections.abc import Callable

from rootsolve.solve.bisection import bisection
from rootsolve.solve.convergence import CheckMode, check_mode
from rootsolve.solve.newton import newton
from rootsolve.solve.results import RobustResults


# ======================================================================

def robust(func: Callable[..., float], fprime: Callable[..., float],
           a: float, b: float, *, args=(), tol: float = 1e-8,
           cf_ratio: float = 1e4, maxiter: int = 100,
           mode: CheckMode | str = CheckMode.INCREMENT,
           disp: bool = False, verbose: bool = False) -> RobustResults:
    """
    Two stage root solution.  A coarse bisection pass on [`a`, `b`] with
    the relaxed tolerance ``cf_ratio * tol`` gives a starting point that
    is close enough to the root for the fine Newton pass (at `tol`) to
    converge quickly.  This avoids Newton diverging from a poor initial
    guess while still finishing with quadratic convergence.

    Examples
    --------
    >>> res = robust(lambda x: x**2 - 0.5, lambda x: 2*x, 0.0, 1.0)
    >>> res.coarse_iterations, res.fine_iterations
    (14, 2)

    Parameters
    ----------
    func, fprime : Callable[[float, ...], float]
        Function which we are searching for root, and its first
        derivative.
    a, b : float
        Interval bracketing the root, used for the coarse pass.
    args : tuple, optional
        Extra arguments passed to `func` and `fprime`.
    tol : float, default = 1e-8
        Tolerance for the fine (Newton) pass.
    cf_ratio : float, default = 1e4
        Ratio of coarse to fine tolerance, must be >= 1.
    maxiter : int, default = 100
        Iteration limit applied to each pass separately.
    mode, disp, verbose :
        Passed to both :func:`bisection` and :func:`newton`.

    Returns
    -------
    result : RobustResults
        Contains both the `coarse` and `fine` results.  An unconverged
        coarse pass still provides the starting point for the fine pass.

    Raises
    ------
    BracketError, ZeroDerivativeError, SolverError, ValueError
        As raised by the individual passes.  `ValueError` is also raised
        if ``cf_ratio < 1``.
    """
    if cf_ratio < 1:
        raise ValueError(f"cf_ratio must be >= 1, got {cf_ratio}.")

    mode = check_mode(mode)

    coarse = bisection(func, a, b, args=args, tol=cf_ratio * tol,
                       maxiter=maxiter, mode=mode, disp=disp,
                       verbose=verbose)
    fine = newton(func, fprime, coarse.root, args=args, tol=tol,
                  maxiter=maxiter, mode=mode, disp=disp, verbose=verbose)
    return RobustResults(coarse=coarse, fine=fine)
