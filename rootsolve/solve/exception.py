
# ======================================================================

class SolverError(RuntimeError):
    """
    Base class for root solver failures.  The status `flag` matches the
    result flags in :mod:`rootsolve.solve.results` and the state of the
    solver at the point of failure is attached as attributes:

        - Iteration failures (iteration limit, zero derivative, NaN
          function value): `x`, `fval` and `iterations`.
        - `BracketError`: `a`, `b`, `fa` and `fb`.

    All attached values are listed by ``str(error)``.
    """

    def __init__(self, *args, flag: int | None = None,
                 details: str | None = None, **kwargs):
        """
        Parameters
        ----------
        args :
            Passed to `RuntimeError`.
        flag : int, default = None
            Status flag of the failed solve, e.g. ``MAXITER_REACHED``.
            Never ``CONVERGED``.
        details : str, default = None
            Short description of the failure, as given by
            `RootResults.status` for the same flag.
        kwargs :
            Solver state attached as attributes, e.g. ``x=..., fval=...``.
        """
        super().__init__(*args)
        self.flag, self.details = flag, details
        for k, v in kwargs.items():
            setattr(self, k, v)

    def __str__(self):
        """Add additional details below the main failure notice."""
        error_str = super().__str__()
        for k, v in self.__dict__.items():
            if v is not None:
                error_str += f"\n{k} -> {v}"
        return error_str


# ----------------------------------------------------------------------

class BracketError(SolverError, ValueError):
    """
    The starting interval does not bracket a root, i.e. ``func(a)`` and
    ``func(b)`` do not have strictly opposite signs.  Attributes `a`,
    `b`, `fa` and `fb` give the interval and function values found.
    Also a `ValueError` because it arises from illegal starting
    conditions rather than a failure during iteration.
    """
    pass


class ZeroDerivativeError(SolverError):
    """
    The derivative evaluated to exactly zero at a Newton iterate so no
    step can be computed.  Attributes `x`, `fval` and `iterations` give
    the iterate, function value and number of completed steps.
    """
    pass
