"""
Result objects returned by the solvers.  These replace plain root
values so that the caller can always tell whether the iteration
actually converged or simply ran out of iterations.
"""
from dataclasses import dataclass, field

# Status flags.  Zero means success, as for SciPy `RootResults`.
CONVERGED = 0
MAXITER_REACHED = 1
ZERO_DERIVATIVE = 2
NAN_VALUE = 3

FLAG_MESSAGES = {
    CONVERGED: "converged",
    MAXITER_REACHED: "maximum iterations reached",
    ZERO_DERIVATIVE: "derivative was zero",
    NAN_VALUE: "function returned NaN",
}


# ======================================================================

@dataclass
class RootResults:
    """
    Outcome of a single solver run.

    Unpacks as ``root, iterations = result`` for convenience.
    """
    root: float
    iterations: int
    function_calls: int
    flag: int = CONVERGED
    method: str | None = None

    @property
    def converged(self) -> bool:
        return self.flag == CONVERGED

    @property
    def status(self) -> str:
        return FLAG_MESSAGES.get(self.flag, f"unknown flag {self.flag}")

    def __iter__(self):
        return iter((self.root, self.iterations))


# ----------------------------------------------------------------------

@dataclass
class RobustResults:
    """
    Outcome of a two stage solve: a coarse bisection pass followed by a
    fine Newton pass started from the coarse estimate.

    Unpacks as ``root, coarse_its, fine_its = result``.
    """
    coarse: RootResults
    fine: RootResults
    method: str = field(default='robust', init=False)

    @property
    def root(self) -> float:
        return self.fine.root

    @property
    def coarse_iterations(self) -> int:
        return self.coarse.iterations

    @property
    def fine_iterations(self) -> int:
        return self.fine.iterations

    @property
    def function_calls(self) -> int:
        return self.coarse.function_calls + self.fine.function_calls

    @property
    def converged(self) -> bool:
        # Only the fine pass determines the final precision.
        return self.fine.converged

    def __iter__(self):
        return iter((self.root, self.coarse_iterations,
                     self.fine_iterations))
