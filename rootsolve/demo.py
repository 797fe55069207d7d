"""
Demonstration of the bisection, Newton and robust solvers on
:math:`f(x) = x^2 - 0.5`.  Run using ``python -m rootsolve.demo``.

Output is one line per solver giving the root found, a tab, then the
iterations used (coarse and fine for the robust solver).
"""
import argparse
import sys

from rootsolve.solve import (CheckMode, ZeroDerivativeError, bisection,
                             newton, robust)

TOL = 1e-8
MAXITER = 100
CF_RATIO = 1e4


# ======================================================================

def f(x):
    return x ** 2 - 0.5


def df(x):
    return 2.0 * x


# ----------------------------------------------------------------------

def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog='python -m rootsolve.demo',
        description="Solve x**2 - 0.5 = 0 by bisection, Newton and the "
                    "robust two stage method.")
    parser.add_argument('-v', '--verbose', action='store_true',
                        help="print solver progress")
    opts = parser.parse_args(argv)
    check = CheckMode.INCREMENT

    try:
        res_bis = bisection(f, 0.0, 1.0, tol=TOL, maxiter=MAXITER,
                            mode=check, verbose=opts.verbose)
        print(f"{res_bis.root:g}\t{res_bis.iterations}")

        res_newt = newton(f, df, 0.1, tol=TOL, maxiter=MAXITER,
                          mode=check, verbose=opts.verbose)
        print(f"{res_newt.root:g}\t{res_newt.iterations}")

        res_rob = robust(f, df, 0.0, 1.0, tol=TOL, cf_ratio=CF_RATIO,
                         maxiter=MAXITER, mode=check, verbose=opts.verbose)
        print(f"{res_rob.root:g}\t{res_rob.coarse_iterations} "
              f"{res_rob.fine_iterations}")

    except ZeroDerivativeError:
        print("ERROR: Division by 0 occurred in Newton algorithm",
              file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
