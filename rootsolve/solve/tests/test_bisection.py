import math
import warnings
from unittest import TestCase

import numpy as np
from scipy.optimize import brentq

from .scalar_tst_functions import f, f_exact


# ======================================================================

class TestBisection(TestCase):
    def test_bisection(self):
        from rootsolve.solve.bisection import bisection

        # Check normal operation.
        res = bisection(f, 0.0, 1.0, tol=1e-8)
        self.assertTrue(res.converged)
        self.assertEqual(res.iterations, 27)  # 2**-27 < 1e-8 < 2**-26.
        self.assertAlmostEqual(res.root, f_exact(res.root), places=7)
        self.assertAlmostEqual(res.root, brentq(f, 0.0, 1.0), places=7)
        self.assertEqual(res.function_calls, 2 + 27)

        # Check result unpacks as (root, iterations).
        root, its = res
        self.assertEqual((root, its), (res.root, res.iterations))

    def test_interval_halves(self):
        from rootsolve.solve.bisection import bisection

        # Bracket length after n iterations is (b - a) / 2**n, so the
        # iteration count follows directly from the tolerance.
        for n in (1, 5, 10, 20):
            with self.subTest(n=n):
                tol = 1.5 * 0.5 ** n
                res = bisection(f, 0.0, 1.0, tol=tol)
                self.assertEqual(res.iterations, n)
                self.assertLess(abs(res.root - f_exact(0.0)), tol)

    def test_residual_shrinks(self):
        from rootsolve.solve.bisection import bisection

        resid = []
        for n in (2, 6, 10, 14, 18):
            with warnings.catch_warnings():
                warnings.simplefilter('ignore', RuntimeWarning)
                res = bisection(f, 0.0, 1.0, tol=1e-30, maxiter=n)
            resid.append(abs(f(res.root)))
        self.assertTrue(np.all(np.diff(resid) < 0))

    def test_modes(self):
        from rootsolve.solve.bisection import bisection

        res = bisection(f, 0.0, 1.0, tol=1e-8, mode='residual')
        self.assertLess(abs(f(res.root)), 1e-8)

        res = bisection(f, 0.0, 1.0, tol=1e-8, mode='both')
        self.assertLess(abs(f(res.root)), 1e-8)
        self.assertGreaterEqual(res.iterations, 27)

    def test_reversed_interval(self):
        from rootsolve.solve.bisection import bisection

        res = bisection(f, 1.0, 0.0, tol=1e-8)
        self.assertTrue(res.converged)
        self.assertAlmostEqual(res.root, f_exact(res.root), places=7)

    def test_args(self):
        from rootsolve.solve.bisection import bisection

        res = bisection(lambda x, c: x ** 2 - c, 0.0, 3.0, args=(4.0,))
        self.assertAlmostEqual(res.root, 2.0, places=7)

    def test_exact_midpoint(self):
        from rootsolve.solve.bisection import bisection

        root, its = bisection(lambda x: (2 * x - 1) * (x - 3), 0.0, 1.0)
        self.assertEqual((root, its), (0.5, 1))

    def test_bad_bracket(self):
        from rootsolve.solve.bisection import bisection
        from rootsolve.solve.exception import BracketError, SolverError

        with self.assertRaises(BracketError) as cm:
            bisection(f, 1.0, 2.0)
        self.assertIsInstance(cm.exception, ValueError)
        self.assertIsInstance(cm.exception, SolverError)
        self.assertEqual((cm.exception.a, cm.exception.b), (1.0, 2.0))
        self.assertIn("fa -> 0.5", str(cm.exception))
        self.assertIn("fb -> 3.5", str(cm.exception))

        # Endpoint already a root is not a strict bracket.
        with self.assertRaises(BracketError):
            bisection(lambda x: x, 0.0, 1.0)

        # NaN at either or both ends never brackets a root.
        with self.assertRaises(BracketError):
            bisection(lambda x: math.nan, 0.0, 1.0)
        with self.assertRaises(BracketError):
            bisection(lambda x: math.nan if x == 0.0 else f(x), 0.0, 1.0)
        with self.assertRaises(BracketError):
            bisection(lambda x: math.nan if x == 1.0 else f(x), 0.0, 1.0)

    def test_nan_midpoint(self):
        from rootsolve.solve.bisection import bisection
        from rootsolve.solve.exception import SolverError
        from rootsolve.solve.results import NAN_VALUE

        # Valid bracket, but f is undefined just right of the midpoint
        # (0.5) so the second midpoint (0.75) gives NaN.
        def h(x):
            return math.nan if 0.6 < x < 0.9 else f(x)

        with self.assertRaises(SolverError) as cm:
            bisection(h, 0.0, 1.0)
        err = cm.exception
        self.assertEqual(err.flag, NAN_VALUE)
        self.assertEqual((err.x, err.iterations), (0.75, 2))
        self.assertIn("fval -> nan", str(err))

    def test_bad_args(self):
        from rootsolve.solve.bisection import bisection

        with self.assertRaises(ValueError):
            bisection(f, 0.0, 1.0, tol=0.0)
        with self.assertRaises(ValueError):
            bisection(f, 0.0, 1.0, maxiter=0)
        with self.assertRaises(ValueError):
            bisection(f, 0.0, 1.0, mode='sideways')

    def test_not_converged(self):
        from rootsolve.solve.bisection import bisection
        from rootsolve.solve.exception import SolverError
        from rootsolve.solve.results import MAXITER_REACHED

        # Check failure to converge is flagged.
        with self.assertWarns(RuntimeWarning):
            res = bisection(f, 0.0, 1.0, tol=1e-8, maxiter=10)
        self.assertFalse(res.converged)
        self.assertEqual(res.flag, MAXITER_REACHED)
        self.assertEqual(res.iterations, 10)
        self.assertLess(abs(res.root - f_exact(0.0)), 2 ** -10)

        with self.assertRaises(SolverError) as cm:
            bisection(f, 0.0, 1.0, tol=1e-8, maxiter=10, disp=True)
        self.assertEqual(cm.exception.flag, MAXITER_REACHED)
        self.assertEqual(cm.exception.iterations, 10)
