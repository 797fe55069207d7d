#!/usr/bin/env python3

# Compare the bisection, Newton and robust solvers against SciPy on a
# few scalar problems, printing progress for one of them.

from math import cos, exp, sin

from scipy.optimize import root_scalar

from rootsolve.solve import bisection, newton, robust


def kepler(E, M=0.8, e=0.6):
    """Kepler's equation for eccentric anomaly `E`."""
    return E - e * sin(E) - M


def kepler_dE(E, M=0.8, e=0.6):
    return 1 - e * cos(E)


def decay(t):
    """Time at which a damped signal falls to 10% of its start."""
    return exp(-0.3 * t) - 0.1


def decay_dt(t):
    return -0.3 * exp(-0.3 * t)


problems = [('kepler', kepler, kepler_dE, 0.0, 3.0),
            ('decay', decay, decay_dt, 0.0, 20.0)]

for name, f, df, a, b in problems:
    ref = root_scalar(f, bracket=(a, b), method='brentq', xtol=1e-14).root
    res_bis = bisection(f, a, b, tol=1e-10)
    res_newt = newton(f, df, 0.5 * (a + b), tol=1e-10)
    res_rob = robust(f, df, a, b, tol=1e-10, cf_ratio=1e6)

    print(f"{name}: SciPy brentq x = {ref:.12f}")
    print(f"... bisection x = {res_bis.root:.12f} "
          f"({res_bis.iterations} its)")
    print(f"... newton    x = {res_newt.root:.12f} "
          f"({res_newt.iterations} its, {res_newt.status})")
    print(f"... robust    x = {res_rob.root:.12f} "
          f"({res_rob.coarse_iterations} + {res_rob.fine_iterations} its)")

print()
robust(kepler, kepler_dE, 0.0, 3.0, tol=1e-10, verbose=True)
