########################################################################################
##
##                     Convergence order of the geometric integrators
##
##   Estimates the order of each method from the errors at a fixed final time
##   for two timesteps and compares it with the order of the tableau.
##
########################################################################################

# IMPORTS ==============================================================================

import unittest
import numpy as np

from geomint.integrators import (
    IntegratorVPRK,
    IntegratorPARK,
    IntegratorSIRK,
    IntegratorSplitting
    )
from geomint.solutions import SolutionSDE, WienerProcess
from geomint.tableaus import (
    vprk_glrk,
    park_glrk,
    stochastic_glrk,
    strang,
    triple_jump
    )
from geomint.problems import (
    oscillator_iode,
    oscillator_pdae,
    oscillator_sode,
    oscillator_reference,
    kubo_oscillator_sde
    )
from geomint.problems import kubo
from geomint.utils import rel_err


# HELPERS ==============================================================================

def _order(err_coarse, err_fine, ratio=2.0):
    return np.log(err_coarse / err_fine) / np.log(ratio)


def _final_error(integrator_class, equation, tableau, dt, T=1.0):
    nt = int(round(T / dt))
    sol = integrator_class(equation, tableau, dt, log=False).run(nt)
    return rel_err(sol.q[-1], oscillator_reference(sol.t[-1]))


def _kubo_exact(q0, t, W):
    #drift and diffusion rotate about the same axis
    angle = kubo.lam * t + kubo.nu * W
    c, s = np.cos(angle), np.sin(angle)
    return np.array([c*q0[0] - s*q0[1], s*q0[0] + c*q0[1]])


# TESTCASE =============================================================================

class TestDeterministicOrder(unittest.TestCase):
    """
    Order of the deterministic integrators on the harmonic oscillator.

    System: q1' = q2, q2' = -k q1, q(0) = (0.5, 0)
    """

    def _check(self, integrator_class, equation_factory, tableau, order_min):

        err_coarse = _final_error(integrator_class, equation_factory(), tableau, 0.1)
        err_fine = _final_error(integrator_class, equation_factory(), tableau, 0.05)

        self.assertGreater(_order(err_coarse, err_fine), order_min)


    def test_eval_vprk(self):

        for s, order_min in [(1, 1.8), (2, 3.5)]:
            with self.subTest(s=s):
                self._check(IntegratorVPRK, oscillator_iode, vprk_glrk(s), order_min)


    def test_eval_park(self):
        self._check(IntegratorPARK, oscillator_pdae, park_glrk(1), 1.8)


    def test_eval_splitting(self):

        for tableau, order_min in [(strang(), 1.7), (triple_jump(), 3.5)]:
            with self.subTest(tableau=tableau.name):
                self._check(IntegratorSplitting, oscillator_sode, tableau, order_min)


class TestStochasticOrder(unittest.TestCase):
    """
    Strong order of the stochastic midpoint rule on the Kubo oscillator.

    System: dq = lam J q dt + nu J q o dW, exact solution is the rotation
    of q0 by the angle lam t + nu W(t)
    """

    def test_eval_sirk(self):

        dt, nt, ns = 0.01, 100, 4

        fine = WienerProcess(dt, nt, ns=ns, seed=11)
        coarse = WienerProcess.from_increments(2 * dt, fine.dW.reshape(nt // 2, 2, ns, 1).sum(axis=1))

        eq = kubo_oscillator_sde()

        errors = []
        for _dt, W in [(2 * dt, coarse), (dt, fine)]:

            sol = SolutionSDE(eq, _dt, len(W), W=W)
            IntegratorSIRK(eq, stochastic_glrk(1), _dt, log=False).integrate(sol)

            W_T = W.dW.sum(axis=0)[:, 0]
            err = [
                np.linalg.norm(sol.q[-1, k] - _kubo_exact(eq.q0, sol.t[-1], W_T[k]))
                for k in range(ns)
                ]
            errors.append(np.mean(err))

        self.assertGreater(_order(*errors), 0.8)


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
