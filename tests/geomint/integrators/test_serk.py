########################################################################################
##
##                                  TESTS FOR
##                             'integrators/serk.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest
import numpy as np

from geomint.integrators import IntegratorSERK
from geomint.solutions import SolutionSDE, WienerProcess
from geomint.tableaus import burrage_r2, stochastic_heun, euler_maruyama, TableauSERK, CoefficientsRK
from geomint.equations import SDE
from geomint.problems import kubo_oscillator_sde, kubo_energy
from geomint.problems.kubo import dt, nt


# HELPERS ==============================================================================

def _energy_error(sol):
    E = kubo_energy(sol.q)
    return np.max(np.abs(E - E[0]) / E[0])


def _linear_v(t, q, v):
    v[:] = -q


def _constant_B(t, q, B):
    B[:, 0] = 1.0


# TESTS ================================================================================

class TestIntegratorSERK(unittest.TestCase):
    """Test the explicit stochastic Runge-Kutta integrator"""

    def test_burrage_energy(self):

        eq = kubo_oscillator_sde()
        sol = IntegratorSERK(eq, burrage_r2(), dt, log=False).run(nt, seed=1)

        self.assertLess(_energy_error(sol), 1e-3)


    def test_explicit_status(self):

        eq = kubo_oscillator_sde()
        integrator = IntegratorSERK(eq, stochastic_heun(), dt, log=False)

        sol = integrator.create_solution(1, seed=0)
        integrator.initialize(sol)

        status = integrator.integrate_step(sol, 1)

        self.assertTrue(status.converged)
        self.assertEqual(status.iterations, 0)


    def test_euler_maruyama_step(self):

        #one step of dq = -q dt + dW by hand
        eq = SDE(_linear_v, _constant_B, [1.0])
        W = WienerProcess.from_increments(0.1, [[[0.3]]])
        sol = SolutionSDE(eq, 0.1, 1, W=W)

        IntegratorSERK(eq, euler_maruyama(), 0.1, log=False).integrate(sol)

        np.testing.assert_allclose(sol.q[1, 0], [1.0 - 0.1 + 0.3])


    def test_heun_step(self):

        eq = SDE(_linear_v, _constant_B, [1.0])
        W = WienerProcess.from_increments(0.1, [[[0.3]]])
        sol = SolutionSDE(eq, 0.1, 1, W=W)

        IntegratorSERK(eq, stochastic_heun(), 0.1, log=False).integrate(sol)

        #predictor 1.2, drift averaged over both stages
        q1 = 1.0 + 0.1 * 0.5 * (-1.0 - 1.2) + 0.3
        np.testing.assert_allclose(sol.q[1, 0], [q1])


    def test_second_diffusion_term(self):

        #integrated increment enters through the dZ coefficients
        em = CoefficientsRK("EM", 1, [[0.0]], [1.0], [0.0])
        dz = CoefficientsRK("dZ", 1, [[0.0]], [2.0], [0.0])
        tableau = TableauSERK("EMdZ", 0.5, em, em, dz)

        eq = SDE(_linear_v, _constant_B, [1.0])
        W = WienerProcess.from_increments(0.1, [[[0.3]]], [[[0.01]]])
        sol = SolutionSDE(eq, 0.1, 1, W=W)

        IntegratorSERK(eq, tableau, 0.1, log=False).integrate(sol)

        np.testing.assert_allclose(sol.q[1, 0], [1.0 - 0.1 + 0.3 + 2.0 * 0.01 / 0.1])


    def test_sample_paths(self):

        eq = kubo_oscillator_sde()
        sol = IntegratorSERK(eq, burrage_r2(), dt, log=False).run(10, ns=4, seed=7)

        self.assertEqual(sol.q.shape, (11, 4, 2))
        self.assertTrue(np.all(np.isfinite(sol.q)))


    def test_zero_step(self):

        eq = kubo_oscillator_sde()
        sol = IntegratorSERK(eq, burrage_r2(), 0.0, log=False).run(3, ns=2, seed=0)

        np.testing.assert_array_equal(sol.q[-1], sol.q[0])


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
