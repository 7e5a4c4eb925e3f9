########################################################################################
##
##                                  TESTS FOR
##                             'integrators/sirk.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest
import numpy as np

from geomint.integrators import IntegratorSIRK
from geomint.solutions import SolutionSDE, WienerProcess
from geomint.tableaus import stochastic_glrk
from geomint.problems import kubo_oscillator_sde, kubo_energy
from geomint.problems.kubo import dt, nt
from geomint.config import SolverConfig, IntegratorConfig
from geomint.utils import norm_inf, truncation_bound


# HELPERS ==============================================================================

def _energy_error(sol):
    E = kubo_energy(sol.q)
    return np.max(np.abs(E - E[0]) / E[0])


# TESTS ================================================================================

class TestIntegratorSIRK(unittest.TestCase):
    """Test the stochastic implicit Runge-Kutta integrator on the Kubo
    oscillator"""

    def setUp(self):
        self.eq = kubo_oscillator_sde()


    def test_init(self):

        integrator = IntegratorSIRK(self.eq, stochastic_glrk(1), dt)

        self.assertEqual(len(integrator), 2)
        self.assertEqual(integrator.params.A, 0.0)
        self.assertIn("StochasticGLRK1", repr(integrator))


    def test_energy(self):

        sol = IntegratorSIRK(self.eq, stochastic_glrk(1), dt, log=False).run(nt, seed=1)

        self.assertLess(_energy_error(sol), 1e-10)


    def test_sample_paths(self):

        integrator = IntegratorSIRK(self.eq, stochastic_glrk(2), dt, log=False)
        sol = integrator.run(20, ns=3, seed=5)

        self.assertEqual(sol.q.shape, (21, 3, 2))
        self.assertLess(_energy_error(sol), 1e-10)

        #paths are driven by different increments
        self.assertFalse(np.allclose(sol.q[-1, 0], sol.q[-1, 1]))


    def test_anderson(self):

        config = IntegratorConfig(solver=SolverConfig(solver="anderson"))
        integrator = IntegratorSIRK(self.eq, stochastic_glrk(1), dt, config=config, log=False)

        sol = integrator.run(nt, seed=2)

        self.assertLess(_energy_error(sol), 1e-8)


    def test_truncation(self):

        K = 1.0
        integrator = IntegratorSIRK(self.eq, stochastic_glrk(1), dt, K=K, log=False)

        W = WienerProcess.from_increments(dt, np.full((2, 1, 1), 10.0))
        sol = SolutionSDE(self.eq, dt, 2, W=W)

        integrator.initialize(sol)
        integrator.update_params(sol, 1)

        A = truncation_bound(K, dt)

        self.assertGreater(A, 0.0)
        np.testing.assert_allclose(integrator.params.dW, [A])

        #stored increments are not modified
        np.testing.assert_array_equal(sol.W.dW, 10.0)


    def test_zero_step(self):

        integrator = IntegratorSIRK(self.eq, stochastic_glrk(1), 0.0, log=False)
        sol = integrator.run(3, ns=2, seed=0)

        np.testing.assert_array_equal(sol.q[-1], sol.q[0])


    def test_residual_root(self):

        config = IntegratorConfig(solver=SolverConfig(atol=1e-10, rtol=0.0, stol=0.0))
        integrator = IntegratorSIRK(self.eq, stochastic_glrk(2), dt, config=config, log=False)

        sol = integrator.create_solution(1, seed=3)
        integrator.initialize(sol)
        integrator.update_params(sol, 1)

        x, status = integrator.driver.solve(integrator.initial_guess(), integrator.residual)

        self.assertTrue(status.converged)
        self.assertLessEqual(norm_inf(integrator.residual(x)), 1e-10)


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
