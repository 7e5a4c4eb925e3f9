########################################################################################
##
##                                  TESTS FOR
##                             'integrators/park.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest
import numpy as np

from geomint.integrators import IntegratorPARK, function_stages_park
from geomint.integrators.park import CachePARK
from geomint.solutions import SolutionPDAE
from geomint.tableaus import park_glrk
from geomint.problems import oscillator_pdae, oscillator_reference
from geomint.problems.oscillator import dt, nt
from geomint.config import SolverConfig, IntegratorConfig
from geomint.utils import norm_inf, rel_err


# TESTS ================================================================================

class TestIntegratorPARK(unittest.TestCase):
    """Test the projected additive Runge-Kutta integrator on the
    oscillator with the one-form as constraint"""

    def setUp(self):
        self.eq = oscillator_pdae()


    def test_init(self):

        integrator = IntegratorPARK(self.eq, park_glrk(1), dt)

        #two internal and three projective unknowns per stage and coordinate
        self.assertEqual(len(integrator), 2*2*1 + 3*2*2)
        self.assertIsInstance(integrator.create_solution(2), SolutionPDAE)


    def test_glrk1(self):

        sol = IntegratorPARK(self.eq, park_glrk(1), dt, log=False).run(nt)

        self.assertLess(rel_err(sol.q[-1], oscillator_reference(sol.t[-1])), 1e-3)


    def test_glrk2(self):

        sol = IntegratorPARK(self.eq, park_glrk(2), dt, log=False).run(nt)

        self.assertLess(rel_err(sol.q[-1], oscillator_reference(sol.t[-1])), 1e-6)


    def test_constraint(self):

        sol = IntegratorPARK(self.eq, park_glrk(2), dt, log=False).run(nt)

        #the constraint holds along the solution, the multiplier stays zero
        np.testing.assert_allclose(sol.p[:, 0], sol.q[:, 1], atol=1e-10)
        np.testing.assert_allclose(sol.p[:, 1], 0.0, atol=1e-10)
        np.testing.assert_allclose(sol.lam, 0.0, atol=1e-10)


    def test_zero_step(self):

        sol = IntegratorPARK(self.eq, park_glrk(1), 0.0, log=False).run(2)

        for n in range(3):
            np.testing.assert_array_equal(sol.q[n], self.eq.q0)
            np.testing.assert_array_equal(sol.p[n], self.eq.p0)


    def test_residual_root(self):

        config = IntegratorConfig(solver=SolverConfig(atol=1e-10, rtol=0.0, stol=0.0))
        integrator = IntegratorPARK(self.eq, park_glrk(1), dt, config, log=False)

        sol = integrator.create_solution(1)
        integrator.initialize(sol)
        integrator.update_params(sol, 1)

        x, status = integrator.driver.solve(integrator.initial_guess(), integrator.residual)

        self.assertTrue(status.converged)
        self.assertLessEqual(norm_inf(integrator.residual(x)), 1e-10)


    def test_pinned_multiplier(self):

        integrator = IntegratorPARK(self.eq, park_glrk(1), dt, log=False)
        integrator.params.lam[:] = [1.0, 2.0]

        layout = integrator.layout
        cache = CachePARK(2, 1, 2)

        b = function_stages_park(np.zeros(len(layout)), integrator.params, cache, layout)

        #first projective stage sits at the first multiplier node zero
        Y, Z = np.zeros((1, 2)), np.zeros((1, 2))
        Y_tilde, Z_tilde, Lambda = np.zeros((2, 2)), np.zeros((2, 2)), np.zeros((2, 2))
        layout.unpack(b, Y, Z, Y_tilde, Z_tilde, Lambda)

        np.testing.assert_array_equal(Lambda[0], [1.0, 2.0])


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
