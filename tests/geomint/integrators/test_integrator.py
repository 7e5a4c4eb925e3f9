########################################################################################
##
##                                  TESTS FOR
##                          'integrators/_integrator.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest
import numpy as np

from geomint.integrators import Integrator, ImplicitIntegrator, IntegratorVPRK
from geomint.equations import IODE
from geomint.solutions import SolutionPODE
from geomint.tableaus import vprk_glrk
from geomint.problems import oscillator_iode
from geomint.problems.oscillator import (
    oscillator_iode_f,
    oscillator_iode_g,
    oscillator_v
    )
from geomint.optim import SolverStatus, compute_jacobian
from geomint.config import SolverConfig, IntegratorConfig
from geomint.errors import SolverNonConvergence, NumericalDivergence


# HELPERS ==============================================================================

def _theta_nan(t, q, v, p):
    p[:] = np.nan


def _failing_config(abort=False):
    #one iteration and no tolerance can be met
    return IntegratorConfig(
        solver=SolverConfig(atol=0.0, rtol=0.0, stol=0.0, iterations_max=1),
        abort_on_nonconvergence=abort
        )


# TESTS ================================================================================

class TestIntegratorBase(unittest.TestCase):
    """Test the shared integrator interface"""

    def test_abstract_hooks(self):

        eq = oscillator_iode()

        with self.assertRaises(NotImplementedError):
            Integrator(eq, 0.1).initialize(None)

        with self.assertRaises(NotImplementedError):
            Integrator(eq, 0.1).integrate_step(None, 1)

        with self.assertRaises(NotImplementedError):
            ImplicitIntegrator(eq, 0.1).assemble(np.zeros(2), None, None)

        with self.assertRaises(NotImplementedError):
            ImplicitIntegrator(eq, 0.1).create_cache(float)


    def test_defaults(self):

        integrator = Integrator(oscillator_iode(), 0.1)

        self.assertEqual(len(integrator), 0)
        self.assertIsInstance(integrator.config, IntegratorConfig)
        self.assertTrue(integrator.log)


    def test_wrap_periodic(self):

        integrator = Integrator(oscillator_iode(periodicity=[1.0, 0.0]), 0.1)

        q = np.array([2.25, 7.0])
        shift = integrator.wrap_periodic(q)

        np.testing.assert_allclose(q, [0.25, 7.0])
        np.testing.assert_allclose(shift, [-2.0, 0.0])


class TestImplicitIntegrator(unittest.TestCase):
    """Test the stage caches and the residual of implicit integrators"""

    def setUp(self):
        self.int = IntegratorVPRK(oscillator_iode(), vprk_glrk(2), 0.1, log=False)


    def test_len(self):
        self.assertEqual(len(self.int), 4)


    def test_create_solution(self):

        sol = self.int.create_solution(5)

        self.assertIsInstance(sol, SolutionPODE)
        self.assertEqual(sol.nt, 5)


    def test_cache_per_dtype(self):

        real = self.int.get_cache(float)

        self.assertIs(self.int.get_cache(np.float64), real)

        cplx = self.int.get_cache(complex)

        self.assertIsNot(cplx, real)
        self.assertEqual(cplx.V.dtype, np.complex128)
        self.assertEqual(real.V.dtype, np.float64)


    def test_complex_step_residual(self):

        sol = self.int.create_solution(1)
        self.int.initialize(sol)
        self.int.update_params(sol, 1)

        x = self.int.initial_guess()

        J_complex, _ = compute_jacobian(self.int.residual, x, strategy="complex")
        J_forward, _ = compute_jacobian(self.int.residual, x, strategy="forward")

        np.testing.assert_allclose(J_complex, J_forward, atol=1e-6)

        #real input is assembled in real arithmetic
        self.assertEqual(self.int.residual(x).dtype, np.float64)


class TestSolverStatusPolicy(unittest.TestCase):
    """Test the handling of failed nonlinear solves"""

    def setUp(self):
        self.eq = oscillator_iode()


    def test_diverged(self):

        integrator = IntegratorVPRK(self.eq, vprk_glrk(1), 0.1, log=False)
        status = SolverStatus(diverged=True)

        with self.assertLogs("geomint", level="ERROR"):
            with self.assertRaises(NumericalDivergence) as ctx:
                integrator.check_solver_status(status, 3)

        self.assertIs(ctx.exception.status, status)


    def test_not_converged_warns(self):

        integrator = IntegratorVPRK(self.eq, vprk_glrk(1), 0.1, log=False)

        with self.assertLogs("geomint", level="WARNING") as cm:
            integrator.check_solver_status(SolverStatus(iterations=5), 2)

        self.assertIn("timestep 2", cm.output[0])


    def test_not_converged_aborts(self):

        integrator = IntegratorVPRK(self.eq, vprk_glrk(1), 0.1, _failing_config(abort=True), log=False)
        status = SolverStatus(iterations=5)

        with self.assertRaises(SolverNonConvergence) as ctx:
            integrator.check_solver_status(status, 2)

        self.assertIs(ctx.exception.status, status)


    def test_converged(self):

        integrator = IntegratorVPRK(self.eq, vprk_glrk(1), 0.1)

        with self.assertLogs("geomint", level="DEBUG") as cm:
            integrator.check_solver_status(SolverStatus.explicit(), 1)

        self.assertEqual(len(cm.records), 1)
        self.assertEqual(cm.records[0].levelname, "DEBUG")


    def test_run_continues(self):

        integrator = IntegratorVPRK(self.eq, vprk_glrk(1), 0.1, _failing_config(), log=False)

        with self.assertLogs("geomint", level="WARNING") as cm:
            sol = integrator.run(3)

        self.assertTrue(any("did not converge" in line for line in cm.output))
        self.assertTrue(np.all(np.isfinite(sol.q)))


    def test_run_aborts(self):

        integrator = IntegratorVPRK(self.eq, vprk_glrk(1), 0.1, _failing_config(abort=True), log=False)

        with self.assertRaises(SolverNonConvergence):
            integrator.run(3)


    def test_run_diverges(self):

        eq = IODE(
            _theta_nan, oscillator_iode_f, oscillator_iode_g, oscillator_v,
            self.eq.q0, self.eq.p0
            )
        integrator = IntegratorVPRK(eq, vprk_glrk(1), 0.1, log=False)

        with self.assertLogs("geomint", level="ERROR"):
            with self.assertRaises(NumericalDivergence):
                integrator.run(3)


    def test_run_logs_progress(self):

        integrator = IntegratorVPRK(self.eq, vprk_glrk(1), 0.1)

        with self.assertLogs("geomint", level="INFO") as cm:
            integrator.run(2)

        messages = [r.getMessage() for r in cm.records if r.levelname == "INFO"]

        self.assertIn("integrating 2 steps of 1 path(s) with IntegratorVPRK", messages)


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
