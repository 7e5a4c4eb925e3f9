########################################################################################
##
##                                  TESTS FOR
##                            'integrators/factory.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest

from geomint.integrators import (
    create_integrator,
    IntegratorVPRK,
    IntegratorPARK,
    IntegratorSIRK,
    IntegratorSERK,
    IntegratorSplitting
    )
from geomint.tableaus import (
    vprk_glrk,
    park_glrk,
    stochastic_glrk,
    burrage_r2,
    strang,
    triple_jump,
    gauss_legendre
    )
from geomint.problems import (
    oscillator_iode,
    oscillator_pdae,
    oscillator_sode,
    kubo_oscillator_sde
    )
from geomint.config import IntegratorConfig
from geomint.errors import ConfigurationError


# TESTS ================================================================================

class TestCreateIntegrator(unittest.TestCase):
    """Test the selection of the integrator from the tableau type"""

    def test_dispatch(self):

        cases = [
            (oscillator_iode(), vprk_glrk(1), IntegratorVPRK),
            (oscillator_pdae(), park_glrk(1), IntegratorPARK),
            (kubo_oscillator_sde(), stochastic_glrk(1), IntegratorSIRK),
            (kubo_oscillator_sde(), burrage_r2(), IntegratorSERK),
            (oscillator_sode(), strang(), IntegratorSplitting),
            (oscillator_sode(), triple_jump(), IntegratorSplitting),
            ]

        for equation, tableau, cls in cases:
            with self.subTest(tableau=tableau.name):
                integrator = create_integrator(equation, tableau, 0.1)
                self.assertIsInstance(integrator, cls)
                self.assertEqual(integrator.dt, 0.1)


    def test_kwargs(self):

        config = IntegratorConfig(abort_on_nonconvergence=True)
        integrator = create_integrator(kubo_oscillator_sde(), stochastic_glrk(1), 0.01, K=2.0, config=config, log=False)

        self.assertEqual(integrator.K, 2.0)
        self.assertIs(integrator.config, config)
        self.assertFalse(integrator.log)


    def test_unknown_tableau(self):
        with self.assertRaises(ConfigurationError):
            create_integrator(oscillator_iode(), gauss_legendre(1), 0.1)


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
