########################################################################################
##
##                                  TESTS FOR
##                            'tableaus/splitting.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest
import numpy as np

from geomint.tableaus import (
    TableauSplitting,
    TableauSplittingNS,
    TableauSplittingGS,
    splitting_coefficients,
    lie_trotter,
    strang,
    triple_jump
    )
from geomint.errors import ConfigurationError


# TESTS ================================================================================

class TestSplittingCoefficients(unittest.TestCase):
    """Test the composition of sub-flows"""

    def test_single_stage(self):

        f, c = splitting_coefficients(3, [0.3], [0.7])

        np.testing.assert_array_equal(f, [0, 1, 2, 2, 1, 0])
        np.testing.assert_allclose(c, [0.3, 0.3, 0.3, 0.7, 0.7, 0.7])


    def test_lie_trotter(self):

        f, c = lie_trotter().coefficients(2)

        np.testing.assert_array_equal(f, [0, 1, 1, 0])
        np.testing.assert_allclose(c, [1.0, 1.0, 0.0, 0.0])


    def test_strang(self):

        f, c = strang().coefficients(2)

        np.testing.assert_array_equal(f, [0, 1, 1, 0])
        np.testing.assert_allclose(c, [0.5, 0.5, 0.5, 0.5])


    def test_triple_jump(self):

        tab = triple_jump()
        f, c = tab.coefficients(2)

        self.assertEqual(tab.order, 4)
        self.assertEqual(len(f), 12)

        #each flow is advanced by the full step in total
        for flow in (0, 1):
            self.assertAlmostEqual(c[f == flow].sum(), 1.0, places=12)


    def test_general_symmetric(self):

        tab = TableauSplittingGS("GS", 2, [0.5], [0.0])
        f, c = tab.coefficients(2)

        np.testing.assert_array_equal(f, [0, 1, 1, 0, 0, 1, 1, 0])
        np.testing.assert_allclose(c, [0.5, 0.5, 0.0, 0.0, 0.0, 0.0, 0.5, 0.5])


    def test_invalid(self):

        with self.assertRaises(ConfigurationError):
            TableauSplittingNS("bad", 1, [0.5, 0.5], [0.5])

        with self.assertRaises(NotImplementedError):
            TableauSplitting("base", 1, [1.0]).coefficients(2)


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
