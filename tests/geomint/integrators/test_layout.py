########################################################################################
##
##                                  TESTS FOR
##                            'integrators/_layout.py'
##
########################################################################################

# IMPORTS ==============================================================================

import unittest
import numpy as np

from geomint.integrators import StageLayout, ParkLayout
from geomint.errors import DimensionMismatch


# TESTS ================================================================================

class TestStageLayout(unittest.TestCase):
    """Test the flat layout of stage vectors and extra blocks"""

    def setUp(self):
        self.layout = StageLayout(2, 3, extra=1)


    def test_size(self):

        self.assertEqual(self.layout.size, 8)
        self.assertEqual(len(self.layout), 8)
        self.assertEqual(len(StageLayout(4, 2)), 8)


    def test_pack(self):

        X = np.array([[1.0, 2.0], [3.0, 4.0], [5.0, 6.0]])
        e = np.array([7.0, 8.0])

        x = self.layout.pack(X, e)

        #component k of stage i at d*i + k, extra block behind the stages
        np.testing.assert_array_equal(x, [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0])


    def test_unpack(self):

        X, e = np.zeros((3, 2)), np.zeros(2)
        self.layout.unpack(np.arange(8.0), X, e)

        np.testing.assert_array_equal(X, [[0.0, 1.0], [2.0, 3.0], [4.0, 5.0]])
        np.testing.assert_array_equal(e, [6.0, 7.0])


    def test_complex(self):

        X = np.ones((3, 2), dtype=complex) * 1j
        x = self.layout.pack(X, np.zeros(2))

        self.assertEqual(x.dtype, complex)
        np.testing.assert_array_equal(x[:6], 1j)


    def test_mismatch(self):

        with self.assertRaises(DimensionMismatch):
            self.layout.unpack(np.zeros(7), np.zeros((3, 2)), np.zeros(2))

        with self.assertRaises(DimensionMismatch):
            self.layout.unpack(np.zeros(8), np.zeros((3, 2)))

        with self.assertRaises(DimensionMismatch):
            self.layout.pack(np.zeros((2, 3)), np.zeros(2))

        with self.assertRaises(DimensionMismatch):
            self.layout.check(np.zeros((8, 1)))


class TestParkLayout(unittest.TestCase):
    """Test the interleaved layout of the PARK unknowns"""

    def setUp(self):
        self.d, self.s, self.r = 2, 2, 3
        self.layout = ParkLayout(self.d, self.s, self.r)


    def test_size(self):

        self.assertEqual(self.layout.internal, 8)
        self.assertEqual(len(self.layout), 8 + 18)


    def test_indices(self):

        d, s, r = self.d, self.s, self.r

        Y, Z = np.zeros((s, d)), np.zeros((s, d))
        Y_tilde, Z_tilde, Lambda = np.zeros((r, d)), np.zeros((r, d)), np.zeros((r, d))

        x = np.arange(float(len(self.layout)))
        self.layout.unpack(x, Y, Z, Y_tilde, Z_tilde, Lambda)

        for i in range(s):
            for k in range(d):
                self.assertEqual(Y[i, k], 2 * (d*i + k))
                self.assertEqual(Z[i, k], 2 * (d*i + k) + 1)

        for i in range(r):
            for k in range(d):
                self.assertEqual(Y_tilde[i, k], 2*d*s + 3 * (d*i + k))
                self.assertEqual(Z_tilde[i, k], 2*d*s + 3 * (d*i + k) + 1)
                self.assertEqual(Lambda[i, k], 2*d*s + 3 * (d*i + k) + 2)

        #packing restores the flat vector
        np.testing.assert_array_equal(self.layout.pack(Y, Z, Y_tilde, Z_tilde, Lambda), x)


    def test_mismatch(self):

        d, s, r = self.d, self.s, self.r

        with self.assertRaises(DimensionMismatch):
            self.layout.pack(np.zeros((s, d)), np.zeros((s, d)), np.zeros((r, d)), np.zeros((r, d)), np.zeros((s, d)))

        with self.assertRaises(DimensionMismatch):
            self.layout.check(np.zeros(len(self.layout) + 1))


# RUN TESTS LOCALLY ====================================================================

if __name__ == '__main__':
    unittest.main(verbosity=2)
