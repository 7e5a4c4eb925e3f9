########################################################################################
##
##                      BASIS AND QUADRATURE COEFFICIENT MATRICES
##                            (integrators/_galerkin.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ..errors import ConfigurationError


# CLASS ================================================================================

class GalerkinCoefficients:
    """Basis function values at the quadrature nodes and the boundaries
    of the unit interval, computed once per integrator.

    .. math::

        m_{ji} = \\varphi_i(c_j), \\quad a_{ji} = \\varphi_i'(c_j), \\quad
        r^-_i = \\varphi_i(1), \\quad r^+_i = \\varphi_i(0)

    Parameters
    ----------
    basis : LagrangeBasis
        'S' basis functions on [0, 1]
    quadrature : Quadrature
        'R' nodes and weights on [0, 1]

    Attributes
    ----------
    b, c : array[float]
        quadrature weights and nodes
    m, a : array[float]
        values and derivatives, shape (R, S)
    r_minus, r_plus : array[float]
        values at the end and the start of the interval
    mw, aw : array[float]
        weighted transposes 'b_j m_ji' and 'b_j a_ji', shape (S, R)
    """

    def __init__(self, basis, quadrature):

        self.s = len(basis)
        self.r = len(quadrature)

        if self.s == 0 or self.r == 0:
            raise ConfigurationError(
                f"galerkin coefficients need basis functions and quadrature nodes, got S={self.s}, R={self.r}"
                )

        self.b = np.asarray(quadrature.weights(), dtype=float)
        self.c = np.asarray(quadrature.nodes(), dtype=float)

        self.m = np.array([[basis.evaluate(i, c_j) for i in range(self.s)] for c_j in self.c])
        self.a = np.array([[basis.derivative(i, c_j) for i in range(self.s)] for c_j in self.c])

        self.r_minus = np.array([basis.evaluate(i, 1.0) for i in range(self.s)])
        self.r_plus = np.array([basis.evaluate(i, 0.0) for i in range(self.s)])

        self.mw = (self.b[:, None] * self.m).T
        self.aw = (self.b[:, None] * self.a).T


    def __repr__(self):
        return f"GalerkinCoefficients(S={self.s}, R={self.r})"
