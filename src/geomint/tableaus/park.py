########################################################################################
##
##                    PROJECTED ADDITIVE RUNGE-KUTTA TABLEAUS
##                              (tableaus/park.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._coefficients import (
    CoefficientsARK,
    CoefficientsPRK,
    CoefficientsMRK
    )
from .collocation import gauss_legendre

from ..errors import ConfigurationError


# TABLEAU ==============================================================================

class TableauPARK:
    """Tableau of a projected additive Runge-Kutta method for partitioned
    index-two differential-algebraic equations.

    Internal stages follow 'q' and 'p', projective stages follow 'q_tilde'
    and 'p_tilde', the Lagrange multiplier is reconstructed with 'lambda_'.
    When the first multiplier node is zero, the first projective multiplier
    stage is pinned to the current multiplier value.

    Parameters
    ----------
    name : str
        name of the method
    order : int
        classical order
    q, p : CoefficientsARK
        internal stage coefficients (s internal, r projective stages)
    q_tilde, p_tilde : CoefficientsPRK
        projective stage coefficients
    lambda_ : CoefficientsMRK
        multiplier reconstruction coefficients

    Attributes
    ----------
    s : int
        number of internal stages
    r : int
        number of projective stages
    """

    def __init__(self, name, order, q, p, q_tilde, p_tilde, lambda_):

        self.name = name
        self.order = order

        self.q = q
        self.p = p
        self.q_tilde = q_tilde
        self.p_tilde = p_tilde
        self.lambda_ = lambda_

        self.s = q.s
        self.r = q.r

        if not (p.s == q_tilde.s == p_tilde.s == self.s):
            raise ConfigurationError(f"'{name}': inconsistent number of internal stages")

        if not (p.r == q_tilde.r == p_tilde.r == lambda_.r == self.r):
            raise ConfigurationError(f"'{name}': inconsistent number of projective stages")


    def __repr__(self):
        return f"TableauPARK(name={self.name!r}, order={self.order}, s={self.s}, r={self.r})"


# FACTORIES ============================================================================

def park_symmetric_projection(name, q, p, R_inf=1.0):
    """PARK tableau that wraps a partitioned Runge-Kutta method (q, p) into
    a symmetric projection with two projective stages at the beginning and
    the end of the timestep.

    Parameters
    ----------
    name : str
        name of the method
    q, p : CoefficientsRK
        coefficients of the underlying partitioned method
    R_inf : float
        value of the stability function of the underlying method at
        infinity, '(-1)^s' for Gauss-Legendre

    Returns
    -------
    tableau : TableauPARK
    """

    if q.s != p.s:
        raise ConfigurationError(f"'{name}': position and momentum tableaus differ in stages")

    order = min(q.order, p.order)

    alpha_q = np.zeros((q.s, 2))
    alpha_q[:, 0] = 0.5

    alpha_p = np.zeros((p.s, 2))
    alpha_p[:, 0] = 0.5

    a_q_tilde = np.vstack((np.zeros(q.s), q.b))
    a_p_tilde = np.vstack((np.zeros(p.s), p.b))

    alpha_tilde = np.array([[0.0, 0.0], [0.5, R_inf*0.5]])

    beta = [0.5, R_inf*0.5]

    c_lambda = [0.0, 1.0]
    d_lambda = [0.5, 0.5]

    return TableauPARK(
        name, order,
        CoefficientsARK(name, order, q.a, q.b, q.c, alpha_q, beta),
        CoefficientsARK(name, order, p.a, p.b, p.c, alpha_p, beta),
        CoefficientsPRK(name, order, a_q_tilde, c_lambda, alpha_tilde),
        CoefficientsPRK(name, order, a_p_tilde, c_lambda, alpha_tilde),
        CoefficientsMRK(name, d_lambda, c_lambda)
        )


def park_glrk(s):
    """Gauss-Legendre method with 's' stages and symmetric projection"""
    glrk = gauss_legendre(s)
    return park_symmetric_projection(f"PARK-GLRK{s}", glrk, glrk, R_inf=(-1)**s)
