########################################################################################
##
##                      COLLOCATION RUNGE-KUTTA COEFFICIENTS
##                           (tableaus/collocation.py)
##
##     Gauss-Legendre and Lobatto coefficients for an arbitrary number of stages,
##     computed from the Lagrange polynomials of the quadrature nodes.
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ._coefficients import CoefficientsRK

from ..basis.lagrange import lagrange_polynomials
from ..basis.quadrature import (
    gauss_legendre_nodes_weights,
    lobatto_legendre_nodes_weights
    )


# HELPERS ==============================================================================

def collocation_matrix(nodes):
    """Stage matrix of the collocation method with the given nodes

    .. math::

        a_{ij} = \\int_0^{c_i} l_j(\\tau) \\, d\\tau

    Parameters
    ----------
    nodes : array[float]
        collocation nodes 'c'

    Returns
    -------
    a : array[float]
        stage matrix
    """

    #antiderivatives vanishing at zero
    integrals = [l.integ(lbnd=0.0) for l in lagrange_polynomials(nodes)]

    return np.array([[L(c_i) for L in integrals] for c_i in nodes])


# COEFFICIENTS =========================================================================

def gauss_legendre(s):
    """s-stage Gauss-Legendre Runge-Kutta coefficients (GLRK), order 2s.

    Characteristics
    ---------------
    * Order: 2s
    * Stages: s (fully implicit)
    * A-stable, symmetric, symplectic
    """
    c, b = gauss_legendre_nodes_weights(s)
    return CoefficientsRK(f"GLRK{s}", 2*s, collocation_matrix(c), b, c)


def implicit_midpoint():
    """Implicit midpoint rule, the 1-stage Gauss-Legendre method"""
    glrk = gauss_legendre(1)
    return CoefficientsRK("ImplicitMidpoint", 2, glrk.a, glrk.b, glrk.c)


def lobatto_iiia(s):
    """s-stage Lobatto IIIA coefficients, order 2s-2.

    Collocation method on the Gauss-Lobatto nodes.
    """
    c, b = lobatto_legendre_nodes_weights(s)
    return CoefficientsRK(f"LobIIIA{s}", 2*s-2, collocation_matrix(c), b, c)


def lobatto_iiib(s):
    """s-stage Lobatto IIIB coefficients, order 2s-2.

    Obtained as the symplectic conjugate of Lobatto IIIA.
    """
    iiia = lobatto_iiia(s)
    conjugate = iiia.symplectic_conjugate()
    return CoefficientsRK(f"LobIIIB{s}", 2*s-2, conjugate.a, conjugate.b, conjugate.c)


def symplectic_conjugate(coefficients):
    """Symplectic conjugate of a Runge-Kutta tableau, see
    'CoefficientsRK.symplectic_conjugate'"""
    return coefficients.symplectic_conjugate()
