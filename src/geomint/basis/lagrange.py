########################################################################################
##
##                               LAGRANGE POLYNOMIAL BASIS
##                                (basis/lagrange.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from numpy.polynomial import Polynomial, polynomial

from ..errors import ConfigurationError


# HELPERS ==============================================================================

def lagrange_polynomials(nodes):
    """Lagrange polynomials of the given nodes.

    Parameters
    ----------
    nodes : array[float]
        distinct interpolation nodes

    Returns
    -------
    polynomials : list[Polynomial]
        'l_i' with 'l_i(nodes[j]) = delta_ij'
    """

    _nodes = np.asarray(nodes, dtype=float)

    if len(np.unique(_nodes)) != len(_nodes):
        raise ConfigurationError(f"Lagrange nodes {_nodes} are not distinct")

    polynomials = []
    for i, x_i in enumerate(_nodes):
        others = np.delete(_nodes, i)
        #a single node gives the constant one
        coeffs = polynomial.polyfromroots(others)
        polynomials.append(Polynomial(coeffs) / np.prod(x_i - others))

    return polynomials


# BASIS ================================================================================

class LagrangeBasis:
    """Lagrange polynomial basis on the unit interval.

    The basis function 'i' is one at node 'i' and zero at all other nodes,
    so the coefficients of a function in this basis are its values at
    the nodes.

    Parameters
    ----------
    nodes : array[float]
        distinct nodes in [0, 1]

    Attributes
    ----------
    nodes : array[float]
        interpolation nodes
    degree : int
        polynomial degree of the basis functions
    """

    def __init__(self, nodes):

        self.nodes = np.asarray(nodes, dtype=float)
        self.degree = len(self.nodes) - 1

        #basis functions and their derivatives
        self._polynomials = lagrange_polynomials(self.nodes)
        self._derivatives = [p.deriv() for p in self._polynomials]


    def __len__(self):
        return len(self.nodes)


    def evaluate(self, i, x):
        """Value of basis function 'i' at 'x'"""
        return float(self._polynomials[i](x))


    def derivative(self, i, x):
        """Derivative of basis function 'i' at 'x'"""
        return float(self._derivatives[i](x))
