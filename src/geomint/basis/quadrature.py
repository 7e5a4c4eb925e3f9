########################################################################################
##
##                                QUADRATURE RULES
##                             (basis/quadrature.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from numpy.polynomial import legendre

from ..errors import ConfigurationError


# HELPERS ==============================================================================

def gauss_legendre_nodes_weights(n):
    """Nodes and weights of the n-point Gauss-Legendre rule on [0, 1].

    Parameters
    ----------
    n : int
        number of nodes

    Returns
    -------
    nodes : array[float]
    weights : array[float]
    """

    if n < 1:
        raise ConfigurationError(f"Gauss-Legendre rule with '{n}' nodes not possible!")

    x, w = legendre.leggauss(n)

    return (x + 1.0) / 2.0, w / 2.0


def lobatto_legendre_nodes_weights(n):
    """Nodes and weights of the n-point Gauss-Lobatto rule on [0, 1].

    The interior nodes are the roots of :math:`P'_{n-1}`, the weights are
    :math:`w_i = 2 / (n (n-1) P_{n-1}(x_i)^2)` on [-1, 1].

    Parameters
    ----------
    n : int
        number of nodes, at least 2

    Returns
    -------
    nodes : array[float]
    weights : array[float]
    """

    if n < 2:
        raise ConfigurationError(f"Gauss-Lobatto rule with '{n}' nodes not possible!")

    P = legendre.Legendre.basis(n - 1)

    #interior nodes and endpoints
    x = np.concatenate(([-1.0], np.sort(np.real(P.deriv().roots())), [1.0]))
    w = 2.0 / (n * (n - 1) * P(x)**2)

    return (x + 1.0) / 2.0, w / 2.0


# QUADRATURES ==========================================================================

class Quadrature:
    """Base class of quadrature rules on the unit interval.

    Note
    ----
    Not to be used directly!

    Attributes
    ----------
    order : int
        order of the rule
    """

    def __init__(self, nodes, weights, order):
        self._nodes = np.asarray(nodes, dtype=float)
        self._weights = np.asarray(weights, dtype=float)
        self.order = order

        if self._nodes.shape != self._weights.shape:
            raise ConfigurationError("quadrature nodes and weights differ in length")


    def __len__(self):
        return len(self._nodes)


    def nodes(self):
        """Quadrature nodes in [0, 1]"""
        return self._nodes.copy()


    def weights(self):
        """Quadrature weights, summing up to one"""
        return self._weights.copy()


    def integrate(self, func):
        """Apply the rule to a scalar function on [0, 1].

        Parameters
        ----------
        func : callable
            integrand

        Returns
        -------
        value : float
        """
        return sum(w * func(c) for c, w in zip(self._nodes, self._weights))


class GaussLegendreQuadrature(Quadrature):
    """n-point Gauss-Legendre quadrature of order 2n.

    Parameters
    ----------
    n : int
        number of nodes
    """

    def __init__(self, n):
        super().__init__(*gauss_legendre_nodes_weights(n), order=2*n)


class LobattoLegendreQuadrature(Quadrature):
    """n-point Gauss-Lobatto quadrature of order 2n-2, including both
    endpoints of the interval.

    Parameters
    ----------
    n : int
        number of nodes, at least 2
    """

    def __init__(self, n):
        super().__init__(*lobatto_legendre_nodes_weights(n), order=2*n-2)
