from .lagrange import LagrangeBasis, lagrange_polynomials
from .quadrature import (
    Quadrature,
    GaussLegendreQuadrature,
    LobattoLegendreQuadrature,
    gauss_legendre_nodes_weights,
    lobatto_legendre_nodes_weights,
)
