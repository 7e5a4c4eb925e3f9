########################################################################################
##
##                 VARIATIONAL PARTITIONED RUNGE-KUTTA TABLEAUS
##                              (tableaus/vprk.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from .collocation import (
    gauss_legendre,
    lobatto_iiia,
    lobatto_iiib
    )

from ..errors import ConfigurationError


# TABLEAU ==============================================================================

class TableauVPRK:
    """Tableau of a variational partitioned Runge-Kutta method.

    The position stages use 'q', the momentum stages use 'p'. For a
    variational method 'p' is the symplectic conjugate of 'q', which is
    the default.

    Parameters
    ----------
    name : str
        name of the method
    order : int
        classical order
    q : CoefficientsRK
        coefficients of the position stages
    p : CoefficientsRK, None
        coefficients of the momentum stages
    d : array[float], None
        projection vector for degenerate Lagrangians, where the stage
        system of 'q' alone is singular (e.g. Lobatto IIIA-IIIB)

    Attributes
    ----------
    s : int
        number of stages
    """

    def __init__(self, name, order, q, p=None, d=None):

        self.name = name
        self.order = order

        self.q = q
        self.p = q.symplectic_conjugate() if p is None else p

        if self.q.s != self.p.s:
            raise ConfigurationError(
                f"'{name}': position and momentum tableaus have {self.q.s} and {self.p.s} stages"
                )

        self.s = self.q.s

        self.d = None
        if d is not None:
            self.d = np.asarray(d, dtype=float)
            if self.d.shape != (self.s,):
                raise ConfigurationError(
                    f"'{name}': projection vector 'd' has shape {self.d.shape}, expected ({self.s},)"
                    )


    def __repr__(self):
        return f"TableauVPRK(name={self.name!r}, order={self.order}, s={self.s})"


    def is_symplectic(self, atol=1e-14):
        """True if (q, p) satisfies the symplecticity condition"""
        return self.q.check_symplecticity(self.p, atol=atol)


# FACTORIES ============================================================================

def vprk_glrk(s):
    """Gauss-Legendre VPRK method with 's' stages, order 2s"""
    glrk = gauss_legendre(s)
    return TableauVPRK(f"VPRK-GLRK{s}", 2*s, glrk, glrk)


def vprk_midpoint():
    """Variational midpoint rule"""
    return TableauVPRK("VPRK-Midpoint", 2, gauss_legendre(1), gauss_legendre(1))


def vprk_lobatto_iiia_iiib(s):
    """Lobatto IIIA-IIIB VPRK method with 2 or 3 stages.

    The stage system is singular for degenerate Lagrangians, the
    projection vector 'd' spans its kernel.
    """

    D = {2: [1.0, -1.0], 3: [0.5, -1.0, 0.5]}

    if s not in D:
        raise ConfigurationError(f"Lobatto IIIA-IIIB VPRK with '{s}' stages not available")

    return TableauVPRK(
        f"VPRK-LobIIIAIIIB{s}", 2*s-2, lobatto_iiia(s), lobatto_iiib(s), d=D[s]
        )
