########################################################################################
##
##                       STOCHASTIC RUNGE-KUTTA TABLEAUS
##                          (tableaus/stochastic.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._coefficients import CoefficientsRK
from .collocation import gauss_legendre

from ..errors import ConfigurationError


# TABLEAUS =============================================================================

class TableauSIRK:
    """Tableau of a stochastic implicit Runge-Kutta method for
    Stratonovich SDEs.

    Parameters
    ----------
    name : str
        name of the method
    order : float
        strong order
    qdrift : CoefficientsRK
        coefficients of the drift term
    qdiff : CoefficientsRK
        coefficients of the diffusion term

    Attributes
    ----------
    s : int
        number of stages
    """

    def __init__(self, name, order, qdrift, qdiff):

        self.name = name
        self.order = order

        self.qdrift = qdrift
        self.qdiff = qdiff

        if qdrift.s != qdiff.s:
            raise ConfigurationError(
                f"'{name}': drift and diffusion tableaus have {qdrift.s} and {qdiff.s} stages"
                )

        self.s = qdrift.s


    def __repr__(self):
        return f"TableauSIRK(name={self.name!r}, order={self.order}, s={self.s})"


class TableauSERK:
    """Tableau of an explicit stochastic Runge-Kutta method.

    Parameters
    ----------
    name : str
        name of the method
    order : float
        strong order
    qdrift : CoefficientsRK
        coefficients of the drift term
    qdiff : CoefficientsRK
        coefficients of the diffusion term with the increment 'dW'
    qdiff2 : CoefficientsRK, None
        coefficients of the diffusion term with the increment 'dZ'

    Attributes
    ----------
    s : int
        number of stages
    """

    def __init__(self, name, order, qdrift, qdiff, qdiff2=None):

        self.name = name
        self.order = order

        self.qdrift = qdrift
        self.qdiff = qdiff
        self.qdiff2 = qdiff2

        coefficients = [qdrift, qdiff] + ([] if qdiff2 is None else [qdiff2])

        if len({c.s for c in coefficients}) != 1:
            raise ConfigurationError(f"'{name}': tableaus differ in number of stages")

        if not all(c.is_explicit() for c in coefficients):
            raise ConfigurationError(f"'{name}': explicit method needs strictly lower triangular tableaus")

        self.s = qdrift.s


    def __repr__(self):
        return f"TableauSERK(name={self.name!r}, order={self.order}, s={self.s})"


# FACTORIES ============================================================================

def stochastic_glrk(s):
    """Stochastic Gauss-Legendre method with 's' stages, the stochastic
    implicit midpoint rule for 's = 1'"""
    glrk = gauss_legendre(s)
    return TableauSIRK(f"StochasticGLRK{s}", 1.0, glrk, glrk)


def euler_maruyama():
    """Euler-Maruyama method (Ito calculus)"""
    euler = CoefficientsRK("EulerMaruyama", 1, [[0.0]], [1.0], [0.0])
    return TableauSERK("EulerMaruyama", 0.5, euler, euler)


def stochastic_heun():
    """Stochastic Heun method (Stratonovich calculus)"""
    heun = CoefficientsRK("StochasticHeun", 2, [[0.0, 0.0], [1.0, 0.0]], [0.5, 0.5], [0.0, 1.0])
    return TableauSERK("StochasticHeun", 1.0, heun, heun)


def burrage_r2():
    """Two-stage explicit method of Burrage and Burrage with the
    intermediate stage at two thirds of the step (Stratonovich calculus)"""
    r2 = CoefficientsRK("BurrageR2", 2, [[0.0, 0.0], [2/3, 0.0]], [1/4, 3/4], [0.0, 2/3])
    return TableauSERK("BurrageR2", 1.0, r2, r2)
