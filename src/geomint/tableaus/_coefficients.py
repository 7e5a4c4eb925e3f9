########################################################################################
##
##                          RUNGE-KUTTA COEFFICIENT CONTAINERS
##                           (tableaus/_coefficients.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ..errors import ConfigurationError


# HELPERS ==============================================================================

def _as_vector(name, value):
    _value = np.asarray(value, dtype=float)
    if _value.ndim == 0:
        _value = _value.reshape(1)
    if _value.ndim != 1:
        raise ConfigurationError(f"coefficient '{name}' must be a vector, got shape {_value.shape}")
    return _value


def _as_matrix(name, value, shape):
    _value = np.asarray(value, dtype=float)
    if _value.ndim == 0:
        _value = _value.reshape(1, 1)
    if _value.shape != shape:
        raise ConfigurationError(
            f"coefficient '{name}' has shape {_value.shape}, expected {shape}"
            )
    return _value


# COEFFICIENTS =========================================================================

class CoefficientsRK:
    """Butcher tableau of an s-stage Runge-Kutta method.

    Parameters
    ----------
    name : str
        name of the method
    order : int
        classical order
    a : array[float]
        stage matrix (s x s)
    b : array[float]
        weights (s)
    c : array[float]
        nodes (s)

    Attributes
    ----------
    s : int
        number of stages
    """

    def __init__(self, name, order, a, b, c):

        self.name = name
        self.order = order

        #weights determine the number of stages
        self.b = _as_vector("b", b)
        self.s = len(self.b)

        self.a = _as_matrix("a", a, (self.s, self.s))
        self.c = _as_vector("c", c)

        if len(self.c) != self.s:
            raise ConfigurationError(f"'c' has {len(self.c)} entries for {self.s} stages")


    def __len__(self):
        return self.s


    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, order={self.order}, s={self.s})"


    def is_explicit(self):
        """True if the stage matrix is strictly lower triangular"""
        return bool(np.all(np.triu(self.a) == 0.0))


    def check_row_sums(self, atol=1e-14):
        """Check that the row sums of 'a' equal the nodes 'c'"""
        return bool(np.allclose(self.a.sum(axis=1), self.c, rtol=0.0, atol=atol))


    def check_symplecticity(self, other=None, atol=1e-14):
        """Check the symplecticity condition

        .. math::

            b_i \\bar{a}_{ij} + \\bar{b}_j a_{ji} = b_i \\bar{b}_j

        of this tableau 'a' paired with 'other' (default: itself) as 'ā'.

        Parameters
        ----------
        other : CoefficientsRK, None
            partner tableau of a partitioned method
        atol : float
            absolute tolerance of the check

        Returns
        -------
        symplectic : bool
        """

        _other = self if other is None else other

        if _other.s != self.s:
            return False

        lhs = self.b[:, None] * _other.a + _other.b[None, :] * self.a.T
        rhs = np.outer(self.b, _other.b)

        return bool(np.allclose(lhs, rhs, rtol=0.0, atol=atol)
                    and np.allclose(self.b, _other.b, rtol=0.0, atol=atol))


    def symplectic_conjugate(self):
        """Coefficients 'ā' that make the pair (self, ā) symplectic,

        .. math::

            \\bar{a}_{ij} = b_j - b_j a_{ji} / b_i

        Returns
        -------
        conjugate : CoefficientsRK
        """

        if np.any(self.b == 0.0):
            raise ConfigurationError(f"'{self.name}' has zero weights, no symplectic conjugate")

        a = self.b[None, :] - self.b[None, :] * self.a.T / self.b[:, None]

        return CoefficientsRK(f"{self.name}_conjugate", self.order, a, self.b, self.c)


class CoefficientsARK:
    """Coefficients of an additive Runge-Kutta method with 's' internal
    stages coupled to 'r' projective stages.

    Parameters
    ----------
    name : str
        name of the method
    order : int
        classical order
    a : array[float]
        internal stage matrix (s x s)
    b : array[float]
        internal weights (s)
    c : array[float]
        internal nodes (s)
    alpha : array[float]
        coupling to projective stages (s x r)
    beta : array[float]
        projective weights (r)
    """

    def __init__(self, name, order, a, b, c, alpha, beta):

        self.name = name
        self.order = order

        self.b = _as_vector("b", b)
        self.beta = _as_vector("beta", beta)

        #internal and projective stages
        self.s = len(self.b)
        self.r = len(self.beta)

        self.a = _as_matrix("a", a, (self.s, self.s))
        self.c = _as_vector("c", c)
        self.alpha = _as_matrix("alpha", alpha, (self.s, self.r))

        if len(self.c) != self.s:
            raise ConfigurationError(f"'c' has {len(self.c)} entries for {self.s} stages")


    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, s={self.s}, r={self.r})"


class CoefficientsPRK:
    """Coefficients of the 'r' projective stages of an additive method.

    Parameters
    ----------
    name : str
        name of the method
    order : int
        classical order
    a : array[float]
        coupling to internal stages (r x s)
    c : array[float]
        projective nodes (r)
    alpha : array[float]
        projective stage matrix (r x r)
    """

    def __init__(self, name, order, a, c, alpha):

        self.name = name
        self.order = order

        self.c = _as_vector("c", c)
        self.r = len(self.c)

        _a = np.asarray(a, dtype=float)
        if _a.ndim != 2:
            raise ConfigurationError(f"coefficient 'a' must be a matrix, got shape {_a.shape}")
        self.s = _a.shape[1]

        self.a = _as_matrix("a", _a, (self.r, self.s))
        self.alpha = _as_matrix("alpha", alpha, (self.r, self.r))


    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, s={self.s}, r={self.r})"


class CoefficientsMRK:
    """Reconstruction coefficients of the Lagrange multiplier from the
    projective stages.

    Parameters
    ----------
    name : str
        name of the method
    b : array[float]
        weights (r)
    c : array[float]
        nodes (r)
    """

    def __init__(self, name, b, c):

        self.name = name

        self.b = _as_vector("b", b)
        self.c = _as_vector("c", c)
        self.r = len(self.b)

        if len(self.c) != self.r:
            raise ConfigurationError(f"'c' has {len(self.c)} entries for {self.r} stages")


    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, r={self.r})"
