########################################################################################
##
##                              SPLITTING TABLEAUS
##                           (tableaus/splitting.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ..errors import ConfigurationError


# HELPERS ==============================================================================

def splitting_coefficients(r, a, b):
    """Composition of 'r' sub-flows for the weights 'a' and 'b'.

    Stage 'i' applies the flows '1, ..., r' with step 'a_i' followed by
    the flows 'r, ..., 1' with step 'b_i'.

    Parameters
    ----------
    r : int
        number of sub-flows
    a, b : array[float]
        forward and backward weights

    Returns
    -------
    f : array[int]
        sub-flow indices (0-based) in order of application
    c : array[float]
        step fractions in order of application
    """

    f, c = [], []
    for a_i, b_i in zip(a, b):
        f.extend(range(r))
        c.extend([a_i] * r)
        f.extend(range(r - 1, -1, -1))
        c.extend([b_i] * r)

    return np.array(f, dtype=int), np.array(c, dtype=float)


# TABLEAUS =============================================================================

class TableauSplitting:
    """Base class of splitting tableaus.

    Note
    ----
    Not to be used directly!
    """

    def __init__(self, name, order, a, b=None):

        self.name = name
        self.order = order

        self.a = np.atleast_1d(np.asarray(a, dtype=float))
        self.b = None if b is None else np.atleast_1d(np.asarray(b, dtype=float))

        if self.b is not None and self.b.shape != self.a.shape:
            raise ConfigurationError(f"'{name}': weights 'a' and 'b' differ in length")

        self.s = len(self.a)


    def __repr__(self):
        return f"{type(self).__name__}(name={self.name!r}, order={self.order}, s={self.s})"


    def coefficients(self, r):
        """Sub-flow indices and step fractions for 'r' sub-flows"""
        raise NotImplementedError


class TableauSplittingNS(TableauSplitting):
    """Non-symmetric splitting with general stages

    .. math::

        \\varphi_{NS} = \\varphi_{b_s \\tau, B} \\circ \\varphi_{a_s \\tau, A}
        \\circ \\dots \\circ \\varphi_{b_1 \\tau, B} \\circ \\varphi_{a_1 \\tau, A}

    where 'A' applies the flows in order and 'B' in reversed order.
    """

    def __init__(self, name, order, a, b):
        super().__init__(name, order, a, b)


    def coefficients(self, r):
        return splitting_coefficients(r, self.a, self.b)


class TableauSplittingGS(TableauSplittingNS):
    """Symmetric splitting with general stages, the non-symmetric
    composition followed by its adjoint."""

    def coefficients(self, r):
        f, c = splitting_coefficients(r, self.a, self.b)
        return np.concatenate((f, f[::-1])), np.concatenate((c, c[::-1]))


class TableauSplittingSS(TableauSplitting):
    """Symmetric splitting with symmetric stages, each stage being a
    Strang composition with step 'a_i', mirrored around the last stage."""

    def __init__(self, name, order, a):
        super().__init__(name, order, a)


    def coefficients(self, r):
        a = np.concatenate((self.a, self.a[-2::-1])) / 2
        return splitting_coefficients(r, a, a)


# FACTORIES ============================================================================

def lie_trotter():
    """Lie-Trotter splitting, order 1"""
    return TableauSplittingNS("LieTrotter", 1, [1.0], [0.0])


def strang():
    """Strang splitting, order 2"""
    return TableauSplittingSS("Strang", 2, [1.0])


def triple_jump():
    """Fourth order triple jump composition of Strang splittings"""
    g1 = 1.0 / (2.0 - 2.0**(1/3))
    g2 = -2.0**(1/3) / (2.0 - 2.0**(1/3))
    return TableauSplittingSS("TripleJump", 4, [g1, g2])
