########################################################################################
##
##                             BASE EQUATION CONTAINER
##                            (equations/_equation.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ..errors import DimensionMismatch


# HELPERS ==============================================================================

def as_state(name, value, d=None):
    """Convert initial data to a float vector and check its length"""

    _value = np.atleast_1d(np.array(value, dtype=float))

    if _value.ndim != 1:
        raise DimensionMismatch(f"'{name}' must be a vector, got shape {_value.shape}")

    if d is not None and len(_value) != d:
        raise DimensionMismatch(f"'{name}' has length {len(_value)}, expected {d}")

    return _value


# BASE CLASS ===========================================================================

class Equation:
    """Base class of all equation containers.

    Holds the initial time, the initial state and the periodicity of
    the state coordinates. The vector fields are added by the subclasses
    as plain callables that write their result into the last argument.

    Note
    ----
    Not to be used directly!

    Parameters
    ----------
    q0 : array[float]
        initial state
    t0 : float
        initial time
    periodicity : array[float], None
        period of each coordinate, zero for non-periodic coordinates

    Attributes
    ----------
    d : int
        dimension of the state
    """

    def __init__(self, q0, t0=0.0, periodicity=None):

        self.t0 = float(t0)
        self.q0 = as_state("q0", q0)

        #dimension of the state
        self.d = len(self.q0)

        if periodicity is None:
            self.periodicity = np.zeros(self.d)
        else:
            self.periodicity = as_state("periodicity", periodicity, self.d)


    def __len__(self):
        return self.d


    def __repr__(self):
        return f"{type(self).__name__}(d={self.d}, t0={self.t0})"


    def is_periodic(self):
        """True if any coordinate is periodic"""
        return bool(np.any(self.periodicity != 0.0))
