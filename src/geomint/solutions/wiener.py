########################################################################################
##
##                               WIENER PROCESS INCREMENTS
##                                (solutions/wiener.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ..errors import ConfigurationError, DimensionMismatch

from .._constants import INT_CONVERGENCE, INT_CONVERGENCES


# CLASS ================================================================================

class WienerProcess:
    """Increments of an 'm'-dimensional Wiener process for 'ns' sample
    paths over 'nt' timesteps.

    'dW' holds the increments of 'W', 'dZ' the increments of the time
    integral of 'W' over the step, both of shape (nt, ns, m).

    Strong increments are normally distributed with variance 'dt',

    .. math::

        \\Delta W = \\sqrt{\\Delta t} \\, N_1, \\qquad
        \\Delta Z = \\frac{1}{2} \\Delta t^{3/2} (N_1 + N_2 / \\sqrt{3})

    weak increments take the values :math:`\\pm \\sqrt{\\Delta t}` with equal
    probability, and 'null' increments are zero.

    Parameters
    ----------
    dt : float
        timestep
    nt : int
        number of timesteps
    m : int
        dimension of the process
    ns : int
        number of sample paths
    conv : str
        one of 'strong', 'weak', 'null'
    seed : int, None
        random seed for reproducibility
    """

    def __init__(self, dt, nt, m=1, ns=1, conv=INT_CONVERGENCE, seed=None):

        if conv not in INT_CONVERGENCES:
            raise ConfigurationError(f"unknown convergence type '{conv}', expected one of {INT_CONVERGENCES}")

        self.dt = dt
        self.nt = nt
        self.m = m
        self.ns = ns
        self.conv = conv

        #random number generator (with optional seed for reproducibility)
        self._rng = np.random.default_rng(seed)

        shape = (nt, ns, m)

        if conv == "strong":
            N1 = self._rng.standard_normal(shape)
            N2 = self._rng.standard_normal(shape)
            self.dW = np.sqrt(dt) * N1
            self.dZ = 0.5 * dt**1.5 * (N1 + N2 / np.sqrt(3.0))

        elif conv == "weak":
            signs = self._rng.choice([-1.0, 1.0], size=shape)
            self.dW = np.sqrt(dt) * signs
            self.dZ = 0.5 * dt * self.dW

        else:
            self.dW = np.zeros(shape)
            self.dZ = np.zeros(shape)


    def __len__(self):
        return self.nt


    @classmethod
    def from_increments(cls, dt, dW, dZ=None):
        """Wiener process with prescribed increments.

        Parameters
        ----------
        dt : float
            timestep
        dW : array[float]
            increments of shape (nt, ns, m)
        dZ : array[float], None
            integrated increments, zero if None

        Returns
        -------
        W : WienerProcess
        """

        _dW = np.array(dW, dtype=float)

        if _dW.ndim != 3:
            raise DimensionMismatch(f"increments must have shape (nt, ns, m), got {_dW.shape}")

        nt, ns, m = _dW.shape

        W = cls(dt, nt, m, ns, conv="null")
        W.dW = _dW

        if dZ is not None:
            W.dZ = np.array(dZ, dtype=float)
            if W.dZ.shape != _dW.shape:
                raise DimensionMismatch(f"'dZ' has shape {W.dZ.shape}, expected {_dW.shape}")

        return W
