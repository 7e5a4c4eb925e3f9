########################################################################################
##
##                                TRAJECTORY STORES
##                              (solutions/solution.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from .wiener import WienerProcess

from ..errors import DimensionMismatch

from .._constants import INT_CONVERGENCE


# BASE CLASS ===========================================================================

class Solution:
    """Base class of the trajectory stores.

    Holds the time grid 't0 + n dt' for 'n = 0, ..., nt'. The integrators
    write the state of step 'n' into slot 'n', slot 0 holds the initial
    conditions of the equation.

    Note
    ----
    Not to be used directly!

    Parameters
    ----------
    equation : Equation
        the integrated equation
    dt : float
        timestep
    nt : int
        number of timesteps

    Attributes
    ----------
    t : array[float]
        time grid
    ns : int
        number of sample paths
    """

    def __init__(self, equation, dt, nt):

        if nt < 0:
            raise DimensionMismatch(f"number of timesteps must be non-negative, got {nt}")

        self.equation = equation
        self.dt = dt
        self.nt = int(nt)
        self.ns = 1

        self.t = equation.t0 + dt * np.arange(self.nt + 1)


    def __len__(self):
        return self.nt + 1


    def __repr__(self):
        return f"{type(self).__name__}(d={self.equation.d}, dt={self.dt}, nt={self.nt})"


# SOLUTIONS ============================================================================

class SolutionODE(Solution):
    """Trajectory 'q' of shape (nt+1, d)"""

    def __init__(self, equation, dt, nt):
        super().__init__(equation, dt, nt)

        self.q = np.zeros((self.nt + 1, equation.d))
        self.q[0] = equation.q0


class SolutionPODE(SolutionODE):
    """Trajectories 'q' and 'p' of shape (nt+1, d)"""

    def __init__(self, equation, dt, nt):
        super().__init__(equation, dt, nt)

        self.p = np.zeros((self.nt + 1, equation.d))
        self.p[0] = equation.p0


class SolutionPDAE(SolutionPODE):
    """Trajectories 'q', 'p' and multiplier 'lam' of shape (nt+1, d)"""

    def __init__(self, equation, dt, nt):
        super().__init__(equation, dt, nt)

        self.lam = np.zeros((self.nt + 1, equation.d))
        self.lam[0] = equation.lambda0


class SolutionSDE(Solution):
    """Sample paths 'q' of shape (nt+1, ns, d) together with the driving
    Wiener process.

    Parameters
    ----------
    equation : SDE
        the integrated equation
    dt : float
        timestep
    nt : int
        number of timesteps
    ns : int
        number of sample paths
    conv : str
        distribution of the increments, see 'WienerProcess'
    seed : int, None
        random seed of the increments
    W : WienerProcess, None
        prescribed Wiener process, overrides 'ns', 'conv' and 'seed'
    """

    def __init__(self, equation, dt, nt, ns=1, conv=INT_CONVERGENCE, seed=None, W=None):
        super().__init__(equation, dt, nt)

        if W is None:
            W = WienerProcess(dt, self.nt, equation.m, ns, conv=conv, seed=seed)

        if W.dW.shape[0] != self.nt or W.dW.shape[2] != equation.m:
            raise DimensionMismatch(
                f"wiener increments of shape {W.dW.shape} do not match nt={self.nt}, m={equation.m}"
                )

        self.W = W
        self.ns = W.dW.shape[1]

        self.q = np.zeros((self.nt + 1, self.ns, equation.d))
        self.q[0] = equation.q0
