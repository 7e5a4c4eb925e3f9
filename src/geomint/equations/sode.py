########################################################################################
##
##                       SPLIT ORDINARY DIFFERENTIAL EQUATION
##                              (equations/sode.py)
##
########################################################################################

# IMPORTS ==============================================================================

from ._equation import Equation

from ..errors import ConfigurationError


# EQUATION =============================================================================

class SODE(Equation):
    """Ordinary differential equation split into sub-problems with exact flows

    .. math::

        \\dot{q} = v_1(t, q) + \\dots + v_r(t, q)

    Parameters
    ----------
    flows : list[callable]
        exact flows 'flow(t, q, q_new, h)' that write the solution of
        sub-problem 'i' after a step 'h' from 'q' into 'q_new'
    q0 : array[float]
        initial state
    t0 : float
        initial time
    periodicity : array[float], None
        period of each coordinate of 'q'
    """

    def __init__(self, flows, q0, t0=0.0, periodicity=None):
        super().__init__(q0, t0, periodicity)

        self.flows = list(flows)

        if not self.flows:
            raise ConfigurationError("split equation needs at least one flow")


    def __repr__(self):
        return f"SODE(d={self.d}, r={len(self.flows)}, t0={self.t0})"
