########################################################################################
##
##                              NONLINEAR SOLVER STATUS
##                                (optim/_status.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from dataclasses import dataclass


# STATUS ===============================================================================

@dataclass
class SolverStatus:
    """Outcome of one nonlinear solve.

    Exactly one of three states applies: converged, iteration limit
    exceeded ('converged' and 'diverged' both False) or diverged
    (NaN or Inf encountered).

    Attributes
    ----------
    iterations : int
        number of iterations performed
    evaluations : int
        number of residual evaluations, including the jacobian
    residual_initial : float
        maximum norm of the residual of the initial guess
    residual_abs : float
        maximum norm of the residual of the last iterate
    residual_rel : float
        'residual_abs' relative to 'residual_initial'
    residual_step : float
        maximum norm of the last update relative to the iterate
    converged : bool
        tolerances met
    diverged : bool
        NaN or Inf detected
    """

    iterations: int = 0
    evaluations: int = 0
    residual_initial: float = np.inf
    residual_abs: float = np.inf
    residual_rel: float = np.inf
    residual_step: float = np.inf
    converged: bool = False
    diverged: bool = False

    def __str__(self):
        if self.diverged:
            state = "diverged"
        elif self.converged:
            state = "converged"
        else:
            state = "not converged"
        return (
            f"{state} after {self.iterations} iterations "
            f"(|b|={self.residual_abs:.3e}, |b|/|b0|={self.residual_rel:.3e}, "
            f"|dx|={self.residual_step:.3e})"
            )


    @classmethod
    def explicit(cls):
        """Status of an explicit step, which needs no iterations"""
        return cls(
            residual_initial=0.0,
            residual_abs=0.0,
            residual_rel=0.0,
            residual_step=0.0,
            converged=True
            )


    @property
    def failed(self):
        """True if the solve did not converge"""
        return not self.converged
