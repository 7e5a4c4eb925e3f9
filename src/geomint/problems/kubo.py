########################################################################################
##
##                           KUBO OSCILLATOR TEST PROBLEM
##                                (problems/kubo.py)
##
##     Stochastic rotation with drift and diffusion proportional to the same
##     skew-symmetric matrix, the squared norm of the state is conserved.
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ..equations import SDE


# CONSTANTS ============================================================================

lam = 2.0
nu = 0.1

dt = 0.01
nt = 100

t0 = 0.0
q0 = np.array([0.5, 0.0])


# VECTOR FIELDS ========================================================================

def kubo_v(t, q, v):
    v[0] = -lam * q[1]
    v[1] = lam * q[0]


def kubo_B(t, q, B):
    B[0, 0] = -nu * q[1]
    B[1, 0] = nu * q[0]


# EQUATIONS ============================================================================

def kubo_oscillator_sde(q=q0):
    """Kubo oscillator driven by a one-dimensional Wiener process"""
    return SDE(kubo_v, kubo_B, q, m=1, t0=t0)


def kubo_energy(q):
    """Conserved quantity, half the squared norm along the last axis"""
    return 0.5 * np.sum(np.asarray(q)**2, axis=-1)
