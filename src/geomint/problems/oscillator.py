########################################################################################
##
##                         HARMONIC OSCILLATOR TEST PROBLEM
##                             (problems/oscillator.py)
##
##     Degenerate Lagrangian formulation L = q2 dq1/dt - q2^2/2 - k q1^2/2,
##     so that q1 is the position and q2 the velocity of the oscillator.
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np

from ..equations import IODE, PDAE, SODE


# CONSTANTS ============================================================================

k = 0.5
omega = np.sqrt(k)

dt = 0.1
nt = 10

t0 = 0.0
q0 = np.array([0.5, 0.0])


# VECTOR FIELDS ========================================================================

def oscillator_theta(t, q, v, p):
    p[0] = q[1]
    p[1] = 0.0


def oscillator_iode_f(t, q, v, f):
    f[0] = -k * q[0]
    f[1] = v[0] - q[1]


def oscillator_iode_g(t, q, lam, g):
    g[0] = 0.0
    g[1] = lam[0]


def oscillator_v(t, q, p, v):
    v[0] = q[1]
    v[1] = -k * q[0]


def oscillator_pdae_f(t, q, p, f):
    f[0] = -k * q[0]
    f[1] = p[0] - q[1]


def oscillator_pdae_u(t, q, p, lam, u):
    u[0] = lam[0]
    u[1] = lam[1]


def oscillator_pdae_g(t, q, p, lam, g):
    g[0] = 0.0
    g[1] = lam[0]


def oscillator_pdae_phi(t, q, p, phi):
    phi[0] = p[0] - q[1]
    phi[1] = p[1]


def oscillator_flow_q(t, q, q_new, h):
    q_new[0] = q[0] + h * q[1]
    q_new[1] = q[1]


def oscillator_flow_v(t, q, q_new, h):
    q_new[0] = q[0]
    q_new[1] = q[1] - h * k * q[0]


# EQUATIONS ============================================================================

def oscillator_p0(q=q0):
    """Momentum consistent with the one-form at 'q'"""
    p = np.zeros(2)
    oscillator_theta(t0, q, np.zeros(2), p)
    return p


def oscillator_iode(q=q0, periodicity=None):
    """Harmonic oscillator as implicit ODE"""
    return IODE(
        oscillator_theta, oscillator_iode_f, oscillator_iode_g, oscillator_v,
        q, oscillator_p0(q), t0=t0, periodicity=periodicity
        )


def oscillator_pdae(q=q0):
    """Harmonic oscillator as partitioned DAE with the one-form as constraint"""
    return PDAE(
        oscillator_v, oscillator_pdae_f, oscillator_pdae_u, oscillator_pdae_g,
        oscillator_pdae_phi, q, oscillator_p0(q), np.zeros(2), t0=t0
        )


def oscillator_sode(q=q0):
    """Harmonic oscillator split into position and velocity updates"""
    return SODE([oscillator_flow_q, oscillator_flow_v], q, t0=t0)


# REFERENCE ============================================================================

def oscillator_reference(t, q=q0):
    """Exact solution of the oscillator at time 't'

    Parameters
    ----------
    t : float
        time
    q : array[float]
        initial state at 't0'

    Returns
    -------
    q : array[float]
        exact state
    """
    A = np.sqrt(q[1]**2 / k + q[0]**2)
    phase = np.arctan2(q[0], q[1] / omega)
    return np.array([
        A * np.sin(omega * (t - t0) + phase),
        A * omega * np.cos(omega * (t - t0) + phase)
        ])
