########################################################################################
##
##                            GLOBAL CONSTANTS AND DEFAULTS
##                                  (_constants.py)
##
########################################################################################

# IMPORTS ==============================================================================

import numpy as np


# NUMERICS =============================================================================

#machine precision of the storage type
EPSILON = np.finfo(float).eps

#threshold for divisions in the anderson mixing step
TOLERANCE = 1e-16


# NONLINEAR SOLVER =====================================================================

#default nonlinear solver and available choices
SOL_SOLVER = "newton"
SOL_SOLVERS = ("newton", "quasi-newton", "anderson", "scipy")

#convergence criteria (absolute residual, relative residual, step size)
SOL_TOLERANCE_ABS = 1e-14
SOL_TOLERANCE_REL = 1e-14
SOL_TOLERANCE_STEP = 1e-14

#iteration limit for one nonlinear solve
SOL_ITERATIONS_MAX = 100

#jacobian approximation and available strategies
SOL_JACOBIAN = "forward"
SOL_JACOBIANS = ("forward", "central", "complex")

#number of iterations between jacobian updates (quasi-newton)
SOL_JACOBIAN_REFRESH = 5

#perturbation sizes for finite difference and complex step jacobians
SOL_FD_FORWARD = np.sqrt(EPSILON)
SOL_FD_CENTRAL = np.cbrt(EPSILON)
SOL_COMPLEX_STEP = 1e-30

#method passed to 'scipy.optimize.root'
SOL_SCIPY_METHOD = "hybr"


# ANDERSON ACCELERATION ================================================================

OPT_HISTORY = 4
OPT_RESTART = False


# INTEGRATORS ==============================================================================

#raise on nonconverged steps instead of logging a warning
INT_ABORT_ON_NONCONVERGENCE = False

#log run progress and per-step solver status
INT_LOG = True

#wiener increment distributions
INT_CONVERGENCE = "strong"
INT_CONVERGENCES = ("strong", "weak", "null")
