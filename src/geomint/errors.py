########################################################################################
##
##                                  ERROR TYPES
##                                  (errors.py)
##
########################################################################################

# ERRORS ===============================================================================

class GeomintError(Exception):
    """Base class of all errors raised by geomint."""


class DimensionMismatch(GeomintError, ValueError):
    """Length of an unknown vector or array disagrees with the expected layout.

    Raised at the entry of residual assembly, layout packing and equation
    construction, before any computation happens.
    """


class ConfigurationError(GeomintError, ValueError):
    """Malformed tableau, basis, quadrature or solver configuration.

    Raised at construction time of the offending object, never while
    integrating.
    """


class SolverNonConvergence(GeomintError, RuntimeError):
    """The nonlinear solver reached its iteration limit without meeting
    the tolerances.

    Only raised when the integrator is configured to abort on
    nonconvergence, otherwise a warning is logged.

    Parameters
    ----------
    message : str
        error message
    status : SolverStatus
        status of the failed solve
    """

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status


class NumericalDivergence(GeomintError, ArithmeticError):
    """NaN or Inf detected in the solution of the nonlinear stage system.

    Always fatal for the timestep where it occurs.

    Parameters
    ----------
    message : str
        error message
    status : SolverStatus
        status of the failed solve
    """

    def __init__(self, message, status=None):
        super().__init__(message)
        self.status = status
