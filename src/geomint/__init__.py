import logging

from .errors import (
    GeomintError,
    DimensionMismatch,
    ConfigurationError,
    SolverNonConvergence,
    NumericalDivergence,
)
from .config import SolverConfig, IntegratorConfig
from .utils.logger import get_logger, configure_logging

from .equations import IODE, PDAE, SDE, SODE
from .solutions import (
    WienerProcess,
    SolutionODE,
    SolutionPODE,
    SolutionPDAE,
    SolutionSDE,
)
from .optim import NonlinearSolveDriver, SolverStatus
from .integrators import (
    IntegratorVPRK,
    IntegratorCGVI,
    IntegratorDGVI,
    IntegratorPARK,
    IntegratorSIRK,
    IntegratorSERK,
    IntegratorSplitting,
    create_integrator,
)

__version__ = "0.1.0"

#silent unless the application configures logging
logging.getLogger("geomint").addHandler(logging.NullHandler())
