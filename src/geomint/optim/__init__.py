from ._status import SolverStatus
from ._solver import NonlinearSolver
from .jacobian import compute_jacobian, factorize
from .newton import NewtonSolver, QuasiNewtonSolver
from .anderson import AndersonSolver
from .scipy_root import ScipyRootSolver
from .driver import SOLVERS, create_solver, NonlinearSolveDriver
