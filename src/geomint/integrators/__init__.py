from ._layout import StageLayout, ParkLayout
from ._galerkin import GalerkinCoefficients
from ._integrator import Integrator, ImplicitIntegrator, VariationalIntegrator
from .initial_guess import InitialGuessPODE
from .vprk import IntegratorVPRK, function_stages_vprk
from .cgvi import IntegratorCGVI, function_stages_cgvi
from .dgvi import IntegratorDGVI, function_stages_dgvi
from .park import IntegratorPARK, function_stages_park
from .sirk import IntegratorSIRK, function_stages_sirk
from .serk import IntegratorSERK
from .splitting import IntegratorSplitting
from .factory import create_integrator
