from ._equation import Equation
from .iode import IODE
from .pdae import PDAE
from .sde import SDE
from .sode import SODE
