from .wiener import WienerProcess
from .solution import (
    Solution,
    SolutionODE,
    SolutionPODE,
    SolutionPDAE,
    SolutionSDE,
)
