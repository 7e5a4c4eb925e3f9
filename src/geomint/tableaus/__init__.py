from ._coefficients import (
    CoefficientsRK,
    CoefficientsARK,
    CoefficientsPRK,
    CoefficientsMRK,
)
from .collocation import (
    collocation_matrix,
    gauss_legendre,
    implicit_midpoint,
    lobatto_iiia,
    lobatto_iiib,
    symplectic_conjugate,
)
from .vprk import TableauVPRK, vprk_glrk, vprk_midpoint, vprk_lobatto_iiia_iiib
from .park import TableauPARK, park_symmetric_projection, park_glrk
from .stochastic import (
    TableauSIRK,
    TableauSERK,
    stochastic_glrk,
    euler_maruyama,
    stochastic_heun,
    burrage_r2,
)
from .splitting import (
    TableauSplitting,
    TableauSplittingNS,
    TableauSplittingGS,
    TableauSplittingSS,
    splitting_coefficients,
    lie_trotter,
    strang,
    triple_jump,
)
