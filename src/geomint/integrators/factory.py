########################################################################################
##
##                          INTEGRATOR FROM METHOD TABLEAU
##                            (integrators/factory.py)
##
########################################################################################

# IMPORTS ==============================================================================

from .vprk import IntegratorVPRK
from .park import IntegratorPARK
from .sirk import IntegratorSIRK
from .serk import IntegratorSERK
from .splitting import IntegratorSplitting

from ..tableaus import (
    TableauVPRK,
    TableauPARK,
    TableauSIRK,
    TableauSERK,
    TableauSplitting
    )
from ..errors import ConfigurationError


# FACTORY ==============================================================================

#integrator class for each tableau type
INTEGRATORS = {
    TableauVPRK: IntegratorVPRK,
    TableauPARK: IntegratorPARK,
    TableauSIRK: IntegratorSIRK,
    TableauSERK: IntegratorSERK,
    TableauSplitting: IntegratorSplitting,
    }


def create_integrator(equation, tableau, dt, **kwargs):
    """Integrator that matches the type of 'tableau'.

    Galerkin integrators are built from a basis and a quadrature rule
    instead of a tableau, use 'IntegratorCGVI' and 'IntegratorDGVI'
    directly.

    Parameters
    ----------
    equation : Equation
        the equation to integrate
    tableau : TableauVPRK, TableauPARK, TableauSIRK, TableauSERK, TableauSplitting
        coefficients of the method
    dt : float
        timestep
    kwargs : dict
        passed on to the integrator ('config', 'log', 'K' for SIRK)

    Returns
    -------
    integrator : Integrator
    """

    for tableau_type, integrator_type in INTEGRATORS.items():
        if isinstance(tableau, tableau_type):
            return integrator_type(equation, tableau, dt, **kwargs)

    raise ConfigurationError(f"no integrator for tableau of type '{type(tableau).__name__}'")
