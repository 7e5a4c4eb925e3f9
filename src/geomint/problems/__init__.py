from .oscillator import (
    oscillator_iode,
    oscillator_pdae,
    oscillator_sode,
    oscillator_p0,
    oscillator_reference,
)
from .kubo import kubo_oscillator_sde, kubo_energy
