from .logger import get_logger, configure_logging
from .funcs import (
    norm_inf,
    rel_err,
    cut_periodic_solution,
    truncation_bound,
    truncate_increments,
)
