########################################################################################
##
##                                  LOGGING SETUP
##                                (utils/logger.py)
##
########################################################################################

# IMPORTS ==============================================================================

import logging


# CONSTANTS ============================================================================

LOGGER_NAME = "geomint"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


# HELPERS ==============================================================================

def get_logger(name=None):
    """Return a logger in the 'geomint' namespace.

    Parameters
    ----------
    name : str, None
        module or component name, the package logger if None

    Returns
    -------
    logger : logging.Logger
    """
    if name is None or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def configure_logging(level=logging.INFO, stream=None, fmt=LOG_FORMAT):
    """Attach a stream handler to the package logger.

    Calling this again replaces the handler installed by a previous call,
    handlers added by the application are left alone.

    Parameters
    ----------
    level : int
        logging level of the package logger
    stream : file-like, None
        target stream, 'sys.stderr' if None
    fmt : str
        format string of the handler

    Returns
    -------
    logger : logging.Logger
        the package logger
    """

    logger = get_logger()

    #remove handler of previous calls
    for handler in list(logger.handlers):
        if getattr(handler, "_geomint_handler", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter(fmt))
    handler._geomint_handler = True

    logger.addHandler(handler)
    logger.setLevel(level)

    return logger
