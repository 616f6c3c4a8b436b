import logging
import os


PACKAGE_LOGGER_NAME = 'tinymlp'
DEFAULT_LOG_FILENAME = 'log.txt'

LINE_FMT = '[%(asctime)s] %(levelname)-8s %(message)s'
DATE_FMT = '%Y-%m-%d %H:%M:%S'


def setup_logging(filename=None, stdout=True, level=logging.INFO):
    """ Sets up logging formatting and handlers for the package logger

    Parameters
    ----------
    filename: str, default=None
        If given, log records are also written to this file (which is
        overwritten). Use :code:`DEFAULT_LOG_FILENAME` for the usual
        location in the current directory.

    stdout: bool, default=True
        If True, log records are echoed to the console.

    level: int, default=logging.INFO
        The level set on the package logger.

    Returns
    -------
    logger: logging.Logger
        The configured package logger
    """
    formatter = logging.Formatter(fmt=LINE_FMT, datefmt=DATE_FMT)

    logger = logging.getLogger(PACKAGE_LOGGER_NAME)
    logger.setLevel(level)

    # Remove handlers from a previous call so records aren't duplicated
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    if filename is not None:
        fhandler = logging.FileHandler(os.path.abspath(filename), mode='w')
        fhandler.setFormatter(formatter)
        logger.addHandler(fhandler)

    if stdout:
        shandler = logging.StreamHandler()
        shandler.setFormatter(formatter)
        logger.addHandler(shandler)

    return logger


def progress(msg, i, n):
    """ Format a progress message like "(03 / 10) msg"
    """
    fmt = "(%%0%dd / %d) %s" % (len(str(n)), n, msg)
    return fmt % i
