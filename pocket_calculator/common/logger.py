"""Shared logger for the calculator package."""
import logging


def get_logger(name: str) -> logging.Logger:
    """
    Build a logger writing ``LEVEL: message`` lines to stderr.

    :param str name: Logger name

    :return: Configured logger
    :rtype: logging.Logger
    """
    formatter = logging.Formatter("%(levelname)s: %(message)s")
    handler = logging.StreamHandler()
    handler.setFormatter(formatter)

    calc_logger = logging.getLogger(name)
    calc_logger.setLevel(logging.INFO)
    # Importing the module twice must not duplicate output
    if not calc_logger.handlers:
        calc_logger.addHandler(handler)
    return calc_logger


logger = get_logger("pocket_calculator")
