"""
Diagnostic logger for Gatelog itself.

This is the package's own stdlib logger, used for debug traces of the
dispatch engine. It is never routed through registered writers.
"""

import logging


logger = logging.getLogger('Gatelog')
logger.addHandler(logging.NullHandler())


def set_verbose(verbose: bool) -> None:
    """Switch the package logger between DEBUG and INFO."""
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
