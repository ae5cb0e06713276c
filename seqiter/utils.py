"""Miscellaneous tools for internal use."""

import logging
import numbers
from logging import NullHandler


def isint(x):
    """Return wether `x` is an integral number."""
    return isinstance(x, numbers.Integral)


def get_logger(name):
    logger = logging.getLogger(name)
    logger.addHandler(NullHandler())
    return logger


def check_not_none(value, name):
    if value is None:
        raise TypeError(name + " must not be None")


def check_callable(func, name):
    if not callable(func):
        raise TypeError(name + " must be callable")


def to_python_value(value):
    """Convert array scalars (numpy and alike) to plain python objects."""
    item = getattr(value, 'item', None)
    if item is not None and getattr(value, 'shape', None) == ():
        return item()
    return value
