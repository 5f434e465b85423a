"""
Local development settings.
"""
from .base import *  # noqa: F401,F403

DEBUG = True

LOGGING['loggers']['apps']['level'] = 'DEBUG'  # noqa: F405
LOGGING['loggers']['shared']['level'] = 'DEBUG'  # noqa: F405
