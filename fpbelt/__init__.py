# fpbelt: a small functional utility belt
# Core: ordered-sequence utilities

"""
Core invariant: no function in this package mutates a sequence it is given.
Every "modifying" operation returns a fresh tuple, and boundary conditions
(not found, out of range) come back as Option values instead of exceptions.

Logging is disabled for the package by default. Call
fpbelt.log.configure_logging() (the CLI does) to see it.
"""

from loguru import logger

logger.disable("fpbelt")
