"""Custom exception hierarchy for the search driver.

The search routines themselves report failure through sentinel values; these
exceptions are raised only by configuration and solver plumbing.
"""


class SelfDescriptiveError(Exception):
    """Base exception for search failures."""


class InvalidBaseError(SelfDescriptiveError):
    """Raised when a requested base lies outside the supported range."""


class SolverError(SelfDescriptiveError):
    """Raised when the CP-SAT model is rejected by the solver."""
