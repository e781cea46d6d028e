"""Domain errors for the fitness tracker."""


class FitnessTrackerError(Exception):
    """Base class for domain errors."""


class InvalidInputError(FitnessTrackerError, ValueError):
    """Raised when a record or request carries values that cannot be used."""


class NotFoundError(FitnessTrackerError, LookupError):
    """Raised when a referenced record does not exist."""
