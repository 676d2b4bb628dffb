"""errors.py — Exceptions raised while building a reading plan."""


class ReadPlanError(Exception):
    """Base exception for reading plan failures."""


class CorpusError(ReadPlanError):
    """Raised when the chapter table is empty or structurally malformed."""


class InvalidDateRangeError(ReadPlanError):
    """Raised when the end date does not come after the start date."""


class OverAllocationError(ReadPlanError):
    """Raised when there are more days to fill than chapters to read."""


class InsufficientChaptersError(ReadPlanError):
    """Raised when a book is asked to span more days than it has chapters."""


class PartitionNotConvergedError(ReadPlanError):
    """Raised when the chapter bisection gives up before hitting its target."""


class DateOverflowError(ReadPlanError):
    """Raised when an assigned reading date falls after the end date."""


class PlanError(ReadPlanError):
    """Raised when day groups are inconsistent with the assignment rules."""
