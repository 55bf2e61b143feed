class HabitTrackerError(Exception):
    """Base class for errors raised by the habit tracker core."""


class InvalidInput(HabitTrackerError):
    """Malformed title, weekday set, date or habit id supplied by the caller."""


class StorageFailure(HabitTrackerError):
    """The store rejected or could not complete an operation."""
