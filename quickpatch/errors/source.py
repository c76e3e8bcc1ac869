class DiffSourceError(Exception):
    """The diff text could not be obtained from its source."""
