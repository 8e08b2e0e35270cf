"""Exception hierarchy for flowlog.

All exceptions derive from FlowLogError, enabling broad catch patterns
at the application boundary. Sink writes, file rotation and state file
writes never raise; they report through the ``"flowlog"`` logger and a
return value instead. Only configuration and lookup errors propagate.
"""


class FlowLogError(Exception):
    """Base exception for all flowlog errors."""


class ConfigValidationError(FlowLogError, ValueError):
    """Configuration field validation failed.

    Raised when a level name is unknown or a settings value cannot be
    coerced to the field's type.
    """


class GuardStateError(FlowLogError):
    """A system logger guard was used outside its active lifetime.

    Raised when a closed guard is re-entered as a context manager.
    """
