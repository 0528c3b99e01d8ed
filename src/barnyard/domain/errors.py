"""Exceptions raised by the Barnyard domain and service layer.

Caller precondition violations are plain ``ValueError``s; the classes below
cover the two remaining failure kinds.
"""


class AnimalNotFoundError(LookupError):
    """Raised when an operation references an animal id the store does not know."""


class InternalConsistencyError(RuntimeError):
    """Raised when stored state contradicts an invariant the allocator relies on.

    This indicates a bug or corrupted data rather than a caller mistake, and
    is never retried.
    """
