"""
Domain Exceptions
=================

Error taxonomy for user operations. Messages are surfaced to API callers
verbatim, so they carry the underlying store text where there is one.
"""


class UserError(Exception):
    """Base class for user operation failures."""


class UserValidationError(UserError, ValueError):
    """A create payload is missing a required field."""


class DuplicateEmailError(UserError, ValueError):
    """The store rejected a create because the email is already taken."""


class UserStoreError(UserError):
    """The store failed while reading or writing user records."""


class StoreUnavailableError(RuntimeError):
    """The store could not be reached at startup."""
