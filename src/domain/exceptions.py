"""
Exceptions for callers that prefer raising over inspecting a ProcessingResult.

Handlers never raise these themselves; ProcessingResult.unwrap() does.
"""

from typing import Optional

from .models import RejectionKind


class MailRejectedError(Exception):
    """Raised when a mail item was rejected by a handler."""

    kind: RejectionKind = None

    def __init__(self, message: Optional[str] = None):
        default = self.kind.value if self.kind is not None else "mail rejected"
        super().__init__(message or default)


class MailTypeMismatchError(MailRejectedError):
    """Raised when a handler received a mail variant it does not support."""
    kind = RejectionKind.TYPE_MISMATCH


class StolenPackageError(MailRejectedError):
    """Raised when a parcel is found to have been emptied in transit."""
    kind = RejectionKind.STOLEN_PACKAGE


class IllegalPackageError(MailRejectedError):
    """Raised when a parcel carries forbidden goods."""
    kind = RejectionKind.ILLEGAL_PACKAGE


_ERRORS_BY_KIND = {
    error.kind: error
    for error in (MailTypeMismatchError, StolenPackageError, IllegalPackageError)
}


def error_for(kind: RejectionKind, message: Optional[str] = None) -> MailRejectedError:
    """Build the exception matching a rejection kind."""
    return _ERRORS_BY_KIND[kind](message)
