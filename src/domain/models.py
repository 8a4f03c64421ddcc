"""
Data models for the mail handling domain.

These immutable value types define the contract between mail handlers.
Handlers never mutate an item; a handler that "changes" mail returns a new one.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


@dataclass(frozen=True)
class Package:
    """
    Goods carried inside a parcel.

    Attributes:
        content: Human-readable description of the goods
        price: Declared value, never negative
    """
    content: str
    price: int

    def __post_init__(self):
        if self.price < 0:
            raise ValueError(f"Package price must be non-negative, got {self.price}")


@dataclass(frozen=True)
class MailMessage:
    """
    Plain letter with a text body.

    Attributes:
        from_address: Sender
        to_address: Recipient
        message: Text body
    """
    from_address: str
    to_address: str
    message: str


@dataclass(frozen=True)
class MailPackage:
    """
    Parcel carrying a Package.

    Attributes:
        from_address: Sender
        to_address: Recipient
        content: The package being shipped
    """
    from_address: str
    to_address: str
    content: Package


# Closed set of mail variants handled by the pipeline
MailItem = Union[MailMessage, MailPackage]


class RejectionKind(Enum):
    """Why a handler refused to pass an item on."""
    TYPE_MISMATCH = "type_mismatch"
    STOLEN_PACKAGE = "stolen_package"
    ILLEGAL_PACKAGE = "illegal_package"


@dataclass(frozen=True)
class ProcessingResult:
    """
    Result of passing a mail item through a handler.

    This explicit result type carries rejections back to the caller
    instead of using exceptions for control flow.

    Attributes:
        success: Whether the item was passed on
        item: Item returned by the handler (None when rejected)
        rejection: Rejection kind (None on success)
        error_message: Rejection description (None on success)
        handler_name: Name of the handler that rejected the item
    """
    success: bool
    item: Optional[MailItem] = None
    rejection: Optional[RejectionKind] = None
    error_message: Optional[str] = None
    handler_name: Optional[str] = None

    def __post_init__(self):
        if self.success:
            if self.item is None or self.rejection is not None:
                raise ValueError("Successful result must carry an item and no rejection")
        elif self.rejection is None:
            raise ValueError("Rejected result must carry a rejection kind")

    @classmethod
    def accepted(cls, item: MailItem) -> 'ProcessingResult':
        return cls(success=True, item=item)

    @classmethod
    def rejected(
        cls,
        kind: RejectionKind,
        error_message: str,
        handler_name: Optional[str] = None
    ) -> 'ProcessingResult':
        return cls(
            success=False,
            rejection=kind,
            error_message=error_message,
            handler_name=handler_name
        )

    def unwrap(self) -> MailItem:
        """
        Return the item, or raise the exception matching the rejection.

        Returns:
            MailItem: The processed item

        Raises:
            MailRejectedError: Subclass matching the rejection kind
        """
        if self.success:
            return self.item

        from .exceptions import error_for
        raise error_for(self.rejection, self.error_message)

    def __repr__(self) -> str:
        """Human-readable representation for logging."""
        if self.success:
            return f"ProcessingResult(success=True, item={self.item!r})"
        else:
            return (
                f"ProcessingResult(success=False, rejection={self.rejection.value}, "
                f"handler={self.handler_name}, error={self.error_message})"
            )
