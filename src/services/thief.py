"""
Thief service that swaps valuable parcels for stones.
"""

import logging
import threading

from domain.mail_worker import MailService
from domain.models import (
    MailItem,
    MailPackage,
    Package,
    ProcessingResult,
    RejectionKind,
)

logger = logging.getLogger(__name__)

STOLEN_PREFIX = "stones instead of "


class Thief(MailService):
    """
    Steals every parcel worth at least min_price.

    The stolen parcel keeps its sender and recipient, but its package is
    replaced with a worthless one. The value of every stolen package is
    added to a running total, readable via get_stolen_value().

    Only parcels are accepted: any other mail is rejected as a type
    mismatch.
    """

    def __init__(self, min_price: int):
        self.min_price = min_price
        self._stolen_price = 0
        self._lock = threading.Lock()

    def get_stolen_value(self) -> int:
        with self._lock:
            return self._stolen_price

    def process_mail(self, mail: MailItem) -> ProcessingResult:
        if not isinstance(mail, MailPackage):
            return ProcessingResult.rejected(
                RejectionKind.TYPE_MISMATCH,
                f"{self.name} only handles parcels, got {type(mail).__name__}",
                handler_name=self.name
            )

        package = mail.content
        if package.price < self.min_price:
            return ProcessingResult.accepted(mail)

        with self._lock:
            self._stolen_price += package.price

        logger.debug(f"Stole package worth {package.price} from {mail.from_address}")

        return ProcessingResult.accepted(MailPackage(
            from_address=mail.from_address,
            to_address=mail.to_address,
            content=Package(STOLEN_PREFIX + package.content, 0)
        ))
