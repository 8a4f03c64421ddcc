"""
Mail worker pipeline - core business logic.

A worker passes each mail item through its handlers in order:
1. Each handler receives the item returned by the previous one
2. The first rejection stops the traversal and is returned as-is
3. Otherwise the final item is handed to the real mail service

No exceptions are used for rejections; every outcome is a ProcessingResult.
"""

import logging
from abc import ABC, abstractmethod
from typing import Sequence

from .models import MailItem, ProcessingResult
from services.delivery import RealMailService

logger = logging.getLogger(__name__)


class MailService(ABC):
    """
    A stage that handles mail in flight.

    A stage may pass the item on unchanged, return a different item,
    or reject it. Side effects are specific to each implementation.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def process_mail(self, mail: MailItem) -> ProcessingResult:
        """
        Handle a single mail item.

        Args:
            mail: Item to handle

        Returns:
            ProcessingResult with the (possibly new) item, or a rejection
        """


class UntrustworthyMailWorker(MailService):
    """
    Runs mail through a chain of handlers before real delivery.

    The real mail service is always last and only sees mail that every
    handler accepted.
    """

    def __init__(
        self,
        services: Sequence[MailService],
        real_mail_service: RealMailService
    ):
        """
        Initialize the worker.

        Args:
            services: Handlers applied in order
            real_mail_service: Terminal delivery stage
        """
        if real_mail_service is None:
            raise ValueError("real_mail_service is required")

        self._services = tuple(services)
        self._real_mail_service = real_mail_service

    @property
    def services(self) -> Sequence[MailService]:
        return self._services

    def get_real_mail_service(self) -> RealMailService:
        return self._real_mail_service

    def process_mail(self, mail: MailItem) -> ProcessingResult:
        """
        Pass mail through every handler, then deliver it.

        Args:
            mail: Item to process

        Returns:
            ProcessingResult wrapping the delivered item, or the first rejection
        """
        for service in self._services:
            result = service.process_mail(mail)

            if not result.success:
                logger.warning(
                    f"Mail from {mail.from_address} to {mail.to_address} rejected by "
                    f"{service.name}: {result.rejection.value}"
                )
                return result

            mail = result.item

        return ProcessingResult.accepted(self._real_mail_service.deliver(mail))
