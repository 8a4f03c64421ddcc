"""
Spy service that watches correspondence and reports it to a logger.

Mail to or from the watched identity is reported at WARNING level with
its contents; everything else is reported at INFO level without them.
"""

import logging
from typing import Optional

from domain.mail_worker import MailService
from domain.models import MailItem, MailMessage, MailPackage, ProcessingResult

AUSTIN_POWERS = "Austin Powers"


class Spy(MailService):
    """
    Logs every item it sees and always passes it on unchanged.

    Works on both mail variants: for a parcel, the package description
    is reported in place of a message body.
    """

    def __init__(
        self,
        logger: Optional[logging.Logger] = None,
        watched_identity: str = AUSTIN_POWERS
    ):
        self.log = logger or logging.getLogger(__name__)
        self.watched_identity = watched_identity

    def process_mail(self, mail: MailItem) -> ProcessingResult:
        if self.watched_identity in (mail.from_address, mail.to_address):
            self.log.warning(
                f"Detected target mail correspondence: from {mail.from_address} "
                f"to {mail.to_address} \"{_describe(mail)}\""
            )
        else:
            self.log.info(f"Usual correspondence: from {mail.from_address} to {mail.to_address}")

        return ProcessingResult.accepted(mail)


def _describe(mail: MailItem) -> str:
    if isinstance(mail, MailMessage):
        return mail.message
    if isinstance(mail, MailPackage):
        return mail.content.content
    return ""
