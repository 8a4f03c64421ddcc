"""
Inspector service that checks parcels before delivery.

Parcels are rejected if their contents were stolen in transit, or if
they carry forbidden goods. Letters are never inspected.
"""

from typing import Sequence

from domain.mail_worker import MailService
from domain.models import MailItem, MailPackage, ProcessingResult, RejectionKind

STONES = "stones"
WEAPONS = "weapons"
BANNED_SUBSTANCE = "banned substance"


class Inspector(MailService):
    """
    Rejects stolen or illegal parcels.

    The stolen check runs first, so a description matching both checks
    is reported as stolen.
    """

    def __init__(
        self,
        stolen_marker: str = STONES,
        forbidden: Sequence[str] = (WEAPONS, BANNED_SUBSTANCE)
    ):
        # A bare string is one term, not a sequence of characters
        if isinstance(forbidden, str):
            forbidden = (forbidden,)

        if not stolen_marker:
            raise ValueError("stolen_marker must not be empty")
        if not all(forbidden):
            raise ValueError("forbidden terms must not be empty")

        self.stolen_marker = stolen_marker
        self.forbidden = tuple(forbidden)

    def process_mail(self, mail: MailItem) -> ProcessingResult:
        if not isinstance(mail, MailPackage):
            return ProcessingResult.accepted(mail)

        description = mail.content.content

        if self.stolen_marker in description:
            return ProcessingResult.rejected(
                RejectionKind.STOLEN_PACKAGE,
                f"Stolen package: \"{description}\"",
                handler_name=self.name
            )

        # First forbidden term found, if any
        found = next((term for term in self.forbidden if term in description), None)
        if found is not None:
            return ProcessingResult.rejected(
                RejectionKind.ILLEGAL_PACKAGE,
                f"Illegal package: \"{description}\" contains {found}",
                handler_name=self.name
            )

        return ProcessingResult.accepted(mail)
