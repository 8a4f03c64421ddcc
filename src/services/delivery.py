"""
Real mail delivery stand-in.

The actual mail transport lives outside this project; this stage only
marks the point where mail leaves the pipeline.
"""

import logging

from domain.models import MailItem

logger = logging.getLogger(__name__)


class RealMailService:
    """Terminal delivery stage. Hands the item back unchanged."""

    def deliver(self, mail: MailItem) -> MailItem:
        logger.debug(f"Delivering mail from {mail.from_address} to {mail.to_address}")
        return mail
