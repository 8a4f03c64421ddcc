"""
Entry point wiring the untrustworthy mail worker.

Thin orchestration layer: builds the spy -> thief -> inspector chain in front
of the real mail service and runs mail through it.
Policy: rejected mail is logged and reported, never retried.
"""

import logging
import os
from typing import Any, Dict, Iterable, List, Optional, Tuple

from domain.mail_worker import UntrustworthyMailWorker
from domain.models import MailItem, MailMessage, MailPackage, Package, ProcessingResult
from services.delivery import RealMailService
from services.inspector import Inspector
from services.spy import AUSTIN_POWERS, Spy
from services.thief import Thief

# Configure logging
LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO').upper()
logger = logging.getLogger()
logger.setLevel(LOG_LEVEL)

# Add console handler when run directly (test runners and hosts bring their own)
if not logger.handlers:
    console_handler = logging.StreamHandler()
    formatter = logging.Formatter('%(levelname)s - %(message)s')
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

# Environment variables
WATCHED_IDENTITY = os.environ.get('WATCHED_IDENTITY', AUSTIN_POWERS)
THIEF_MIN_PRICE = os.environ.get('THIEF_MIN_PRICE', '1000')


def build_worker(
    spy_logger: Optional[logging.Logger] = None,
    watched_identity: str = WATCHED_IDENTITY,
    min_price: Any = THIEF_MIN_PRICE
) -> Tuple[UntrustworthyMailWorker, Thief]:
    """
    Build the reference worker composition.

    Args:
        spy_logger: Logger the spy reports to (defaults to the spy module logger)
        watched_identity: Sender/recipient the spy reports at WARNING level
        min_price: Minimum parcel value the thief steals

    Returns:
        Tuple of (worker, thief) so callers can read the stolen total

    Raises:
        ValueError: If min_price is not an integer
    """
    thief = Thief(int(min_price))
    worker = UntrustworthyMailWorker(
        [Spy(spy_logger, watched_identity), thief, Inspector()],
        RealMailService()
    )
    return worker, thief


def process_batch(
    worker: UntrustworthyMailWorker,
    items: Iterable[MailItem]
) -> List[ProcessingResult]:
    """
    Run each item through the worker and log a summary.

    Args:
        worker: Worker to process mail with
        items: Mail items, processed in order

    Returns:
        One ProcessingResult per item
    """
    logger.info("=" * 70)
    logger.info("Mail Worker - Started")
    logger.info("=" * 70)

    results = []
    for item in items:
        result = worker.process_mail(item)
        results.append(result)

        if result.success:
            logger.info(f"✓ Delivered mail from {item.from_address} to {item.to_address}")
        else:
            logger.warning(
                f"⚠ Mail from {item.from_address} to {item.to_address} REJECTED "
                f"({result.rejection.value}): {result.error_message}"
            )

    logger.info("=" * 70)
    logger.info(f"Batch processing complete: {len(results)} item(s)")
    delivered_count = sum(1 for r in results if r.success)
    logger.info(f"  Delivered: {delivered_count}")
    logger.info(f"  Rejected: {len(results) - delivered_count}")
    logger.info("=" * 70)

    return results


def run_demo(spy_logger: Optional[logging.Logger] = None) -> Dict[str, Any]:
    """
    Replay the classic scenario stage by stage.

    The spy reads a letter to Austin Powers, the thief empties a valuable
    parcel, and the inspector catches the theft.

    Returns:
        Dict with the spy, thief and inspector results and the stolen total
    """
    thief = Thief(1000)
    inspector = Inspector()
    spy = Spy(spy_logger, AUSTIN_POWERS)

    mail_message = MailMessage(AUSTIN_POWERS, "d", "Hi")
    mail_package = MailPackage(AUSTIN_POWERS, "z", Package("Something valuable", 1000))

    spy_result = spy.process_mail(mail_message)
    thief_result = thief.process_mail(mail_package)
    logger.info(f"Stolen value: {thief.get_stolen_value()}")

    inspector_result = inspector.process_mail(thief_result.item)
    logger.info(f"Inspector result: {inspector_result!r}")

    return {
        'spy': spy_result,
        'thief': thief_result,
        'stolen_value': thief.get_stolen_value(),
        'inspector': inspector_result,
    }


def main() -> None:
    run_demo()

    worker, thief = build_worker()
    process_batch(worker, [
        MailPackage(WATCHED_IDENTITY, "z", Package("Something valuable", 1000)),
        MailPackage("x", "y", Package("Postcards", 5)),
        MailPackage("x", "y", Package("weapons", 10)),
        MailMessage("x", "y", "Hi"),
    ])
    logger.info(f"Total stolen: {thief.get_stolen_value()}")


if __name__ == '__main__':
    main()
