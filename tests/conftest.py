"""
Pytest configuration and fixtures for all tests.
"""

import os
import sys
import pytest

# Add src to Python path before any imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

# Set up test environment variables before importing any modules
os.environ.setdefault('WATCHED_IDENTITY', 'Austin Powers')
os.environ.setdefault('THIEF_MIN_PRICE', '1000')
os.environ.setdefault('LOG_LEVEL', 'INFO')

from domain.models import MailMessage, MailPackage, Package  # noqa: E402


@pytest.fixture
def valuable_parcel():
    """Parcel worth exactly the default thief threshold."""
    return MailPackage("Austin Powers", "z", Package("Something valuable", 1000))


@pytest.fixture
def cheap_parcel():
    """Parcel below the default thief threshold."""
    return MailPackage("Austin Powers", "z", Package("Something cheap", 500))


@pytest.fixture
def target_message():
    """Letter sent by the watched identity."""
    return MailMessage("Austin Powers", "d", "Hi")
