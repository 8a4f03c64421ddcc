"""
Tests for domain models (data structures).
"""

import dataclasses

import pytest
import sys
import os

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '../src'))

from domain.models import (
    MailMessage,
    MailPackage,
    Package,
    ProcessingResult,
    RejectionKind,
)
from domain.exceptions import (
    IllegalPackageError,
    MailRejectedError,
    MailTypeMismatchError,
    StolenPackageError,
)


class TestPackage:
    """Test Package value type."""

    def test_package_equality(self):
        """Test packages with same description and price are equal."""
        assert Package("Books", 10) == Package("Books", 10)
        assert hash(Package("Books", 10)) == hash(Package("Books", 10))

    @pytest.mark.parametrize("other", [
        Package("Book", 10),
        Package("Books", 11),
    ])
    def test_package_inequality(self, other):
        """Test packages differing in any field are not equal."""
        assert Package("Books", 10) != other

    def test_package_zero_price_allowed(self):
        """Test zero-priced packages are valid."""
        assert Package("stones", 0).price == 0

    def test_package_negative_price_rejected(self):
        """Test negative price raises ValueError."""
        with pytest.raises(ValueError, match="non-negative"):
            Package("Debt", -1)


class TestMailItems:
    """Test MailMessage and MailPackage value types."""

    def test_message_equality(self):
        """Test messages with equal fields are equal."""
        assert MailMessage("a", "b", "Hi") == MailMessage("a", "b", "Hi")

    @pytest.mark.parametrize("other", [
        MailMessage("x", "b", "Hi"),
        MailMessage("a", "x", "Hi"),
        MailMessage("a", "b", "Bye"),
    ])
    def test_message_inequality(self, other):
        """Test messages differing in one field are not equal."""
        assert MailMessage("a", "b", "Hi") != other

    def test_parcel_equality(self):
        """Test parcels with equal fields and equal packages are equal."""
        assert MailPackage("a", "b", Package("Books", 10)) == MailPackage("a", "b", Package("Books", 10))

    @pytest.mark.parametrize("other", [
        MailPackage("x", "b", Package("Books", 10)),
        MailPackage("a", "x", Package("Books", 10)),
        MailPackage("a", "b", Package("Books", 11)),
        MailPackage("a", "b", Package("Comics", 10)),
    ])
    def test_parcel_inequality(self, other):
        """Test parcels differing in one field are not equal."""
        assert MailPackage("a", "b", Package("Books", 10)) != other

    def test_variants_never_equal(self):
        """Test a message never equals a parcel with the same addresses."""
        assert MailMessage("a", "b", "Hi") != MailPackage("a", "b", Package("Hi", 0))

    def test_empty_addresses_allowed(self):
        """Test empty sender and recipient are legal."""
        message = MailMessage("", "", "")

        assert message.from_address == ""
        assert message.to_address == ""

    def test_items_are_immutable(self):
        """Test mail items cannot be modified after construction."""
        message = MailMessage("a", "b", "Hi")

        with pytest.raises(dataclasses.FrozenInstanceError):
            message.message = "Changed"


class TestProcessingResult:
    """Test ProcessingResult result type."""

    def test_accepted_result(self):
        """Test successful ProcessingResult."""
        message = MailMessage("a", "b", "Hi")
        result = ProcessingResult.accepted(message)

        assert result.success is True
        assert result.item == message
        assert result.rejection is None
        assert result.error_message is None
        assert result.unwrap() is message

    def test_rejected_result(self):
        """Test rejected ProcessingResult."""
        result = ProcessingResult.rejected(
            RejectionKind.ILLEGAL_PACKAGE,
            "contains weapons",
            handler_name="Inspector"
        )

        assert result.success is False
        assert result.item is None
        assert result.rejection is RejectionKind.ILLEGAL_PACKAGE
        assert result.error_message == "contains weapons"
        assert result.handler_name == "Inspector"

    @pytest.mark.parametrize("kind, error", [
        (RejectionKind.TYPE_MISMATCH, MailTypeMismatchError),
        (RejectionKind.STOLEN_PACKAGE, StolenPackageError),
        (RejectionKind.ILLEGAL_PACKAGE, IllegalPackageError),
    ])
    def test_unwrap_raises_matching_error(self, kind, error):
        """Test unwrap raises the exception matching the rejection kind."""
        result = ProcessingResult.rejected(kind, "rejected")

        with pytest.raises(error) as exc_info:
            result.unwrap()

        assert isinstance(exc_info.value, MailRejectedError)
        assert exc_info.value.kind is kind
        assert str(exc_info.value) == "rejected"

    def test_rejected_without_kind_is_invalid(self):
        """Test a failed result must name its rejection kind."""
        with pytest.raises(ValueError, match="rejection kind"):
            ProcessingResult(success=False, error_message="no")

    def test_accepted_without_item_is_invalid(self):
        """Test a successful result must carry an item."""
        with pytest.raises(ValueError, match="item"):
            ProcessingResult(success=True)

    def test_accepted_with_rejection_is_invalid(self):
        """Test a successful result cannot also carry a rejection."""
        with pytest.raises(ValueError):
            ProcessingResult(
                success=True,
                item=MailMessage("a", "b", "Hi"),
                rejection=RejectionKind.STOLEN_PACKAGE
            )

    def test_base_error_default_message(self):
        """Test the base exception can be raised without a kind."""
        error = MailRejectedError()

        assert error.kind is None
        assert str(error) == "mail rejected"
        assert str(MailRejectedError("custom")) == "custom"

    def test_subclass_default_message(self):
        """Test subclasses default to their kind's value."""
        assert str(StolenPackageError()) == "stolen_package"

    def test_repr_success(self):
        """Test __repr__ for successful result."""
        repr_str = repr(ProcessingResult.accepted(MailMessage("a", "b", "Hi")))

        assert "success=True" in repr_str
        assert "MailMessage" in repr_str

    def test_repr_rejected(self):
        """Test __repr__ for rejected result."""
        repr_str = repr(ProcessingResult.rejected(
            RejectionKind.STOLEN_PACKAGE, "Test error", handler_name="Inspector"
        ))

        assert "success=False" in repr_str
        assert "stolen_package" in repr_str
        assert "Inspector" in repr_str
        assert "Test error" in repr_str


if __name__ == '__main__':
    pytest.main([__file__, '-v'])
