"""
Vendor table rows, related-record counts and field checks
"""

import re
from collections import Counter
from typing import Any, Dict, Iterable, List, Mapping, Optional

from vowsync.schemas.vendor import Vendor, VendorTableRow
from vowsync.services.filter_service import get_nested_value, is_number

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


class VendorService:
    """Service for vendor table data"""

    @staticmethod
    def count_by_vendor_id(records: Iterable[Any]) -> Dict[str, int]:
        """Number of records per ``vendor_id``; records without one are skipped"""
        counts = Counter(get_nested_value(record, "vendor_id") for record in records)
        counts.pop(None, None)
        return dict(counts)

    @staticmethod
    def transform_to_table_rows(
        vendors: Iterable[Vendor],
        contacts_counts: Mapping[str, int],
        payments_counts: Mapping[str, int],
        invoices_counts: Mapping[str, int]
    ) -> List[VendorTableRow]:
        return [
            VendorTableRow(
                **vendor.model_dump(),
                contacts_count=contacts_counts.get(vendor.id, 0),
                payments_count=payments_counts.get(vendor.id, 0),
                invoices_count=invoices_counts.get(vendor.id, 0),
            )
            for vendor in vendors
        ]

    @staticmethod
    def mask_account_number(account_number: Optional[str]) -> str:
        """Show only the last four digits, e.g. '****6789'"""
        if not account_number or len(account_number) < 4:
            return ""
        return "****" + account_number[-4:]

    @staticmethod
    def is_valid_email(email: Optional[str]) -> bool:
        # Empty is allowed, the field is optional
        if not email:
            return True
        return bool(EMAIL_PATTERN.match(email))

    @staticmethod
    def is_valid_url(url: Optional[str]) -> bool:
        if not url:
            return True
        return url.startswith("http://") or url.startswith("https://")

    @staticmethod
    def is_valid_percentage(value: Any) -> bool:
        if value is None:
            return True
        return is_number(value) and 0 <= value <= 100

    @staticmethod
    def is_positive_number(value: Any) -> bool:
        if value is None:
            return True
        return is_number(value) and value > 0

    @staticmethod
    def field_errors(vendor: Vendor) -> Dict[str, str]:
        """Messages for the fields of ``vendor`` that fail their format check"""
        errors: Dict[str, str] = {}
        if not VendorService.is_valid_email(vendor.contact_email):
            errors["contact_email"] = "Invalid email address"
        if not VendorService.is_valid_url(vendor.website):
            errors["website"] = "Website must start with http:// or https://"
        if not VendorService.is_positive_number(vendor.contract_value):
            errors["contract_value"] = "Contract value must be greater than 0"
        if not VendorService.is_valid_percentage(vendor.cancellation_fee_percentage):
            errors["cancellation_fee_percentage"] = "Cancellation fee must be between 0 and 100"
        return errors
