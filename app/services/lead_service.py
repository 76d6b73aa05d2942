"""
Business logic for the lead-capture form.

Pure Python - no Flask dependencies.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional
import logging

from app.exceptions import ValidationError
from app.validation import validate_email, validate_name, validate_phone

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Lead:
    """A prospective client's contact details"""
    first_name: str
    last_name: str
    email: str
    phone: str = ''

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class LeadService:
    """Validates lead form submissions and hands them to a notifier."""

    def __init__(self, notifier, phone_region: Optional[str] = None):
        self.notifier = notifier
        self.phone_region = phone_region

    @staticmethod
    def validate(data: Mapping[str, Any], phone_region: Optional[str] = None) -> Lead:
        """
        Validate raw form fields.

        Args:
            data: Mapping with firstName, lastName, email and optional phone
            phone_region: Country assumed for phone numbers without "+"

        Returns:
            Lead with trimmed values

        Raises:
            ValidationError: With a {field: message} dict for every bad field
        """
        checks = {
            'firstName': validate_name(data.get('firstName'), "First name"),
            'lastName': validate_name(data.get('lastName'), "Last name"),
            'email': validate_email(data.get('email')),
            'phone': validate_phone(data.get('phone'), phone_region),
        }
        errors: Dict[str, str] = {
            field: result.error for field, result in checks.items() if not result
        }

        if errors:
            logger.info(f"Lead form rejected: {sorted(errors)}")
            raise ValidationError("Lead form is invalid", errors=errors)

        return Lead(
            first_name=str(data['firstName']).strip(),
            last_name=str(data['lastName']).strip(),
            email=str(data['email']).strip(),
            phone=str(data.get('phone') or '').strip(),
        )

    def submit(self, data: Mapping[str, Any]) -> Lead:
        """
        Validate and deliver a lead.

        Raises:
            ValidationError: Invalid form data
            LeadDeliveryError: The notifier could not deliver it
        """
        lead = self.validate(data, self.phone_region)
        self.notifier.send(lead)
        logger.info(f"Lead submitted: {lead.full_name}")
        return lead
