"""
Lead delivery through EmailJS.

The site hands validated leads to a notifier; the e-mail provider itself is
an external service reached over its REST API.
"""

import logging
from typing import Any, Dict, Optional

import requests

from app.exceptions import LeadDeliveryError

logger = logging.getLogger(__name__)

EMAILJS_SEND_URL = 'https://api.emailjs.com/api/v1.0/email/send'


def build_template_params(lead, contact_email: Optional[str] = None) -> Dict[str, Any]:
    """Template variables expected by the lead e-mail template."""
    return {
        'email': lead.email,
        'fullName': lead.full_name,
        'phone': lead.phone or 'Not provided',
        'to_email': contact_email or lead.email,
        'reply_to': lead.email,
    }


class LoggingNotifier:
    """Logs leads instead of sending them. Used when EmailJS is not configured."""

    def __init__(self, contact_email: Optional[str] = None):
        self.contact_email = contact_email

    def send(self, lead) -> None:
        params = build_template_params(lead, self.contact_email)
        logger.warning(f"EmailJS not configured, lead logged only: {params['fullName']} <{params['email']}>")


class EmailJSNotifier:
    """Sends leads through the EmailJS REST API."""

    def __init__(
        self,
        service_id: str,
        template_id: str,
        public_key: str,
        contact_email: Optional[str] = None,
        session: Optional[requests.Session] = None,
        timeout: float = 10
    ):
        self.service_id = service_id
        self.template_id = template_id
        self.public_key = public_key
        self.contact_email = contact_email
        self.session = session or requests.Session()
        self.timeout = timeout

    def send(self, lead) -> None:
        """
        Send one lead.

        Raises:
            LeadDeliveryError: The request failed or EmailJS rejected it
        """
        payload = {
            'service_id': self.service_id,
            'template_id': self.template_id,
            'user_id': self.public_key,
            'template_params': build_template_params(lead, self.contact_email),
        }
        logger.info(f"Sending lead e-mail via EmailJS (service={self.service_id}, template={self.template_id})")

        try:
            response = self.session.post(EMAILJS_SEND_URL, json=payload, timeout=self.timeout)
        except requests.exceptions.RequestException as e:
            logger.error(f"EmailJS request failed: {e.__class__.__name__}: {e}")
            raise LeadDeliveryError(f"Failed to reach EmailJS: {e}") from e

        if not response.ok:
            logger.error(f"EmailJS rejected lead: {response.status_code} {response.text}")
            raise LeadDeliveryError(f"EmailJS error {response.status_code}: {response.text}")

        logger.info("Lead e-mail sent successfully")


class UnconfiguredNotifier:
    """Refuses every lead. Used outside development when EmailJS is not configured."""

    def send(self, lead) -> None:
        logger.error(f"EmailJS not configured, lead from {lead.email} not delivered")
        raise LeadDeliveryError("Email service is not configured")


def create_notifier(config):
    """
    Pick EmailJS when all three credentials are set.

    Without credentials, leads are only logged when LEADS_LOG_ONLY is set
    (development and testing). Otherwise every submission fails so the form
    reports an error instead of accepting a lead nobody receives.
    """
    service_id = config.get('EMAILJS_SERVICE_ID')
    template_id = config.get('EMAILJS_TEMPLATE_ID')
    public_key = config.get('EMAILJS_PUBLIC_KEY')
    contact_email = config.get('CONTACT_EMAIL')

    if service_id and template_id and public_key:
        return EmailJSNotifier(service_id, template_id, public_key, contact_email=contact_email)

    if config.get('LEADS_LOG_ONLY'):
        logger.warning("EmailJS credentials missing, leads will only be logged")
        return LoggingNotifier(contact_email=contact_email)

    logger.error("EmailJS credentials missing, lead submissions will fail")
    return UnconfiguredNotifier()
