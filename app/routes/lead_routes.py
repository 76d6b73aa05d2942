"""
Lead-capture form endpoint.
"""

from flask import Blueprint, request
import logging

from app.exceptions import LeadDeliveryError, ValidationError
from app.utils.portfolio_utils import get_lead_service
from app.utils.response_helpers import (
    success_response,
    validation_error_response,
    bad_gateway_response
)

logger = logging.getLogger(__name__)

leads_bp = Blueprint('leads', __name__, url_prefix='/api/leads')


@leads_bp.route('', methods=['POST'])
def submit_lead():
    """Accept the project enquiry form as JSON or form-encoded data"""
    data = request.get_json(silent=True) if request.is_json else request.form
    data = data or {}

    try:
        lead = get_lead_service().submit(data)
    except ValidationError as e:
        return validation_error_response(e.errors)
    except LeadDeliveryError as e:
        logger.error(f"Error submitting lead: {e}")
        return bad_gateway_response(
            'E-mail delivery',
            'Failed to send message. Please try again or contact us directly.'
        )

    return success_response(
        data={'fullName': lead.full_name},
        message="Thanks! We'll be in touch shortly.",
        status=201
    )
