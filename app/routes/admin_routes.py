"""
Admin routes for content maintenance.

The parsed portfolio collection is cached for the life of the process;
these endpoints let an editor pick up a changed content file without a
restart.
"""

from flask import Blueprint
import logging

from app.exceptions import AcquisitionError
from app.utils.portfolio_utils import clear_portfolio_caches, get_portfolio_service
from app.utils.response_helpers import success_response, service_unavailable_response

logger = logging.getLogger(__name__)

admin_bp = Blueprint('admin', __name__, url_prefix='/admin')


@admin_bp.route('/cache/clear', methods=['POST'])
def clear_cache():
    """Clear the portfolio caches and reload the content file."""
    clear_portfolio_caches()
    logger.info("Portfolio caches cleared")

    try:
        items = get_portfolio_service().fetch_portfolio_data()
    except AcquisitionError as e:
        return service_unavailable_response('Portfolio content', str(e))

    return success_response(
        data={'portfolio_items': len(items)},
        message='Portfolio cache cleared'
    )
