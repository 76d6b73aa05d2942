"""
JSON API for portfolio content.
"""

from flask import Blueprint, request
import logging

from app.cache import cache
from app.exceptions import AcquisitionError
from app.models import CATEGORY_LABELS
from app.utils.portfolio_utils import get_portfolio_service
from app.utils.response_helpers import (
    success_response,
    error_response,
    not_found_response,
    service_unavailable_response
)

logger = logging.getLogger(__name__)

api_bp = Blueprint('api', __name__, url_prefix='/api/portfolio')


@api_bp.errorhandler(AcquisitionError)
def handle_acquisition_error(e):
    return service_unavailable_response('Portfolio content', str(e))


@api_bp.route('')
@cache.cached(query_string=True, response_filter=lambda rv: rv[1] == 200)
def get_portfolio():
    """All projects, most recent first; ?category= narrows to one bucket"""
    category = request.args.get('category')
    if category and category not in CATEGORY_LABELS:
        return error_response(
            f'Unknown category: {category}',
            status=400,
            details={'choices': list(CATEGORY_LABELS)},
            error_code='UNKNOWN_CATEGORY'
        )

    items = get_portfolio_service().filter_by_category(category)
    return success_response(data=[item.to_dict() for item in items])


@api_bp.route('/categories')
def get_categories():
    """Filter buckets that have at least one project"""
    categories = get_portfolio_service().available_categories()
    return success_response(data=[
        {'id': bucket, 'label': label} for bucket, label in categories
    ])


@api_bp.route('/<slug>')
def get_project(slug):
    """One project by slug"""
    project = get_portfolio_service().get_by_slug(slug)
    if project is None:
        return not_found_response('Project', slug)
    return success_response(data=project.to_dict())
