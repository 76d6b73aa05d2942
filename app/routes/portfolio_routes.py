from flask import Blueprint, render_template, request, abort
import logging

from app.exceptions import AcquisitionError
from app.models import CATEGORY_LABELS
from app.utils.portfolio_utils import get_portfolio_service

# Set up logger
logger = logging.getLogger(__name__)

portfolio_bp = Blueprint('portfolio', __name__,
                         url_prefix='/portfolio',
                         template_folder='../../templates')


@portfolio_bp.errorhandler(AcquisitionError)
def handle_acquisition_error(e):
    """Content could not be loaded; the page cannot render without it"""
    logger.error(f"Portfolio content unavailable: {e}")
    return render_template('pages/unavailable.html'), 503


@portfolio_bp.route('')
def listing():
    """Portfolio listing page with optional category filter"""
    category = request.args.get('category', 'all')
    if category not in CATEGORY_LABELS:
        logger.warning(f"Unknown category filter '{category}', showing all")
        category = 'all'

    service = get_portfolio_service()
    items = service.filter_by_category(category)
    logger.info(f"Portfolio listing: category={category}, {len(items)} items")

    return render_template('pages/portfolio.html',
                           items=items,
                           categories=service.available_categories(),
                           active_category=category)


@portfolio_bp.route('/<slug>')
def detail(slug):
    """Project detail page"""
    project = get_portfolio_service().get_by_slug(slug)
    if project is None:
        abort(404)

    return render_template('pages/portfolio_detail.html', project=project)
