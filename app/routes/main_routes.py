from flask import Blueprint, render_template, current_app, send_file, abort
import logging

from app.exceptions import AcquisitionError
from app.utils.portfolio_utils import get_portfolio_service

logger = logging.getLogger(__name__)

main_bp = Blueprint('main', __name__)


@main_bp.route('/')
def index():
    """Landing page with the most recent projects and the lead form"""
    logger.info("Accessing homepage")

    try:
        projects = get_portfolio_service().recent_projects()
    except AcquisitionError as e:
        # The landing page still renders; the projects section shows as empty
        logger.error(f"Error loading projects: {e}")
        projects = []

    logger.info(f"Showing {len(projects)} recent projects")
    return render_template('pages/index.html', projects=projects)


@main_bp.route('/data/portfolio.csv')
def portfolio_csv():
    """Serve the raw content file, for sites configured to fetch it remotely"""
    if current_app.config.get('PORTFOLIO_SOURCE') != 'local':
        abort(404)

    try:
        return send_file(
            current_app.config['PORTFOLIO_CSV_PATH'],
            mimetype='text/csv',
            max_age=current_app.config['CACHE_DEFAULT_TIMEOUT']
        )
    except FileNotFoundError:
        logger.error(f"Portfolio CSV missing: {current_app.config['PORTFOLIO_CSV_PATH']}")
        abort(404)
