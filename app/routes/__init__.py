# Routes package initialization
from app.routes.main_routes import main_bp
from app.routes.portfolio_routes import portfolio_bp
from app.routes.portfolio_api import api_bp
from app.routes.lead_routes import leads_bp
from app.routes.admin_routes import admin_bp

__all__ = [
    'main_bp',
    'portfolio_bp',
    'api_bp',
    'leads_bp',
    'admin_bp'
]
