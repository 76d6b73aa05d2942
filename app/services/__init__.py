"""
Service layer for business logic.

Services contain pure business logic without Flask dependencies.
This makes them testable and reusable.
"""

from app.services.portfolio_service import PortfolioService
from app.services.lead_service import Lead, LeadService

__all__ = ['PortfolioService', 'Lead', 'LeadService']
