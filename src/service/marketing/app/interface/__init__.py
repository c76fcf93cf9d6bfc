"""Marketing Interfaces"""

from src.service.marketing.app.interface.i_marketing_query_repo import IMarketingQueryRepo

__all__ = ['IMarketingQueryRepo']
