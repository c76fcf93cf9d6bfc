"""Box Office Interfaces"""

from src.service.box_office.app.interface.i_box_office_query_repo import IBoxOfficeQueryRepo

__all__ = ['IBoxOfficeQueryRepo']
