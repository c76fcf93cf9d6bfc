"""Shared Kernel Interfaces"""

from src.service.shared_kernel.app.interface.i_row_source import IRowSource, Row

__all__ = ['IRowSource', 'Row']
