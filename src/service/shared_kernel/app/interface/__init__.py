"""Shared Kernel Interfaces"""

from src.service.shared_kernel.app.interface.i_event_catalog import IEventCatalog
from src.service.shared_kernel.app.interface.i_user_directory import IUserDirectory

__all__ = ['IEventCatalog', 'IUserDirectory']
