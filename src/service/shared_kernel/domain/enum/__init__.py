"""Shared Kernel Enums"""

from src.service.shared_kernel.domain.enum.user_role import UserRole

__all__ = ['UserRole']
