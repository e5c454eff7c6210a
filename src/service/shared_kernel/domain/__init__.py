"""Shared Kernel Domain Layer"""

from src.service.shared_kernel.domain.entity.event_entity import EventEntity
from src.service.shared_kernel.domain.entity.user_entity import UserEntity

__all__ = ['EventEntity', 'UserEntity']
