"""User Role Enum"""

from enum import StrEnum


class UserRole(StrEnum):
    USER = 'user'
    ADMIN = 'admin'
    ORGANIZER = 'organizer'
    ATTENDEE = 'attendee'
