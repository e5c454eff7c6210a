"""Attendance Status Enum"""

from enum import StrEnum


class AttendanceStatus(StrEnum):
    # No transition graph: any status may be overwritten by any other
    REGISTERED = 'registered'
    CONFIRMED = 'confirmed'
    CANCELLED = 'cancelled'
    ATTENDED = 'attended'
    NO_SHOW = 'no_show'
