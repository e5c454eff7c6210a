"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.inventory.app.command import (
    adjust_ticket_quantity_use_case,
    create_ticket_use_case,
    delete_ticket_use_case,
    update_ticket_use_case,
)
from src.service.inventory.app.query import get_ticket_use_case, list_tickets_use_case
from src.service.registration.app.command import (
    delete_attendee_use_case,
    register_attendee_use_case,
    update_attendee_use_case,
)
from src.service.registration.app.query import (
    get_attendee_use_case,
    get_event_attendance_stats_use_case,
    list_attendees_use_case,
)
from src.service.shared_kernel.driving_adapter.auth import role_auth


WIRE_MODULES: list[ModuleType] = [
    # Registration
    register_attendee_use_case,
    update_attendee_use_case,
    delete_attendee_use_case,
    get_attendee_use_case,
    list_attendees_use_case,
    get_event_attendance_stats_use_case,
    # Inventory
    create_ticket_use_case,
    update_ticket_use_case,
    adjust_ticket_quantity_use_case,
    delete_ticket_use_case,
    get_ticket_use_case,
    list_tickets_use_case,
    # Auth
    role_auth,
]
