from src.service.registration.domain.entity.attendee_entity import Attendee
from src.service.registration.domain.enum.attendance_status import AttendanceStatus
from src.service.registration.driven_adapter.model.attendee_model import AttendeeModel


def attendee_model_to_entity(attendee_model: AttendeeModel) -> Attendee:
    return Attendee(
        id=attendee_model.id,
        user_id=attendee_model.user_id,
        event_id=attendee_model.event_id,
        status=AttendanceStatus(attendee_model.status),
        notes=attendee_model.notes,
        is_paid=attendee_model.is_paid,
        payment_amount=attendee_model.payment_amount,
        created_at=attendee_model.created_at,
        updated_at=attendee_model.updated_at,
    )
