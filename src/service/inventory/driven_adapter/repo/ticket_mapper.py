from src.service.inventory.domain.entity.ticket_entity import Ticket
from src.service.inventory.driven_adapter.model.ticket_model import TicketModel


def ticket_model_to_entity(ticket_model: TicketModel) -> Ticket:
    return Ticket(
        id=ticket_model.id,
        name=ticket_model.name,
        price=ticket_model.price,
        quantity=ticket_model.quantity,
        event_id=ticket_model.event_id,
        created_at=ticket_model.created_at,
        updated_at=ticket_model.updated_at,
    )
