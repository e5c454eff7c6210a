API_PREFIX = '/api'

# Attendee
ATTENDEE_BASE = f'{API_PREFIX}/attendees'
ATTENDEE_REGISTER = f'{ATTENDEE_BASE}/register'
ATTENDEE_GET = f'{ATTENDEE_BASE}/{{attendee_id}}'
ATTENDEE_BY_EVENT = f'{ATTENDEE_BASE}/event/{{event_id}}'
ATTENDEE_BY_USER = f'{ATTENDEE_BASE}/user/{{user_id}}'
ATTENDEE_EVENT_STATS = f'{ATTENDEE_BASE}/event/{{event_id}}/stats'
ATTENDEE_STATUS = f'{ATTENDEE_BASE}/{{attendee_id}}/status'
ATTENDEE_PAYMENT = f'{ATTENDEE_BASE}/{{attendee_id}}/payment'

# Ticket
TICKET_BASE = f'{API_PREFIX}/tickets'
TICKET_AVAILABLE = f'{TICKET_BASE}/available'
TICKET_GET = f'{TICKET_BASE}/{{ticket_id}}'
TICKET_BY_EVENT = f'{TICKET_BASE}/event/{{event_id}}'
TICKET_AVAILABLE_BY_EVENT = f'{TICKET_BASE}/event/{{event_id}}/available'
TICKET_QUANTITY = f'{TICKET_BASE}/{{ticket_id}}/quantity'
TICKET_DECREASE = f'{TICKET_BASE}/{{ticket_id}}/decrease'
TICKET_INCREASE = f'{TICKET_BASE}/{{ticket_id}}/increase'
