# User
USER_BASE = '/api/user'
USER_CREATE = USER_BASE
USER_LIST = USER_BASE
USER_ME = f'{USER_BASE}/me'
USER_BOOKED_EVENTS = f'{USER_BASE}/me/booked-events'
USER_BOOKED_EVENT = f'{USER_BASE}/me/booked-events/{{event_id}}'

# Auth
AUTH_BASE = '/api/auth'
AUTH_LOGIN = f'{AUTH_BASE}/login'

# Event
EVENT_BASE = '/api/event'
EVENT_GET = f'{EVENT_BASE}/{{event_id}}'
EVENT_TICKETS = f'{EVENT_BASE}/{{event_id}}/tickets'
EVENT_TICKET = f'{EVENT_BASE}/{{event_id}}/tickets/{{ticket_id}}'

# Ops
HEALTH = '/health'
METRICS = '/metrics'
