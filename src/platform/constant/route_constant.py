# API Route Constants

# Base API
API_BASE = '/api'

# Passenger routes
PASSENGER_BASE = f'{API_BASE}/passenger'
PASSENGER_CREATE = PASSENGER_BASE
PASSENGER_LIST = PASSENGER_BASE
PASSENGER_GET = f'{PASSENGER_BASE}/{{passenger_id}}'

# Trip routes
TRIP_BASE = f'{API_BASE}/trip'
TRIP_CREATE = TRIP_BASE
TRIP_LIST = TRIP_BASE
TRIP_GET = f'{TRIP_BASE}/{{trip_id}}'
TRIP_SEATS = f'{TRIP_BASE}/{{trip_id}}/seats'

# Reservation routes (scoped to a trip)
TRIP_BOOKING = f'{TRIP_BASE}/{{trip_id}}/booking'
TRIP_CANCELLATION = f'{TRIP_BASE}/{{trip_id}}/cancellation'
TRIP_WAITLIST = f'{TRIP_BASE}/{{trip_id}}/waitlist'

# Fleet-wide listings
BOOKING_LIST = f'{API_BASE}/booking'
WAITLIST_LIST = f'{API_BASE}/waitlist'

HEALTH = '/health'
