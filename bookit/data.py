# bookit/data.py

KEYS = {
    "users": "sb_users",
    "services": "sb_services",
    "bookings": "sb_bookings",
    "auth": "sb_auth",
}

TIME_SLOTS = [
    "09:00 AM", "09:30 AM", "10:00 AM", "10:30 AM",
    "11:00 AM", "11:30 AM", "12:00 PM", "12:30 PM",
    "01:00 PM", "01:30 PM", "02:00 PM", "02:30 PM",
    "03:00 PM", "03:30 PM", "04:00 PM", "04:30 PM",
    "05:00 PM", "05:30 PM", "06:00 PM",
]

BOOKING_WINDOW_DAYS = 60

ROLE_HOME = {
    "owner": "/owner",
    "user": "/dashboard",
}

LOGIN_VIEW = "/login"
