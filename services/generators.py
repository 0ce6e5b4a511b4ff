"""
Form-filling helpers: sender/recipient names, gift messages, and
throwaway email / date-of-birth values for registration.
"""

import random
import string
import threading
from datetime import date, timedelta

FIRST_NAMES = [
    "Andrea", "Bea", "Carlo", "Dianne", "Enzo", "Francis", "Gabriel", "Hannah",
    "Isabel", "Joshua", "Kyla", "Lance", "Miguel", "Nicole", "Paolo", "Rhea",
    "Samantha", "Tristan", "Vince", "Ysabel",
]

LAST_NAMES = [
    "Aquino", "Bautista", "Castillo", "Dela Cruz", "Estrada", "Fernandez",
    "Garcia", "Hernandez", "Ignacio", "Jimenez", "Lopez", "Mendoza",
    "Navarro", "Ocampo", "Pascual", "Reyes", "Santos", "Torres",
]

MESSAGES = [
    "You're the light in the dark. You cheer me up when I'm down. Here are some drinks for you!",
    "Coffee's on me today. Thanks for always being there!",
    "A little pick-me-up for your busy week.",
    "Happy birthday! Treat yourself to something sweet.",
    "For all the late nights and early mornings. Enjoy!",
    "Thank you for everything. This one's for you.",
    "Just because. Have a great day!",
    "Congrats on the new job! Drinks are on me.",
]

EMAIL_DOMAINS = ["gmail.com", "yahoo.com", "outlook.com", "hotmail.com", "icloud.com", "protonmail.com"]

MIN_AGE = 18
MAX_AGE = 65

_lock = threading.Lock()
_name_index = 0
_message_index = 0


def random_full_name() -> str:
    return f"{random.choice(FIRST_NAMES)} {random.choice(LAST_NAMES)}"


def next_full_name() -> str:
    """Next name in a fixed cycle through both name lists."""
    global _name_index
    with _lock:
        first = FIRST_NAMES[_name_index % len(FIRST_NAMES)]
        last = LAST_NAMES[_name_index % len(LAST_NAMES)]
        _name_index = (_name_index + 1) % max(len(FIRST_NAMES), len(LAST_NAMES))
    return f"{first} {last}"


def generate_both_names() -> dict:
    return {"senderName": next_full_name(), "recipientName": next_full_name()}


def random_message() -> str:
    return random.choice(MESSAGES)


def next_message() -> str:
    global _message_index
    with _lock:
        message = MESSAGES[_message_index]
        _message_index = (_message_index + 1) % len(MESSAGES)
    return message


def generate_email() -> str:
    local = "".join(random.choices(string.ascii_lowercase + string.digits, k=14))
    return f"{local}@{random.choice(EMAIL_DOMAINS)}"


def _years_ago(today: date, years: int) -> date:
    try:
        return today.replace(year=today.year - years)
    except ValueError:
        # Feb 29 in a non-leap target year
        return today.replace(year=today.year - years, day=28)


def generate_dob(today: date = None) -> str:
    """Random date of birth for an adult aged 18 to 65, as YYYY-MM-DD."""
    today = today or date.today()
    latest = _years_ago(today, MIN_AGE)
    earliest = _years_ago(today, MAX_AGE)
    offset = random.randint(0, (latest - earliest).days)
    return (earliest + timedelta(days=offset)).isoformat()


def generate_all() -> dict:
    """Names and a message for the batch send form."""
    names = generate_both_names()
    return {
        "senderName": names["senderName"],
        "recipientName": names["recipientName"],
        "message": next_message(),
    }


def generate_random() -> dict:
    """Like generate_all, but drawn at random instead of cycling."""
    return {
        "senderName": random_full_name(),
        "recipientName": random_full_name(),
        "message": random_message(),
    }
