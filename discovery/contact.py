import re
from typing import Optional
from urllib.parse import quote


def booking_message(name: str) -> str:
    return f"Hi {name}, I'm interested in booking a massage session. Could you please share your availability?"


def whatsapp_url(phone: Optional[str], message: str) -> str:
    """wa.me deep link; wa.me wants the bare international number, digits only."""
    digits = re.sub(r"\D", "", phone or "")
    return f"https://wa.me/{digits}?text={quote(message, safe='')}"
