"""
Inquiry composition.

Builds the human-readable booking and contact messages and wraps them in
WhatsApp or mailto deep links. Nothing is sent from here.
"""

from datetime import date
from typing import Optional
from urllib.parse import quote

from . import config
from .availability import format_price
from .catalog import APARTMENTS, apartment_by_key
from .i18n import texts

# Characters encodeURIComponent leaves alone
_URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_component(text: str) -> str:
    return quote(text, safe=_URI_COMPONENT_SAFE)


def count_nights(start: str, end: str) -> int:
    """Day difference between the endpoints plus one."""
    return (date.fromisoformat(end) - date.fromisoformat(start)).days + 1


def whatsapp_link(number: str, message: str) -> str:
    return f"{config.WHATSAPP_BASE}/{number}?text={encode_component(message)}"


# =============================================================================
# BOOKING
# =============================================================================

def compose_booking_message(unit_key: str, start: str, end: str, name: str,
                            guests, total: Optional[float], lang: str,
                            units=APARTMENTS) -> str:
    t = texts(lang)
    unit = apartment_by_key(unit_key, units)
    title = unit.title(lang) if unit else unit_key
    total_text = format_price(total) if total is not None else "N/A"
    lines = [
        f"{t['booking']}:",
        f"{unit_key} - {title}",
        f"{t['dates']}: {start} → {end} ({count_nights(start, end)} {t['nights']})",
        f"{t['name']}: {name}",
        f"{t['people']}: {guests}",
        f"{t['priceTotal']}: {total_text}",
    ]
    return "\n".join(lines)


def booking_link(unit_key: str, start: str, end: str, name: str, guests,
                 total: Optional[float], lang: str,
                 number: str = config.BOOKING_WHATSAPP) -> str:
    """WhatsApp deep link carrying a pre-filled reservation inquiry."""
    message = compose_booking_message(unit_key, start, end, name, guests, total, lang)
    return whatsapp_link(number, message)


# =============================================================================
# CONTACT
# =============================================================================

def compose_contact_message(email: str, phone: str, message: str, lang: str) -> str:
    t = texts(lang)
    return "\n".join([
        f"{t['contact']}:",
        f"{t['email']}: {email}",
        f"{t['phone']}: {phone}",
        f"{t['message']}: {message}",
    ])


def contact_whatsapp_link(email: str, phone: str, message: str, lang: str,
                          number: str = config.CONTACT_WHATSAPP) -> str:
    return whatsapp_link(number, compose_contact_message(email, phone, message, lang))


def contact_mail_link(email: str, phone: str, message: str, lang: str,
                      address: str = config.CONTACT_EMAIL) -> str:
    """mailto: link with the contact form as subject and body."""
    t = texts(lang)
    body = "\n".join([
        t["contact"],
        "",
        f"{t['email']}: {email}",
        f"{t['phone']}: {phone}",
        f"{t['message']}: {message}",
    ])
    return (f"mailto:{address}?subject={encode_component(t['contact'])}"
            f"&body={encode_component(body)}")


def contact_mail_subject_link(lang: str, address: str = config.CONTACT_EMAIL) -> str:
    """Plain mailto: link with only the subject filled in."""
    return f"mailto:{address}?subject={encode_component(texts(lang)['contact'])}"
