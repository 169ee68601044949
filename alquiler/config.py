"""
Site configuration.

Load-time constants for the feed, the outbound channels and static assets.
Every value can be overridden with an environment variable of the same name.
"""

import os

# =============================================================================
# FEED
# =============================================================================

SHEET_CSV_URL = os.getenv(
    "SHEET_CSV_URL",
    "https://docs.google.com/spreadsheets/d/e/2PACX-1vQoXmH3uHC7Ezw17NKLFWaVJzF2kRveW4xquJGGr3VYckc1lGqMOW62QeTyhCDiUPu4vYkxYTEInOXf/pub?output=csv",
)

REFRESH_SECONDS = int(os.getenv("REFRESH_SECONDS", "60"))  # how often to re-fetch the sheet
MIN_REFRESH_SECONDS = 5
FETCH_TIMEOUT = int(os.getenv("FETCH_TIMEOUT", "30"))

# =============================================================================
# OUTBOUND CHANNELS
# =============================================================================

WHATSAPP_BASE = "https://wa.me"
BOOKING_WHATSAPP = os.getenv("BOOKING_WHATSAPP", "34611044315")
CONTACT_WHATSAPP = os.getenv("CONTACT_WHATSAPP", "34611033315")
CONTACT_EMAIL = os.getenv("CONTACT_EMAIL", "youremail@example.com")

MAPS_URL = os.getenv("MAPS_URL", "https://maps.app.goo.gl/TQJrgqLmhEHTLW4i8")

# =============================================================================
# PRESENTATION
# =============================================================================

IMAGES_DIR = os.getenv("IMAGES_DIR", "images")
CURRENCY = os.getenv("CURRENCY", "€")
DEFAULT_LANG = "es"
DEFAULT_GUESTS = 2
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
