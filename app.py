"""
Apartment Rentals
=================
Booking-inquiry site for a handful of short-term rental units.

Shows the units, a two-month price/availability calendar read from a
published Google Sheet (CSV), and hands reservation inquiries off to
WhatsApp. Nothing is booked or stored here.

Run with: streamlit run app.py
"""

from alquiler.ui import main

if __name__ == "__main__":
    main()
