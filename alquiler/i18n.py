"""Localized string tables for the two supported languages."""

LANGS = ("es", "en")

TEXT = {
    "es": {
        "appTitle": "Alquiler de Apartamentos",
        "selectLang": "ES | EN",
        "nights": "noches",
        "people": "personas",
        "checkAvailability": "Ver disponibilidad",
        "book": "Reservar",
        "booking": "Reserva",
        "dates": "Fechas",
        "sendWhatsApp": "Enviar por WhatsApp",
        "name": "Nombre",
        "namePlaceholder": "Tu nombre",
        "guests": "Número de huéspedes",
        "startDate": "Fecha inicio",
        "endDate": "Fecha fin",
        "selectDates": "Selecciona fechas en el calendario",
        "priceTotal": "Precio total",
        "available": "Disponible",
        "notAvailable": "No disponible",
        "price": "Precio",
        "loading": "Cargando...",
        "staleData": "No se pudo actualizar la disponibilidad",
        "refresh": "Actualizar",
        "back": "Volver",
        "reset": "Borrar selección",
        "home": "Inicio",
        "activities": "Actividades",
        "contact": "Contacto",
        "contactIntro": "Contáctanos por WhatsApp o email",
        "email": "Correo",
        "phone": "Teléfono",
        "message": "Mensaje",
        "send": "Enviar",
        "howto": "Cómo llegar",
        "photos": "fotos",
        "description": "Descripción",
        "calendar": "Calendario",
        "month": "Mes",
        "year": "Año",
        "byCar": "En coche",
        "byCarText": "Sigue la carretera principal hasta el desvío hacia la costa. Aparcamiento limitado cerca de El Camión.",
        "publicTransport": "Transporte público",
        "publicTransportText": "Autobús desde la estación central cada 2 horas. Parada más cercana a 1.2 km.",
        "tips": "Consejos",
        "tipShoes": "Trae calzado cómodo para senderos.",
        "tipGps": "Se recomienda GPS para llegar al acantilado.",
        "map": "Mapa",
        "openMaps": "Abrir en Google Maps",
    },
    "en": {
        "appTitle": "Apartment Rentals",
        "selectLang": "ES | EN",
        "nights": "nights",
        "people": "guests",
        "checkAvailability": "Check availability",
        "book": "Book",
        "booking": "Booking",
        "dates": "Dates",
        "sendWhatsApp": "Send via WhatsApp",
        "name": "Name",
        "namePlaceholder": "Your name",
        "guests": "Number of guests",
        "startDate": "Start date",
        "endDate": "End date",
        "selectDates": "Select dates using the calendar",
        "priceTotal": "Total price",
        "available": "Available",
        "notAvailable": "Not available",
        "price": "Price",
        "loading": "Loading...",
        "staleData": "Availability could not be refreshed",
        "refresh": "Refresh",
        "back": "Back",
        "reset": "Clear selection",
        "home": "Home",
        "activities": "Activities",
        "contact": "Contact",
        "contactIntro": "Contact us via WhatsApp or email",
        "email": "Email",
        "phone": "Phone",
        "message": "Message",
        "send": "Send",
        "howto": "How to get here",
        "photos": "photos",
        "description": "Description",
        "calendar": "Calendar",
        "month": "Month",
        "year": "Year",
        "byCar": "By car",
        "byCarText": "Follow the main road to the coastal turnoff. Limited parking near El Camión.",
        "publicTransport": "Public transport",
        "publicTransportText": "Bus from the central station every 2 hours. Closest stop 1.2 km away.",
        "tips": "Tips",
        "tipShoes": "Bring sturdy shoes for trails.",
        "tipGps": "GPS recommended for reaching the bluff.",
        "map": "Map",
        "openMaps": "Open in Google Maps",
    },
}

MONTH_NAMES = {
    "es": ["enero", "febrero", "marzo", "abril", "mayo", "junio", "julio",
           "agosto", "septiembre", "octubre", "noviembre", "diciembre"],
    "en": ["January", "February", "March", "April", "May", "June", "July",
           "August", "September", "October", "November", "December"],
}

# Sunday first, matching the calendar grid
WEEKDAY_NAMES = {
    "es": ["Dom", "Lun", "Mar", "Mié", "Jue", "Vie", "Sáb"],
    "en": ["Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat"],
}


def texts(lang: str) -> dict:
    """Return the string table for a language, raising on unknown codes."""
    if lang not in TEXT:
        raise ValueError(f"Unsupported language: {lang!r}")
    return TEXT[lang]


def month_name(lang: str, month: int) -> str:
    """Localized month name for a 1-based month number."""
    return MONTH_NAMES[lang][month - 1]
