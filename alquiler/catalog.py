"""
Static unit and activity catalogs.

Each unit's `key` is the canonical identifier used by the availability feed;
`id` doubles as the image filename prefix (camion0.jpg, camion1.jpg, ...).
"""

from dataclasses import dataclass, field
from typing import Mapping, Optional

from . import config


@dataclass(frozen=True)
class UnitDefinition:
    """A rentable unit as shown on the site."""

    id: str
    key: str
    titles: Mapping[str, str]
    short: Mapping[str, str] = field(default_factory=dict)
    long: Mapping[str, str] = field(default_factory=dict)
    photo_count: int = 0

    def title(self, lang: str) -> str:
        return self.titles.get(lang, self.key)

    def summary(self, lang: str) -> str:
        return self.short.get(lang, "")

    def description(self, lang: str) -> str:
        return self.long.get(lang, "")

    def image_paths(self, images_dir: str = config.IMAGES_DIR) -> list[str]:
        """Photo paths following the <id><index>.jpg convention."""
        prefix = images_dir.rstrip("/")
        return [f"{prefix}/{self.id}{i}.jpg" for i in range(max(0, self.photo_count))]


@dataclass(frozen=True)
class Activity:
    id: str
    titles: Mapping[str, str]
    descriptions: Mapping[str, str]

    def title(self, lang: str) -> str:
        return self.titles.get(lang, self.id)

    def description(self, lang: str) -> str:
        return self.descriptions.get(lang, "")


# =============================================================================
# CATALOG
# =============================================================================

APARTMENTS = (
    UnitDefinition(
        id="camion",
        key="El camion",
        titles={"es": "El camión", "en": "El Camión"},
        short={
            "es": "Pequeño y acogedor, ideal para 2 personas.",
            "en": "Small & cozy, great for 2 guests.",
        },
        long={
            "es": (
                "Situada en un acantilado, esta pequeña cabaña de cedro y cristal equilibra "
                "la montaña y el mar. Picos de granito se alzan detrás; el océano se extiende "
                "delante. Dentro, esperan una acogedora estufa de leña y una cama alta. Explora "
                "senderos de montaña y pozas de marea. Es el escape perfecto, combinando picos "
                "escarpados y olas tranquilas."
            ),
            "en": (
                "Nestled on a bluff, this cedar and glass tiny lodge balances the mountains and "
                "sea. Granite peaks rise behind it; the ocean stretches before it. Inside, a cozy "
                "wood stove and loft bed await. Explore mountain trails and ocean tide pools. It "
                "is the perfect escape, combining rugged peaks and the calming surf."
            ),
        },
        photo_count=3,
    ),
    UnitDefinition(
        id="apartamento",
        key="El apartamento",
        titles={"es": "El Apartamento", "en": "The Apartment"},
        short={
            "es": "Céntrico, con todas las comodidades.",
            "en": "Central, all comforts included.",
        },
        long={
            "es": (
                "Apartamento céntrico, luminoso y con todas las comodidades para estancias "
                "urbanas. Espacio para 4 personas, cocina completa y transporte cercano."
            ),
            "en": (
                "Central, bright apartment with all comforts for urban stays. Space for 4 "
                "guests, full kitchen and nearby transport."
            ),
        },
        photo_count=3,
    ),
    UnitDefinition(
        id="aula",
        key="El aula",
        titles={"es": "El Aula", "en": "The Classroom"},
        short={
            "es": "Espacioso, perfecto para grupos.",
            "en": "Spacious — perfect for groups.",
        },
        long={
            "es": (
                "Espacio amplio pensado para grupos y talleres. Dispone de una sala diáfana y "
                "equipada para actividades."
            ),
            "en": (
                "Large space designed for groups and workshops. It includes an open, "
                "well-equipped room for activities."
            ),
        },
        photo_count=2,
    ),
)

ACTIVITIES = (
    Activity(
        id="surf",
        titles={"es": "Clases de surf", "en": "Surf lessons"},
        descriptions={
            "es": "Sesiones para todos los niveles cerca de la playa.",
            "en": "Lessons for all levels near the beach.",
        },
    ),
    Activity(
        id="kayak",
        titles={"es": "Kayak", "en": "Kayaking"},
        descriptions={
            "es": "Rutas guiadas en kayak al atardecer.",
            "en": "Guided kayak routes at sunset.",
        },
    ),
    Activity(
        id="gastronomia",
        titles={"es": "Ruta gastronómica", "en": "Food tour"},
        descriptions={
            "es": "Degustación de productos locales.",
            "en": "Tasting of local products.",
        },
    ),
)


def apartment_by_key(key: str, units=APARTMENTS) -> Optional[UnitDefinition]:
    """Look up a unit by its canonical key."""
    for unit in units:
        if unit.key == key:
            return unit
    return None
