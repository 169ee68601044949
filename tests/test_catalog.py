import pytest

from alquiler.catalog import ACTIVITIES, APARTMENTS, apartment_by_key
from alquiler.i18n import TEXT, month_name, texts


def test_units_have_unique_keys_and_ids():
    assert len({unit.key for unit in APARTMENTS}) == len(APARTMENTS)
    assert len({unit.id for unit in APARTMENTS}) == len(APARTMENTS)


def test_image_paths_follow_naming_convention():
    camion = apartment_by_key("El camion")
    assert camion.image_paths("/static/images/") == [
        "/static/images/camion0.jpg",
        "/static/images/camion1.jpg",
        "/static/images/camion2.jpg",
    ]
    assert len(apartment_by_key("El aula").image_paths()) == 2


def test_localized_fields_fall_back():
    unit = apartment_by_key("El apartamento")
    assert unit.title("en") == "The Apartment"
    assert unit.title("fr") == "El apartamento"
    assert unit.description("fr") == ""
    assert ACTIVITIES[0].title("en") == "Surf lessons"


def test_unknown_unit_lookup():
    assert apartment_by_key("La casa") is None


def test_string_tables_share_keys():
    assert set(TEXT["es"]) == set(TEXT["en"])
    assert texts("en")["priceTotal"] == "Total price"
    assert month_name("es", 1) == "enero"
    with pytest.raises(ValueError):
        texts("fr")
