"""City slugs and localized city names."""

import re
from collections import Counter
from typing import Any, Dict, Iterable, Mapping, NamedTuple, Set

from infrastructure.i18n import Locale


class CityNames(NamedTuple):
    de: str
    en: str
    db_name: str


CITY_DISPLAY_NAMES: Dict[str, CityNames] = {
    "muenchen": CityNames("München", "Munich", "Munich"),
    "hamburg": CityNames("Hamburg", "Hamburg", "Hamburg"),
    "koeln": CityNames("Köln", "Cologne", "Cologne"),
    "frankfurt": CityNames("Frankfurt", "Frankfurt", "Frankfurt"),
    "leipzig": CityNames("Leipzig", "Leipzig", "Leipzig"),
    "duesseldorf": CityNames("Düsseldorf", "Düsseldorf", "Düsseldorf"),
    "potsdam": CityNames("Potsdam", "Potsdam", "Potsdam"),
    "oldenburg": CityNames("Oldenburg", "Oldenburg", "Oldenburg"),
    "osnabrueck": CityNames("Osnabrück", "Osnabrück", "Osnabrück"),
    "stuttgart": CityNames("Stuttgart", "Stuttgart", "Stuttgart"),
    "dresden": CityNames("Dresden", "Dresden", "Dresden"),
    "hannover": CityNames("Hannover", "Hannover", "Hannover"),
    "nuernberg": CityNames("Nürnberg", "Nuremberg", "Nuremberg"),
    "bremen": CityNames("Bremen", "Bremen", "Bremen"),
    "dortmund": CityNames("Dortmund", "Dortmund", "Dortmund"),
    "essen": CityNames("Essen", "Essen", "Essen"),
    "mannheim": CityNames("Mannheim", "Mannheim", "Mannheim"),
    "bonn": CityNames("Bonn", "Bonn", "Bonn"),
    "karlsruhe": CityNames("Karlsruhe", "Karlsruhe", "Karlsruhe"),
    "freiburg": CityNames("Freiburg", "Freiburg", "Freiburg"),
    "muenster": CityNames("Münster", "Münster", "Münster"),
    "heidelberg": CityNames("Heidelberg", "Heidelberg", "Heidelberg"),
}

_UMLAUTS = {"ä": "ae", "ö": "oe", "ü": "ue", "ß": "ss"}


def slugify_city(name: Any) -> str:
    """Create a URL slug from a city name.

    Examples:
        "Frankfurt am Main" -> "frankfurt-am-main"
        "München" -> "muenchen"
        "Köln" -> "koeln"
    """
    if not isinstance(name, str) or not name:
        return ""

    slug = name.strip().lower()
    for umlaut, replacement in _UMLAUTS.items():
        slug = slug.replace(umlaut, replacement)
    slug = re.sub(r"[\s_]+", "-", slug)
    slug = re.sub(r"[^a-z0-9-]", "", slug)
    slug = re.sub(r"-+", "-", slug)
    return slug.strip("-")


def _title_from_slug(city_slug: str) -> str:
    return " ".join(word[:1].upper() + word[1:] for word in city_slug.split("-"))


def get_city_display_name(city_slug: str, locale: Locale) -> str:
    """Get the city name shown to users of a locale."""
    names = CITY_DISPLAY_NAMES.get(city_slug.lower())
    if names:
        return names.de if locale == Locale.DE else names.en
    return _title_from_slug(city_slug)


def get_city_db_name(city_slug: str) -> str:
    """Get the city name as stored on café rows."""
    names = CITY_DISPLAY_NAMES.get(city_slug.lower())
    if names:
        return names.db_name
    return _title_from_slug(city_slug)


def count_cities(rows: Iterable[Any]) -> Dict[str, int]:
    """Count cafés per city, skipping rows without a city."""
    return dict(
        Counter(
            row["city"]
            for row in rows
            if isinstance(row, dict) and isinstance(row.get("city"), str) and row["city"]
        )
    )


# Cities shown first on the cities index, in this order
MAJOR_CITY_SLUGS = ("berlin", "hamburg", "muenchen", "koeln", "frankfurt", "leipzig")


def city_slug_aliases(city_slug: str) -> Set[str]:
    """Slugs a city's rows may carry, e.g. "muenchen" and "munich"."""
    city_slug = city_slug.lower()
    aliases = {city_slug}
    names = CITY_DISPLAY_NAMES.get(city_slug)
    if names:
        aliases |= {slugify_city(name) for name in names}
    return aliases


def count_for_city(counts: Mapping[str, int], city_slug: str) -> int:
    """Sum the counts of every city name that belongs to a slug."""
    aliases = city_slug_aliases(city_slug)
    return sum(count for name, count in counts.items() if slugify_city(name) in aliases)
