"""Berlin districts with their own landing pages.

Café rows carry no district column, so a café belongs to a district when the
district name appears in its address.
"""

from typing import Any, Dict, List, Mapping, Optional

BERLIN = "Berlin"
BERLIN_SLUG = "berlin"

# slug -> name as written in addresses
BERLIN_DISTRICTS: Dict[str, str] = {
    "mitte": "Mitte",
    "charlottenburg": "Charlottenburg",
    "prenzlauer-berg": "Prenzlauer Berg",
    "neukoelln": "Neukölln",
    "kreuzberg": "Kreuzberg",
    "friedrichshain": "Friedrichshain",
    "hbf": "Hauptbahnhof",
}

# Alternative spellings used in addresses
_DISTRICT_ALIASES: Dict[str, List[str]] = {
    "hbf": ["hauptbahnhof", "hbf"],
}

# Keys of the district intro texts under meta.district.intro
DISTRICT_INTRO_KEYS: Dict[str, str] = {
    "mitte": "mitte",
    "charlottenburg": "charlottenburg",
    "prenzlauer-berg": "prenzlauerBerg",
    "neukoelln": "neukoelln",
    "kreuzberg": "kreuzberg",
    "friedrichshain": "friedrichshain",
    "hbf": "hbf",
}


def is_berlin_district(slug: Any) -> bool:
    return isinstance(slug, str) and slug.lower() in BERLIN_DISTRICTS


def get_district_name(slug: str) -> Optional[str]:
    """Name of a district slug, or None for unknown slugs."""
    return BERLIN_DISTRICTS.get(slug.lower())


def _search_terms(slug: str) -> List[str]:
    name = BERLIN_DISTRICTS[slug].lower()
    return _DISTRICT_ALIASES.get(slug, [name])


def in_district(cafe: Mapping[str, Any], slug: str) -> bool:
    """Whether a café's address mentions the district.

    Matches plain mentions as well as "Berlin-Kreuzberg" style addresses.
    """
    address = cafe.get("address")
    if not isinstance(address, str) or not address:
        return False
    lowered = address.lower()
    return any(term in lowered for term in _search_terms(slug))


def filter_by_district(cafes: List[Mapping[str, Any]], slug: str) -> List[Mapping[str, Any]]:
    """Keep the cafés located in a Berlin district."""
    slug = slug.lower()
    if slug not in BERLIN_DISTRICTS:
        return []
    return [cafe for cafe in cafes if in_district(cafe, slug)]


def district_path(slug: str) -> str:
    return f"/cities/{BERLIN_SLUG}/{slug}"
