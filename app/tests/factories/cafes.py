"""Test data factories for café records."""

from typing import Any, Dict, List

PLACE_ID = "ChIJN1t_tDeuEmsRUsoyG83frY4"
CAFE_ID = "1f0e7c9a-4b1d-4c55-9a4f-3c3f9d2b7e10"


def make_cafe(**overrides: Any) -> Dict[str, Any]:
    """Create a café row as returned by the database.

    Args:
        **overrides: Fields to set or replace.

    Returns:
        Café row dict.
    """
    cafe = {
        "id": CAFE_ID,
        "place_id": PLACE_ID,
        "name": "Kaffeebar",
        "address": "Torstraße 1, 10119 Berlin",
        "city": "Berlin",
        "state": "Berlin",
        "zip_code": "10119",
        "country": "Germany",
        "latitude": 52.5290,
        "longitude": 13.4010,
        "work_score": 8.5,
        "google_rating": 4.6,
        "google_ratings_total": 320,
        "is_work_friendly": True,
        "is_active": True,
        "website": "https://www.kaffeebar.de/",
        "description": "Cozy café with big tables",
        "ai_inference_notes": None,
        "ai_wifi_quality": None,
        "ai_power_outlets": None,
        "ai_noise_level": None,
        "created_at": "2024-05-01T10:00:00+00:00",
        "updated_at": "2024-06-01T10:00:00+00:00",
    }
    cafe.update(overrides)
    return cafe


def make_cafes(count: int = 3, city: str = "Berlin") -> List[Dict[str, Any]]:
    """Create cafés with distinct ids, place ids and descending work scores."""
    return [
        make_cafe(
            id=f"00000000-0000-4000-8000-{index:012d}",
            place_id=f"ChIJtest{index:04d}",
            name=f"Cafe {index}",
            city=city,
            work_score=float(10 - index % 10),
            google_rating=4.0 + (index % 10) / 10,
        )
        for index in range(count)
    ]
