"""Work features cafés can be searched by, and their database filters."""

from enum import Enum
from typing import Dict, List, NamedTuple, Optional, Tuple

DEFAULT_FEATURE_RADIUS_M = 5000
MAX_FEATURE_RADIUS_M = 20000
DEFAULT_FEATURE_LIMIT = 50
MAX_FEATURE_LIMIT = 100


class CafeFeature(str, Enum):
    WIFI = "wifi"
    OUTLETS = "outlets"
    QUIET = "quiet"
    TIME_LIMIT = "time-limit"


def _known(column: str) -> List[Tuple[str, str]]:
    # Inferred columns hold "unknown" or "" when nothing could be read
    return [(column, "not.is.null"), (column, "neq.unknown"), (column, "neq.")]


FEATURE_FILTERS: Dict[CafeFeature, List[Tuple[str, str]]] = {
    CafeFeature.WIFI: _known("ai_wifi_quality"),
    CafeFeature.OUTLETS: _known("ai_power_outlets"),
    CafeFeature.QUIET: [("ai_noise_level", "in.(quiet,moderate)")],
    CafeFeature.TIME_LIMIT: _known("ai_laptop_policy")
    + [("ai_laptop_policy", "ilike.*unlimited*")],
}


class FeatureCopy(NamedTuple):
    """Translation keys of a feature landing page."""

    title: str
    description: str
    heading: str
    intro: str
    link_label: str


FEATURE_COPY: Dict[CafeFeature, FeatureCopy] = {
    CafeFeature.WIFI: FeatureCopy(
        "meta.find.wifiTitle",
        "meta.find.wifiDescription",
        "find.heading.wifi",
        "find.intro.wifi",
        "city.relatedWifi",
    ),
    CafeFeature.OUTLETS: FeatureCopy(
        "meta.find.outletsTitle",
        "meta.find.outletsDescription",
        "find.heading.outlets",
        "find.intro.outlets",
        "city.relatedOutlets",
    ),
    CafeFeature.QUIET: FeatureCopy(
        "meta.find.quietTitle",
        "meta.find.quietDescription",
        "find.heading.quiet",
        "find.intro.quiet",
        "city.relatedQuiet",
    ),
    CafeFeature.TIME_LIMIT: FeatureCopy(
        "meta.find.timeLimitTitle",
        "meta.find.timeLimitDescription",
        "find.heading.timeLimit",
        "find.intro.timeLimit",
        "city.relatedTimeLimit",
    ),
}


def feature_filters(feature: CafeFeature) -> List[Tuple[str, str]]:
    """PostgREST filters that keep cafés offering a feature."""
    return list(FEATURE_FILTERS[feature])


def parse_feature(value: str) -> Optional[CafeFeature]:
    """Feature of a URL segment, or None when there is no such page."""
    try:
        return CafeFeature(value.lower())
    except ValueError:
        return None


def feature_path(feature: CafeFeature) -> str:
    return f"/find/{feature.value}"
