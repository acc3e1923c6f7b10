from .translator import (
    AETHER_PATTERN,
    MVN_PATTERN,
    aether_to_mvn,
    mvn_to_aether,
    parse_aether,
    parse_coordinates,
    parse_mvn,
)

__all__ = [
    "AETHER_PATTERN",
    "MVN_PATTERN",
    "aether_to_mvn",
    "mvn_to_aether",
    "parse_aether",
    "parse_coordinates",
    "parse_mvn",
]
