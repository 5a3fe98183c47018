"""Default configuration constants."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Defaults:
    # Linkage used when the caller does not choose one
    method: str = "single"

    # Merge heights and tie detection work on values rounded to this many places
    height_decimals: int = 4

    # Logging
    logger_name: str = "hclust"


DEFAULTS = Defaults()
