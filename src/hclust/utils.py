"""Utility helpers: logging setup and decimal rounding."""

import logging
import math
from decimal import ROUND_HALF_UP, Context, Decimal

from hclust.config import DEFAULTS

# Wide enough to quantize any finite double to a few decimal places.
_ROUNDING = Context(prec=400, rounding=ROUND_HALF_UP)


def setup_logging(level: int = logging.INFO) -> logging.Logger:
    logging.basicConfig(
        format="%(asctime)s %(levelname)-8s %(message)s",
        datefmt="%H:%M:%S",
        level=level,
    )
    return logging.getLogger(DEFAULTS.logger_name)


def round_half_up(value: float, decimals: int = DEFAULTS.height_decimals) -> float:
    """Round *value* to *decimals* places, halves away from zero.

    The exact binary value is rounded, so 1.03125 becomes 1.0313 where the
    built-in ``round`` would give 1.0312. NaN and infinities pass through.
    """
    value = float(value)
    if not math.isfinite(value):
        return value
    exponent = Decimal(1).scaleb(-decimals)
    return float(Decimal(value).quantize(exponent, context=_ROUNDING))
