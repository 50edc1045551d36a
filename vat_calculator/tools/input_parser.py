import logging
import math
from typing import Any

logger = logging.getLogger(__name__)


def parse_number(raw: Any) -> float:
    """
    Coerce a form value into a float.

    Blank, non-numeric or non-finite input becomes 0.0, the same way an empty
    number field reads as zero.
    """
    if raw is None or isinstance(raw, bool):
        return 0.0

    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        text = str(raw).strip().replace(" ", "").replace("_", "")
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            logger.warning("Non-numeric input %r, using 0", raw)
            return 0.0

    if not math.isfinite(value):
        logger.warning("Non-finite input %r, using 0", raw)
        return 0.0
    return value
