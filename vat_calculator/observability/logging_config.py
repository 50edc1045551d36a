import logging
from vat_calculator.config import LOG_LEVEL


def setup_logging():
    """Configure root logging once for whichever front-end starts first (CLI, API or UI)."""
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-7s [%(name)s] %(message)s",
    )
    # gradio polls through httpx; keep its request lines out of INFO output
    logging.getLogger("httpx").setLevel(logging.WARNING)
