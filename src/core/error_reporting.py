"""Default error reporter for pipeline failures.

This module turns structured failures into user-facing messages.
Only unknown failures are logged; the others carry their own reason.
"""

from __future__ import annotations

from core.config import RadarConfig
from core.constants import FAQ_POINTER_TEMPLATE, LOADING_PROBLEM_PREFIX
from core.logging_config import get_logger
from core.types import RadarFailure

_LOGGER = get_logger(__name__)


def render_failure_message(failure: RadarFailure, config: RadarConfig | None = None) -> str:
    """Render a failure as a user-facing message.

    Args:
        failure: Structured failure from a source adapter.
        config: Runtime configuration providing the FAQ link.

    Returns:
        Message text ending with a pointer to the FAQ.
    """
    faq_url = (config or RadarConfig()).faq_url
    if failure.kind == "malformed-data":
        message = LOADING_PROBLEM_PREFIX + failure.message
    elif failure.kind == "sheet-not-found":
        message = failure.message
    else:
        _LOGGER.error("radar_unexpected_failure", reason=failure.message)
        message = LOADING_PROBLEM_PREFIX.rstrip()
    return f"{message}\n{FAQ_POINTER_TEMPLATE.format(faq_url=faq_url)}"
