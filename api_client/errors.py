"""Turn any failed call into one message the dashboard can display."""

import logging
from typing import Any, Optional

logger = logging.getLogger(__name__)

FALLBACK_ERROR_MESSAGE = "Unexpected error. Please try again."


def _response_message(err: Any) -> Optional[str]:
    """The `message` field of an error response body, if there is one."""
    try:
        response = getattr(err, "response", None)
        if response is None:
            return None
        body = response.json()
    except Exception:
        # No response attached, or a body that is not JSON
        return None

    if isinstance(body, dict):
        message = body.get("message")
        if message:
            return str(message)
    return None


def to_error_message(err: Any) -> str:
    """Normalize an error of any shape to a human-readable string.

    Preference order: the structured `message` from the response body, then
    the exception's own message, then a generic fallback. Never raises.
    """
    message = _response_message(err)
    if message:
        return message

    if isinstance(err, BaseException):
        try:
            text = str(err)
        except Exception:
            logger.debug("Could not render %s as text", type(err).__name__)
            text = ""
        if text:
            return text

    return FALLBACK_ERROR_MESSAGE
