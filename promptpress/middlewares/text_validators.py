import logging

from promptpress.core.config import settings
from promptpress.messages.reduce_messages import TEXT_TOO_LONG
from promptpress.utils.exceptions import PayloadTooLargeError

logger = logging.getLogger(__name__)


def validate_text_length(*texts: str, max_length: int | None = None) -> None:
    limit = max_length or settings.MAX_TEXT_LENGTH
    for t in texts:
        if len(t) > limit:
            logger.warning(f"Rejected text of {len(t)} chars (limit {limit})")
            raise PayloadTooLargeError(
                code="TEXT_TOO_LONG",
                message=f"{TEXT_TOO_LONG} Max allowed length is {limit} characters.",
            )
