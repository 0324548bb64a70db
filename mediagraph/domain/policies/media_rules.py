# mediagraph/domain/policies/media_rules.py
from __future__ import annotations

from datetime import date

from mediagraph.common.logging import get_logger
from mediagraph.domain.entities.media_item import MediaItem
from mediagraph.domain.errors import InvalidError

logger = get_logger(__name__)

EARLIEST_RELEASE_DATE = date(1895, 12, 28)
SYNOPSIS_MAX_LENGTH = 200


def _is_blank(s: str | None) -> bool:
    return s is None or not s.strip()


def validate_media_item(
    item: MediaItem,
    *,
    synopsis_max_length: int = SYNOPSIS_MAX_LENGTH,
    earliest_release_date: date = EARLIEST_RELEASE_DATE,
) -> None:
    """
    Check the caller-supplied fields of a media item.

    Rules are checked in a fixed order and the first failure wins:
      1. title is present and not blank
      2. synopsis, when given, is at most `synopsis_max_length` code points
      3. release_date is present and not before `earliest_release_date`
      4. runtime is present and positive
    """
    if _is_blank(item.title):
        logger.warning("Media item rejected: blank title")
        raise InvalidError("Title must not be blank", field="title")

    if item.synopsis is not None and len(item.synopsis) > synopsis_max_length:
        logger.warning("Media item rejected: synopsis is %d chars", len(item.synopsis))
        raise InvalidError(
            f"Synopsis must be at most {synopsis_max_length} characters", field="synopsis"
        )

    if item.release_date is None or item.release_date < earliest_release_date:
        logger.warning("Media item rejected: release date %s", item.release_date)
        raise InvalidError(
            f"Release date must not be earlier than {earliest_release_date.isoformat()}",
            field="release_date",
        )

    # whole minutes only; bool is an int subclass but True is not a runtime
    runtime = item.runtime
    if not isinstance(runtime, int) or isinstance(runtime, bool) or runtime <= 0:
        logger.warning("Media item rejected: runtime %s", item.runtime)
        raise InvalidError("Runtime must be a positive number of minutes", field="runtime")
