"""Helpers shared by the listing use cases."""

from datetime import date, datetime, time
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from learnhub.config import ListingSettings
from learnhub.domain.error import InvalidArgumentError

# Bounds used when a listing names only one end of its date range. One day
# inside the representable range, so they still convert to UTC from any zone.
EARLIEST_DATE = date(1000, 1, 2)
LATEST_DATE = date(9999, 12, 30)


def calendar_range(
    start_date: date | None,
    end_date: date | None,
    zone_id: str,
) -> tuple[datetime | None, datetime | None]:
    """Turn calendar dates into the instants bounding them in a time zone.

    The start date begins at midnight and the end date runs to its last
    microsecond. When neither date is given no range applies; a missing
    bound is otherwise opened up to the far past or future.

    Raises:
        InvalidArgumentError: If the zone is unknown
    """
    if start_date is None and end_date is None:
        return None, None

    try:
        zone = ZoneInfo(zone_id)
    except (ZoneInfoNotFoundError, ValueError):
        raise InvalidArgumentError(f"Unknown time zone: {zone_id}")

    start = datetime.combine(start_date or EARLIEST_DATE, time.min, tzinfo=zone)
    end = datetime.combine(end_date or LATEST_DATE, time.max, tzinfo=zone)
    return start, end


def check_page_size(size: int, settings: ListingSettings) -> None:
    """Reject page sizes above the configured maximum.

    Raises:
        InvalidArgumentError: If size exceeds ``max_page_size``
    """
    if size > settings.max_page_size:
        raise InvalidArgumentError(
            f"Page size must not exceed {settings.max_page_size}"
        )
