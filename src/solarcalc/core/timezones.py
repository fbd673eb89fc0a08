"""
solarcalc.core.timezones
------------------------
Timezone id -> UTC offset, backed by the pytz Olson database.

The offset depends on whether DST is in force, so callers pass the local
instant they care about. Resolving against "now" is only for display.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

import pytz

from .errors import UnresolvedTimezoneError

log = logging.getLogger(__name__)


def resolve_utc_offset_seconds(zone_id: str, reference: Optional[datetime] = None) -> int:
    """
    Signed UTC offset in seconds of `zone_id` at the naive local datetime `reference`.

    reference=None resolves against the current instant.
    """
    try:
        tz = pytz.timezone(zone_id)
    except pytz.UnknownTimeZoneError as e:
        raise UnresolvedTimezoneError(f"unknown time zone {zone_id!r}") from e

    if reference is None:
        local = datetime.now(pytz.utc).astimezone(tz)
    else:
        if reference.tzinfo is not None:
            reference = reference.replace(tzinfo=None)
        # is_dst=False picks standard time on ambiguous/nonexistent wall times
        local = tz.localize(reference, is_dst=False)

    offset = local.utcoffset()
    if offset is None:
        raise UnresolvedTimezoneError(f"time zone {zone_id!r} has no UTC offset at {reference}")
    seconds = int(offset.total_seconds())
    log.debug("Resolved %s at %s -> %+d s", zone_id, local.isoformat(), seconds)
    return seconds
