"""Date-indexed browsing over the published e-papers.

The directory holds the published dates newest first. Moving to the
*previous* edition means going back in time (a higher index) and moving to
the *next* edition means going forward (a lower index). Navigation stops at
both ends of the list.
"""

from datetime import date, datetime
from typing import Iterable, List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from janatar_bhasha.exceptions import InvalidInput, NotFound

DATE_FORMAT = '%Y-%m-%d'


def parse_date(value) -> date:
    """Parse a ``YYYY-MM-DD`` string."""
    if isinstance(value, date):
        return value
    try:
        return datetime.strptime((value or '').strip(), DATE_FORMAT).date()
    except ValueError:
        raise InvalidInput('Date must be in YYYY-MM-DD format')


def resolve_timezone(tz_name) -> ZoneInfo:
    """Look up an IANA zone; unknown names raise ``ValueError``."""
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, TypeError) as e:
        raise ValueError(f'Unknown EPAPER_TIMEZONE {tz_name!r}') from e


def local_today(tz_name='UTC') -> date:
    return datetime.now(resolve_timezone(tz_name)).date()


class EpaperDirectory:

    def __init__(self, dates: Iterable[date]):
        self.dates: List[date] = sorted(set(dates), reverse=True)

    def __len__(self):
        return len(self.dates)

    def __contains__(self, day):
        return day in self.dates

    @property
    def is_empty(self):
        return not self.dates

    def latest(self) -> Optional[date]:
        return self.dates[0] if self.dates else None

    def resolve_current(self, today: date) -> Optional[date]:
        """Today's date when published, else the most recent one."""
        if today in self.dates:
            return today
        return self.latest()

    def select(self, day: date) -> date:
        if day not in self.dates:
            raise NotFound('No e-paper available for this date')
        return day

    def index_of(self, day: date) -> int:
        try:
            return self.dates.index(day)
        except ValueError:
            raise NotFound('No e-paper available for this date')

    def previous_date(self, day: date) -> Optional[date]:
        """The edition published before ``day``, if any."""
        index = self.index_of(day)
        if index < len(self.dates) - 1:
            return self.dates[index + 1]
        return None

    def next_date(self, day: date) -> Optional[date]:
        """The edition published after ``day``, if any."""
        index = self.index_of(day)
        if index > 0:
            return self.dates[index - 1]
        return None

    def has_previous(self, day: date) -> bool:
        return self.previous_date(day) is not None

    def has_next(self, day: date) -> bool:
        return self.next_date(day) is not None

    def position(self, day: date) -> int:
        """1-based position, as shown in "Paper i of n"."""
        return self.index_of(day) + 1
