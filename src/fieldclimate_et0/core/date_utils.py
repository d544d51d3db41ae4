"""
Date and timezone utilities.

Centralizes date/time operations for stations that report a fixed UTC offset.
"""

import logging
from datetime import datetime, timedelta, tzinfo
from typing import Optional, Tuple, Union
import pytz


FIELDCLIMATE_DATE_FORMAT = "%Y%m%d%H%M"


class DateUtils:
    """Utilities for date and timezone handling."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        """
        Initialize date utilities.

        Args:
            logger: Logger instance
        """
        self.logger = logger or logging.getLogger(__name__)

    @staticmethod
    def station_timezone(offset_hours: Union[int, float, str, None]) -> tzinfo:
        """
        Build a timezone for a station.

        Args:
            offset_hours: UTC offset in hours (e.g. -3) or an Olson name
                          (e.g. 'America/Bahia'). None means UTC.

        Returns:
            pytz timezone object

        Raises:
            ValueError: If the timezone name is unknown
        """
        if offset_hours is None:
            return pytz.UTC
        if isinstance(offset_hours, str):
            try:
                return pytz.timezone(offset_hours)
            except pytz.exceptions.UnknownTimeZoneError:
                raise ValueError(f"Invalid timezone: {offset_hours}")
        return pytz.FixedOffset(int(round(offset_hours * 60)))

    @staticmethod
    def now_utc() -> datetime:
        return datetime.now(pytz.UTC)

    @staticmethod
    def to_station_time(
        dt: Optional[datetime],
        offset_hours: Union[int, float, str, None]
    ) -> datetime:
        """
        Convert a datetime to station-local time.

        Naive datetimes are assumed to be UTC.
        """
        if dt is None:
            dt = DateUtils.now_utc()
        elif dt.tzinfo is None:
            dt = pytz.UTC.localize(dt)
        return dt.astimezone(DateUtils.station_timezone(offset_hours))

    @staticmethod
    def day_of_year(
        dt: Optional[datetime] = None,
        offset_hours: Union[int, float, str, None] = None
    ) -> int:
        """
        Get the ordinal day (1-366) of a moment in station-local time.

        Args:
            dt: Moment to evaluate (defaults to now)
            offset_hours: Station UTC offset

        Returns:
            Day of the year
        """
        return DateUtils.to_station_time(dt, offset_hours).timetuple().tm_yday

    def get_lookback_range(
        self,
        hours_back: float,
        reference_time: Optional[datetime] = None
    ) -> Tuple[datetime, datetime]:
        """
        Get the (start, end) window ending at reference_time.

        Args:
            hours_back: Window length in hours
            reference_time: End of the window (defaults to now in UTC)

        Returns:
            Tuple of timezone-aware (start_datetime, end_datetime)
        """
        if hours_back <= 0:
            raise ValueError(f"hours_back must be positive, got {hours_back}")

        if reference_time is None:
            reference_time = self.now_utc()
        elif reference_time.tzinfo is None:
            reference_time = pytz.UTC.localize(reference_time)

        start = reference_time - timedelta(hours=hours_back)
        self.logger.debug(
            f"Lookback range: {start.isoformat()} to {reference_time.isoformat()}"
        )
        return start, reference_time

    @staticmethod
    def to_fieldclimate_format(dt: datetime) -> str:
        """
        Format a datetime the way FieldClimate data endpoints expect (YYYYMMDDHHMM, UTC).

        Raises:
            ValueError: If datetime is naive
        """
        if dt.tzinfo is None:
            raise ValueError("Datetime must be timezone-aware")
        return dt.astimezone(pytz.UTC).strftime(FIELDCLIMATE_DATE_FORMAT)

    @staticmethod
    def iso_date(dt: Optional[datetime] = None) -> str:
        """Return the UTC calendar date of dt (default now) as YYYY-MM-DD."""
        if dt is None:
            dt = DateUtils.now_utc()
        elif dt.tzinfo is None:
            dt = pytz.UTC.localize(dt)
        return dt.astimezone(pytz.UTC).strftime("%Y-%m-%d")
