# -*- coding: utf-8 -*-
"""
All access to the current date or time goes through this module so that
tests can move the wall clock to a specific day.  Anything that decides
whether a journal is in the future, ongoing or past depends on "today",
so the clock must be controllable.

Calendar days are exchanged as YYYY-MM-DD strings. The conversion helpers
here are the only place that format is parsed or produced.
"""

import datetime
import logging

import pytz

from django.conf import settings
from django.utils import timezone

logger = logging.getLogger(__name__)

DEFAULT_TIME_ZONE_NAME = 'UTC'
DATE_STR_FORMAT = '%Y-%m-%d'

_time_delta = datetime.timedelta()


def now( tzname = None ):
    """
    Wraps Django's timezone.now() to return a timezone aware datetime,
    shifted by whatever offset tests have installed.
    """
    utcnow = timezone.now() + _time_delta
    if tzname is None:
        return utcnow

    try:
        to_zone = pytz.timezone( tzname )
    except pytz.exceptions.UnknownTimeZoneError:
        logger.warning( "Unrecognized time zone '%s'", tzname )
        to_zone = pytz.timezone( DEFAULT_TIME_ZONE_NAME )

    return utcnow.astimezone( to_zone )


def today( tzname = None ):
    """ The current calendar day, in the project time zone by default. """
    if tzname is None:
        tzname = settings.TIME_ZONE
    return now( tzname = tzname ).date()


def set( force_datetime ):
    """
    Sets the current date/time to a specific time.
    """
    global _time_delta
    _time_delta = force_datetime - timezone.now()
    return


def set_today( the_date, tzname = None ):
    """ Moves the clock to noon of the given day in the given time zone. """
    if tzname is None:
        tzname = settings.TIME_ZONE
    tzinfo = pytz.timezone( tzname )
    noon_dt = datetime.datetime.combine( to_calendar_date( the_date ), datetime.time( 12, 0 ))
    set( tzinfo.localize( noon_dt ))
    return


def reset():
    global _time_delta
    _time_delta = datetime.timedelta()
    return


def date_str_to_date( date_str ):
    """
    The string representation we use for a particular day is
    YYYY-MM-DD. This routine and to_date_str() convert back and forth.
    Raises ValueError if the string is not in that form.
    """
    return datetime.datetime.strptime( date_str.strip(), DATE_STR_FORMAT ).date()


def to_date_str( date_or_datetime = None ):
    if not date_or_datetime:
        date_or_datetime = now()
    return date_or_datetime.strftime( DATE_STR_FORMAT )


def to_calendar_date( value ):
    """
    Normalizes a date, datetime or YYYY-MM-DD string to a date, dropping
    any time of day.  Aware datetimes keep their own local calendar day.
    """
    if isinstance( value, datetime.datetime ):
        return value.date()
    if isinstance( value, datetime.date ):
        return value
    if isinstance( value, str ):
        return date_str_to_date( value )
    raise TypeError( f'Cannot convert {value!r} to a calendar date' )


def to_display_date_str( the_date ):
    """ User-facing rendering of a day, e.g., in helper text. """
    return to_calendar_date( the_date ).strftime( settings.TJ_DISPLAY_DATE_FORMAT )
