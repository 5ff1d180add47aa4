from dataclasses import dataclass
from datetime import date
from typing import Dict, List, Optional

from tj.apps.common import datetimeproxy

from .enums import PlaceStatus, TravelStatus


@dataclass( frozen = True )
class DateRange:
    """ Inclusive range of calendar days. """

    min  : date
    max  : date

    def contains( self, the_date : date ) -> bool:
        return bool( self.min <= the_date <= self.max )

    def to_dict(self) -> Dict[str, str]:
        return {
            'min': datetimeproxy.to_date_str( self.min ),
            'max': datetimeproxy.to_date_str( self.max ),
        }


@dataclass( frozen = True )
class DateConstraints:
    """
    What place statuses and dates a journal accepts on a given day.

    Only the variants below are ever built, one per TravelStatus.  Each
    variant declares just the ranges it has: a future journal has no
    visited_range attribute at all and a past journal no planned_range,
    so a range can only be read through range_for().
    """

    journal_start  : date
    journal_end    : date
    today          : date
    info_message   : str
    helper_text    : str

    status = None
    ALLOWED_STATUSES = ()

    @property
    def allowed_statuses(self) -> List[PlaceStatus]:
        return list( self.ALLOWED_STATUSES )

    def allows( self, place_status : PlaceStatus ) -> bool:
        return bool( place_status in self.ALLOWED_STATUSES )

    def range_for( self, place_status : PlaceStatus ) -> Optional[DateRange]:
        return getattr( self, f'{place_status}_range', None )


@dataclass( frozen = True )
class FutureDateConstraints( DateConstraints ):

    planned_range  : DateRange

    status = TravelStatus.FUTURE
    ALLOWED_STATUSES = ( PlaceStatus.PLANNED, )


@dataclass( frozen = True )
class OngoingDateConstraints( DateConstraints ):

    visited_range  : DateRange
    planned_range  : DateRange

    status = TravelStatus.ONGOING
    ALLOWED_STATUSES = ( PlaceStatus.VISITED, PlaceStatus.PLANNED )


@dataclass( frozen = True )
class PastDateConstraints( DateConstraints ):

    visited_range  : DateRange

    status = TravelStatus.PAST
    ALLOWED_STATUSES = ( PlaceStatus.VISITED, )


@dataclass( frozen = True )
class PlaceDateValidation:

    is_valid       : bool
    error_message  : Optional[str]  = None

    @classmethod
    def valid(cls) -> 'PlaceDateValidation':
        return cls( is_valid = True )

    @classmethod
    def invalid( cls, error_message : str ) -> 'PlaceDateValidation':
        return cls( is_valid = False, error_message = error_message )


@dataclass( frozen = True )
class SuggestedDates:

    start_date  : date
    end_date    : date

    def to_dict(self) -> Dict[str, str]:
        return {
            'start_date': datetimeproxy.to_date_str( self.start_date ),
            'end_date': datetimeproxy.to_date_str( self.end_date ),
        }


@dataclass( frozen = True )
class TravelSegment:
    """ A selectable kind of place (visited or planned) and its legal days. """

    place_status  : PlaceStatus
    date_range    : DateRange

    @property
    def label(self) -> str:
        return self.place_status.segment_label
