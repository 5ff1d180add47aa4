"""
Date rules for places in a journal.

A journal's date range, compared with the current day, decides which
place statuses are legal (visited, planned) and which days each status
may use.  Every function here takes "today" as an explicit argument:
callers read the clock once (see datetimeproxy) and pass the same day to
every step of an evaluation.
"""
import logging
from datetime import date
from typing import List, Optional

from tj.apps.common import datetimeproxy

from .enums import PlaceStatus, TravelStatus
from .exceptions import UnknownTravelStatusError
from .messages import TravelMessages as M
from .schemas import (
    DateConstraints,
    DateRange,
    FutureDateConstraints,
    OngoingDateConstraints,
    PastDateConstraints,
    PlaceDateValidation,
    SuggestedDates,
    TravelSegment,
)

logger = logging.getLogger(__name__)


class TravelStatusResolver:

    @classmethod
    def resolve( cls, today, journal_start, journal_end ) -> TravelStatus:
        """
        Classify by calendar day only.  Both journal boundaries count as
        ongoing.  Assumes journal_start <= journal_end.
        """
        today = datetimeproxy.to_calendar_date( today )
        journal_start = datetimeproxy.to_calendar_date( journal_start )
        journal_end = datetimeproxy.to_calendar_date( journal_end )

        if today < journal_start:
            return TravelStatus.FUTURE
        if today <= journal_end:
            return TravelStatus.ONGOING
        return TravelStatus.PAST


class DateConstraintCalculator:

    @classmethod
    def compute( cls, journal_start, journal_end, today ) -> DateConstraints:
        journal_start = datetimeproxy.to_calendar_date( journal_start )
        journal_end = datetimeproxy.to_calendar_date( journal_end )
        today = datetimeproxy.to_calendar_date( today )

        travel_status = TravelStatusResolver.resolve(
            today = today,
            journal_start = journal_start,
            journal_end = journal_end,
        )
        logger.debug( 'Journal %s..%s is %s on %s',
                      journal_start, journal_end, travel_status, today )
        return cls._build( travel_status = travel_status,
                           journal_start = journal_start,
                           journal_end = journal_end,
                           today = today )

    @classmethod
    def _build( cls,
                travel_status  : TravelStatus,
                journal_start  : date,
                journal_end    : date,
                today          : date ) -> DateConstraints:

        if travel_status == TravelStatus.FUTURE:
            return FutureDateConstraints(
                journal_start = journal_start,
                journal_end = journal_end,
                today = today,
                planned_range = DateRange( min = journal_start, max = journal_end ),
                info_message = M.FUTURE_INFO,
                helper_text = M.helper_text( M.FUTURE_HELPER_PREFIX, journal_start, journal_end ),
            )

        if travel_status == TravelStatus.ONGOING:
            # Today closes the visited range and opens the planned one.
            return OngoingDateConstraints(
                journal_start = journal_start,
                journal_end = journal_end,
                today = today,
                visited_range = DateRange( min = journal_start, max = today ),
                planned_range = DateRange( min = today, max = journal_end ),
                info_message = M.ONGOING_INFO,
                helper_text = M.helper_text( M.ONGOING_HELPER_PREFIX, journal_start, journal_end ),
            )

        if travel_status == TravelStatus.PAST:
            return PastDateConstraints(
                journal_start = journal_start,
                journal_end = journal_end,
                today = today,
                visited_range = DateRange( min = journal_start, max = journal_end ),
                info_message = M.PAST_INFO,
                helper_text = M.helper_text( M.PAST_HELPER_PREFIX, journal_start, journal_end ),
            )

        logger.error( 'No date constraints defined for travel status %r', travel_status )
        raise UnknownTravelStatusError( travel_status )


class PlaceDateValidator:

    @classmethod
    def validate( cls,
                  candidate_date,
                  is_visited      : bool,
                  constraints     : DateConstraints ) -> PlaceDateValidation:
        """
        Failures are returned, not raised, so callers can show them
        inline next to the field being edited.
        """
        place_status = PlaceStatus.from_is_visited( is_visited )

        if not constraints.allows( place_status ):
            if is_visited:
                return PlaceDateValidation.invalid( M.VISITED_NOT_ALLOWED )
            return PlaceDateValidation.invalid( M.PLANNED_NOT_ALLOWED )

        date_range = constraints.range_for( place_status )
        if date_range is None:
            return PlaceDateValidation.invalid( M.CONSTRAINTS_UNDEFINED )

        candidate_date = datetimeproxy.to_calendar_date( candidate_date )

        if candidate_date < date_range.min:
            if is_visited:
                return PlaceDateValidation.invalid( M.VISITED_BEFORE_START )
            return PlaceDateValidation.invalid( M.PLANNED_IN_PAST )

        if candidate_date > date_range.max:
            if is_visited:
                return PlaceDateValidation.invalid( M.VISITED_AFTER_END_OR_TODAY )
            return PlaceDateValidation.invalid( M.PLANNED_AFTER_END )

        return PlaceDateValidation.valid()

    @classmethod
    def validate_range( cls,
                        start_date,
                        end_date,
                        is_visited      : bool,
                        constraints     : DateConstraints ) -> PlaceDateValidation:
        """ Checks both ends of a place's stay, returning the first failure. """
        start_validation = cls.validate( start_date, is_visited, constraints )
        if not start_validation.is_valid or end_date is None:
            return start_validation

        end_validation = cls.validate( end_date, is_visited, constraints )
        if not end_validation.is_valid:
            return end_validation

        if datetimeproxy.to_calendar_date( end_date ) < datetimeproxy.to_calendar_date( start_date ):
            return PlaceDateValidation.invalid( M.END_BEFORE_START )
        return PlaceDateValidation.valid()


class DefaultDateSuggester:

    @classmethod
    def suggest( cls,
                 is_visited   : bool,
                 constraints  : DateConstraints ) -> SuggestedDates:
        """
        Advisory only: the earliest legal day for the status, or the
        evaluation day when the status has no range.
        """
        date_range = constraints.range_for( PlaceStatus.from_is_visited( is_visited ))
        if date_range is None:
            return SuggestedDates( start_date = constraints.today, end_date = constraints.today )
        return SuggestedDates( start_date = date_range.min, end_date = date_range.min )


class TravelSegmentBuilder:

    @classmethod
    def build( cls, constraints : DateConstraints ) -> List[TravelSegment]:
        segments = list()
        for place_status in constraints.allowed_statuses:
            date_range = constraints.range_for( place_status )
            if date_range is None:
                continue
            segments.append( TravelSegment( place_status = place_status,
                                            date_range = date_range ))
            continue
        return segments


class PlaceStatusChangeValidator:

    @classmethod
    def validate( cls,
                  selected_date,
                  to_visited       : bool,
                  from_visited     : bool,
                  constraints      : DateConstraints,
                  has_attachments  : bool             = False ) -> PlaceDateValidation:
        if not selected_date:
            return PlaceDateValidation.invalid( M.SELECT_DATE_FIRST )

        # Photos and notes are evidence the visit happened.
        if from_visited and not to_visited and has_attachments:
            return PlaceDateValidation.invalid( M.HAS_PROOF_OF_VISIT )

        return PlaceDateValidator.validate( selected_date, to_visited, constraints )

    @classmethod
    def resolve_status( cls,
                        requested_visited  : Optional[bool],
                        constraints        : DateConstraints ) -> bool:
        """
        The requested status if the journal accepts it, else the first
        status it does accept.
        """
        if requested_visited is not None:
            if constraints.allows( PlaceStatus.from_is_visited( requested_visited )):
                return requested_visited
        return constraints.allowed_statuses[0].is_visited
