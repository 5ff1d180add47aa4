"""
User-facing messages for the travel date rules.

Forms, serializers and the constraint report all show these strings, so
phrasing lives in one place.
"""
from tj.apps.common import datetimeproxy


class TravelMessages:

    @staticmethod
    def helper_text( prefix: str, journal_start, journal_end ) -> str:
        return '{}: {} to {}'.format(
            prefix,
            datetimeproxy.to_display_date_str( journal_start ),
            datetimeproxy.to_display_date_str( journal_end ),
        )

    # -------------------------------------------------------------------------
    # Journal phase summaries
    # -------------------------------------------------------------------------
    FUTURE_INFO = 'This journal is in the future. You can only plan your visits.'
    ONGOING_INFO = 'This journal is ongoing. You can add your past visits and plan upcoming ones.'
    PAST_INFO = 'This journal is over. You can only record visited places.'

    FUTURE_HELPER_PREFIX = 'Planned trip'
    ONGOING_HELPER_PREFIX = 'Trip in progress'
    PAST_HELPER_PREFIX = 'Completed trip'

    # -------------------------------------------------------------------------
    # Place date validation
    # -------------------------------------------------------------------------
    VISITED_NOT_ALLOWED = 'You cannot mark a place as visited for this journal'
    PLANNED_NOT_ALLOWED = 'You cannot plan new places for this journal'
    CONSTRAINTS_UNDEFINED = 'Date constraints are not defined for this status'
    VISITED_BEFORE_START = 'The date cannot be before the start of the journal'
    PLANNED_IN_PAST = 'The date cannot be in the past'
    VISITED_AFTER_END_OR_TODAY = 'The date cannot be after the end of the journal or today'
    PLANNED_AFTER_END = 'The date cannot be after the end of the journal'
    END_BEFORE_START = 'The end date must be on or after the start date'

    # -------------------------------------------------------------------------
    # Status toggle
    # -------------------------------------------------------------------------
    SELECT_DATE_FIRST = 'Please select a date first'
    HAS_PROOF_OF_VISIT = ( 'This place has proof of visit (photos, notes).'
                           ' Converting it to planned is not recommended.' )
