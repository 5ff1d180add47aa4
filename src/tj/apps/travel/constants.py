"""
JSON keys for travel date rules exchanged with clients.

Dates under these keys are always YYYY-MM-DD strings.
"""


class TravelFields:

    STATUS = 'status'
    ALLOWED_STATUSES = 'allowed_statuses'
    VISITED_DATE_CONSTRAINTS = 'visited_date_constraints'
    PLANNED_DATE_CONSTRAINTS = 'planned_date_constraints'
    INFO_MESSAGE = 'info_message'
    HELPER_TEXT = 'helper_text'
    SEGMENTS = 'segments'
    LABEL = 'label'
    PLACE_STATUS = 'place_status'
    MIN = 'min'
    MAX = 'max'

    DATE = 'date'
    IS_VISITED = 'is_visited'
    START_DATE = 'start_date'
    END_DATE = 'end_date'
