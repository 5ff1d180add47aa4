from typing import Any, Dict

from rest_framework import serializers

from tj.apps.common import datetimeproxy

from .constants import TravelFields as F
from .enums import PlaceStatus
from .schemas import DateConstraints, DateRange
from .services import PlaceDateValidator, TravelSegmentBuilder


class DateRangeSerializer( serializers.Serializer ):

    def to_representation( self, instance: DateRange ) -> Dict[str, Any]:
        return {
            F.MIN: datetimeproxy.to_date_str( instance.min ),
            F.MAX: datetimeproxy.to_date_str( instance.max ),
        }


class DateConstraintsSerializer( serializers.Serializer ):
    """
    Read-only representation of a journal's date constraints.

    The per-status keys are only present for the statuses the journal
    accepts, mirroring the constraint variant being serialized.
    """

    def to_representation( self, instance: DateConstraints ) -> Dict[str, Any]:
        data = {
            F.STATUS: str( instance.status ),
            F.ALLOWED_STATUSES: [ str(x) for x in instance.allowed_statuses ],
        }
        range_keys = (
            ( PlaceStatus.VISITED, F.VISITED_DATE_CONSTRAINTS ),
            ( PlaceStatus.PLANNED, F.PLANNED_DATE_CONSTRAINTS ),
        )
        for place_status, key in range_keys:
            date_range = instance.range_for( place_status )
            if date_range is not None:
                data[key] = DateRangeSerializer( date_range ).data
            continue

        data[F.SEGMENTS] = [
            {
                F.PLACE_STATUS: str( segment.place_status ),
                F.LABEL: segment.label,
                **DateRangeSerializer( segment.date_range ).data,
            }
            for segment in TravelSegmentBuilder.build( instance )
        ]
        data[F.INFO_MESSAGE] = instance.info_message
        data[F.HELPER_TEXT] = instance.helper_text
        return data


class PlaceDateSerializer( serializers.Serializer ):
    """
    Validates a candidate place date and status against the journal's
    constraints, passed in as context['constraints'].
    """
    date = serializers.DateField( input_formats = [ datetimeproxy.DATE_STR_FORMAT ] )
    is_visited = serializers.BooleanField()

    def validate( self, attrs: Dict[str, Any] ) -> Dict[str, Any]:
        constraints = self.context['constraints']
        validation = PlaceDateValidator.validate(
            candidate_date = attrs[F.DATE],
            is_visited = attrs[F.IS_VISITED],
            constraints = constraints,
        )
        if not validation.is_valid:
            raise serializers.ValidationError({ F.DATE: validation.error_message })
        return attrs
