from tj.apps.common.enums import LabeledEnum


class TravelStatus( LabeledEnum ):
    """
    Where a journal's date range sits relative to the current day.
    Never persisted; recomputed whenever needed since "today" moves.
    """
    FUTURE   = ( 'Future'  , 'The journal has not started yet'   )
    ONGOING  = ( 'Ongoing' , 'Today falls within the journal'     )
    PAST     = ( 'Past'    , 'The journal has ended'              )


class PlaceStatus( LabeledEnum ):

    VISITED  = ( 'Visited' , 'The place has been visited'  , 'Visited places' )
    PLANNED  = ( 'Planned' , 'The place is planned'        , 'Planned places' )

    def __init__( self, label, description, segment_label ):
        super().__init__( label, description )
        self.segment_label = segment_label
        return

    @classmethod
    def default(cls):
        return cls.PLANNED

    @classmethod
    def from_is_visited( cls, is_visited : bool ):
        return cls.VISITED if is_visited else cls.PLANNED

    @property
    def is_visited(self):
        return bool( self == PlaceStatus.VISITED )
