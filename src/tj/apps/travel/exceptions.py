class TravelRulesError( Exception ):
    pass


class UnknownTravelStatusError( TravelRulesError ):
    """ A travel status reached a branch that does not handle it. """

    def __init__( self, status ):
        self._status = status
        super().__init__( f'Unrecognized travel status: {status}' )
        return

    @property
    def status(self):
        return self._status
