import logging
from datetime import date

from django.core.exceptions import ValidationError

from tj.apps.journal.models import Journal, Place
from tj.apps.travel.enums import PlaceStatus, TravelStatus
from tj.apps.travel.messages import TravelMessages as M
from tj.testing.base_test_case import BaseTestCase

from .synthetic_data import JournalSyntheticData

logging.disable(logging.CRITICAL)


class JournalModelTestCase(BaseTestCase):

    def setUp(self):
        super().setUp()
        self.journal = JournalSyntheticData.create_test_journal()
        return

    def test_total_days_is_inclusive(self):
        self.assertEqual( self.journal.total_days, 11 )

    def test_clean_rejects_end_before_start(self):
        journal = Journal( title = 'Backwards', start_date = date( 2025, 1, 20 ), end_date = date( 2025, 1, 10 ))
        with self.assertRaises( ValidationError ) as context:
            journal.full_clean()
        self.assertEqual( context.exception.message_dict['end_date'], [ M.END_BEFORE_START ] )

    def test_clean_accepts_single_day(self):
        journal = Journal( title = 'Day trip', start_date = date( 2025, 1, 10 ), end_date = date( 2025, 1, 10 ))
        journal.full_clean()

    def test_travel_status_follows_clock(self):
        self.set_today( '2025-01-01' )
        self.assertEqual( self.journal.get_travel_status(), TravelStatus.FUTURE )
        self.set_today( '2025-01-10' )
        self.assertEqual( self.journal.get_travel_status(), TravelStatus.ONGOING )
        self.set_today( '2025-02-01' )
        self.assertEqual( self.journal.get_travel_status(), TravelStatus.PAST )

    def test_explicit_today_wins_over_clock(self):
        self.set_today( '2025-02-01' )
        constraints = self.journal.get_date_constraints( today = date( 2025, 1, 15 ))
        self.assertEqual( constraints.status, TravelStatus.ONGOING )
        self.assertEqual( constraints.today, date( 2025, 1, 15 ))

    def test_constraints_use_clock_when_today_omitted(self):
        self.set_today( '2025-01-12' )
        constraints = self.journal.get_date_constraints()
        self.assertEqual( constraints.today, date( 2025, 1, 12 ))


class PlaceModelTestCase(BaseTestCase):

    def setUp(self):
        super().setUp()
        self.journal = JournalSyntheticData.create_test_journal()
        return

    def test_status_round_trips_as_enum(self):
        place = JournalSyntheticData.create_test_place( self.journal, status = PlaceStatus.VISITED )
        place = Place.objects.get( pk = place.pk )
        self.assertEqual( place.status, PlaceStatus.VISITED )
        self.assertTrue( place.is_visited )
        self.assertEqual( Place.objects.filter( status = 'visited' ).count(), 1 )

    def test_status_accepts_string(self):
        place = Place( journal = self.journal, name = 'Louvre' )
        place.status = 'PLANNED'
        self.assertEqual( place.status, PlaceStatus.PLANNED )

    def test_default_status_is_planned(self):
        place = Place( journal = self.journal, name = 'Louvre' )
        self.assertEqual( place.status, PlaceStatus.PLANNED )

    def test_unknown_status_reads_as_default(self):
        place = Place( journal = self.journal, name = 'Louvre' )
        place.status = 'wishlist'
        self.assertEqual( place.status, PlaceStatus.PLANNED )

    def test_field_rejects_unknown_status(self):
        with self.assertRaises( ValidationError ):
            Place._meta.get_field( 'status' ).to_python( 'wishlist' )

    def test_apply_dates_for_visited(self):
        place = Place( journal = self.journal, name = 'Louvre', status = PlaceStatus.VISITED )
        place.apply_dates( date( 2025, 1, 12 ), date( 2025, 1, 13 ))
        self.assertEqual( place.date_visited, date( 2025, 1, 12 ))
        self.assertEqual( place.end_date, date( 2025, 1, 13 ))

    def test_apply_dates_for_planned_clears_visit(self):
        place = JournalSyntheticData.create_test_place( self.journal, status = PlaceStatus.VISITED )
        place.status = PlaceStatus.PLANNED
        place.apply_dates( date( 2025, 1, 18 ), date( 2025, 1, 18 ))
        self.assertIsNone( place.date_visited )

    def test_places_related_to_journal(self):
        JournalSyntheticData.create_test_place( self.journal, name = 'A' )
        JournalSyntheticData.create_test_place( self.journal, name = 'B' )
        self.assertEqual( self.journal.places.count(), 2 )
