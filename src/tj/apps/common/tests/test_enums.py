import logging

from django.test import TestCase

from tj.apps.travel.enums import PlaceStatus, TravelStatus

logging.disable(logging.CRITICAL)


class TestLabeledEnum(TestCase):

    def test_str_is_lowercase_name(self):
        self.assertEqual( str( TravelStatus.ONGOING ), 'ongoing' )
        self.assertEqual( str( PlaceStatus.VISITED ), 'visited' )

    def test_members_are_distinct(self):
        self.assertEqual( len( list( TravelStatus )), 3 )
        self.assertEqual( len( list( PlaceStatus )), 2 )

    def test_from_name(self):
        self.assertEqual( PlaceStatus.from_name( ' Planned ' ), PlaceStatus.PLANNED )
        with self.assertRaises( ValueError ):
            PlaceStatus.from_name( 'wishlist' )

    def test_place_status_helpers(self):
        self.assertEqual( PlaceStatus.from_is_visited( True ), PlaceStatus.VISITED )
        self.assertEqual( PlaceStatus.from_is_visited( False ), PlaceStatus.PLANNED )
        self.assertTrue( PlaceStatus.VISITED.is_visited )
        self.assertFalse( PlaceStatus.PLANNED.is_visited )
