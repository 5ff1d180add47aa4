import datetime
import logging

import pytz

from django.test import TestCase, override_settings
from django.utils import timezone

import tj.apps.common.datetimeproxy as datetimeproxy

logging.disable(logging.CRITICAL)


class TestDateTimeProxy(TestCase):

    def tearDown(self):
        datetimeproxy.reset()
        return

    def test_unaltered_time_matches_system_time(self):
        datetimeproxy.reset()
        delta = datetimeproxy.now() - timezone.now()
        self.assertTrue( abs( delta.total_seconds() ) <= 1 )

    def test_set(self):
        native_dt = timezone.now()
        datetimeproxy.set( native_dt + datetime.timedelta( hours = 5 ))
        delta = datetimeproxy.now() - native_dt
        self.assertTrue( 5 * 60 * 60 - 1 <= delta.total_seconds() <= 5 * 60 * 60 + 1 )

    def test_now_in_time_zone(self):
        local_dt = datetimeproxy.now( tzname = 'Europe/Paris' )
        self.assertEqual( local_dt.tzinfo.zone, 'Europe/Paris' )

    def test_unknown_time_zone_falls_back(self):
        local_dt = datetimeproxy.now( tzname = 'Nowhere/Special' )
        self.assertEqual( local_dt.utcoffset(), datetime.timedelta( 0 ))

    @override_settings( TIME_ZONE = 'UTC' )
    def test_set_today(self):
        datetimeproxy.set_today( '2025-01-15' )
        self.assertEqual( datetimeproxy.today(), datetime.date( 2025, 1, 15 ))

    def test_today_depends_on_time_zone(self):
        late_utc = pytz.utc.localize( datetime.datetime( 2025, 1, 15, 23, 30 ))
        datetimeproxy.set( late_utc )
        self.assertEqual( datetimeproxy.today( tzname = 'UTC' ), datetime.date( 2025, 1, 15 ))
        self.assertEqual( datetimeproxy.today( tzname = 'Asia/Tokyo' ), datetime.date( 2025, 1, 16 ))

    def test_date_str_round_trip(self):
        the_date = datetimeproxy.date_str_to_date( '2025-01-05' )
        self.assertEqual( the_date, datetime.date( 2025, 1, 5 ))
        self.assertEqual( datetimeproxy.to_date_str( the_date ), '2025-01-05' )

    def test_date_str_rejects_other_formats(self):
        for bad_str in ( '05/01/2025', '2025-13-01', '' ):
            with self.assertRaises( ValueError ):
                datetimeproxy.date_str_to_date( bad_str )
            continue

    def test_to_calendar_date(self):
        expected = datetime.date( 2025, 1, 5 )
        self.assertEqual( datetimeproxy.to_calendar_date( expected ), expected )
        self.assertEqual( datetimeproxy.to_calendar_date( datetime.datetime( 2025, 1, 5, 22, 15 )), expected )
        self.assertEqual( datetimeproxy.to_calendar_date( '2025-01-05' ), expected )
        with self.assertRaises( TypeError ):
            datetimeproxy.to_calendar_date( 20250105 )

    @override_settings( TJ_DISPLAY_DATE_FORMAT = '%d %b %Y' )
    def test_to_display_date_str(self):
        self.assertEqual( datetimeproxy.to_display_date_str( '2025-01-05' ), '05 Jan 2025' )
