"""
Management command to show which place statuses and dates a journal
accepts on a given day.

Usage:
    ./src/manage.py tj_dateconstraints <journal_uuid> [--today YYYY-MM-DD] [--json]
"""
import json
import logging

from django.core.exceptions import ValidationError
from django.core.management.base import BaseCommand, CommandError

from tj.apps.common import datetimeproxy
from tj.apps.journal.models import Journal
from tj.apps.travel.serializers import DateConstraintsSerializer
from tj.apps.travel.services import TravelSegmentBuilder

logger = logging.getLogger(__name__)


class Command( BaseCommand ):
    help = 'Show the place date constraints of a journal'

    def add_arguments( self, parser ):
        parser.add_argument(
            'journal_uuid',
            help='UUID of the journal'
        )
        parser.add_argument(
            '--today',
            help='Evaluate as of this day (YYYY-MM-DD) instead of the current day'
        )
        parser.add_argument(
            '--json',
            action='store_true',
            help='Output the constraints as JSON'
        )

    def handle( self, *args, **options ):
        try:
            journal = Journal.objects.get( uuid = options['journal_uuid'] )
        except ( Journal.DoesNotExist, ValidationError ):
            raise CommandError( f'Journal "{options["journal_uuid"]}" not found' )

        if options['today']:
            try:
                today = datetimeproxy.date_str_to_date( options['today'] )
            except ValueError:
                raise CommandError( f'Invalid date "{options["today"]}", expected YYYY-MM-DD' )
        else:
            today = datetimeproxy.today()

        constraints = journal.get_date_constraints( today = today )
        logger.debug( 'Reporting constraints for journal %s on %s', journal.uuid, today )

        if options['json']:
            data = DateConstraintsSerializer( constraints ).data
            self.stdout.write( json.dumps( data, indent = 2 ))
            return

        self.stdout.write( f'{journal.title} ({constraints.status.label})' )
        self.stdout.write( constraints.info_message )
        self.stdout.write( constraints.helper_text )
        for segment in TravelSegmentBuilder.build( constraints ):
            date_range = segment.date_range.to_dict()
            self.stdout.write( f'  {segment.label}: {date_range["min"]} to {date_range["max"]}' )
            continue
        return
