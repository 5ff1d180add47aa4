import uuid

from django.core.exceptions import ValidationError
from django.db import models

from tj.apps.common import datetimeproxy
from tj.apps.common.model_fields import LabeledEnumField
from tj.apps.travel.enums import PlaceStatus, TravelStatus
from tj.apps.travel.messages import TravelMessages
from tj.apps.travel.schemas import DateConstraints
from tj.apps.travel.services import DateConstraintCalculator, TravelStatusResolver


class Journal( models.Model ):
    """
    A trip: a titled date range that owns places.  Only the fields the
    travel date rules need are modeled here.
    """

    uuid = models.UUIDField(
        default = uuid.uuid4,
        unique = True,
        editable = False,
    )
    title = models.CharField(
        max_length = 200,
    )
    description = models.TextField(
        blank = True,
    )
    start_date = models.DateField()
    end_date = models.DateField()
    created_datetime = models.DateTimeField( auto_now_add = True )
    modified_datetime = models.DateTimeField( auto_now = True )

    class Meta:
        verbose_name = 'Journal'
        verbose_name_plural = 'Journals'
        ordering = [ '-start_date' ]

    def __str__(self):
        return f'{self.title} [{self.pk}]'

    def clean(self):
        super().clean()
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValidationError({ 'end_date': TravelMessages.END_BEFORE_START })
        return

    @property
    def total_days(self) -> int:
        return ( self.end_date - self.start_date ).days + 1

    def get_travel_status( self, today = None ) -> TravelStatus:
        if today is None:
            today = datetimeproxy.today()
        return TravelStatusResolver.resolve(
            today = today,
            journal_start = self.start_date,
            journal_end = self.end_date,
        )

    def get_date_constraints( self, today = None ) -> DateConstraints:
        if today is None:
            today = datetimeproxy.today()
        return DateConstraintCalculator.compute(
            journal_start = self.start_date,
            journal_end = self.end_date,
            today = today,
        )


class Place( models.Model ):

    uuid = models.UUIDField(
        default = uuid.uuid4,
        unique = True,
        editable = False,
    )
    journal = models.ForeignKey(
        Journal,
        on_delete = models.CASCADE,
        related_name = 'places',
    )
    name = models.CharField(
        max_length = 200,
    )
    status = LabeledEnumField(
        PlaceStatus,
        'Status',
    )
    date_visited = models.DateField(
        null = True,
        blank = True,
    )
    start_date = models.DateField(
        null = True,
        blank = True,
    )
    end_date = models.DateField(
        null = True,
        blank = True,
    )
    created_datetime = models.DateTimeField( auto_now_add = True )
    modified_datetime = models.DateTimeField( auto_now = True )

    class Meta:
        verbose_name = 'Place'
        verbose_name_plural = 'Places'
        ordering = [ 'start_date', 'name' ]

    def __str__(self):
        return f'{self.name} [{self.pk}]'

    @property
    def is_visited(self) -> bool:
        return self.status.is_visited

    def apply_dates( self, start_date, end_date ):
        """ Only visited places have a date_visited; it is their first day. """
        self.start_date = start_date
        self.end_date = end_date
        self.date_visited = start_date if self.is_visited else None
        return
