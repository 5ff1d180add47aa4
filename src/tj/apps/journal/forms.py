from django import forms

from tj.apps.common import datetimeproxy
from tj.apps.travel.enums import PlaceStatus
from tj.apps.travel.services import (
    DefaultDateSuggester,
    PlaceDateValidator,
    PlaceStatusChangeValidator,
)

from .models import Journal, Place

DATE_INPUT_FORMATS = [ datetimeproxy.DATE_STR_FORMAT ]


class JournalForm(forms.ModelForm):
    """ The end-before-start check lives in Journal.clean(). """

    class Meta:
        model = Journal
        fields = ('title', 'description', 'start_date', 'end_date')
        widgets = {
            'title': forms.TextInput(attrs={
                'class': 'form-control',
                'placeholder': 'Enter journal title',
                'autofocus': 'autofocus',
            }),
            'description': forms.Textarea(attrs={
                'class': 'form-control',
                'placeholder': 'Enter optional description',
                'rows': 3,
            }),
            'start_date': forms.DateInput(attrs={
                'class': 'form-control',
                'type': 'date',
            }),
            'end_date': forms.DateInput(attrs={
                'class': 'form-control',
                'type': 'date',
            }),
        }


class PlaceForm(forms.ModelForm):
    """
    Place name, visited/planned status and dates, checked against what the
    journal accepts on the evaluation day.

    Unbound forms for a new place are pre-filled with a status the journal
    accepts and the suggested default dates for that status.
    """

    is_visited = forms.BooleanField(
        required = False,
        label = 'Visited',
    )
    start_date = forms.DateField(
        input_formats = DATE_INPUT_FORMATS,
        widget = forms.DateInput(attrs={
            'class': 'form-control',
            'type': 'date',
        }),
    )
    end_date = forms.DateField(
        required = False,
        input_formats = DATE_INPUT_FORMATS,
        widget = forms.DateInput(attrs={
            'class': 'form-control',
            'type': 'date',
        }),
    )

    class Meta:
        model = Place
        fields = ('name', 'start_date', 'end_date')
        widgets = {
            'name': forms.TextInput(attrs={
                'class': 'form-control',
                'placeholder': 'Place name',
            }),
        }

    def __init__( self, *args, journal : Journal, today = None, has_attachments = False, **kwargs ):
        if today is None:
            today = datetimeproxy.today()
        if kwargs.get( 'instance' ) is None:
            kwargs['instance'] = Place( journal = journal )

        self.journal = journal
        self.has_attachments = has_attachments
        self.constraints = journal.get_date_constraints( today = today )
        super().__init__( *args, **kwargs )

        is_new_place = bool( self.instance.pk is None )
        if self.is_bound:
            requested_visited = self.fields['is_visited'].to_python(
                self.data.get( self.add_prefix( 'is_visited' )))
        elif is_new_place:
            requested_visited = None
        else:
            requested_visited = self.instance.is_visited
        is_visited = PlaceStatusChangeValidator.resolve_status( requested_visited, self.constraints )

        if not self.is_bound:
            self.initial['is_visited'] = is_visited
            if is_new_place or not self.instance.start_date:
                suggested = DefaultDateSuggester.suggest( is_visited, self.constraints )
                self.initial['start_date'] = suggested.start_date
                self.initial['end_date'] = suggested.end_date

        self._set_date_bounds( is_visited = is_visited )
        return

    def _set_date_bounds( self, is_visited : bool ):
        date_range = self.constraints.range_for( PlaceStatus.from_is_visited( is_visited ))
        if date_range is None:
            return
        for field_name in ( 'start_date', 'end_date' ):
            self.fields[field_name].widget.attrs.update( date_range.to_dict() )
            continue
        self.fields['start_date'].help_text = self.constraints.helper_text
        return

    def clean(self):
        cleaned_data = super().clean()
        is_visited = cleaned_data.get( 'is_visited', False )
        start_date = cleaned_data.get( 'start_date' )
        end_date = cleaned_data.get( 'end_date' )

        # A date that failed to parse already carries its own error.
        if ( self.instance.pk is not None
             and self.instance.is_visited != is_visited
             and 'start_date' not in self.errors ):
            status_change = PlaceStatusChangeValidator.validate(
                selected_date = start_date,
                to_visited = is_visited,
                from_visited = self.instance.is_visited,
                constraints = self.constraints,
                has_attachments = self.has_attachments,
            )
            if not status_change.is_valid:
                self.add_error( 'is_visited', status_change.error_message )
                return cleaned_data

        if start_date is None:
            return cleaned_data

        start_validation = PlaceDateValidator.validate( start_date, is_visited, self.constraints )
        if not start_validation.is_valid:
            self.add_error( 'start_date', start_validation.error_message )
            return cleaned_data

        range_validation = PlaceDateValidator.validate_range(
            start_date = start_date,
            end_date = end_date,
            is_visited = is_visited,
            constraints = self.constraints,
        )
        if not range_validation.is_valid:
            self.add_error( 'end_date', range_validation.error_message )
        return cleaned_data

    def save( self, commit = True ):
        place = super().save( commit = False )
        place.status = PlaceStatus.from_is_visited( self.cleaned_data.get( 'is_visited', False ))
        place.apply_dates(
            start_date = self.cleaned_data['start_date'],
            end_date = self.cleaned_data.get( 'end_date' ) or self.cleaned_data['start_date'],
        )
        if commit:
            place.save()
        return place
