"""
Custom Django model fields for common patterns.
"""
from django.core.exceptions import ValidationError
from django.db import models

from .enums import LabeledEnum


class LabeledEnumDescriptor:
    """
    Converts the raw stored string to its enum member on attribute access,
    so model code always sees enum instances.
    """

    def __init__(self, field):
        self.field = field

    def __get__(self, instance, owner):
        if instance is None:
            return self.field

        value = instance.__dict__.get( self.field.attname )
        if value is None or isinstance( value, self.field.enum_class ):
            return value
        try:
            return self.field.to_python( value )
        except ValidationError:
            return self.field.enum_class.default()

    def __set__(self, instance, value):
        instance.__dict__[self.field.attname] = value


class LabeledEnumField(models.CharField):
    """
    Stores a LabeledEnum member as its lowercase name (VARCHAR).

    Choices are not put on the column so adding enum members needs no
    migration.

        status = LabeledEnumField( PlaceStatus, 'Status' )
        place.status = 'visited'
        assert place.status == PlaceStatus.VISITED
    """

    description = "A field for storing LabeledEnum values as lowercase strings"

    def __init__(self, enum_class, *args, **kwargs):
        if not issubclass( enum_class, LabeledEnum ):
            raise TypeError( f'{enum_class} must be a subclass of LabeledEnum' )
        self.enum_class = enum_class

        if 'max_length' not in kwargs:
            kwargs['max_length'] = max( 32, max( len(str(x)) for x in enum_class ) + 10 )
        if 'default' not in kwargs:
            kwargs['default'] = str( enum_class.default() )
        super().__init__(*args, **kwargs)

    def deconstruct(self):
        name, path, args, kwargs = super().deconstruct()
        kwargs['enum_class'] = self.enum_class
        return name, path, args, kwargs

    def from_db_value(self, value, expression, connection):
        if value is None:
            return None
        return self.to_python( value )

    def to_python(self, value):
        if value is None or isinstance( value, self.enum_class ):
            return value
        try:
            return self.enum_class.from_name( str(value) )
        except ValueError as e:
            raise ValidationError( f"Invalid value '{value}' for {self.enum_class.__name__}: {e}" )

    def get_prep_value(self, value):
        enum_value = self.to_python( value )
        if enum_value is None:
            return None
        return str( enum_value )

    def validate(self, value, model_instance):
        if value is None:
            if not self.null:
                raise ValidationError( 'This field cannot be null.' )
            return
        # Skip CharField choice validation; membership is checked by to_python()
        self.to_python( value )
        return

    def contribute_to_class(self, cls, name, **kwargs):
        super().contribute_to_class( cls, name, **kwargs )
        setattr( cls, name, LabeledEnumDescriptor( self ))
