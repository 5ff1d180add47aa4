from enum import Enum


class LabeledEnum(Enum):
    """
    Enum whose members carry a display label and description.  Members
    are auto-numbered and their string form is the lowercase name, which
    is also what gets stored in the database and exchanged with clients.
    """

    def __new__(cls, *args, **kwds):
        value = len(cls.__members__) + 1
        obj = object.__new__(cls)
        obj._value_ = value
        return obj

    def __init__( self, label : str, description : str ):
        self.label = label
        self.description = description
        return

    @classmethod
    def default(cls):
        """ Subclasses can override, else first item """
        return next(iter(cls))

    @classmethod
    def from_name( cls, name : str ):
        if name:
            for value in cls:
                if value.name.lower() == name.strip().lower():
                    return value
                continue
        raise ValueError( f'Unknown name value "{name}" for {cls.__name__}' )

    def __str__(self):
        return self.name.lower()
