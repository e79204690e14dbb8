"""Field constraints shared by the Doctor model and the API serializer."""

from django.core.exceptions import ValidationError
from django.core.validators import RegexValidator

FIRST_NAME_MAX_LENGTH = 50
LAST_NAME_MAX_LENGTH = 50
ADDRESS_MAX_LENGTH = 255
CITY_MAX_LENGTH = 100

# ASCII digits only; \d would also accept other Unicode digits.
validate_pincode = RegexValidator(
    regex=r'^[0-9]{5,6}\Z',
    message='Pincode must be 5 or 6 digits',
    code='invalid_pincode',
)


def validate_not_blank(value):
    """Reject values made up only of whitespace."""
    if value is None or not str(value).strip():
        raise ValidationError('This field may not be blank.', code='blank')
