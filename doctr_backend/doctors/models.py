from django.db import models

from doctr_backend.doctors.validators import (
    ADDRESS_MAX_LENGTH,
    CITY_MAX_LENGTH,
    FIRST_NAME_MAX_LENGTH,
    LAST_NAME_MAX_LENGTH,
    validate_not_blank,
    validate_pincode,
)


class Doctor(models.Model):
    """A registered doctor.

    The id is assigned by the database and never changes; every other
    field is overwritten in place on update.
    """

    first_name = models.CharField(max_length=FIRST_NAME_MAX_LENGTH, validators=[validate_not_blank])
    last_name = models.CharField(max_length=LAST_NAME_MAX_LENGTH, validators=[validate_not_blank])
    address = models.CharField(max_length=ADDRESS_MAX_LENGTH, validators=[validate_not_blank])
    city = models.CharField(max_length=CITY_MAX_LENGTH, validators=[validate_not_blank])
    pincode = models.CharField(max_length=6, db_index=True, validators=[validate_pincode])

    class Meta:
        db_table = 'Doctor'
        ordering = ['id']
        verbose_name = 'Doctor'
        verbose_name_plural = 'Doctors'

    def __str__(self) -> str:
        return f"{self.last_name}, {self.first_name} ({self.city} {self.pincode})"
