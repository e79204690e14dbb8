from rest_framework import serializers

from doctr_backend.doctors.links import doctor_links
from doctr_backend.doctors.models import Doctor
from doctr_backend.doctors.validators import (
    ADDRESS_MAX_LENGTH,
    CITY_MAX_LENGTH,
    FIRST_NAME_MAX_LENGTH,
    LAST_NAME_MAX_LENGTH,
    validate_not_blank,
    validate_pincode,
)


class DoctorReadSerializer(serializers.ModelSerializer):
    """Read-only representation with camelCase field names.

    Pass ``request`` and ``link_rels`` in the context to get ``_links``.
    """

    firstName = serializers.CharField(source='first_name', read_only=True)
    lastName = serializers.CharField(source='last_name', read_only=True)

    class Meta:
        model = Doctor
        fields = [
            'id',
            'firstName',
            'lastName',
            'address',
            'city',
            'pincode',
        ]
        read_only_fields = fields

    def to_representation(self, instance):
        data = super().to_representation(instance)
        request = self.context.get('request')
        rels = self.context.get('link_rels')
        if request is not None and rels:
            data['_links'] = doctor_links(request, instance.pk, rels)
        return data


class DoctorWriteSerializer(serializers.Serializer):
    """Validates a doctor payload for create and full update.

    Every constraint is checked and all violations are reported together,
    keyed by JSON field name. Values are kept exactly as submitted.
    ``id`` is not a field here, so a client-supplied id is ignored.
    """

    firstName = serializers.CharField(
        source='first_name',
        max_length=FIRST_NAME_MAX_LENGTH,
        trim_whitespace=False,
        validators=[validate_not_blank],
    )
    lastName = serializers.CharField(
        source='last_name',
        max_length=LAST_NAME_MAX_LENGTH,
        trim_whitespace=False,
        validators=[validate_not_blank],
    )
    address = serializers.CharField(
        max_length=ADDRESS_MAX_LENGTH,
        trim_whitespace=False,
        validators=[validate_not_blank],
    )
    city = serializers.CharField(
        max_length=CITY_MAX_LENGTH,
        trim_whitespace=False,
        validators=[validate_not_blank],
    )
    pincode = serializers.CharField(
        trim_whitespace=False,
        validators=[validate_pincode],
    )
