import django.core.validators
from django.db import migrations, models

import doctr_backend.doctors.validators


class Migration(migrations.Migration):

	initial = True

	dependencies = []

	operations = [
		migrations.CreateModel(
			name="Doctor",
			fields=[
				("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
				(
					"first_name",
					models.CharField(max_length=50, validators=[doctr_backend.doctors.validators.validate_not_blank]),
				),
				(
					"last_name",
					models.CharField(max_length=50, validators=[doctr_backend.doctors.validators.validate_not_blank]),
				),
				(
					"address",
					models.CharField(max_length=255, validators=[doctr_backend.doctors.validators.validate_not_blank]),
				),
				(
					"city",
					models.CharField(max_length=100, validators=[doctr_backend.doctors.validators.validate_not_blank]),
				),
				(
					"pincode",
					models.CharField(
						db_index=True,
						max_length=6,
						validators=[
							django.core.validators.RegexValidator(
								code="invalid_pincode",
								message="Pincode must be 5 or 6 digits",
								regex="^[0-9]{5,6}\\Z",
							)
						],
					),
				),
			],
			options={
				"verbose_name": "Doctor",
				"verbose_name_plural": "Doctors",
				"db_table": "Doctor",
				"ordering": ["id"],
			},
		),
	]
