"""
Doctors App - Admin
"""

from django.contrib import admin

from doctr_backend.doctors.models import Doctor


@admin.register(Doctor)
class DoctorAdmin(admin.ModelAdmin):
    list_display = ("id", "full_name", "city", "pincode")
    list_filter = ("city",)
    search_fields = ("first_name", "last_name", "city", "pincode")
    ordering = ("id",)
    list_per_page = 50

    readonly_fields = ("id",)

    fieldsets = (
        ("Doctor", {
            "fields": ("id", "first_name", "last_name")
        }),
        ("Address", {
            "fields": ("address", "city", "pincode")
        }),
    )

    def full_name(self, obj):
        return f"{obj.last_name}, {obj.first_name}"
    full_name.short_description = "Name"
