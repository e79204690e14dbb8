"""Tests for DoctorStore and Page.

Uses only the default test DB.
"""

from __future__ import annotations

from unittest.mock import patch

from django.db import DatabaseError
from django.test import SimpleTestCase, TestCase

from doctr_backend.doctors.exceptions import DoctorNotFound, DoctorStorageError
from doctr_backend.doctors.models import Doctor
from doctr_backend.doctors.store import DoctorStore, Page


def _fields(**overrides):
    fields = {
        "first_name": "Srikanth",
        "last_name": "Kakumanu",
        "address": "Lakshmi Prasad Arcade",
        "city": "Tenali",
        "pincode": "522201",
    }
    fields.update(overrides)
    return fields


class PageTest(SimpleTestCase):

    def test_total_pages_rounds_up(self):
        page = Page(content=[], number=0, size=2, total_elements=5)

        self.assertEqual(page.total_pages, 3)
        self.assertTrue(page.has_next)
        self.assertFalse(page.has_previous)

    def test_exact_multiple(self):
        page = Page(content=[], number=1, size=2, total_elements=4)

        self.assertEqual(page.total_pages, 2)
        self.assertFalse(page.has_next)
        self.assertTrue(page.has_previous)

    def test_empty(self):
        page = Page(content=[], number=0, size=20, total_elements=0)

        self.assertEqual(page.total_pages, 0)
        self.assertFalse(page.has_next)
        self.assertFalse(page.has_previous)


class DoctorStoreTest(TestCase):

    databases = {"default"}

    def setUp(self):
        self.store = DoctorStore()

    # ========== CREATE / READ ==========

    def test_create_assigns_id(self):
        doctor = self.store.create(_fields())

        self.assertIsNotNone(doctor.pk)
        self.assertEqual(Doctor.objects.get(pk=doctor.pk).first_name, "Srikanth")

    def test_create_ignores_unknown_keys(self):
        doctor = self.store.create(_fields(id=999, extra="x"))

        self.assertNotEqual(doctor.pk, 999)

    def test_get_by_id(self):
        created = self.store.create(_fields())

        fetched = self.store.get_by_id(created.pk)

        self.assertEqual(fetched.pk, created.pk)
        self.assertEqual(fetched.pincode, "522201")

    def test_get_by_id_missing_raises_not_found(self):
        with self.assertRaises(DoctorNotFound) as ctx:
            self.store.get_by_id(999999)

        self.assertEqual(ctx.exception.doctor_id, 999999)
        self.assertEqual(ctx.exception.to_dict(), {"detail": "Doctor not found.", "id": 999999})

    # ========== LIST ==========

    def test_list_all_pages_in_insertion_order(self):
        created = [self.store.create(_fields(first_name=f"D{i}")) for i in range(5)]

        page = self.store.list_all(1, 2)

        self.assertEqual([d.pk for d in page.content], [created[2].pk, created[3].pk])
        self.assertEqual(page.number, 1)
        self.assertEqual(page.size, 2)
        self.assertEqual(page.total_elements, 5)
        self.assertEqual(page.total_pages, 3)

    def test_list_all_with_ordering(self):
        self.store.create(_fields(city="Tenali"))
        self.store.create(_fields(city="Chennai"))
        self.store.create(_fields(city="Guntur"))

        page = self.store.list_all(0, 10, ordering=("city",))

        self.assertEqual([d.city for d in page.content], ["Chennai", "Guntur", "Tenali"])

    def test_list_all_ties_break_on_id(self):
        first = self.store.create(_fields())
        second = self.store.create(_fields())

        page = self.store.list_all(0, 10, ordering=("-city",))

        self.assertEqual([d.pk for d in page.content], [first.pk, second.pk])

    def test_list_by_pincode_exact_match(self):
        self.store.create(_fields(pincode="522201"))
        self.store.create(_fields(pincode="52220"))
        self.store.create(_fields(pincode="600028"))

        page = self.store.list_by_pincode("522201", 0, 10)

        self.assertEqual(page.total_elements, 1)
        self.assertEqual(page.content[0].pincode, "522201")

    def test_list_past_the_end(self):
        self.store.create(_fields())

        page = self.store.list_all(5, 10)

        self.assertEqual(page.content, [])
        self.assertEqual(page.total_elements, 1)

    # ========== UPDATE ==========

    def test_update_overwrites_all_fields(self):
        doctor = self.store.create(_fields())

        updated = self.store.update(
            doctor.pk,
            _fields(first_name="Anita", last_name="Sharma", address="New", city="Guntur", pincode="12345"),
        )

        self.assertEqual(updated.pk, doctor.pk)
        doctor.refresh_from_db()
        self.assertEqual(
            (doctor.first_name, doctor.last_name, doctor.address, doctor.city, doctor.pincode),
            ("Anita", "Sharma", "New", "Guntur", "12345"),
        )

    def test_update_missing_raises_not_found(self):
        with self.assertRaises(DoctorNotFound):
            self.store.update(999999, _fields())

    # ========== DELETE ==========

    def test_delete_by_id(self):
        doctor = self.store.create(_fields())

        self.store.delete_by_id(doctor.pk)

        self.assertFalse(Doctor.objects.filter(pk=doctor.pk).exists())
        with self.assertRaises(DoctorNotFound):
            self.store.delete_by_id(doctor.pk)

    def test_delete_all_returns_count(self):
        for _ in range(3):
            self.store.create(_fields())

        self.assertEqual(self.store.delete_all(), 3)
        self.assertEqual(Doctor.objects.count(), 0)
        self.assertEqual(self.store.delete_all(), 0)

    # ========== STORAGE ERRORS ==========

    def test_database_error_becomes_storage_error(self):
        with patch("django.db.models.query.QuerySet.count", side_effect=DatabaseError("gone")):
            with self.assertRaises(DoctorStorageError) as ctx:
                self.store.list_all(0, 10)

        self.assertEqual(ctx.exception.operation, "list_all")
        self.assertIsInstance(ctx.exception.__cause__, DatabaseError)
        self.assertEqual(ctx.exception.to_dict(), {"detail": "Internal server error."})

    def test_storage_error_is_logged(self):
        with patch("django.db.models.query.QuerySet.get", side_effect=DatabaseError("gone")):
            with self.assertLogs("doctr_backend.doctors.store", level="ERROR") as logs:
                with self.assertRaises(DoctorStorageError):
                    self.store.get_by_id(1)

        self.assertIn("operation=get_by_id", logs.output[0])
