"""Doctor store - single-table persistence for the doctor registry.

Every operation is one query (plus a count for paged reads) against the
``Doctor`` table. Database failures surface as ``DoctorStorageError``;
unknown ids as ``DoctorNotFound``.
"""

from __future__ import annotations

import logging
import math
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterable

from django.db import DatabaseError

from doctr_backend.doctors.exceptions import DoctorNotFound, DoctorStorageError
from doctr_backend.doctors.models import Doctor

logger = logging.getLogger(__name__)

MUTABLE_FIELDS = ['first_name', 'last_name', 'address', 'city', 'pincode']


@dataclass
class Page:
    """One page of doctors plus the totals needed for navigation."""

    content: list[Doctor]
    number: int
    size: int
    total_elements: int

    @property
    def total_pages(self) -> int:
        if self.size <= 0:
            return 0
        return math.ceil(self.total_elements / self.size)

    @property
    def has_next(self) -> bool:
        return self.number + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.number > 0


@contextmanager
def _storage_errors(operation: str):
    try:
        yield
    except DatabaseError as exc:
        logger.exception('Doctor store operation failed (operation=%s)', operation)
        raise DoctorStorageError(operation) from exc


class DoctorStore:
    """Create/read/update/delete access to the ``Doctor`` table."""

    def __init__(self, using: str = 'default'):
        self.using = using

    def _objects(self):
        return Doctor.objects.using(self.using)

    def create(self, fields: dict[str, Any]) -> Doctor:
        with _storage_errors('create'):
            doctor = self._objects().create(**{attr: fields[attr] for attr in MUTABLE_FIELDS})
        logger.debug('Created doctor id=%s', doctor.pk)
        return doctor

    def get_by_id(self, doctor_id: int) -> Doctor:
        with _storage_errors('get_by_id'):
            try:
                return self._objects().get(pk=doctor_id)
            except Doctor.DoesNotExist:
                raise DoctorNotFound(doctor_id) from None

    def list_all(self, page: int, size: int, ordering: Iterable[str] = ()) -> Page:
        return self._page(self._objects().all(), page, size, ordering, 'list_all')

    def list_by_pincode(self, pincode: str, page: int, size: int, ordering: Iterable[str] = ()) -> Page:
        return self._page(
            self._objects().filter(pincode=pincode),
            page,
            size,
            ordering,
            'list_by_pincode',
        )

    def update(self, doctor_id: int, fields: dict[str, Any]) -> Doctor:
        with _storage_errors('update'):
            try:
                doctor = self._objects().get(pk=doctor_id)
            except Doctor.DoesNotExist:
                raise DoctorNotFound(doctor_id) from None

            for attr in MUTABLE_FIELDS:
                setattr(doctor, attr, fields[attr])
            doctor.save(using=self.using, update_fields=MUTABLE_FIELDS)
        logger.debug('Updated doctor id=%s', doctor_id)
        return doctor

    def delete_by_id(self, doctor_id: int) -> None:
        with _storage_errors('delete_by_id'):
            deleted, _ = self._objects().filter(pk=doctor_id).delete()
        if not deleted:
            raise DoctorNotFound(doctor_id)
        logger.debug('Deleted doctor id=%s', doctor_id)

    def delete_all(self) -> int:
        with _storage_errors('delete_all'):
            deleted, _ = self._objects().all().delete()
        logger.debug('Deleted all doctors (count=%s)', deleted)
        return deleted

    def _page(self, qs, page: int, size: int, ordering: Iterable[str], operation: str) -> Page:
        ordering = tuple(ordering)
        # id keeps insertion order as the final tie-breaker
        order_by = [*ordering, 'id'] if 'id' not in {o.lstrip('-') for o in ordering} else list(ordering)
        offset = page * size

        with _storage_errors(operation):
            total = qs.count()
            content = list(qs.order_by(*order_by)[offset:offset + size]) if offset < total else []

        return Page(
            content=content,
            number=page,
            size=size,
            total_elements=total,
        )
