"""Doctors App URLs.

Prefix: /api/
Routes (trailing slash optional):
    GET/POST/DELETE  /api/doctors       - List/Create/Delete all
    GET/PUT/DELETE   /api/doctors/<pk>  - Retrieve/Replace/Delete
"""

from django.urls import re_path

from doctr_backend.doctors.store import DoctorStore
from doctr_backend.doctors.views import DoctorCollectionView, DoctorDetailView

app_name = 'doctors'

store = DoctorStore()

urlpatterns = [
    re_path(r'^doctors/?$', DoctorCollectionView.as_view(store=store), name='list'),
    re_path(r'^doctors/(?P<pk>[0-9]{1,18})/?$', DoctorDetailView.as_view(store=store), name='detail'),
]
