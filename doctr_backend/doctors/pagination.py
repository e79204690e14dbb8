"""Zero-based page/size pagination for the doctor collection.

Query parameters:
    page    zero-based page index (default 0)
    size    page size (default REST_FRAMEWORK['PAGE_SIZE'], capped at DOCTORS_MAX_PAGE_SIZE)
    sort    repeatable, ``property[,asc|desc]`` using JSON property names

Malformed page/size values fall back to the defaults instead of failing
the request; an unknown sort property raises ``InvalidSortProperty``.
"""

from __future__ import annotations

from dataclasses import dataclass

from django.conf import settings
from rest_framework.response import Response
from rest_framework.settings import api_settings
from rest_framework.utils.urls import replace_query_param

from doctr_backend.doctors.exceptions import InvalidSortProperty
from doctr_backend.doctors.links import doctors_url, link
from doctr_backend.doctors.store import Page

DEFAULT_PAGE_SIZE = 20

# JSON property name -> model field
SORT_PROPERTIES = {
    'id': 'id',
    'firstName': 'first_name',
    'lastName': 'last_name',
    'address': 'address',
    'city': 'city',
    'pincode': 'pincode',
}


@dataclass(frozen=True)
class PageRequest:
    page: int
    size: int
    ordering: tuple[str, ...] = ()


def _parse_int(raw, default: int) -> int:
    if raw is None:
        return default
    try:
        return int(str(raw).strip())
    except ValueError:
        return default


class DoctorPagination:
    page_query_param = 'page'
    page_size_query_param = 'size'
    sort_query_param = 'sort'
    collection_rel = 'doctors'

    @property
    def default_page_size(self) -> int:
        return api_settings.PAGE_SIZE or DEFAULT_PAGE_SIZE

    @property
    def max_page_size(self) -> int:
        return getattr(settings, 'DOCTORS_MAX_PAGE_SIZE', 2000)

    def get_page_request(self, request) -> PageRequest:
        params = request.query_params

        page = _parse_int(params.get(self.page_query_param), 0)
        if page < 0:
            page = 0

        size = _parse_int(params.get(self.page_size_query_param), self.default_page_size)
        if size < 1:
            size = self.default_page_size
        size = min(size, self.max_page_size)

        return PageRequest(
            page=page,
            size=size,
            ordering=self.get_ordering(params.getlist(self.sort_query_param)),
        )

    def get_ordering(self, sort_params) -> tuple[str, ...]:
        """Translate ``sort`` values into ``order_by`` terms.

        ``lastName,desc`` -> ``-last_name``; ``city,lastName`` sorts by both
        ascending. Direction tokens are case-insensitive.
        """
        ordering: list[str] = []
        for raw in sort_params:
            tokens = [t.strip() for t in raw.split(',') if t.strip()]
            if not tokens:
                continue

            descending = False
            if tokens[-1].lower() in ('asc', 'desc'):
                descending = tokens.pop().lower() == 'desc'

            for prop in tokens:
                field = SORT_PROPERTIES.get(prop)
                if field is None:
                    raise InvalidSortProperty(prop, sorted(SORT_PROPERTIES))
                ordering.append(f'-{field}' if descending else field)
        return tuple(ordering)

    def get_paginated_response(self, request, page: Page, data) -> Response:
        return Response({
            '_embedded': {self.collection_rel: data},
            '_links': self.get_links(request, page),
            'page': {
                'size': page.size,
                'totalElements': page.total_elements,
                'totalPages': page.total_pages,
                'number': page.number,
            },
        })

    def get_links(self, request, page: Page) -> dict[str, dict[str, str]]:
        url = request.build_absolute_uri()
        url = replace_query_param(url, self.page_size_query_param, page.size)

        links = {'self': link(replace_query_param(url, self.page_query_param, page.number))}
        if page.has_next:
            links['next'] = link(replace_query_param(url, self.page_query_param, page.number + 1))
        if page.has_previous:
            links['prev'] = link(replace_query_param(url, self.page_query_param, page.number - 1))
        links['create'] = link(doctors_url(request))
        return links
