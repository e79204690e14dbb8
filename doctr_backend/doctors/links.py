"""Hypermedia links for doctor representations (HAL ``_links``)."""

from __future__ import annotations

from rest_framework.reverse import reverse

ENTITY_RELS = ('self', 'update', 'delete', 'doctors')
CREATED_RELS = ('self', 'doctors')
UPDATED_RELS = ('self', 'delete', 'doctors')
COLLECTION_ITEM_RELS = ('self', 'update', 'delete')


def doctor_url(request, doctor_id: int) -> str:
    return reverse('doctors:detail', kwargs={'pk': doctor_id}, request=request)


def doctors_url(request) -> str:
    return reverse('doctors:list', request=request)


def link(href: str) -> dict[str, str]:
    return {'href': href}


def doctor_links(request, doctor_id: int, rels) -> dict[str, dict[str, str]]:
    """Build the ``_links`` object for one doctor.

    self/update/delete all point at the item resource (the HTTP method
    tells them apart); ``doctors`` points at the collection.
    """
    links = {}
    for rel in rels:
        if rel == 'doctors':
            links[rel] = link(doctors_url(request))
        else:
            links[rel] = link(doctor_url(request, doctor_id))
    return links
