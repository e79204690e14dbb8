"""Doctor registry views.

Routes (prefix /api/):
    POST    /api/doctors         - Create a doctor
    GET     /api/doctors         - List doctors (?pincode=&page=&size=&sort=)
    DELETE  /api/doctors         - Delete all doctors
    GET     /api/doctors/<id>    - Retrieve a doctor
    PUT     /api/doctors/<id>    - Replace a doctor's details
    DELETE  /api/doctors/<id>    - Delete a doctor

The store is passed in through ``as_view(store=...)`` in urls.py.
"""

from __future__ import annotations

from drf_spectacular.types import OpenApiTypes
from drf_spectacular.utils import OpenApiParameter, OpenApiResponse, extend_schema, inline_serializer
from rest_framework import serializers, status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from doctr_backend.core.utils import log_doctor_action
from doctr_backend.doctors.exceptions import DoctorNotFound, DoctorStorageError, InvalidSortProperty
from doctr_backend.doctors.links import (
    COLLECTION_ITEM_RELS,
    CREATED_RELS,
    ENTITY_RELS,
    UPDATED_RELS,
)
from doctr_backend.doctors.pagination import DoctorPagination
from doctr_backend.doctors.serializers import DoctorReadSerializer, DoctorWriteSerializer
from doctr_backend.doctors.store import DoctorStore

SCHEMA_TAGS = ['Doctor API']

_error_detail = inline_serializer(name='ErrorDetail', fields={'detail': serializers.CharField()})

NOT_FOUND = OpenApiResponse(response=_error_detail, description='Doctor not found')
SERVER_ERROR = OpenApiResponse(response=_error_detail, description='Internal server error')
VALIDATION_ERROR = OpenApiResponse(response=OpenApiTypes.OBJECT, description='Validation errors keyed by field')
UNAUTHORIZED = OpenApiResponse(response=_error_detail, description='Missing or invalid basic-auth credentials')

DOCTOR_ID = OpenApiParameter('pk', OpenApiTypes.INT, OpenApiParameter.PATH, description='Doctor id')

LIST_PARAMETERS = [
    OpenApiParameter('pincode', OpenApiTypes.STR, description='Only doctors with exactly this pincode'),
    OpenApiParameter('page', OpenApiTypes.INT, description='Zero-based page index (default 0)'),
    OpenApiParameter('size', OpenApiTypes.INT, description='Page size (default 20, max 2000)'),
    OpenApiParameter('sort', OpenApiTypes.STR, many=True, description='property[,asc|desc]'),
]


class DoctorAPIView(APIView):
    permission_classes = [IsAuthenticated]
    store: DoctorStore | None = None

    def represent(self, doctor, rels):
        return DoctorReadSerializer(
            doctor,
            context={'request': self.request, 'link_rels': rels},
        ).data


class DoctorCollectionView(DoctorAPIView):
    """Create, list (paged, optionally by pincode) and delete-all."""

    pagination_class = DoctorPagination

    @extend_schema(
        operation_id='doctors_list',
        summary='List doctors, optionally filtered by pincode',
        tags=SCHEMA_TAGS,
        parameters=LIST_PARAMETERS,
        responses={
            200: OpenApiResponse(
                response=OpenApiTypes.OBJECT,
                description='HAL page: _embedded.doctors, _links and page totals',
            ),
            400: OpenApiResponse(response=OpenApiTypes.OBJECT, description='Unknown sort property'),
            401: UNAUTHORIZED,
            500: SERVER_ERROR,
        },
    )
    def get(self, request, *args, **kwargs):
        paginator = self.pagination_class()
        pincode = request.query_params.get('pincode') or None

        try:
            page_request = paginator.get_page_request(request)
            if pincode is None:
                page = self.store.list_all(page_request.page, page_request.size, page_request.ordering)
            else:
                page = self.store.list_by_pincode(
                    pincode,
                    page_request.page,
                    page_request.size,
                    page_request.ordering,
                )
        except InvalidSortProperty as e:
            return Response(e.to_dict(), status=status.HTTP_400_BAD_REQUEST)
        except DoctorStorageError as e:
            return Response(e.to_dict(), status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        data = DoctorReadSerializer(
            page.content,
            many=True,
            context={'request': request, 'link_rels': COLLECTION_ITEM_RELS},
        ).data
        return paginator.get_paginated_response(request, page, data)

    @extend_schema(
        operation_id='doctors_create',
        summary='Create a doctor',
        tags=SCHEMA_TAGS,
        request=DoctorWriteSerializer,
        responses={
            201: DoctorReadSerializer,
            400: VALIDATION_ERROR,
            401: UNAUTHORIZED,
            500: SERVER_ERROR,
        },
    )
    def post(self, request, *args, **kwargs):
        serializer = DoctorWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            doctor = self.store.create(serializer.validated_data)
        except DoctorStorageError as e:
            return Response(e.to_dict(), status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        log_doctor_action(request.user, 'doctor_created', doctor_id=doctor.pk)

        out = self.represent(doctor, CREATED_RELS)
        headers = {'Location': out['_links']['self']['href']}
        return Response(out, status=status.HTTP_201_CREATED, headers=headers)

    @extend_schema(
        operation_id='doctors_delete_all',
        summary='Delete all doctors',
        tags=SCHEMA_TAGS,
        responses={
            204: OpenApiResponse(description='All doctors deleted'),
            401: UNAUTHORIZED,
            500: SERVER_ERROR,
        },
    )
    def delete(self, request, *args, **kwargs):
        try:
            count = self.store.delete_all()
        except DoctorStorageError as e:
            return Response(e.to_dict(), status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        log_doctor_action(request.user, 'doctors_deleted_all', meta={'count': count})
        return Response(status=status.HTTP_204_NO_CONTENT)


class DoctorDetailView(DoctorAPIView):
    """Retrieve, replace or delete a single doctor."""

    @extend_schema(
        operation_id='doctors_retrieve',
        summary='Get a doctor by id',
        tags=SCHEMA_TAGS,
        parameters=[DOCTOR_ID],
        responses={
            200: DoctorReadSerializer,
            401: UNAUTHORIZED,
            404: NOT_FOUND,
            500: SERVER_ERROR,
        },
    )
    def get(self, request, pk, *args, **kwargs):
        try:
            doctor = self.store.get_by_id(int(pk))
        except DoctorNotFound as e:
            return Response(e.to_dict(), status=status.HTTP_404_NOT_FOUND)
        except DoctorStorageError as e:
            return Response(e.to_dict(), status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        return Response(self.represent(doctor, ENTITY_RELS), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id='doctors_update',
        summary="Replace a doctor's details",
        tags=SCHEMA_TAGS,
        parameters=[DOCTOR_ID],
        request=DoctorWriteSerializer,
        responses={
            200: DoctorReadSerializer,
            400: VALIDATION_ERROR,
            401: UNAUTHORIZED,
            404: NOT_FOUND,
            500: SERVER_ERROR,
        },
    )
    def put(self, request, pk, *args, **kwargs):
        serializer = DoctorWriteSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        try:
            doctor = self.store.update(int(pk), serializer.validated_data)
        except DoctorNotFound as e:
            return Response(e.to_dict(), status=status.HTTP_404_NOT_FOUND)
        except DoctorStorageError as e:
            return Response(e.to_dict(), status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        log_doctor_action(request.user, 'doctor_updated', doctor_id=doctor.pk)
        return Response(self.represent(doctor, UPDATED_RELS), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id='doctors_delete',
        summary='Delete a doctor by id',
        tags=SCHEMA_TAGS,
        parameters=[DOCTOR_ID],
        responses={
            204: OpenApiResponse(description='Doctor deleted'),
            401: UNAUTHORIZED,
            404: NOT_FOUND,
            500: SERVER_ERROR,
        },
    )
    def delete(self, request, pk, *args, **kwargs):
        try:
            self.store.delete_by_id(int(pk))
        except DoctorNotFound as e:
            return Response(e.to_dict(), status=status.HTTP_404_NOT_FOUND)
        except DoctorStorageError as e:
            return Response(e.to_dict(), status=status.HTTP_500_INTERNAL_SERVER_ERROR)

        log_doctor_action(request.user, 'doctor_deleted', doctor_id=int(pk))
        return Response(status=status.HTTP_204_NO_CONTENT)
