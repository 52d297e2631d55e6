"""
Custom exception handlers for DRF.
"""
import logging

from django.db import DatabaseError
from rest_framework import exceptions as drf_exceptions
from rest_framework import status
from rest_framework.permissions import SAFE_METHODS
from rest_framework.response import Response
from rest_framework.views import exception_handler

from shared.domain.exceptions import (
    DomainException,
    NotFoundError,
    ValidationError,
    InvalidOperationError,
    ConflictError,
    PersistenceError,
)

logger = logging.getLogger(__name__)


def _is_retryable(context) -> bool:
    request = context.get('request') if context else None
    return request is not None and request.method in SAFE_METHODS


def _persistence_response(exc, context) -> Response:
    retryable = _is_retryable(context)
    logger.error("Persistence failure (retryable=%s): %s", retryable, exc, exc_info=exc)
    return Response(
        {
            'error': PersistenceError().message,
            'code': 'PERSISTENCE_ERROR',
            'retryable': retryable,
        },
        status=status.HTTP_503_SERVICE_UNAVAILABLE,
    )


def custom_exception_handler(exc, context):
    """Handle custom domain exceptions."""
    if isinstance(exc, ValidationError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
                'field': exc.field,
                'errors': exc.errors,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, NotFoundError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
            },
            status=status.HTTP_404_NOT_FOUND,
        )

    if isinstance(exc, InvalidOperationError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
                **exc.details(),
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    if isinstance(exc, ConflictError):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
            },
            status=status.HTTP_409_CONFLICT,
        )

    if isinstance(exc, (PersistenceError, DatabaseError)):
        return _persistence_response(exc, context)

    if isinstance(exc, DomainException):
        return Response(
            {
                'error': exc.message,
                'code': exc.code,
            },
            status=status.HTTP_400_BAD_REQUEST,
        )

    # Call REST framework's default exception handler for everything else
    response = exception_handler(exc, context)

    if isinstance(exc, drf_exceptions.ValidationError) and response is not None:
        errors = response.data if isinstance(response.data, dict) else {'non_field_errors': response.data}
        response.data = {
            'error': 'Invalid input',
            'code': 'VALIDATION_ERROR',
            'field': next(iter(errors)) if len(errors) == 1 else None,
            'errors': errors,
        }

    return response
