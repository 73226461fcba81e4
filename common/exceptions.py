"""
Shared error taxonomy and the DRF exception handler.

Service layers raise subclasses of ``ServiceError``; the handler below
turns them into ``{"error": "..."}`` responses with the status code each
class declares. Nothing raised by the store leaves a service unconverted.
"""
import functools
import logging

from django.db import DatabaseError
from django.http import Http404
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class ServiceError(Exception):
    """Base exception for all service errors."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = 'An unexpected error occurred.'

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(ServiceError):
    """Missing or malformed input."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Invalid input.'


class NotFoundError(ServiceError):
    """Group, discussion or comment does not exist."""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = 'Not found.'


class ConflictError(ServiceError):
    """Duplicate name, email or slug."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = 'Resource already exists.'


class AuthorizationError(ServiceError):
    """Caller is not allowed to perform the action."""
    status_code = status.HTTP_403_FORBIDDEN
    default_message = 'You do not have permission to perform this action.'


class StoreError(ServiceError):
    """The database failed underneath a service operation."""
    default_message = 'The data store could not complete the request.'


def store_errors_converted(func):
    """
    Wrap a service function so database failures surface as ``StoreError``.

    Domain errors raised by the function itself pass through untouched.
    """
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except DatabaseError as exc:
            logger.error('Store failure in %s: %s', func.__name__, exc)
            raise StoreError() from exc
    return wrapper


def custom_exception_handler(exc, context):
    """
    Return consistent JSON error bodies.

    Response format::

        {"error": "Human-readable message", "details": {...}}

    ``details`` is only present for DRF validation errors.
    """
    if isinstance(exc, ServiceError):
        if exc.status_code >= 500:
            logger.error(
                'Service failure in %s: %s',
                context.get('view', 'unknown view'),
                exc.message,
            )
        return Response({'error': exc.message}, status=exc.status_code)

    response = exception_handler(exc, context)

    if response is None:
        logger.exception(
            'Unhandled exception in %s',
            context.get('view', 'unknown view'),
            exc_info=exc,
        )
        return Response(
            {'error': 'Internal server error'},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )

    response.data = _format_error(exc, response)
    return response


def _format_error(exc, response):
    """Format the error payload based on exception type."""
    if isinstance(exc, Http404):
        return {'error': 'Not found'}

    if isinstance(exc, APIException):
        detail = response.data
        if isinstance(detail, dict) and set(detail) == {'detail'}:
            return {'error': str(detail['detail'])}
        return {'error': 'Invalid input.', 'details': detail}

    return {'error': 'An error occurred.'}
