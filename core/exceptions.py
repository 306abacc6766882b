"""
Ledger error taxonomy and the DRF exception handler.

Every error leaving the API is rendered as ``{"error": "<message>"}`` so the
UI can display the message verbatim.
"""

import logging

from django.db import DatabaseError
from django.http import Http404
from rest_framework import exceptions, status
from rest_framework.views import exception_handler

logger = logging.getLogger(__name__)


class LedgerError(exceptions.APIException):
    """Base class for ledger errors raised by services."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Ledger operation failed.'
    default_code = 'ledger_error'


class InvalidInput(LedgerError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid input.'
    default_code = 'invalid_input'


class NotFound(LedgerError):
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = 'Not found.'
    default_code = 'not_found'


class Conflict(LedgerError):
    status_code = status.HTTP_409_CONFLICT
    default_detail = 'Record already exists.'
    default_code = 'conflict'


class InsufficientStock(LedgerError):
    """Raised when a sale or loss would drive a balance below zero."""
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = 'insufficient_stock'

    def __init__(self, category, available, requested):
        self.category = category
        self.available = available
        self.requested = requested
        super().__init__(
            f"Not enough stock of {category}. "
            f"Available: {available}, Requested: {requested}"
        )


class StorageFailure(LedgerError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = 'The operation could not be saved. No changes were made.'
    default_code = 'storage_failure'


def _first_message(detail):
    """Flatten a DRF error detail (dict/list/str) into a single message."""
    if isinstance(detail, dict):
        for field, value in detail.items():
            message = _first_message(value)
            if field in ('non_field_errors', 'detail'):
                return message
            return f"{field}: {message}"
        return ''
    if isinstance(detail, (list, tuple)):
        return _first_message(detail[0]) if detail else ''
    return str(detail)


def ledger_exception_handler(exc, context):
    """
    Render every API error as ``{"error": message}``.

    Database errors surface as StorageFailure (500); the atomic block that
    raised them has already rolled back.
    """
    if isinstance(exc, DatabaseError):
        view = context.get('view')
        logger.exception(f"Storage failure in {view.__class__.__name__ if view else 'unknown view'}")
        exc = StorageFailure()
    elif isinstance(exc, Http404):
        exc = NotFound(str(exc) or NotFound.default_detail)

    response = exception_handler(exc, context)
    if response is None:
        return None

    if isinstance(exc, LedgerError) and not isinstance(exc, StorageFailure):
        logger.warning(f"Rejected request: {exc.detail}")

    response.data = {'error': _first_message(response.data)}
    return response
