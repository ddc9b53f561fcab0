"""Mapping of domain errors raised by mutations onto HTTP errors."""

import logging

from fastapi import HTTPException, status

from domain.exceptions import NotFoundError, ValidationError


def to_http_error(error: Exception, failure_message: str, logger: logging.Logger) -> HTTPException:
    """
    Translate an exception raised by a use case.
    
    NotFoundError -> 404, ValidationError -> 400, anything else -> 500 with
    failure_message, so a failed write is never reported as success.
    """
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{error.entity} not found.")
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    
    logger.error(f"{failure_message} {error}", exc_info=True)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=failure_message)
