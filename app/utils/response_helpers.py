"""
Response helpers for consistent API responses.

Provides standardized success and error response functions for all API endpoints.
Philosophy: Consistency and predictability in API responses.
"""
from flask import jsonify
from typing import Any, Dict, Optional, Union
import logging

logger = logging.getLogger(__name__)


def success_response(
    data: Any = None,
    message: Optional[str] = None,
    status: int = 200
) -> tuple:
    """
    Create a standardized success response.

    Args:
        data: The data payload to return (optional)
        message: Success message to include (optional)
        status: HTTP status code (default: 200)

    Returns:
        Tuple of (response_dict, status_code) suitable for Flask return

    Example:
        # Success with data
        return success_response(data=[item.to_dict() for item in items])

        # Success with message and custom status
        return success_response(message='Thanks, we will be in touch', status=201)
    """
    response: Dict[str, Any] = {'success': True}

    if message is not None:
        response['message'] = message

    if data is not None:
        response['data'] = data

    logger.debug(f"Success response: {status} - {message or 'OK'}")
    return jsonify(response), status


def error_response(
    message: str,
    status: int = 400,
    details: Optional[Union[str, Dict, list]] = None,
    error_code: Optional[str] = None
) -> tuple:
    """
    Create a standardized error response.

    Args:
        message: User-friendly error message (required)
        status: HTTP status code (default: 400 Bad Request)
        details: Additional error details for debugging (optional)
        error_code: Machine-readable error code (optional)

    Returns:
        Tuple of (response_dict, status_code) suitable for Flask return

    Common status codes:
        400 - Bad Request (validation errors, invalid input)
        404 - Not Found
        502 - Bad Gateway (e-mail provider rejected the request)
        503 - Service Unavailable (portfolio content unreachable)
    """
    response: Dict[str, Any] = {
        'error': message,
        'success': False
    }

    if details is not None:
        response['details'] = details

    if error_code is not None:
        response['error_code'] = error_code

    logger.warning(f"Error response: {status} - {message}")
    if details:
        logger.debug(f"Error details: {details}")

    return jsonify(response), status


def validation_error_response(errors: Dict[str, str]) -> tuple:
    """
    Create a standardized validation error response.

    Args:
        errors: Dict of {field: message} for every invalid field

    Returns:
        Tuple of (response_dict, status_code) with status 400

    Example:
        return validation_error_response({'email': 'Email is required'})
    """
    return error_response(
        message='Validation error: ' + ', '.join(sorted(errors)),
        status=400,
        details=errors,
        error_code='VALIDATION_ERROR'
    )


def not_found_response(
    resource: str,
    identifier: Optional[Union[str, int]] = None
) -> tuple:
    """
    Create a standardized "not found" error response.

    Args:
        resource: Type of resource that wasn't found (e.g., 'Project')
        identifier: ID or slug of the missing resource (optional)

    Returns:
        Tuple of (response_dict, status_code) with status 404

    Example:
        return not_found_response('Project', slug)
    """
    if identifier is not None:
        message = f'{resource} not found: {identifier}'
        details = {'resource': resource, 'identifier': identifier}
    else:
        message = f'{resource} not found'
        details = {'resource': resource}

    return error_response(
        message=message,
        status=404,
        details=details,
        error_code='NOT_FOUND'
    )


def bad_gateway_response(service: str, message: Optional[str] = None) -> tuple:
    """Create a 502 response for an upstream service that rejected a request."""
    full_message = f'{service} request failed'
    if message:
        full_message = f'{full_message}: {message}'

    return error_response(
        message=full_message,
        status=502,
        details={'service': service},
        error_code='BAD_GATEWAY'
    )


def service_unavailable_response(
    service: str,
    message: Optional[str] = None
) -> tuple:
    """
    Create a standardized service unavailable error response.

    Used when the portfolio content cannot be acquired.

    Args:
        service: Name of the unavailable service
        message: Additional details (optional)

    Returns:
        Tuple of (response_dict, status_code) with status 503

    Example:
        return service_unavailable_response('Portfolio content', str(e))
    """
    if message:
        full_message = f'{service} is temporarily unavailable: {message}'
    else:
        full_message = f'{service} is temporarily unavailable'

    return error_response(
        message=full_message,
        status=503,
        details={'service': service},
        error_code='SERVICE_UNAVAILABLE'
    )
