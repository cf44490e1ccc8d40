"""Mapping of domain exceptions to HTTP errors"""

import logging

from fastapi import HTTPException

from finplan_gateway.domain.exceptions import InfeasibleGoalError, InvalidInputError
from finplan_gateway.infrastructure.observability.metrics import record_calculation


def invalid_input(operation: str, error: InvalidInputError, request_id: str) -> HTTPException:
    """422 carrying the offending field"""
    record_calculation(operation, "invalid_input")
    logging.warning(f"Invalid input: {error}", extra={"request_id": request_id, "operation": operation})
    return HTTPException(
        status_code=422,
        detail={"kind": "invalid_input", "field": error.field, "message": error.message},
    )


def infeasible(operation: str, error: InfeasibleGoalError, request_id: str) -> HTTPException:
    """422 distinct from invalid input, so the caller can suggest a smaller goal"""
    record_calculation(operation, "infeasible")
    logging.warning(f"Infeasible goal: {error}", extra={"request_id": request_id, "operation": operation})
    return HTTPException(
        status_code=422,
        detail={"kind": "infeasible", "field": None, "message": str(error)},
    )


def internal_error(operation: str, error: Exception, request_id: str) -> HTTPException:
    record_calculation(operation, "error")
    logging.error(f"Unexpected error: {error}", extra={"request_id": request_id, "operation": operation})
    return HTTPException(status_code=500, detail="Internal server error")
