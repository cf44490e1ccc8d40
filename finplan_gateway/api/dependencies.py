"""Dependency injection for FastAPI endpoints"""

from functools import lru_cache

from fastapi import Request
from finplan_gateway.config import Settings, settings
from finplan_gateway.domain.models import AllocationPolicy
from finplan_gateway.infrastructure.tables.allocation import load_allocation_policy


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_settings() -> Settings:
    """Provide application settings"""
    return settings


@lru_cache(maxsize=1)
def get_allocation_policy() -> AllocationPolicy:
    """Provide the allocation policy, loaded once per process"""
    return load_allocation_policy(settings.allocation_table_path)
