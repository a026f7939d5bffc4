"""Dependency injection for FastAPI endpoints"""

from fastapi import Depends, Request
from moro_scoring.infrastructure.clients.data_store import DataStoreClient
from moro_scoring.services.aggregator import ProfileAggregator


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_data_store_client() -> DataStoreClient:
    return DataStoreClient()


def get_profile_aggregator(client: DataStoreClient = Depends(get_data_store_client)) -> ProfileAggregator:
    return ProfileAggregator(client)
