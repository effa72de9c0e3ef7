"""
Base resource implementing the uniform CRUD bindings over the REST API.

Each backend collection (jobs, candidates, users, ...) exposes the same
list / get / create / update / delete surface and differs only in its
path. Resource subclasses add the few collection-specific calls.

Read conventions:
- list reads return the envelope's ``data`` or an empty list
- single reads and writes return the envelope's ``data``
- deletes return the whole envelope
"""

from __future__ import annotations
from typing import Any, Dict, Mapping, Optional, Union
from pydantic import BaseModel
import logging

from talent_client.core.http import ApiTransport

logger = logging.getLogger(__name__)

Payload = Union[Mapping[str, Any], BaseModel]


def as_payload(obj_in: Payload) -> Dict[str, Any]:
    """Turn a mapping or pydantic model into a JSON request body."""
    if isinstance(obj_in, BaseModel):
        return obj_in.model_dump(by_alias=True, exclude_none=True)
    return dict(obj_in)


def build_query(**filters: Any) -> Optional[Dict[str, Any]]:
    """
    Build query parameters from filter values, dropping empty ones.

    Example:
        >>> build_query(companyId="c1", status=None)
        {'companyId': 'c1'}
        >>> build_query(status="") is None
        True
    """
    params = {key: value for key, value in filters.items() if value}
    return params or None


class BaseResource:
    """
    Generic CRUD bindings for one REST collection.

    Example:
        class JobResource(BaseResource):
            def __init__(self, transport):
                super().__init__(transport, "/jobs")
    """

    update_method = "PUT"

    def __init__(self, transport: ApiTransport, path: str):
        """
        Args:
            transport: Shared ApiTransport instance
            path: Collection path below the base URL, e.g. "/jobs"
        """
        self.transport = transport
        self.path = path

    async def get_all(self, params: Optional[Dict[str, Any]] = None) -> list:
        """
        List the collection.

        Args:
            params: Optional query-string filters

        Returns:
            List of raw records (empty list when the backend sends no data)
        """
        response = await self.transport.request(self.path, params=params)
        return response.get("data") or []

    async def get(self, id: str) -> Any:
        response = await self.transport.request(f"{self.path}/{id}")
        return response.get("data")

    async def create(self, obj_in: Payload) -> Any:
        response = await self.transport.request(
            self.path, method="POST", json=as_payload(obj_in)
        )
        return response.get("data")

    async def update(self, id: str, obj_in: Payload) -> Any:
        """
        Update a record with the collection's update verb (PUT unless the
        subclass says otherwise).
        """
        response = await self.transport.request(
            f"{self.path}/{id}", method=self.update_method, json=as_payload(obj_in)
        )
        return response.get("data")

    async def delete(self, id: str) -> Dict[str, Any]:
        return await self.transport.request(f"{self.path}/{id}", method="DELETE")
