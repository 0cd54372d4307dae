"""Endpoint listing the API routes."""
from __future__ import annotations

from fastapi import APIRouter, Request

from placebook.schemas.meta import RouteDescriptor

router = APIRouter(tags=["meta"])

HTTP_METHODS = {"get", "put", "post", "delete", "options", "head", "patch", "trace"}


@router.get("/", response_model=list[RouteDescriptor])
async def list_endpoints(request: Request) -> list[RouteDescriptor]:
    # the OpenAPI schema stays flat however routers are nested
    paths = request.app.openapi()["paths"]
    return [
        RouteDescriptor(
            path=path,
            methods=sorted(method.upper() for method in operations if method in HTTP_METHODS),
        )
        for path, operations in paths.items()
    ]
