from typing import List

from fastapi import APIRouter

from devnetrequester.routers.routes import funding_router
from devnetrequester.routers.routes import metrics_router
from devnetrequester.routers.routes import status_router

router = APIRouter()

routers_to_include: List[APIRouter] = [
    # This is the order they show up in openapi.json
    status_router.router,
    funding_router.router,
    metrics_router.router,
]

for router_to_include in routers_to_include:
    router.include_router(router_to_include)
