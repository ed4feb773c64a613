from fastapi import APIRouter, Depends, FastAPI, Request
from fastapi.responses import HTMLResponse
from pydantic import BaseModel, ValidationError
from starlette.concurrency import run_in_threadpool
from typing import List, Optional, Type

from .checker import HealthChecker
from .config import Settings
from .models import AddServiceRequest, OperationResult, RemoveServiceRequest, Service
from .page import INDEX_HTML
from .registry import Registry, open_registry

INVALID_DATA = "invalid data format"
MISSING_FIELDS = "name/url required"
INVALID_INDEX = "invalid service index"

router = APIRouter()

def get_registry(request: Request) -> Registry:
    return request.app.state.registry

def get_checker(request: Request) -> HealthChecker:
    return request.app.state.checker

async def parse_body(
    request: Request, model: Type[BaseModel], null_as_empty: bool = False
) -> Optional[BaseModel]:
    try:
        data = await request.json()
        if data is None and null_as_empty:
            data = {}
        return model.model_validate(data)
    except (ValueError, ValidationError):
        return None

@router.get("/", response_class=HTMLResponse)
def index():
    return INDEX_HTML

@router.get("/api/services", response_model=List[Service])
def list_services(
    registry: Registry = Depends(get_registry),
    checker: HealthChecker = Depends(get_checker),
):
    checker.sweep(registry)
    return registry.snapshot()

# Validation failures are reported in the body with HTTP 200
@router.post("/api/add", response_model=OperationResult, response_model_exclude_none=True)
async def add_service(request: Request, registry: Registry = Depends(get_registry)):
    payload = await parse_body(request, AddServiceRequest, null_as_empty=True)
    if payload is None:
        return OperationResult(success=False, error=INVALID_DATA)
    if not payload.name or not payload.url:
        return OperationResult(success=False, error=MISSING_FIELDS)
    await run_in_threadpool(registry.add, payload.name, payload.url)
    return OperationResult(success=True)

@router.post("/api/remove", response_model=OperationResult, response_model_exclude_none=True)
async def remove_service(request: Request, registry: Registry = Depends(get_registry)):
    payload = await parse_body(request, RemoveServiceRequest)
    if payload is None:
        return OperationResult(success=False, error=INVALID_DATA)
    removed = await run_in_threadpool(registry.remove, payload.index)
    if not removed:
        return OperationResult(success=False, error=INVALID_INDEX)
    return OperationResult(success=True)

def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[Registry] = None,
    checker: Optional[HealthChecker] = None,
) -> FastAPI:
    settings = settings or Settings()
    app = FastAPI(title="Web Service Monitor", version="1.0.0")
    app.state.settings = settings
    app.state.registry = registry if registry is not None else open_registry(settings.services_path)
    app.state.checker = checker or HealthChecker(
        timeout=settings.check_timeout, workers=settings.check_workers
    )
    app.include_router(router)
    return app
