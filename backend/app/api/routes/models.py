"""Model Routes: CRUD endpoints for the Model resource.

Invariants:
    - Bodies are validated (core/validate_model.py) before the service is called,
      so a blank name is rejected with 400 even when the id does not exist
    - Service failures are rendered via render_service_error (single status table)
    - POST answers 201 with a Location header pointing at /models/{id}
    - DELETE answers 204 with an empty body
    - Path ids outside the signed 32-bit range are rejected with 400 before any query

Design Decisions:
    - Thin handlers: parse, validate, delegate, serialize
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status
from fastapi.responses import JSONResponse

from app.api.dependencies import get_model_service
from app.api.error_handlers import render_service_error
from app.core.domain_types import MODEL_ID_MAX, MODEL_ID_MIN, ModelId
from app.core.errors import validation_failed
from app.core.validate_model import validate_model
from app.schemas.model import ModelPayload, model_to_json
from app.services.model_service import ModelService

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/models", tags=["models"])

ModelIdPath = Annotated[int, Path(ge=MODEL_ID_MIN, le=MODEL_ID_MAX)]


@router.get("")
async def list_models(service: ModelService = Depends(get_model_service)):
    logger.debug("Received get all models request")
    result = await service.list_all()
    return [model_to_json(m) for m in result.value]


@router.get("/{model_id}", name="get_model")
async def get_model(
    model_id: ModelIdPath,
    request: Request,
    service: ModelService = Depends(get_model_service),
):
    logger.debug(
        f"Received get one model request for model with id '{model_id}'",
        extra={"model_id": model_id},
    )
    result = await service.get(ModelId(model_id))
    if not result.ok:
        return render_service_error(request, result.error)
    return model_to_json(result.value)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_model(
    body: ModelPayload,
    request: Request,
    service: ModelService = Depends(get_model_service),
):
    """Create a Model; the store assigns the id."""
    logger.debug(f"Received create new model request for '{body.name}'")
    field_errors = validate_model(body.name)
    if field_errors:
        return render_service_error(request, validation_failed(field_errors).error)

    result = await service.create(body.name)
    created = result.value
    location = str(request.url_for("get_model", model_id=created.id))
    return JSONResponse(
        status_code=status.HTTP_201_CREATED,
        content=model_to_json(created),
        headers={"Location": location},
    )


@router.patch("/{model_id}")
async def update_model(
    model_id: ModelIdPath,
    body: ModelPayload,
    request: Request,
    service: ModelService = Depends(get_model_service),
):
    """Replace the name of an existing Model."""
    logger.debug(
        f"Received update request for model with id '{model_id}'",
        extra={"model_id": model_id},
    )
    field_errors = validate_model(body.name)
    if field_errors:
        return render_service_error(request, validation_failed(field_errors).error)

    result = await service.update(ModelId(model_id), body.name)
    if not result.ok:
        return render_service_error(request, result.error)
    return model_to_json(result.value)


@router.delete("/{model_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_model(
    model_id: ModelIdPath,
    request: Request,
    service: ModelService = Depends(get_model_service),
):
    logger.debug(
        f"Received delete request for model with id '{model_id}'",
        extra={"model_id": model_id},
    )
    result = await service.delete(ModelId(model_id))
    if not result.ok:
        return render_service_error(request, result.error)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
