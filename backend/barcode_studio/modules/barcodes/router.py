"""
API Router for barcode generation endpoints.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Query, status
from fastapi.responses import Response

from barcode_studio.core.config import get_settings
from barcode_studio.modules.barcodes.schemas import (
    BarcodeBatchRequest,
    BarcodeBatchResponse,
    BarcodeOutcomeResponse,
    BarcodeRequest,
    BarcodeWarning,
    Outcome,
)
from barcode_studio.modules.barcodes.service import (
    BarcodeGenerationError,
    BarcodeGenerationService,
)
from barcode_studio.renderers.context import RenderContext
from barcode_studio.renderers.images import encode_png

router = APIRouter()


def get_render_context() -> RenderContext:
    """Build the renderers for one request."""
    return RenderContext.default()


RenderContextDep = Annotated[RenderContext, Depends(get_render_context)]


def to_outcome_response(
    request: BarcodeRequest,
    outcome: Outcome | BarcodeGenerationError,
) -> BarcodeOutcomeResponse:
    if isinstance(outcome, BarcodeGenerationError):
        return BarcodeOutcomeResponse(kind="error", type=request.type, message=str(outcome))
    if isinstance(outcome, BarcodeWarning):
        return BarcodeOutcomeResponse(
            kind="warning",
            type=request.type,
            message=outcome.message,
            fallback_type=outcome.fallback_type,
        )
    return BarcodeOutcomeResponse(
        kind="success",
        type=request.type,
        data_url=outcome.to_data_url(),
    )


def generation_http_error(exc: BarcodeGenerationError) -> HTTPException:
    """Map a generation fault to 422 for bad input and 500 for renderer failures."""
    if isinstance(exc.__cause__, ValueError):
        return HTTPException(status_code=status.HTTP_422_UNPROCESSABLE_ENTITY, detail=str(exc))
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(exc))


def ensure_batch_size(count: int) -> None:
    limit = get_settings().batch_max_items
    if count > limit:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"Batch contains {count} barcodes; the limit is {limit}",
        )


@router.post("", response_model=BarcodeOutcomeResponse)
async def generate_barcode(
    request: BarcodeRequest,
    context: RenderContextDep,
) -> BarcodeOutcomeResponse:
    """
    Generate a single barcode.

    Returns the PNG as a data URI, or a warning with a suggested fallback
    symbology when the data does not fit EAN-13/UPC-A.
    """
    service = BarcodeGenerationService()
    try:
        outcome = await service.generate(request, context)
    except BarcodeGenerationError as e:
        raise generation_http_error(e) from e
    return to_outcome_response(request, outcome)


@router.post("/batch", response_model=BarcodeBatchResponse)
async def generate_barcode_batch(
    batch: BarcodeBatchRequest,
    context: RenderContextDep,
) -> BarcodeBatchResponse:
    """
    Generate several barcodes at once.

    Items are returned in request order. A failing item is reported with
    ``kind="error"`` and does not fail the batch.
    """
    ensure_batch_size(len(batch.requests))
    service = BarcodeGenerationService()
    outcomes = await service.generate_many(batch.requests, context)
    return BarcodeBatchResponse(
        items=[
            to_outcome_response(request, outcome)
            for request, outcome in zip(batch.requests, outcomes, strict=True)
        ]
    )


@router.get(
    "/image",
    responses={
        200: {
            "content": {"image/png": {}},
            "description": "Rendered barcode image",
        }
    },
)
async def get_barcode_image(
    context: RenderContextDep,
    type: str = Query(..., min_length=1, max_length=32, description="Barcode type"),
    data: str = Query(..., description="Payload to encode"),
    height: int | None = Query(None, gt=0, le=1000, description="Bar height"),
) -> Response:
    """Render a barcode and return the PNG directly."""
    request = BarcodeRequest(type=type, data=data, height=height)
    service = BarcodeGenerationService()
    try:
        outcome = await service.generate(request, context)
    except BarcodeGenerationError as e:
        raise generation_http_error(e) from e

    if isinstance(outcome, BarcodeWarning):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail={"message": outcome.message, "fallback_type": outcome.fallback_type.value},
        )

    return Response(
        content=encode_png(outcome.image),
        media_type="image/png",
        headers={"Content-Disposition": 'inline; filename="barcode.png"'},
    )
