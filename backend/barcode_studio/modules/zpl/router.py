"""
API Router for ZPL interpretation and template endpoints.
"""

from fastapi import APIRouter, HTTPException, Query, status

from barcode_studio.core.config import get_settings
from barcode_studio.modules.barcodes.router import (
    RenderContextDep,
    ensure_batch_size,
    to_outcome_response,
)
from barcode_studio.modules.barcodes.service import BarcodeGenerationService
from barcode_studio.modules.zpl.interpreter import interpret
from barcode_studio.modules.zpl.schemas import (
    ZPLInterpretRequest,
    ZPLInterpretResponse,
    ZPLRenderResponse,
    ZPLTemplateResponse,
)
from barcode_studio.modules.zpl.templates import generate_template, template_symbology

router = APIRouter()


def _ensure_zpl_length(zpl: str) -> None:
    limit = get_settings().zpl_max_length
    if len(zpl) > limit:
        raise HTTPException(
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            detail=f"ZPL document exceeds {limit} characters",
        )


@router.post("/interpret", response_model=ZPLInterpretResponse)
async def interpret_zpl(request: ZPLInterpretRequest) -> ZPLInterpretResponse:
    """
    Extract barcode directives from a ZPL document.

    Only ``^FO``, ``^FD``/``^FS`` and the barcode type commands are read;
    everything else is ignored.
    """
    _ensure_zpl_length(request.zpl)
    directives = interpret(request.zpl)
    return ZPLInterpretResponse(directives=directives, count=len(directives))


@router.post("/render", response_model=ZPLRenderResponse)
async def render_zpl(
    request: ZPLInterpretRequest,
    context: RenderContextDep,
) -> ZPLRenderResponse:
    """Extract barcode directives and render each of them."""
    _ensure_zpl_length(request.zpl)
    directives = interpret(request.zpl)
    ensure_batch_size(len(directives))

    barcode_requests = [directive.to_request() for directive in directives]
    outcomes = await BarcodeGenerationService().generate_many(barcode_requests, context)
    return ZPLRenderResponse(
        directives=directives,
        items=[
            to_outcome_response(barcode_request, outcome)
            for barcode_request, outcome in zip(barcode_requests, outcomes, strict=True)
        ],
    )


@router.get("/templates/{barcode_type}", response_model=ZPLTemplateResponse)
async def get_zpl_template(
    barcode_type: str,
    data: str = Query(..., min_length=1, description="Payload to place in ^FD"),
) -> ZPLTemplateResponse:
    """Return a one-barcode ZPL label for the given type (Code 128 if unsupported)."""
    return ZPLTemplateResponse(
        type=template_symbology(barcode_type),
        zpl=generate_template(barcode_type, data),
    )
