"""
Barcode generation service.

Normalizes a ``BarcodeRequest`` for its symbology (check digit repair for
EAN-13 and UPC-A, option presets per type) and hands the result to the
renderers in a ``RenderContext``:

- QR codes go to the QR renderer with a fixed profile
- Data Matrix tries a compact rendering first and falls back to Code 128
- Everything else goes through the general raster renderer
"""

from __future__ import annotations

import asyncio
from collections.abc import Sequence

from barcode_studio.core.logging import get_logger
from barcode_studio.modules.barcodes.schemas import (
    BarcodeRequest,
    BarcodeSuccess,
    BarcodeWarning,
    Outcome,
)
from barcode_studio.modules.symbology.check_digits import (
    compute_ean13_checksum,
    compute_upca_check_digit,
    fix_ean13,
    fix_upca,
)
from barcode_studio.modules.symbology.rules import (
    Symbology,
    map_to_renderer_id,
    type_specific_options,
)
from barcode_studio.renderers.context import RenderContext
from barcode_studio.renderers.options import RenderOptions

logger = get_logger(__name__)

DEFAULT_HEIGHT = 60
DEFAULT_SCALE = 2
DEFAULT_PADDING = 8
BACKGROUND_COLOR = "FFFFFF"

# Keys of ``type_specific_options`` that map onto RenderOptions fields
_CORE_OPTION_KEYS = frozenset({"scale", "height", "padding", "includetext"})


class BarcodeGenerationError(RuntimeError):
    """Raised when a barcode cannot be rendered."""


def _length_warning(label: str, expected: str, data: str) -> BarcodeWarning:
    return BarcodeWarning(
        message=(
            f"{label} barcodes require {expected} digits.\n\n"
            f"Received: {len(data)} digits\n"
            f"Data: {data}\n\n"
            "Use Code 128 to encode this value instead."
        ),
        fallback_type=Symbology.CODE128,
    )


def normalize_data(request: BarcodeRequest) -> str | BarcodeWarning:
    """
    Validate and repair the payload for symbologies with a check digit.

    Returns:
        The payload to encode, or a BarcodeWarning if the length is wrong
    """
    data = request.data
    symbology = request.symbology

    if symbology is Symbology.EAN13:
        if len(data) == 12:
            completed = compute_ean13_checksum(data)
            logger.debug("ean13_checksum_computed", original=data, normalized=completed)
            return completed  # type: ignore[return-value]
        if len(data) == 13:
            return fix_ean13(data)  # type: ignore[return-value]
        logger.info("ean13_length_invalid", length=len(data))
        return _length_warning("EAN-13", "12 or 13", data)

    if symbology is Symbology.UPCA:
        if len(data) == 11:
            completed = compute_upca_check_digit(data)
            logger.debug("upca_check_digit_computed", original=data, normalized=completed)
            return completed  # type: ignore[return-value]
        if len(data) == 12:
            return fix_upca(data)  # type: ignore[return-value]
        logger.info("upca_length_invalid", length=len(data))
        return _length_warning("UPC-A", "11 or 12", data)

    return data


def build_render_options(request: BarcodeRequest, data: str) -> RenderOptions:
    """
    Assemble renderer options from the generic defaults and the type presets.

    Type presets win over the request height, which wins over the default.
    """
    type_options = type_specific_options(request.type)
    return RenderOptions(
        bcid=map_to_renderer_id(request.type),
        text=data,
        scale=type_options.get("scale") or DEFAULT_SCALE,
        height=type_options.get("height") or request.height or DEFAULT_HEIGHT,
        padding=type_options.get("padding") or DEFAULT_PADDING,
        includetext=type_options.get("includetext") is not False,
        textxalign="center",
        backgroundcolor=BACKGROUND_COLOR,
        extras={k: v for k, v in type_options.items() if k not in _CORE_OPTION_KEYS},
    )


def build_datamatrix_options(request: BarcodeRequest) -> RenderOptions:
    """Near-minimal Data Matrix configuration that keeps the symbol square."""
    return RenderOptions(
        bcid="datamatrix",
        text=request.data,
        scale=1,
        height=50,
        width=50,
        padding=3,
        includetext=False,
        backgroundcolor=BACKGROUND_COLOR,
    )


class BarcodeGenerationService:
    """Turns barcode requests into rendered images or warnings."""

    async def generate(
        self,
        request: BarcodeRequest,
        context: RenderContext | None = None,
    ) -> Outcome:
        """
        Generate one barcode.

        Args:
            request: Barcode type, data and optional height
            context: Renderers to use; a default context is built when omitted

        Returns:
            BarcodeSuccess with the image, or BarcodeWarning for a payload
            whose length does not fit EAN-13/UPC-A

        Raises:
            BarcodeGenerationError: If rendering or check digit math fails
        """
        context = context or RenderContext.default()
        try:
            return await self._dispatch(request, context)
        except Exception as exc:
            logger.error(
                "barcode_generation_failed",
                barcode_type=request.type,
                error=str(exc),
            )
            raise BarcodeGenerationError(f"Barcode generation failed: {exc}") from exc

    async def generate_many(
        self,
        requests: Sequence[BarcodeRequest],
        context: RenderContext | None = None,
    ) -> list[Outcome | BarcodeGenerationError]:
        """
        Generate several barcodes concurrently.

        Results are index-aligned with ``requests``. A request that faults
        yields its BarcodeGenerationError in place; the others still complete.
        """
        context = context or RenderContext.default()
        results = await asyncio.gather(
            *(self.generate(request, context) for request in requests),
            return_exceptions=True,
        )

        outcomes: list[Outcome | BarcodeGenerationError] = []
        for result in results:
            if isinstance(result, BarcodeGenerationError):
                outcomes.append(result)
            elif isinstance(result, BaseException):
                raise result
            else:
                outcomes.append(result)

        failed = sum(1 for item in outcomes if isinstance(item, BarcodeGenerationError))
        logger.info("barcode_batch_completed", total=len(outcomes), failed=failed)
        return outcomes

    async def _dispatch(self, request: BarcodeRequest, context: RenderContext) -> Outcome:
        symbology = request.symbology
        if symbology is Symbology.QR:
            image = await asyncio.to_thread(context.qr.render, request.data)
            return BarcodeSuccess(image=image)
        if symbology is Symbology.DATAMATRIX:
            return await self._generate_datamatrix(request, context)
        return await self._generate_raster(request, context)

    async def _generate_datamatrix(
        self, request: BarcodeRequest, context: RenderContext
    ) -> Outcome:
        options = build_datamatrix_options(request)
        try:
            image = await asyncio.to_thread(context.datamatrix.render, options)
        except Exception as exc:
            logger.warning("datamatrix_fallback_to_code128", error=str(exc))
            fallback = request.model_copy(update={"type": Symbology.CODE128.value})
            return await self._dispatch(fallback, context)
        return BarcodeSuccess(image=image)

    async def _generate_raster(self, request: BarcodeRequest, context: RenderContext) -> Outcome:
        data = normalize_data(request)
        if isinstance(data, BarcodeWarning):
            return data

        options = build_render_options(request, data)
        logger.debug("barcode_render_options", **options.as_dict())
        image = await asyncio.to_thread(context.raster.render, options)
        return BarcodeSuccess(image=image)


_default_service = BarcodeGenerationService()


async def generate(request: BarcodeRequest, context: RenderContext | None = None) -> Outcome:
    """Generate one barcode with the default service."""
    return await _default_service.generate(request, context)


async def generate_many(
    requests: Sequence[BarcodeRequest],
    context: RenderContext | None = None,
) -> list[Outcome | BarcodeGenerationError]:
    """Generate several barcodes with the default service."""
    return await _default_service.generate_many(requests, context)
