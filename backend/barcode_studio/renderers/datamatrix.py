"""DataMatrix renderer backed by pylibdmtx (libdmtx)."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from PIL import Image

from barcode_studio.renderers.images import apply_padding
from barcode_studio.renderers.options import RenderOptions

Encoder = Callable[[bytes], Any]


def _load_encoder() -> Encoder:
    try:
        from pylibdmtx.pylibdmtx import encode  # type: ignore[import-not-found]
    except Exception as exc:
        raise NotImplementedError(
            "DataMatrix rendering unavailable. Install pylibdmtx and libdmtx runtime dependencies."
        ) from exc
    return encode


class DataMatrixRenderer:
    """Render DataMatrix payloads with pylibdmtx.

    ``encoder`` receives the UTF-8 payload and must return an object with
    ``width``, ``height`` and RGB ``pixels`` (pylibdmtx's ``Encoded``).
    """

    MAX_PAYLOAD_BYTES = 2000

    def __init__(self, encoder: Encoder | None = None) -> None:
        self._encoder = encoder

    @staticmethod
    def is_available() -> bool:
        try:
            _load_encoder()
        except NotImplementedError:
            return False
        return True

    def validate_payload(self, payload: str) -> None:
        if not payload.strip():
            raise ValueError("DataMatrix payload cannot be empty")
        if len(payload.encode("utf-8")) > self.MAX_PAYLOAD_BYTES:
            raise ValueError("DataMatrix payload is too large for configured profile")

    def render(self, options: RenderOptions) -> Image.Image:
        """Encode ``options.text`` and scale the module grid by ``options.scale``.

        The symbol is only ever enlarged by a whole factor, so every module
        keeps the same pixel size. ``options.width``/``options.height`` do not
        apply to 2-D symbols; padding is the only other change in size.
        """
        self.validate_payload(options.text)

        encode = self._encoder or _load_encoder()
        encoded = encode(options.text.encode("utf-8"))
        image = Image.frombytes("RGB", (encoded.width, encoded.height), encoded.pixels)

        scale = max(1, int(options.scale))
        if scale > 1:
            image = image.resize((image.width * scale, image.height * scale), Image.NEAREST)

        return apply_padding(image, options.padding, options.backgroundcolor)
