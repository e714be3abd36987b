from __future__ import annotations

import io
from pathlib import Path

import cairo

from bubble_overlay._color import ColorLike

from ._cairo import CairoSurface


class SvgSurface(CairoSurface):
    """Cairo SVG surface written to an in-memory buffer.

    The document is finalized on the first ``to_string``/``save``; drawing
    after that is an error.
    """

    def __init__(self, width: float, height: float, background: ColorLike | None = None) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("SVG size must be positive.")
        self._buffer = io.BytesIO()
        target = cairo.SVGSurface(self._buffer, float(width), float(height))
        target.set_document_unit(cairo.SVGUnit.PX)
        self._document: str | None = None
        super().__init__(target, background=background)

    def to_string(self) -> str:
        if self._document is None:
            self.target.finish()
            self._document = self._buffer.getvalue().decode("utf-8")
        return self._document

    def save(self, path: Path) -> Path:
        path = Path(path)
        path.write_text(self.to_string(), encoding="utf-8")
        return path
