"""NiceGUI window that displays an :class:`ImageCanvas`.

Drawing never touches the UI: turtles draw into the Pillow backing image and
bump ``version``.  Each open page polls that counter with ``ui.timer`` and
pushes a fresh snapshot of the image when it changed.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from nicegui import app, ui

from ..colors import ColorLike, to_hex
from ..config import ScreenSettings, WindowSettings
from ..logger import get_logger
from .memory import ImageCanvas

logger = get_logger(__name__)


class WindowCanvas(ImageCanvas):
    """Image canvas that can be shown in a browser tab or native window."""

    def __init__(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        background: Optional[ColorLike] = None,
        *,
        settings: Optional[ScreenSettings] = None,
        window: Optional[WindowSettings] = None,
    ) -> None:
        super().__init__(width, height, background, settings=settings)
        self.window = window or WindowSettings()
        self._routes_registered = False

    # ------------------------------------------------------------------
    # UI construction
    # ------------------------------------------------------------------
    def create_ui(self) -> None:
        ui.page_title(self.window.title)
        with ui.column().classes("w-full items-center"):
            view = ui.interactive_image(self.snapshot()).style(
                f"width: {self.width}px; height: {self.height}px; "
                f"background: {to_hex(self.background)};"
            )
        shown = {"version": self.version}

        def sync_to_ui() -> None:
            if shown["version"] == self.version:
                return
            shown["version"] = self.version
            view.set_source(self.snapshot())

        ui.timer(self.window.refresh_interval, sync_to_ui)

    def status(self) -> Dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "background": to_hex(self.background),
            "lines": len(self.lines()),
            "dots": len(self.dots()),
            "version": self.version,
        }

    def register_routes(self) -> None:
        if self._routes_registered:
            return
        ui.page("/")(self.create_ui)
        app.get("/api/canvas")(self.status)
        self._routes_registered = True

    # ------------------------------------------------------------------
    # Entry point
    # ------------------------------------------------------------------
    def show(self, **kwargs: Any) -> None:
        """Serve the canvas and block until the UI is closed."""

        self.register_routes()
        options: Dict[str, Any] = {
            "title": self.window.title,
            "favicon": self.window.favicon,
            "host": self.window.host,
            "port": self.window.port,
            "show": self.window.show,
            "reload": False,
        }
        if self.window.native:
            options["native"] = True
            options["window_size"] = self.size
        options.update(kwargs)
        logger.info(
            "Showing %dx%d canvas on http://%s:%d", self.width, self.height, options["host"], options["port"]
        )
        ui.run(**options)


__all__ = ["WindowCanvas"]
