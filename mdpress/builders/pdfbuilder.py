#!/usr/bin/env python3
"""
pdfbuilder.py
-------------------
Render complete HTML documents to PDF bytes with a headless browser.

The browser is reached through a narrow engine seam: an engine takes the
path of an HTML file, the page options and a deadline, and returns PDF
bytes or raises. ChromiumEngine drives Chromium through Playwright;
tests substitute a fake engine and never start a browser.

Every render:
1. Writes the HTML to a uniquely named temporary file
2. Navigates the browser to it and waits for the load event
3. Prints to PDF (A4, backgrounds on, 0.4in margins, no header/footer)
4. Removes the temporary file, whatever the outcome

The whole browser session (launch, navigation, capture) runs under one
deadline. A timeout is a terminal failure; nothing is retried.

Usage:
    renderer = PdfRenderer(timeout=30, logger=logger)
    pdf_bytes = renderer.render(html_document)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import asyncio
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Protocol

# --- Third party ---
from playwright.async_api import async_playwright

from mdpress.core.exceptions import PdfRenderError, TemporalFileError
from mdpress.core.logging_manager import MdpressLogger, safe_logger
from mdpress.core.temporal_files import TemporalFileManager


# ----- Page Constants -----
RENDER_TIMEOUT = 30.0
"""Deadline in seconds for one complete browser session."""

A4_WIDTH = "8.27in"
"""A4 paper width."""

A4_HEIGHT = "11.7in"
"""A4 paper height."""

PAGE_MARGIN = "0.4in"
"""Margin applied to all four page edges."""

CHROMIUM_ARGS = [
    "--disable-dev-shm-usage",
    "--disable-gpu",
    "--no-sandbox",
]
"""Launch flags for headless Chromium in containers and CI."""


@dataclass(frozen=True)
class PdfOptions:
    """
    Page layout requested from the rendering engine.

    Attributes:
        width: Paper width (CSS length)
        height: Paper height (CSS length)
        margin: Uniform margin (CSS length)
        print_background: Whether background colors and images are printed
        display_header_footer: Whether the browser adds its header/footer
    """
    width: str = A4_WIDTH
    height: str = A4_HEIGHT
    margin: str = PAGE_MARGIN
    print_background: bool = True
    display_header_footer: bool = False

    def margins(self) -> Dict[str, str]:
        """Margin mapping in the shape the browser expects."""
        return {side: self.margin for side in ("top", "right", "bottom", "left")}


class PdfEngine(Protocol):
    """Anything that can print an HTML file to PDF bytes."""

    def render(self, html_path: Path, options: PdfOptions, timeout: float) -> bytes:
        """
        Print the HTML file at ``html_path``.

        Raises:
            Exception: Any failure, including the deadline expiring
        """
        ...


class ChromiumEngine:
    """
    Headless Chromium driven through Playwright.

    A fresh browser is launched for every render and closed afterwards, so
    no browser state outlives a conversion.
    """

    def __init__(self, launch_args: Optional[List[str]] = None) -> None:
        self.launch_args = list(CHROMIUM_ARGS if launch_args is None else launch_args)

    def render(self, html_path: Path, options: PdfOptions, timeout: float) -> bytes:
        """
        Print ``html_path`` to PDF within ``timeout`` seconds.

        Raises:
            asyncio.TimeoutError: If the deadline expires
            playwright.async_api.Error: If launch, navigation or capture fails
        """
        return asyncio.run(
            asyncio.wait_for(self._print(html_path, options), timeout=timeout)
        )

    async def _print(self, html_path: Path, options: PdfOptions) -> bytes:
        async with async_playwright() as playwright:
            browser = await playwright.chromium.launch(
                headless=True, args=self.launch_args
            )
            try:
                page = await browser.new_page()
                await page.goto(html_path.resolve().as_uri(), wait_until="load")
                return await page.pdf(
                    width=options.width,
                    height=options.height,
                    margin=options.margins(),
                    print_background=options.print_background,
                    display_header_footer=options.display_header_footer,
                )
            finally:
                await browser.close()


class PdfRenderer:
    """
    Turns HTML documents into PDF bytes through a PdfEngine.

    Attributes:
        engine: Rendering engine (Chromium unless replaced)
        timeout: Deadline in seconds for one render
        options: Page layout
        temp_dir: Directory for the temporary HTML file (system temp if None)
        logger: Optional logger
    """

    def __init__(
        self,
        engine: Optional[PdfEngine] = None,
        timeout: float = RENDER_TIMEOUT,
        options: Optional[PdfOptions] = None,
        temp_dir: Optional[Path] = None,
        logger: Optional[MdpressLogger] = None,
    ) -> None:
        """
        Initialize the renderer.

        Args:
            engine: Rendering engine; defaults to ChromiumEngine()
            timeout: Deadline in seconds for the browser session
            options: Page layout; defaults to A4 with 0.4in margins
            temp_dir: Where the temporary HTML file is written
            logger: Optional logger
        """
        if timeout <= 0:
            raise ValueError(f"timeout must be positive, got {timeout}")

        self.engine = engine or ChromiumEngine()
        self.timeout = timeout
        self.options = options or PdfOptions()
        self.temp_dir = temp_dir
        self.logger = logger

    def render(self, html: str) -> bytes:
        """
        Render an HTML document to PDF.

        The temporary HTML file is removed before this method returns or
        raises.

        Args:
            html: Complete HTML document

        Returns:
            PDF bytes (never empty)

        Raises:
            PdfRenderError: If staging, the browser session or the capture
                fails, or the deadline expires
        """
        log = safe_logger(self.logger)

        try:
            with TemporalFileManager(self.temp_dir, logger=self.logger) as temp_manager:
                html_path = temp_manager.write_temp_file(html, suffix=".html")
                log.log_debug(
                    "Rendering PDF",
                    {"html_file": str(html_path), "timeout": self.timeout},
                )
                pdf = self.engine.render(html_path, self.options, self.timeout)
        except TemporalFileError as e:
            raise PdfRenderError(
                f"Failed to stage HTML for rendering: {e}", cause=e
            ) from e
        except asyncio.TimeoutError as e:
            raise PdfRenderError(
                f"PDF rendering timed out after {self.timeout:g}s", cause=e
            ) from e
        except Exception as e:
            raise PdfRenderError(f"PDF rendering failed: {e}", cause=e) from e

        if not pdf:
            raise PdfRenderError("Rendering engine returned an empty PDF")

        log.log_debug("Rendered PDF", {"pdf_bytes": len(pdf)})
        return pdf
