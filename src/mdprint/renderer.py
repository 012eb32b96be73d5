"""
HTML to PDF rendering through headless Chromium (Playwright sync API).

Page load and printing are hard requirements: failures there raise
RenderError. Waiting for fonts, diagrams and layout to settle is best
effort: each wait is bounded and a timeout is logged, then printing goes
ahead with whatever has rendered.
"""

import logging
from enum import Enum
from typing import Dict, Iterable, Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from .assembler import SETTLED_FLAG
from .exceptions import BrowserLaunchError, RenderError
from .presets import RenderConfig
from .settings import CHROMIUM_ARGS, RendererTimeouts

logger = logging.getLogger(__name__)

FONTS_READY_JS = "document.fonts.status === 'loaded'"

DIAGRAMS_RENDERED_JS = """() => {
  const diagrams = document.querySelectorAll('.mermaid');
  if (diagrams.length === 0) return true;
  return Array.from(diagrams).every(el => {
    const svg = el.querySelector('svg');
    return svg && svg.children.length > 0;
  });
}"""

LAYOUT_SETTLED_JS = f"window.{SETTLED_FLAG} === true"

# Empty blocks print as blank pages; zero-margin blocks run together.
CLEANUP_JS = """() => {
  document.querySelectorAll('p:empty, div:empty, h1:empty, h2:empty, h3:empty, h4:empty, h5:empty, h6:empty')
    .forEach(el => {
      if (el.textContent.trim() === '') el.remove();
    });

  document.querySelectorAll('h1, h2, h3, h4, h5, h6, p, ul, ol, pre, .mermaid').forEach(el => {
    const style = window.getComputedStyle(el);
    if (style.marginTop === '0px' && style.marginBottom === '0px') {
      el.style.marginTop = '1em';
      el.style.marginBottom = '1em';
    }
  });
}"""


class WaitOutcome(Enum):
    """Result of a bounded wait."""

    COMPLETED = "completed"
    TIMED_OUT = "timed_out"


def _ms(seconds: float) -> float:
    return seconds * 1000


class PlaywrightRenderer:
    """Prints assembled HTML to PDF in a fresh Chromium per call.

    The outcome of each best-effort wait from the most recent render is kept
    in last_waits (keys: "fonts", "diagrams", "layout").
    """

    def __init__(
        self,
        timeouts: Optional[RendererTimeouts] = None,
        chromium_args: Iterable[str] = CHROMIUM_ARGS,
        headless: bool = True,
    ):
        if timeouts is None:
            from .config import get_renderer_timeouts

            timeouts = get_renderer_timeouts()
        self.timeouts = timeouts
        self.chromium_args = list(chromium_args)
        self.headless = headless
        self.last_waits: Dict[str, WaitOutcome] = {}

    def render(self, html: str, config: RenderConfig) -> bytes:
        """Render html to PDF bytes using config's page geometry.

        Raises:
            BrowserLaunchError: If Chromium cannot be started
            RenderError: If the page fails to load or print
        """
        self.last_waits = {}
        with sync_playwright() as playwright:
            logger.info("Launching Chromium...")
            try:
                browser = playwright.chromium.launch(
                    headless=self.headless,
                    args=self.chromium_args,
                )
            except PlaywrightError as e:
                raise BrowserLaunchError(
                    f"Could not launch Chromium: {e}. "
                    "Install it with: playwright install chromium"
                ) from e

            try:
                logger.debug("Creating new page")
                page = browser.new_page(
                    viewport={"width": config.viewport_width, "height": config.viewport_height},
                    device_scale_factor=1,
                )
                return self._print(page, html, config)
            except PlaywrightError as e:
                raise RenderError(f"PDF rendering failed: {e}") from e
            finally:
                browser.close()

    def _print(self, page: Page, html: str, config: RenderConfig) -> bytes:
        logger.info("Setting content...")
        page.set_content(
            html,
            wait_until="networkidle",
            timeout=_ms(self.timeouts.navigation),
        )

        logger.info("Waiting for fonts to load...")
        self.last_waits["fonts"] = self._bounded_wait(
            page, "font loading", FONTS_READY_JS, self.timeouts.fonts,
        )

        logger.info("Waiting for Mermaid diagrams to render...")
        self.last_waits["diagrams"] = self._bounded_wait(
            page,
            "Mermaid rendering",
            DIAGRAMS_RENDERED_JS,
            self.timeouts.diagrams,
            polling=self.timeouts.diagram_poll_interval,
        )

        page.evaluate(CLEANUP_JS)

        self.last_waits["layout"] = self._bounded_wait(
            page, "diagram layout", LAYOUT_SETTLED_JS, self.timeouts.settle,
        )

        logger.info(config.log_message)
        pdf = page.pdf(
            format=config.page_format,
            landscape=config.landscape,
            margin=dict(config.margin),
            display_header_footer=config.display_header_footer,
            print_background=config.print_background,
            prefer_css_page_size=True,
            tagged=True,
            outline=True,
        )
        logger.info("PDF generation complete")
        return pdf

    def _bounded_wait(
        self,
        page: Page,
        what: str,
        expression: str,
        timeout: float,
        polling: Optional[float] = None,
    ) -> WaitOutcome:
        kwargs = {"timeout": _ms(timeout)}
        if polling is not None:
            kwargs["polling"] = _ms(polling)
        try:
            page.wait_for_function(expression, **kwargs)
        except PlaywrightTimeoutError:
            logger.warning("%s did not finish within %.0fs, proceeding anyway", what.capitalize(), timeout)
            return WaitOutcome.TIMED_OUT
        logger.debug("%s finished", what.capitalize())
        return WaitOutcome.COMPLETED
