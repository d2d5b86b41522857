"""HTML page renderer.

Embeds a serialized specification in a standalone page that loads Vega,
Vega-Lite and vega-embed from a CDN. Drawing happens in the browser.
"""

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from vlplot.config import DEFAULT_CDN_URL, Config
from vlplot.logger import Logger, session_logger
from vlplot.spec.vegalite import Vegalite

TEMPLATE_DIR = Path(__file__).parent / "templates"
TEMPLATE_NAME = "chart.html"


def _script_safe(spec_json: str) -> str:
    # A literal "</" inside JSON strings would close the <script> element
    return spec_json.replace("</", "<\\/")


class HtmlRenderer:
    """Renders a Vegalite spec to a standalone HTML document."""

    def __init__(self, logger: Optional[Logger] = None, cdn_url: str = DEFAULT_CDN_URL):
        self.logger = logger or session_logger
        self.cdn_url = cdn_url.rstrip("/")
        self._env = Environment(
            loader=FileSystemLoader(str(TEMPLATE_DIR)),
            autoescape=select_autoescape(["html"]),
        )

    def render(self, spec: Vegalite, theme: Optional[str] = None) -> str:
        """Render the page for ``spec``.

        Args:
            spec: Specification to embed
            theme: Optional theme name applied before embedding

        Returns:
            HTML document text

        Raises:
            ThemeNotFoundError: If the theme is unknown
        """
        if theme:
            spec = spec.with_theme(theme)

        spec_json = spec.to_string()
        self.logger.info(
            "Starting render",
            title=spec.title,
            theme=theme,
            spec_size_bytes=len(spec_json),
        )

        template = self._env.get_template(TEMPLATE_NAME)
        background = (spec.config or {}).get("background") or spec.background
        html = template.render(
            title=spec.title or "vlplot chart",
            cdn_url=self.cdn_url,
            versions=Config.get_library_versions(),
            element_id="vis",
            background=background,
            spec_json=_script_safe(spec_json),
        )

        self.logger.info("Render completed", title=spec.title, output_size_bytes=len(html))
        return html
