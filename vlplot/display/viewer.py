"""Display a specification by writing an HTML page and opening a browser."""

import hashlib
import webbrowser
from pathlib import Path
from typing import Optional, Union

from vlplot.config import Config
from vlplot.exceptions import DisplayError
from vlplot.logger import Logger, session_logger
from vlplot.display.renderer import HtmlRenderer
from vlplot.spec.vegalite import Vegalite


def page_name(spec: Vegalite) -> str:
    """Stable file name derived from the serialized spec."""
    digest = hashlib.sha256(spec.to_string().encode("utf-8")).hexdigest()[:16]
    return f"vlplot-{digest}.html"


def show(
    spec: Vegalite,
    theme: Optional[str] = None,
    output_dir: Optional[Union[str, Path]] = None,
    open_browser: Optional[bool] = None,
    logger: Optional[Logger] = None,
) -> Path:
    """Write ``spec`` as an HTML page and open it in the default browser.

    Args:
        spec: Specification to display
        theme: Theme name, defaults to VLPLOT_THEME
        output_dir: Target directory, defaults to VLPLOT_OUTPUT_DIR
        open_browser: Launch a browser, defaults to VLPLOT_OPEN_BROWSER

    Returns:
        Path of the written page

    Raises:
        DisplayError: If the page cannot be written or the browser cannot be opened
    """
    log = logger or session_logger
    theme = theme or Config.get_theme()
    target_dir = Path(output_dir) if output_dir is not None else Config.get_output_dir()
    if open_browser is None:
        open_browser = Config.get_open_browser()

    html = HtmlRenderer(logger=log).render(spec, theme=theme)

    path = target_dir / page_name(spec)
    try:
        target_dir.mkdir(parents=True, exist_ok=True)
        path.write_text(html, encoding="utf-8")
    except OSError as e:
        raise DisplayError(
            f"Failed to write chart page to {path}: {e}", details={"path": str(path)}
        ) from e
    log.info("Chart page written", path=str(path))

    if open_browser:
        try:
            opened = webbrowser.open(path.resolve().as_uri())
        except webbrowser.Error as e:
            raise DisplayError(
                f"Failed to open browser: {e}", details={"path": str(path)}
            ) from e
        if not opened:
            log.warning("No browser available to display chart", path=str(path))

    return path
