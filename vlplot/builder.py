"""Fluent chart builder.

Collects specification members through chained setters and assembles a
validated ``Vegalite`` in :meth:`ChartBuilder.build`::

    chart = (
        ChartBuilder()
        .title("Random points")
        .data(np.array([[1, 2], [3, 4]]))
        .mark(Mark.POINT)
        .encoding(Encoding(x=X(field="0", type="quantitative")))
        .build()
    )
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from vlplot.data.sources import to_data
from vlplot.exceptions import SpecBuildError
from vlplot.logger import Logger, session_logger
from vlplot.spec.encoding import Encoding
from vlplot.spec.enums import Mark
from vlplot.spec.mark import MarkDef, mark_type
from vlplot.spec.projection import Projection
from vlplot.spec.transform import Transform
from vlplot.spec.vegalite import Vegalite
from vlplot.validation.validator import SpecValidator


class ChartBuilder:
    """Builder for ``Vegalite`` specifications."""

    def __init__(self, logger: Optional[Logger] = None, validator: Optional[SpecValidator] = None):
        self.logger = logger or session_logger
        self.validator = validator or SpecValidator()
        self._fields: Dict[str, Any] = {}
        self._theme: Optional[str] = None

    def _set(self, name: str, value: Any) -> "ChartBuilder":
        self._fields[name] = value
        return self

    def title(self, title: str) -> "ChartBuilder":
        return self._set("title", title)

    def description(self, description: str) -> "ChartBuilder":
        return self._set("description", description)

    def data(self, data: Any) -> "ChartBuilder":
        """Set the data source.

        Accepts ``UrlData``/``InlineData``, a 2-D numpy array, a pandas
        DataFrame, or a sequence of records.
        """
        return self._set("data", to_data(data))

    def mark(self, mark: Union[Mark, MarkDef, str]) -> "ChartBuilder":
        return self._set("mark", mark)

    def encoding(self, encoding: Encoding) -> "ChartBuilder":
        return self._set("encoding", encoding)

    def transform(self, transform: Union[Transform, List[Transform]]) -> "ChartBuilder":
        if not isinstance(transform, list):
            transform = [transform]
        return self._set("transform", transform)

    def projection(self, projection: Projection) -> "ChartBuilder":
        return self._set("projection", projection)

    def width(self, width: Union[float, str]) -> "ChartBuilder":
        return self._set("width", width)

    def height(self, height: Union[float, str]) -> "ChartBuilder":
        return self._set("height", height)

    def padding(self, padding: Union[float, Dict[str, float]]) -> "ChartBuilder":
        return self._set("padding", padding)

    def background(self, background: str) -> "ChartBuilder":
        return self._set("background", background)

    def config(self, config: Dict[str, Any]) -> "ChartBuilder":
        return self._set("config", config)

    def theme(self, name: str) -> "ChartBuilder":
        self._theme = name
        return self

    def build(self) -> Vegalite:
        """Assemble and validate the specification.

        Raises:
            SpecBuildError: If a member has an invalid value or the assembled
                spec fails validation
            ThemeNotFoundError: If a theme was set and is unknown
        """
        try:
            spec = Vegalite(**self._fields)
        except PydanticValidationError as e:
            issues = [
                {
                    "field": ".".join(str(part) for part in err["loc"]),
                    "message": err["msg"],
                }
                for err in e.errors(include_url=False)
            ]
            self.logger.error("Spec construction failed", error_count=len(issues))
            raise SpecBuildError(f"Invalid chart specification: {e}", issues=issues) from e

        result = self.validator.validate(spec)
        if not result.is_valid:
            issues = [issue.to_dict() for issue in result.errors]
            messages = "; ".join(issue.message for issue in result.errors)
            self.logger.error(
                "Spec validation failed",
                error_count=len(issues),
                fields=",".join(result.fields()),
            )
            raise SpecBuildError(f"Invalid chart specification: {messages}", issues=issues)

        if self._theme:
            spec = spec.with_theme(self._theme)

        mark = mark_type(spec.mark)
        self.logger.debug(
            "Spec built",
            title=spec.title,
            mark=mark.value if mark is not None else None,
            transforms=len(spec.transform or []),
        )
        return spec
