"""Chart specification validator.

Checks a built Vegalite spec for problems the schema alone does not catch
and reports them with helpful error messages and suggestions.
"""

import re
from typing import List, Optional, Set

from vlplot.spec.data import InlineData
from vlplot.spec.encoding import FieldDef
from vlplot.spec.enums import DataFormatType, Mark, NonArgAggregateOp
from vlplot.spec.mark import MarkDef, mark_type
from vlplot.spec.transform import CalculateTransform, LookupTransform
from vlplot.spec.vegalite import Vegalite

# CSS named colors understood by the browser renderer
NAMED_COLORS = {
    "aliceblue", "antiquewhite", "aqua", "aquamarine", "azure", "beige",
    "bisque", "black", "blanchedalmond", "blue", "blueviolet", "brown",
    "burlywood", "cadetblue", "chartreuse", "chocolate", "coral",
    "cornflowerblue", "cornsilk", "crimson", "cyan", "darkblue", "darkcyan",
    "darkgoldenrod", "darkgray", "darkgreen", "darkgrey", "darkkhaki",
    "darkmagenta", "darkolivegreen", "darkorange", "darkorchid", "darkred",
    "darksalmon", "darkseagreen", "darkslateblue", "darkslategray",
    "darkslategrey", "darkturquoise", "darkviolet", "deeppink", "deepskyblue",
    "dimgray", "dimgrey", "dodgerblue", "firebrick", "floralwhite",
    "forestgreen", "fuchsia", "gainsboro", "ghostwhite", "gold", "goldenrod",
    "gray", "green", "greenyellow", "grey", "honeydew", "hotpink", "indianred",
    "indigo", "ivory", "khaki", "lavender", "lavenderblush", "lawngreen",
    "lemonchiffon", "lightblue", "lightcoral", "lightcyan",
    "lightgoldenrodyellow", "lightgray", "lightgreen", "lightgrey", "lightpink",
    "lightsalmon", "lightseagreen", "lightskyblue", "lightslategray",
    "lightslategrey", "lightsteelblue", "lightyellow", "lime", "limegreen",
    "linen", "magenta", "maroon", "mediumaquamarine", "mediumblue",
    "mediumorchid", "mediumpurple", "mediumseagreen", "mediumslateblue",
    "mediumspringgreen", "mediumturquoise", "mediumvioletred", "midnightblue",
    "mintcream", "mistyrose", "moccasin", "navajowhite", "navy", "oldlace",
    "olive", "olivedrab", "orange", "orangered", "orchid", "palegoldenrod",
    "palegreen", "paleturquoise", "palevioletred", "papayawhip", "peachpuff",
    "peru", "pink", "plum", "powderblue", "purple", "rebeccapurple", "red",
    "rosybrown", "royalblue", "saddlebrown", "salmon", "sandybrown",
    "seagreen", "seashell", "sienna", "silver", "skyblue", "slateblue",
    "slategray", "slategrey", "snow", "springgreen", "steelblue", "tan",
    "teal", "thistle", "tomato", "turquoise", "violet", "wheat", "white",
    "whitesmoke", "yellow", "yellowgreen", "transparent", "currentcolor",
}

_HEX_COLOR = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
_FUNCTION_COLOR = re.compile(r"^(?:rgba?|hsla?)\([^()]*\)$")


def is_valid_color(value: str) -> bool:
    """Accept CSS color names, hex (#RGB, #RRGGBB, with optional alpha), and rgb/rgba/hsl/hsla."""
    color = value.lower().strip()
    if color in NAMED_COLORS:
        return True
    return bool(_HEX_COLOR.match(color) or _FUNCTION_COLOR.match(color))


class ValidationIssue:
    """Structured validation error with suggestions."""

    def __init__(
        self,
        field: str,
        message: str,
        received_value=None,
        expected: str = "",
        suggestions: list[str] | None = None,
    ):
        self.field = field
        self.message = message
        self.received_value = received_value
        self.expected = expected
        self.suggestions = suggestions or []

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "message": self.message,
            "received_value": str(self.received_value) if self.received_value is not None else None,
            "expected": self.expected,
            "suggestions": self.suggestions,
        }


class ValidationResult:
    """Result of specification validation."""

    def __init__(self, is_valid: bool, errors: List[ValidationIssue] | None = None):
        self.is_valid = is_valid
        self.errors = errors or []

    def fields(self) -> List[str]:
        return [e.field for e in self.errors]


class SpecValidator:
    """Validates Vegalite specs with helpful error messages and suggestions."""

    def validate(self, spec: Vegalite) -> ValidationResult:
        """Validate a spec and return structured validation results."""
        errors: List[ValidationIssue] = []

        errors.extend(self._validate_mark(spec))
        errors.extend(self._validate_channels(spec))
        errors.extend(self._validate_scales(spec))
        errors.extend(self._validate_colors(spec))
        errors.extend(self._validate_topojson(spec))
        errors.extend(self._validate_inline_fields(spec))
        errors.extend(self._validate_row_count(spec))

        return ValidationResult(is_valid=len(errors) == 0, errors=errors)

    def _validate_mark(self, spec: Vegalite) -> List[ValidationIssue]:
        if spec.mark is not None:
            return []
        return [
            ValidationIssue(
                field="mark",
                message="A mark is required",
                expected=f"One of: {', '.join(m.value for m in Mark)}",
                suggestions=[
                    "Use 'point' for scatter plots",
                    "Use 'bar' for bar charts",
                    "Use 'line' for line charts",
                    "Use 'geoshape' for maps",
                ],
            )
        ]

    def _validate_channels(self, spec: Vegalite) -> List[ValidationIssue]:
        errors = []
        if spec.encoding is None:
            return errors
        for name, channel in spec.encoding.channels().items():
            if not channel.is_field_less():
                continue
            if channel.aggregate == NonArgAggregateOp.COUNT:
                continue
            if getattr(channel, "value", None) is not None:
                continue
            errors.append(
                ValidationIssue(
                    field=f"encoding.{name}",
                    message=f"Channel '{name}' has neither a field, a count aggregate nor a value",
                    expected="field, aggregate='count', or value",
                    suggestions=[
                        "Set field to a column of the data",
                        "Use aggregate='count' to count records",
                    ],
                )
            )
        return errors

    def _validate_scales(self, spec: Vegalite) -> List[ValidationIssue]:
        errors = []
        if spec.encoding is None:
            return errors
        for name, channel in spec.encoding.channels().items():
            scale = getattr(channel, "scale", None)
            if scale is None or scale.domain is None or not isinstance(scale.range, list):
                continue
            if len(scale.domain) != len(scale.range):
                errors.append(
                    ValidationIssue(
                        field=f"encoding.{name}.scale",
                        message=(
                            f"Scale domain and range must have the same length. "
                            f"Domain has {len(scale.domain)} values, range has {len(scale.range)}"
                        ),
                        expected="Lists of equal length",
                    )
                )
        return errors

    def _validate_colors(self, spec: Vegalite) -> List[ValidationIssue]:
        """Basic color format validation for mark colors and color scales."""
        candidates: List[tuple[str, str]] = []
        if isinstance(spec.mark, MarkDef) and spec.mark.color is not None:
            candidates.append(("mark.color", spec.mark.color))
        if spec.encoding is not None:
            for name in ("color", "fill", "stroke"):
                channel = getattr(spec.encoding, name)
                if channel is None:
                    continue
                if isinstance(channel.value, str):
                    candidates.append((f"encoding.{name}.value", channel.value))
                if channel.scale is not None and isinstance(channel.scale.range, list):
                    for i, color in enumerate(channel.scale.range):
                        if isinstance(color, str):
                            candidates.append((f"encoding.{name}.scale.range[{i}]", color))

        errors = []
        for field, color in candidates:
            if is_valid_color(color):
                continue
            errors.append(
                ValidationIssue(
                    field=field,
                    message=f"Invalid color format '{color}'",
                    received_value=color,
                    expected="CSS color name, hex (#RRGGBB), rgb(a)(...) or hsl(a)(...)",
                    suggestions=[
                        "Use hex (#FF5733), rgb(255,87,51), or color name (red, blue, etc.)"
                    ],
                )
            )
        return errors

    def _validate_topojson(self, spec: Vegalite) -> List[ValidationIssue]:
        """TopoJSON sources must name the object to extract."""
        sources = [("data", spec.data)]
        for i, transform in enumerate(spec.transform or []):
            if isinstance(transform, LookupTransform):
                sources.append((f"transform[{i}].from.data", transform.from_.data))

        errors = []
        for field, data in sources:
            if data is None or data.format is None:
                continue
            fmt = data.format
            if fmt.type != DataFormatType.TOPOJSON or fmt.feature or fmt.mesh:
                continue
            errors.append(
                ValidationIssue(
                    field=f"{field}.format",
                    message="TopoJSON data must name a feature or mesh to extract",
                    expected="format.feature or format.mesh",
                    suggestions=["Example: DataFormat(type='topojson', feature='counties')"],
                )
            )
        return errors

    def _derived_fields(self, spec: Vegalite) -> Set[str]:
        derived: Set[str] = set()
        for transform in spec.transform or []:
            if isinstance(transform, LookupTransform):
                derived.update(transform.output_fields())
            elif isinstance(transform, CalculateTransform):
                derived.add(transform.as_)
        return derived

    def _validate_inline_fields(self, spec: Vegalite) -> List[ValidationIssue]:
        errors = []
        if not isinstance(spec.data, InlineData) or spec.encoding is None:
            return errors
        available = spec.data.field_names()
        if not available:
            return errors
        available |= self._derived_fields(spec)

        for name, channel in spec.encoding.channels().items():
            field = self._field_root(channel)
            if field is None or field in available:
                continue
            errors.append(
                ValidationIssue(
                    field=f"encoding.{name}.field",
                    message=f"Field '{channel.field}' is not present in the inline data",
                    received_value=channel.field,
                    expected=f"One of: {', '.join(sorted(available))}",
                    suggestions=["Check the column name spelling and case"],
                )
            )
        return errors

    @staticmethod
    def _field_root(channel: FieldDef) -> Optional[str]:
        # Nested access ("a.b") is resolved by the renderer from the top-level key
        if channel.field is None:
            return None
        return channel.field.split(".", 1)[0]

    def _validate_row_count(self, spec: Vegalite) -> List[ValidationIssue]:
        if mark_type(spec.mark) != Mark.LINE or not isinstance(spec.data, InlineData):
            return []
        if spec.transform:
            # Filters may reduce the rows; leave the final count to the renderer
            return []
        rows = spec.data.row_count()
        if rows >= 2:
            return []
        return [
            ValidationIssue(
                field="data.values",
                message="Line charts require at least 2 data points",
                received_value=rows,
                expected="At least 2 rows",
                suggestions=["Use 'point' mark for single points"],
            )
        ]
