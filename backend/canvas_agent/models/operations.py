"""Argument schemas for every canvas operation the planner may call.

Every args model is closed (undeclared fields fail) and repeats its own tool
name in ``tool``. The batch tool carries a list of create/update/delete
sub-operations discriminated on ``type``; create descriptors are themselves
discriminated on the shape ``type``.

Partial updates: a field that is absent means "no change". An explicit null on
a resettable style field (see ``RESETTABLE_FIELDS``) resets it to the store
default; on any other field it also means "no change".
"""

from __future__ import annotations

from typing import Annotated, Any, Literal, Union

from pydantic import Field, StringConstraints, model_validator

from canvas_agent.canvas.constants import (
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    DEFAULT_FONT_SIZE,
    MAX_SHAPES,
)
from canvas_agent.canvas.geometry import circle_box, estimate_text_size, line_box, rect_box, text_box
from canvas_agent.models.base import NullMeansDefault, StrictModel
from canvas_agent.models.shapes import ShapeSeed, ShapeType

HEX_COLOR_PATTERN = r"^#([0-9a-fA-F]{3}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$"

HexColor = Annotated[str, StringConstraints(pattern=HEX_COLOR_PATTERN)]
ShapeId = Annotated[str, StringConstraints(min_length=1, max_length=200)]
Coord = Annotated[float, Field(ge=0, le=CANVAS_WIDTH)]
Dimension = Annotated[float, Field(ge=10, le=1000)]
Extent = Annotated[float, Field(gt=0, le=CANVAS_WIDTH)]
Radius = Annotated[float, Field(ge=5, le=500)]
FontSize = Annotated[float, Field(ge=8, le=500)]
Angle = Annotated[float, Field(ge=0, le=360)]
Opacity = Annotated[float, Field(ge=0, le=1)]
CornerRadius = Annotated[float, Field(ge=0, le=50)]
StrokeWidth = Annotated[float, Field(ge=1, le=20)]
TextContent = Annotated[str, StringConstraints(min_length=1, max_length=500)]
Label = Annotated[str, StringConstraints(min_length=1, max_length=100)]
Delta = Annotated[float, Field(ge=-CANVAS_WIDTH, le=CANVAS_WIDTH)]
Scale = Annotated[float, Field(ge=0.1, le=10)]

Size = Literal["small", "normal", "large"]
Style = Literal["modern", "minimal", "bold"]

# Null on these resets the attribute; null anywhere else is "no change"
RESETTABLE_FIELDS = frozenset({"fill", "stroke", "stroke_width", "opacity", "corner_radius", "rotation"})

_ADDRESSING_FIELDS = {"tool", "shape_id"}


def _check_text_fits(text: str, font_size: float) -> None:
    width, height = estimate_text_size(text, font_size)
    if width > CANVAS_WIDTH or height > CANVAS_HEIGHT:
        raise ValueError(
            f"text is too large for the canvas at fontSize {font_size:g} "
            f"(estimated {width:.0f}x{height:.0f})"
        )


def _check_line_length(x1: float, y1: float, x2: float, y2: float) -> None:
    if x1 == x2 and y1 == y2:
        raise ValueError("line endpoints must differ")


def _check_extent(right: float, bottom: float, what: str) -> None:
    if right > CANVAS_WIDTH or bottom > CANVAS_HEIGHT:
        raise ValueError(
            f"{what} would extend to ({right:g}, {bottom:g}), past the "
            f"{CANVAS_WIDTH}x{CANVAS_HEIGHT} canvas"
        )


# ---------------------------------------------------------------------------
# Create descriptors (batch sub-operations)
# ---------------------------------------------------------------------------

class _Descriptor(StrictModel):
    fill: HexColor | None = None
    opacity: Opacity | None = None
    rotation: Angle | None = None

    def _style(self) -> dict[str, Any]:
        return {"fill": self.fill, "opacity": self.opacity, "rotation": self.rotation}


class RectangleDescriptor(_Descriptor):
    """Rectangle positioned by its top-left corner."""

    type: Literal["rectangle"]
    x: Coord
    y: Coord
    width: Extent
    height: Extent
    stroke: HexColor | None = None
    stroke_width: StrokeWidth | None = None
    corner_radius: CornerRadius | None = None

    def to_seed(self) -> ShapeSeed:
        return ShapeSeed(
            type="rectangle",
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            stroke=self.stroke,
            stroke_width=self.stroke_width,
            corner_radius=self.corner_radius,
            **self._style(),
        )


class CircleDescriptor(_Descriptor):
    """Circle positioned by its centre."""

    type: Literal["circle"]
    x: Coord
    y: Coord
    radius: Radius
    stroke: HexColor | None = None
    stroke_width: StrokeWidth | None = None

    def to_seed(self) -> ShapeSeed:
        return ShapeSeed(
            type="circle",
            stroke=self.stroke,
            stroke_width=self.stroke_width,
            **circle_box(self.x, self.y, self.radius),
            **self._style(),
        )


class TextDescriptor(_Descriptor):
    """Single-line text positioned by its centre. The box is estimated from content."""

    type: Literal["text"]
    x: Coord
    y: Coord
    text: TextContent
    font_size: FontSize | None = None

    @model_validator(mode="after")
    def _fits_canvas(self) -> TextDescriptor:
        _check_text_fits(self.text, self.font_size or DEFAULT_FONT_SIZE)
        return self

    def to_seed(self) -> ShapeSeed:
        font_size = self.font_size or DEFAULT_FONT_SIZE
        style = self._style()
        style["fill"] = style["fill"] or "#000000"
        return ShapeSeed(
            type="text",
            text=self.text,
            font_size=font_size,
            **text_box(self.x, self.y, self.text, font_size),
            **style,
        )


class LineDescriptor(_Descriptor):
    type: Literal["line"]
    x1: Coord
    y1: Coord
    x2: Coord
    y2: Coord
    stroke: HexColor | None = None
    stroke_width: StrokeWidth | None = None

    @model_validator(mode="after")
    def _has_length(self) -> LineDescriptor:
        _check_line_length(self.x1, self.y1, self.x2, self.y2)
        return self

    def to_seed(self) -> ShapeSeed:
        stroke = self.stroke or self.fill
        style = self._style()
        style["fill"] = stroke
        return ShapeSeed(
            type="line",
            stroke=stroke,
            stroke_width=self.stroke_width,
            **line_box(self.x1, self.y1, self.x2, self.y2),
            **style,
        )


ShapeDescriptor = Annotated[
    Union[RectangleDescriptor, CircleDescriptor, TextDescriptor, LineDescriptor],
    Field(discriminator="type"),
]


# ---------------------------------------------------------------------------
# Partial update maps
# ---------------------------------------------------------------------------

class BulkUpdates(StrictModel):
    """Fields that may be set to the same value on many shapes at once."""

    fill: HexColor | None = None
    stroke: HexColor | None = None
    stroke_width: StrokeWidth | None = None
    opacity: Opacity | None = None
    corner_radius: CornerRadius | None = None
    width: Dimension | None = None
    height: Dimension | None = None
    font_size: FontSize | None = None
    text: TextContent | None = None

    def changes(self) -> dict[str, Any]:
        """Requested changes keyed by stored attribute name.

        Only fields the caller actually sent are returned. Nulls survive for
        resettable fields and are dropped everywhere else.
        """
        data = self.model_dump(exclude_unset=True, exclude=_ADDRESSING_FIELDS)
        return {k: v for k, v in data.items() if v is not None or k in RESETTABLE_FIELDS}


class ShapeUpdates(BulkUpdates):
    """Full partial-update map for a single shape inside a batch."""

    x: Coord | None = None
    y: Coord | None = None
    radius: Radius | None = None
    rotation: Angle | None = None


# ---------------------------------------------------------------------------
# Batch sub-operations
# ---------------------------------------------------------------------------

class CreateOp(StrictModel):
    type: Literal["create"]
    shape: ShapeDescriptor


class UpdateOp(StrictModel):
    type: Literal["update"]
    shape_id: ShapeId
    updates: ShapeUpdates


class DeleteOp(StrictModel):
    type: Literal["delete"]
    shape_id: ShapeId


BatchOperation = Annotated[Union[CreateOp, UpdateOp, DeleteOp], Field(discriminator="type")]


# ---------------------------------------------------------------------------
# Primitive creation
# ---------------------------------------------------------------------------

class CreateRectangleArgs(StrictModel):
    tool: Literal["create_rectangle"]
    x: Coord = Field(..., description="Centre x")
    y: Coord = Field(..., description="Centre y")
    width: Dimension
    height: Dimension
    fill: HexColor | None = None
    corner_radius: CornerRadius | None = None

    def to_seed(self) -> ShapeSeed:
        return ShapeSeed(
            type="rectangle",
            fill=self.fill,
            corner_radius=self.corner_radius,
            **rect_box(self.x, self.y, self.width, self.height),
        )


class CreateCircleArgs(StrictModel):
    tool: Literal["create_circle"]
    x: Coord = Field(..., description="Centre x")
    y: Coord = Field(..., description="Centre y")
    radius: Radius
    fill: HexColor | None = None

    def to_seed(self) -> ShapeSeed:
        return ShapeSeed(type="circle", fill=self.fill, **circle_box(self.x, self.y, self.radius))


class CreateTextArgs(StrictModel):
    tool: Literal["create_text"]
    x: Coord = Field(..., description="Centre x")
    y: Coord = Field(..., description="Centre y")
    text: TextContent
    font_size: FontSize | None = None
    fill: HexColor | None = None

    @model_validator(mode="after")
    def _fits_canvas(self) -> CreateTextArgs:
        _check_text_fits(self.text, self.font_size or DEFAULT_FONT_SIZE)
        return self

    def to_seed(self) -> ShapeSeed:
        font_size = self.font_size or DEFAULT_FONT_SIZE
        return ShapeSeed(
            type="text",
            text=self.text,
            font_size=font_size,
            fill=self.fill or "#000000",
            **text_box(self.x, self.y, self.text, font_size),
        )


class CreateLineArgs(StrictModel):
    tool: Literal["create_line"]
    x1: Coord
    y1: Coord
    x2: Coord
    y2: Coord
    stroke: HexColor | None = None
    stroke_width: StrokeWidth | None = None

    @model_validator(mode="after")
    def _has_length(self) -> CreateLineArgs:
        _check_line_length(self.x1, self.y1, self.x2, self.y2)
        return self

    def to_seed(self) -> ShapeSeed:
        return ShapeSeed(
            type="line",
            stroke=self.stroke,
            fill=self.stroke,
            stroke_width=self.stroke_width or 2,
            **line_box(self.x1, self.y1, self.x2, self.y2),
        )


# ---------------------------------------------------------------------------
# Single-shape modification
# ---------------------------------------------------------------------------

class UpdateShapeArgs(BulkUpdates):
    tool: Literal["update_shape"]
    shape_id: ShapeId
    radius: Radius | None = None


class MoveShapeArgs(StrictModel):
    """Move by setting the top-left corner. Either axis may be left out."""

    tool: Literal["move_shape"]
    shape_id: ShapeId
    x: Coord | None = None
    y: Coord | None = None


class ResizeShapeArgs(StrictModel):
    tool: Literal["resize_shape"]
    shape_id: ShapeId
    width: Dimension | None = None
    height: Dimension | None = None


class RotateShapeArgs(StrictModel):
    tool: Literal["rotate_shape"]
    shape_id: ShapeId
    rotation: Angle


class DeleteShapeArgs(StrictModel):
    tool: Literal["delete_shape"]
    shape_id: ShapeId


# ---------------------------------------------------------------------------
# Batch
# ---------------------------------------------------------------------------

class BatchOperationsArgs(StrictModel):
    tool: Literal["batch_operations"]
    operations: Annotated[list[BatchOperation], Field(min_length=1, max_length=100)]


class BatchUpdateShapesArgs(StrictModel):
    """Same absolute updates plus relative deltas/scales applied to every listed shape."""

    tool: Literal["batch_update_shapes"]
    shape_ids: Annotated[list[ShapeId], Field(min_length=1, max_length=MAX_SHAPES)]
    updates: BulkUpdates | None = None
    delta_x: Delta | None = None
    delta_y: Delta | None = None
    delta_rotation: Annotated[float, Field(ge=-360, le=360)] | None = None
    scale_x: Scale | None = None
    scale_y: Scale | None = None


# ---------------------------------------------------------------------------
# Patterns and utilities
# ---------------------------------------------------------------------------

class CreateGridArgs(NullMeansDefault):
    tool: Literal["create_grid"]
    rows: Annotated[int, Field(ge=1, le=20)]
    cols: Annotated[int, Field(ge=1, le=20)]
    start_x: Coord = 500
    start_y: Coord = 500
    cell_width: Annotated[float, Field(ge=20, le=200)] = 80
    cell_height: Annotated[float, Field(ge=20, le=200)] = 80
    spacing: Annotated[float, Field(ge=0, le=50)] = 10
    fill: HexColor = "#3B82F6"

    @model_validator(mode="after")
    def _fits_canvas(self) -> CreateGridArgs:
        right = self.start_x + self.cols * self.cell_width + (self.cols - 1) * self.spacing
        bottom = self.start_y + self.rows * self.cell_height + (self.rows - 1) * self.spacing
        _check_extent(right, bottom, "grid")
        return self


class CreateRowArgs(NullMeansDefault):
    tool: Literal["create_row"]
    count: Annotated[int, Field(ge=2, le=50)]
    start_x: Coord = 500
    start_y: Coord = 2500
    width: Annotated[float, Field(ge=20, le=200)] = 80
    height: Annotated[float, Field(ge=20, le=200)] = 80
    spacing: Annotated[float, Field(ge=0, le=100)] = 20
    fill: HexColor = "#3B82F6"

    @model_validator(mode="after")
    def _fits_canvas(self) -> CreateRowArgs:
        right = self.start_x + self.count * self.width + (self.count - 1) * self.spacing
        _check_extent(right, self.start_y + self.height, "row")
        return self


class CreateCircleRowArgs(NullMeansDefault):
    tool: Literal["create_circle_row"]
    count: Annotated[int, Field(ge=2, le=50)]
    start_x: Coord = Field(500, description="Centre x of the first circle")
    start_y: Coord = Field(2500, description="Centre y of every circle")
    radius: Annotated[float, Field(ge=10, le=100)] = 40
    spacing: Annotated[float, Field(ge=0, le=200)] = Field(20, description="Gap between neighbouring circles")
    fill: HexColor = "#3B82F6"

    @model_validator(mode="after")
    def _fits_canvas(self) -> CreateCircleRowArgs:
        right = self.start_x + (self.count - 1) * (2 * self.radius + self.spacing) + self.radius
        _check_extent(right, self.start_y + self.radius, "circle row")
        if self.start_x < self.radius or self.start_y < self.radius:
            raise ValueError("first circle would extend past the top-left of the canvas")
        return self


class ClearCanvasArgs(StrictModel):
    tool: Literal["clear_canvas"]


class AddRandomShapesArgs(NullMeansDefault):
    tool: Literal["add_random_shapes"]
    count: Annotated[int, Field(ge=1, le=MAX_SHAPES)]
    types: Annotated[list[ShapeType], Field(min_length=1)] = Field(
        default_factory=lambda: ["rectangle", "circle", "text", "line"]
    )
    balanced: bool = True


# ---------------------------------------------------------------------------
# UI templates (unset fields come from the template's own defaults)
# ---------------------------------------------------------------------------

class LoginTemplateArgs(NullMeansDefault):
    tool: Literal["use_login_template"]
    primary_color: HexColor | None = None
    size: Size | None = None
    style: Style | None = None
    fields: Annotated[
        list[Literal["email", "username", "password", "phone", "name"]], Field(min_length=1, max_length=5)
    ] | None = None
    social_providers: list[Literal["google", "facebook", "twitter", "github"]] | None = None
    title_text: Label | None = None
    subtitle_text: Label | None = None
    button_text: Label | None = None


class NavbarTemplateArgs(NullMeansDefault):
    tool: Literal["use_navbar_template"]
    primary_color: HexColor | None = None
    background_color: HexColor | None = None
    items: Annotated[list[Label], Field(min_length=1, max_length=12)] | None = None
    item_count: Annotated[int, Field(ge=1, le=12)] | None = None
    logo_text: Label | None = None
    height: Annotated[float, Field(ge=40, le=200)] | None = None
    size: Size | None = None
    style: Style | None = None


class CardTemplateArgs(NullMeansDefault):
    tool: Literal["use_card_template"]
    primary_color: HexColor | None = None
    style: Style | None = None
    size: Size | None = None
    title_text: Label | None = None
    button_text: Label | None = None
    image_aspect_ratio: Literal["16:9", "4:3", "1:1", "square"] | None = None
    has_image: bool | None = None
    has_title: bool | None = None
    has_description: bool | None = None
    has_button: bool | None = None
