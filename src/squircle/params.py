from pydantic import BaseModel, ConfigDict
from typing_extensions import Required, TypedDict

from .distribute import RoundedRectangle


class SquircleOptions(TypedDict, total=False):
    """
    Keyword options accepted by `get_svg_path` and `get_path`.

    Attributes:
        width (float): width of the rectangle.
        height (float): height of the rectangle.
        corner_smoothing (float):
            0 draws plain circular corners, 1 the smoothest corners.
            Larger values exaggerate the effect.
        corner_radius (float):
            radius used by every corner without its own radius, default 0.
        top_left_corner_radius (float): overrides `corner_radius`.
        top_right_corner_radius (float): overrides `corner_radius`.
        bottom_right_corner_radius (float): overrides `corner_radius`.
        bottom_left_corner_radius (float): overrides `corner_radius`.
        preserve_smoothing (bool):
            keep the requested smoothing when a corner runs out of room,
            only pulling in its outer control points. Default False.
    """
    width: Required[float]
    height: Required[float]
    corner_smoothing: Required[float]
    corner_radius: float
    top_left_corner_radius: float | None
    top_right_corner_radius: float | None
    bottom_right_corner_radius: float | None
    bottom_left_corner_radius: float | None
    preserve_smoothing: bool


class SquircleParams(BaseModel):

    model_config = ConfigDict(frozen=True, extra="forbid")

    width: float
    height: float
    corner_smoothing: float
    corner_radius: float = 0
    top_left_corner_radius: float | None = None
    top_right_corner_radius: float | None = None
    bottom_right_corner_radius: float | None = None
    bottom_left_corner_radius: float | None = None
    preserve_smoothing: bool = False

    def _or_default(self, radius: float | None) -> float:
        return self.corner_radius if radius is None else radius

    def to_rectangle(self) -> RoundedRectangle:
        """Resolve unset corner radii against `corner_radius`."""
        return RoundedRectangle(
            width=self.width,
            height=self.height,
            top_left_corner_radius=self._or_default(
                self.top_left_corner_radius),
            top_right_corner_radius=self._or_default(
                self.top_right_corner_radius),
            bottom_right_corner_radius=self._or_default(
                self.bottom_right_corner_radius),
            bottom_left_corner_radius=self._or_default(
                self.bottom_left_corner_radius),
        )
