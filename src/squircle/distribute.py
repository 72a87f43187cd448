from dataclasses import dataclass

from .corner import Adjacent, Corner, get_adjacents
from .log import logger_wrapper
from .typing import Undefined, undefined

logger = logger_wrapper("Distribute")


@dataclass(frozen=True)
class RoundedRectangle:
    width: float
    height: float
    top_left_corner_radius: float
    top_right_corner_radius: float
    bottom_right_corner_radius: float
    bottom_left_corner_radius: float

    def radius(self, corner: Corner) -> float:
        return getattr(self, f"{corner.value}_corner_radius")

    @property
    def radii(self) -> dict[Corner, float]:
        return {corner: self.radius(corner) for corner in Corner}


@dataclass(frozen=True)
class NormalizedCorner:
    """A corner radius that fits the rectangle.

    Attributes:
        radius: clamped radius, never above the raw radius or the budget.
        rounding_and_smoothing_budget: how far along each adjacent side the
            corner (arc and smoothing curves) may reach.
    """
    radius: float
    rounding_and_smoothing_budget: float


@dataclass(frozen=True)
class NormalizedCorners:
    top_left: NormalizedCorner
    top_right: NormalizedCorner
    bottom_left: NormalizedCorner
    bottom_right: NormalizedCorner

    def __getitem__(self, corner: Corner) -> NormalizedCorner:
        return getattr(self, corner.value)


def distribute_and_normalize(
        rectangle: RoundedRectangle) -> NormalizedCorners:
    """Split the sides of `rectangle` between the corners sharing them.

    Corners are visited from the largest radius to the smallest. A corner
    whose neighbour along a side has not been visited yet gets a share of
    that side proportional to the two radii; otherwise it gets whatever the
    neighbour left over. The corner keeps the smaller of its two shares.
    """
    budget: dict[Corner, float | Undefined] = {
        corner: undefined
        for corner in Corner
    }
    radius_map = rectangle.radii

    # stable, so equal radii keep the TL, TR, BL, BR order
    items = sorted(radius_map.items(), key=lambda item: item[1], reverse=True)

    for corner, radius in items:

        def calc_budget(adjacent: Adjacent) -> float:
            adjacent_radius = radius_map[adjacent.corner]
            if radius == 0 and adjacent_radius == 0:
                return 0

            side_length = adjacent.side.length(rectangle.width,
                                               rectangle.height)
            adjacent_budget = budget[adjacent.corner]
            # the neighbour already took its share, take the rest
            if not isinstance(adjacent_budget, Undefined):
                return side_length - adjacent_budget
            return radius / (radius + adjacent_radius) * side_length

        adjacent1, adjacent2 = get_adjacents(corner)
        corner_budget = min(calc_budget(adjacent1), calc_budget(adjacent2))

        budget[corner] = corner_budget
        radius_map[corner] = min(radius, corner_budget)
        logger.trace(f"{corner.name}: radius {radius} -> "
                     f"{radius_map[corner]}, budget {corner_budget}")

    def normalized(corner: Corner) -> NormalizedCorner:
        corner_budget = budget[corner]
        assert not isinstance(corner_budget, Undefined)
        return NormalizedCorner(radius=radius_map[corner],
                                rounding_and_smoothing_budget=corner_budget)

    return NormalizedCorners(
        top_left=normalized(Corner.TOP_LEFT),
        top_right=normalized(Corner.TOP_RIGHT),
        bottom_left=normalized(Corner.BOTTOM_LEFT),
        bottom_right=normalized(Corner.BOTTOM_RIGHT),
    )
