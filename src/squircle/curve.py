import math
from dataclasses import dataclass

from .log import logger_wrapper

logger = logger_wrapper("Curve")


@dataclass(frozen=True)
class CornerParams:
    radius: float
    smoothing: float
    preserve_smoothing: bool
    rounding_and_smoothing_budget: float


@dataclass(frozen=True)
class CornerPathParams:
    """Control distances of one smoothed corner.

    Seen from the top-right corner, the corner starts `p` before the end of
    the top side, runs a cubic curve with control points at `far` and
    `far + near` along the side, then a circular arc spanning
    `arc_section_length` on both axes, then the mirrored cubic curve down
    the right side. The first curve ends at (`far + near + mid`, `offset`).

    Attributes:
        far: from the corner start to the first control point.
        near: between the two control points.
        mid: from the second control point to the arc, along the side.
        offset: from the side to the arc, across the side.
        p: total length the corner takes from each adjacent side.
        radius: radius of the circular arc, 0 for a sharp corner.
        arc_section_length: chord of the arc projected on either axis.
    """
    far: float
    near: float
    mid: float
    offset: float
    p: float
    radius: float
    arc_section_length: float

    @property
    def is_rounded(self) -> bool:
        return self.radius > 0


SHARP_CORNER = CornerPathParams(far=0,
                                near=0,
                                mid=0,
                                offset=0,
                                p=0,
                                radius=0,
                                arc_section_length=0)


# Figma's article on squircles:
#   https://www.figma.com/blog/desperately-seeking-squircles/
# and the approximation by MartinRGB:
#   https://github.com/MartinRGB/Figma_Squircles_Approximation
def get_path_params_for_corner(params: CornerParams) -> CornerPathParams:
    """Derive the control distances for a single corner.

    With `preserve_smoothing` off, the smoothing is reduced until the corner
    fits in its budget. With it on, the requested smoothing shapes the arc
    and only the outer control points are pulled in when space runs out.
    """
    radius = params.radius
    smoothing = params.smoothing
    budget = params.rounding_and_smoothing_budget

    if radius == 0:
        return SHARP_CORNER

    # figure 12.2 of the article, q = R since the corner turns 90 degrees
    p = (1 + smoothing) * radius

    if not params.preserve_smoothing:
        max_smoothing = budget / radius - 1
        smoothing = min(smoothing, max_smoothing)
        p = min(p, budget)

    arc_measure = 90 * (1 - smoothing)
    arc_section_length = (math.sin(math.radians(arc_measure / 2)) * radius *
                          math.sqrt(2))

    # distance between P3 and P4
    angle_alpha = (90 - arc_measure) / 2
    p3_to_p4_distance = radius * math.tan(math.radians(angle_alpha / 2))

    # figure 11.1 of the article
    angle_beta = math.radians(45 * smoothing)
    mid = p3_to_p4_distance * math.cos(angle_beta)
    offset = mid * math.tan(angle_beta)

    near = (p - arc_section_length - mid - offset) / 3
    far = 2 * near

    if params.preserve_smoothing and p > budget:
        p1_to_p3_max_distance = budget - offset - arc_section_length - mid

        # keep P1 and P2 apart so the curve does not kink
        min_far = p1_to_p3_max_distance / 6
        max_near = p1_to_p3_max_distance - min_far

        near = min(near, max_near)
        far = p1_to_p3_max_distance - near
        p = min(p, budget)

    logger.trace(f"radius {radius}, smoothing {smoothing}: p={p}, "
                 f"arc={arc_section_length}, far={far}, near={near}, "
                 f"mid={mid}, offset={offset}")
    return CornerPathParams(far=far,
                            near=near,
                            mid=mid,
                            offset=offset,
                            p=p,
                            radius=radius,
                            arc_section_length=arc_section_length)
