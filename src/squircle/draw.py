from .corner import Corner
from .curve import CornerPathParams
from .path import ArcTo, ClosePath, CubicTo, LineTo, MoveTo, Path, PathCommand

# quarter turns from the top-right corner, walking clockwise
_TURNS: dict[Corner, int] = {
    Corner.TOP_RIGHT: 0,
    Corner.BOTTOM_RIGHT: 1,
    Corner.BOTTOM_LEFT: 2,
    Corner.TOP_LEFT: 3,
}


def _top_right_corner(params: CornerPathParams) -> list[PathCommand]:
    """Relative commands for a top-right corner, entered along the top."""
    if not params.is_rounded:
        return [LineTo(params.p, 0, relative=True)]

    a, b, c, d = params.far, params.near, params.mid, params.offset
    radius = params.radius
    arc = params.arc_section_length
    return [
        CubicTo(a, 0, a + b, 0, a + b + c, d, relative=True),
        ArcTo(radius, radius, 0, False, True, arc, arc, relative=True),
        CubicTo(d, c, d, b + c, d, a + b + c, relative=True),
    ]


def draw_corner(corner: Corner,
                params: CornerPathParams) -> list[PathCommand]:
    """Relative commands for `corner`, following the outline clockwise.

    A sharp corner is a line of length `p` (which is 0), so every corner
    moves the pen by `p` along both sides it touches.
    """
    turns = _TURNS[corner]
    return [cmd.rotate_quarter(turns) for cmd in _top_right_corner(params)]


def get_path_from_path_params(
    width: float,
    height: float,
    top_left: CornerPathParams,
    top_right: CornerPathParams,
    bottom_right: CornerPathParams,
    bottom_left: CornerPathParams,
) -> Path:
    return Path([
        MoveTo(width - top_right.p, 0),
        *draw_corner(Corner.TOP_RIGHT, top_right),
        LineTo(width, height - bottom_right.p),
        *draw_corner(Corner.BOTTOM_RIGHT, bottom_right),
        LineTo(bottom_left.p, height),
        *draw_corner(Corner.BOTTOM_LEFT, bottom_left),
        LineTo(0, top_left.p),
        *draw_corner(Corner.TOP_LEFT, top_left),
        ClosePath(),
    ])


def get_svg_path_from_path_params(
    width: float,
    height: float,
    top_left: CornerPathParams,
    top_right: CornerPathParams,
    bottom_right: CornerPathParams,
    bottom_left: CornerPathParams,
    precision: int | None = None,
) -> str:
    return get_path_from_path_params(width, height, top_left, top_right,
                                     bottom_right,
                                     bottom_left).to_svg(precision)
