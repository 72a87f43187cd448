from .config import Settings
from .corner import Adjacent, Corner, Side, get_adjacents
from .curve import (SHARP_CORNER, CornerParams, CornerPathParams,
                    get_path_params_for_corner)
from .distribute import (NormalizedCorner, NormalizedCorners,
                         RoundedRectangle, distribute_and_normalize)
from .draw import (draw_corner, get_path_from_path_params,
                   get_svg_path_from_path_params)
from .exception import PathSyntaxError, SquircleError
from .params import SquircleOptions, SquircleParams
from .path import (ArcTo, ClosePath, CubicTo, LineTo, MoveTo, Path,
                   PathCommand)
from .squircle import get_path, get_svg_path

__all__ = [
    "SHARP_CORNER",
    "Adjacent",
    "ArcTo",
    "ClosePath",
    "Corner",
    "CornerParams",
    "CornerPathParams",
    "CubicTo",
    "LineTo",
    "MoveTo",
    "NormalizedCorner",
    "NormalizedCorners",
    "Path",
    "PathCommand",
    "PathSyntaxError",
    "RoundedRectangle",
    "Settings",
    "Side",
    "SquircleError",
    "SquircleOptions",
    "SquircleParams",
    "distribute_and_normalize",
    "draw_corner",
    "get_adjacents",
    "get_path",
    "get_path_from_path_params",
    "get_path_params_for_corner",
    "get_svg_path",
    "get_svg_path_from_path_params",
]
