from typing_extensions import Unpack

from .corner import Corner
from .curve import CornerParams, get_path_params_for_corner
from .distribute import distribute_and_normalize
from .draw import get_path_from_path_params
from .log import logger_wrapper
from .params import SquircleOptions, SquircleParams
from .path import Path

logger = logger_wrapper("Squircle")


def _resolve(params: SquircleParams | None,
             options: SquircleOptions) -> SquircleParams:
    if params is None:
        return SquircleParams.model_validate(options)
    if options:
        return SquircleParams.model_validate({
            **params.model_dump(),
            **options
        })
    return params


def get_path(params: SquircleParams | None = None,
             /,
             **options: Unpack[SquircleOptions]) -> Path:
    """Outline of a rectangle with smoothed corners.

    Either pass a `SquircleParams`, keyword options, or both (options
    override the fields of `params`).

    Returns:
        Path: a closed clockwise outline starting on the top side.
    """
    params = _resolve(params, options)
    rectangle = params.to_rectangle()
    width, height = rectangle.width, rectangle.height
    radii = rectangle.radii

    if len(set(radii.values())) == 1:
        budget = min(width, height) / 2
        radius = min(rectangle.top_left_corner_radius, budget)
        logger.debug(f"uniform radius {radius}, budget {budget}")
        path_params = get_path_params_for_corner(
            CornerParams(radius=radius,
                         smoothing=params.corner_smoothing,
                         preserve_smoothing=params.preserve_smoothing,
                         rounding_and_smoothing_budget=budget))
        return get_path_from_path_params(width, height, path_params,
                                         path_params, path_params,
                                         path_params)

    corners = distribute_and_normalize(rectangle)
    corner_params = {
        corner: get_path_params_for_corner(
            CornerParams(radius=corners[corner].radius,
                         smoothing=params.corner_smoothing,
                         preserve_smoothing=params.preserve_smoothing,
                         rounding_and_smoothing_budget=corners[corner].
                         rounding_and_smoothing_budget))
        for corner in Corner
    }
    return get_path_from_path_params(
        width,
        height,
        top_left=corner_params[Corner.TOP_LEFT],
        top_right=corner_params[Corner.TOP_RIGHT],
        bottom_right=corner_params[Corner.BOTTOM_RIGHT],
        bottom_left=corner_params[Corner.BOTTOM_LEFT],
    )


def get_svg_path(params: SquircleParams | None = None,
                 /,
                 **options: Unpack[SquircleOptions]) -> str:
    """SVG path data of `get_path`, see `Path.to_svg`."""
    return get_path(params, **options).to_svg()
