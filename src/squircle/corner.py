from enum import Enum
from typing import NamedTuple


class Corner(Enum):
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"


class Side(Enum):
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"

    def length(self, width: float, height: float) -> float:
        if self in (Side.TOP, Side.BOTTOM):
            return width
        return height


class Adjacent(NamedTuple):

    corner: Corner
    side: Side


# yapf: disable
_ADJACENTS: dict[Corner, tuple[Adjacent, Adjacent]] = {
    Corner.TOP_LEFT: (Adjacent(Corner.TOP_RIGHT, Side.TOP),
                      Adjacent(Corner.BOTTOM_LEFT, Side.LEFT)),
    Corner.TOP_RIGHT: (Adjacent(Corner.TOP_LEFT, Side.TOP),
                       Adjacent(Corner.BOTTOM_RIGHT, Side.RIGHT)),
    Corner.BOTTOM_LEFT: (Adjacent(Corner.BOTTOM_RIGHT, Side.BOTTOM),
                         Adjacent(Corner.TOP_LEFT, Side.LEFT)),
    Corner.BOTTOM_RIGHT: (Adjacent(Corner.BOTTOM_LEFT, Side.BOTTOM),
                          Adjacent(Corner.TOP_RIGHT, Side.RIGHT)),
}
# yapf: enable


def get_adjacents(corner: Corner) -> tuple[Adjacent, Adjacent]:
    """The two corners sharing a side with `corner`, with that side."""
    return _ADJACENTS[corner]
