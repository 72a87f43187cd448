from __future__ import annotations

import math
import re
from dataclasses import dataclass, fields, replace
from typing import ClassVar, Iterable, Iterator, Sequence

import numpy as np
import numpy.typing as npt

from .config import Settings
from .exception import PathSyntaxError
from .typing import Point


def format_number(value: float, precision: int) -> str:
    text = f"{value:.{precision}f}"
    # -0.0000 -> 0.0000
    if float(text) == 0:
        return f"{0:.{precision}f}"
    return text


@dataclass(frozen=True)
class PathCommand:

    letter: ClassVar[str]
    # (x field, y field) of every point the command carries
    point_fields: ClassVar[tuple[tuple[str, str], ...]] = ()

    def args(self) -> tuple[float | bool, ...]:
        return tuple(
            getattr(self, f.name) for f in fields(self)
            if f.name != "relative")

    @property
    def is_relative(self) -> bool:
        return getattr(self, "relative", False)

    @property
    def end(self) -> Point:
        """The last point of the command, as written."""
        if not self.point_fields:
            raise ValueError(f"{type(self).__name__} has no end point")
        x, y = self.point_fields[-1]
        return getattr(self, x), getattr(self, y)

    def rotate_quarter(self, turns: int) -> PathCommand:
        """Rotate all points by `turns` quarter turns about the origin.

        Turns are clockwise on screen (y axis pointing down).
        """
        turns %= 4
        changes = {}
        for fx, fy in self.point_fields:
            x, y = getattr(self, fx), getattr(self, fy)
            for _ in range(turns):
                x, y = -y, x
            changes[fx], changes[fy] = x, y
        return replace(self, **changes)

    def to_svg(self, precision: int) -> str:
        letter = self.letter.lower() if self.is_relative else self.letter
        parts = [letter]
        for arg in self.args():
            if isinstance(arg, bool):
                parts.append("1" if arg else "0")
            else:
                parts.append(format_number(arg, precision))
        return " ".join(parts)


@dataclass(frozen=True)
class MoveTo(PathCommand):
    letter = "M"
    point_fields = (("x", "y"), )

    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class LineTo(PathCommand):
    letter = "L"
    point_fields = (("x", "y"), )

    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class CubicTo(PathCommand):
    letter = "C"
    point_fields = (("x1", "y1"), ("x2", "y2"), ("x", "y"))

    x1: float
    y1: float
    x2: float
    y2: float
    x: float
    y: float
    relative: bool = False


@dataclass(frozen=True)
class ArcTo(PathCommand):
    letter = "A"
    point_fields = (("x", "y"), )

    rx: float
    ry: float
    rotation: float
    large_arc: bool
    sweep: bool
    x: float
    y: float
    relative: bool = False

    def rotate_quarter(self, turns: int) -> ArcTo:
        rotated = super().rotate_quarter(turns)
        assert isinstance(rotated, ArcTo)
        if self.rx == self.ry:
            return rotated
        return replace(rotated,
                       rotation=(self.rotation + 90 * (turns % 4)) % 360)


@dataclass(frozen=True)
class ClosePath(PathCommand):
    letter = "Z"


_ARITY: dict[str, tuple[type[PathCommand], int]] = {
    "M": (MoveTo, 2),
    "L": (LineTo, 2),
    "C": (CubicTo, 6),
    "A": (ArcTo, 7),
    "Z": (ClosePath, 0),
}

_TOKEN = re.compile(r"\s*(?:([A-Za-z])|"
                    r"([-+]?(?:\d+\.?\d*|\.\d+)(?:[eE][-+]?\d+)?))\s*,?")


class Path(Sequence[PathCommand]):
    """An immutable sequence of drawing commands."""

    def __init__(self, commands: Iterable[PathCommand]) -> None:
        self._commands = tuple(commands)

    @classmethod
    def of(cls, *commands: PathCommand) -> Path:
        return cls(commands)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return Path(self._commands[index])
        return self._commands[index]

    def __len__(self) -> int:
        return len(self._commands)

    def __iter__(self) -> Iterator[PathCommand]:
        return iter(self._commands)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._commands == other._commands

    def __hash__(self) -> int:
        return hash(self._commands)

    def __repr__(self) -> str:
        return f"Path({self.to_svg()!r})"

    def __str__(self) -> str:
        return self.to_svg()

    def __add__(self, other: Path) -> Path:
        return Path(self._commands + other._commands)

    def to_svg(self, precision: int | None = None) -> str:
        """Serialize as SVG path data.

        Every number, zeros and arc rotation included, is printed with
        `precision` decimals (default `Settings.squircle_precision`), and
        `-0` is printed without its sign. Arc flags are printed as `0` or
        `1`. The text is equivalent to, but not byte-identical with, paths
        that write fixed zeros as a bare `0`.
        """
        if precision is None:
            precision = Settings.squircle_precision
        return " ".join(cmd.to_svg(precision) for cmd in self._commands)

    @classmethod
    def parse(cls, text: str) -> Path:
        """Parse the `M L C A Z` subset of SVG path data.

        Coordinates may repeat after a command letter; extra pairs after a
        move are treated as lines, as in SVG.
        """
        commands: list[PathCommand] = []
        letter: str | None = None
        numbers: list[float] = []
        number_start = 0

        def flush(position: int) -> None:
            if letter is None:
                if numbers:
                    raise PathSyntaxError("path must start with a command",
                                          position=number_start,
                                          text=text)
                return
            command_type, arity = _ARITY[letter.upper()]
            relative = letter.islower()
            if arity == 0:
                if numbers:
                    raise PathSyntaxError(f"'{letter}' takes no arguments",
                                          position=number_start,
                                          text=text)
                commands.append(ClosePath())
                return
            if not numbers or len(numbers) % arity:
                raise PathSyntaxError(
                    f"'{letter}' expects a multiple of {arity} numbers, "
                    f"got {len(numbers)}",
                    position=position,
                    text=text)
            for i in range(0, len(numbers), arity):
                args: list[float | bool] = list(numbers[i:i + arity])
                if command_type is ArcTo:
                    args[3], args[4] = bool(args[3]), bool(args[4])
                commands.append(command_type(*args, relative=relative))
                # implicit lines after a move
                if command_type is MoveTo:
                    command_type = LineTo

        position = 0
        while position < len(text):
            match = _TOKEN.match(text, position)
            if match is None or match.end() == position:
                if text[position:].strip() == "":
                    break
                raise PathSyntaxError("unexpected character",
                                      position=position,
                                      text=text)
            command, number = match.groups()
            if command is not None:
                if command.upper() not in _ARITY:
                    raise PathSyntaxError(f"unsupported command '{command}'",
                                          position=match.start(1),
                                          text=text)
                flush(match.start(1))
                letter = command
                numbers.clear()
            else:
                if not numbers:
                    number_start = match.start(2)
                numbers.append(float(number))
            position = match.end()
        flush(len(text))
        return cls(commands)

    def vertices(self) -> list[Point]:
        """Absolute end point of each command.

        A close command ends at the start of its subpath.
        """
        current = (0.0, 0.0)
        subpath_start = current
        result: list[Point] = []
        for cmd in self._commands:
            if isinstance(cmd, ClosePath):
                current = subpath_start
            else:
                x, y = cmd.end
                if cmd.is_relative:
                    x, y = current[0] + x, current[1] + y
                current = (x, y)
                if isinstance(cmd, MoveTo):
                    subpath_start = current
            result.append(current)
        return result

    @property
    def start(self) -> Point:
        if not self._commands:
            raise ValueError("empty path")
        return self.vertices()[0]

    @property
    def is_closed(self) -> bool:
        return bool(self._commands) and isinstance(self._commands[-1],
                                                   ClosePath)

    def flatten(self, steps: int = 16) -> npt.NDArray[np.float64]:
        """Approximate the outline by a polyline.

        Args:
            steps (int): segments per curve or arc.

        Returns:
            npt.NDArray[np.float64]: (N, 2) array of absolute points.
        """
        if steps < 1:
            raise ValueError("steps must be positive")
        t = np.linspace(0, 1, steps + 1)[1:]
        current = np.zeros(2)
        subpath_start = current
        chunks: list[npt.NDArray[np.float64]] = []
        for cmd in self._commands:
            origin = current if cmd.is_relative else np.zeros(2)
            if isinstance(cmd, ClosePath):
                if not np.array_equal(current, subpath_start):
                    chunks.append(subpath_start[None, :])
                current = subpath_start
                continue
            end = origin + np.asarray(cmd.end, dtype=np.float64)
            if isinstance(cmd, CubicTo):
                p1 = origin + np.array([cmd.x1, cmd.y1])
                p2 = origin + np.array([cmd.x2, cmd.y2])
                chunks.append(_cubic_points(current, p1, p2, end, t))
            elif isinstance(cmd, ArcTo):
                chunks.append(_arc_points(current, cmd, end, t))
            else:
                chunks.append(end[None, :])
            if isinstance(cmd, MoveTo):
                subpath_start = end
            current = end
        if not chunks:
            return np.empty((0, 2), dtype=np.float64)
        return np.concatenate(chunks).astype(np.float64)

    def bounding_box(self,
                     steps: int = 16) -> tuple[float, float, float, float]:
        """(min x, min y, max x, max y) of the flattened outline."""
        points = self.flatten(steps)
        if len(points) == 0:
            raise ValueError("empty path")
        min_x, min_y = points.min(axis=0)
        max_x, max_y = points.max(axis=0)
        return float(min_x), float(min_y), float(max_x), float(max_y)


def _cubic_points(p0, p1, p2, p3, t) -> npt.NDArray[np.float64]:
    t = t[:, None]
    mt = 1 - t
    return (mt**3 * p0 + 3 * mt**2 * t * p1 + 3 * mt * t**2 * p2 +
            t**3 * p3)


def _vector_angle(ux: float, uy: float, vx: float, vy: float) -> float:
    return math.atan2(ux * vy - uy * vx, ux * vx + uy * vy)


def _arc_points(start, arc: ArcTo, end, t) -> npt.NDArray[np.float64]:
    """Sample an SVG arc, converting endpoint to center parameterization."""
    x1, y1 = start
    x2, y2 = end
    rx, ry = abs(arc.rx), abs(arc.ry)
    if (x1 == x2 and y1 == y2) or rx == 0 or ry == 0:
        return np.asarray(end, dtype=np.float64)[None, :]

    phi = math.radians(arc.rotation)
    cos_phi, sin_phi = math.cos(phi), math.sin(phi)
    dx, dy = (x1 - x2) / 2, (y1 - y2) / 2
    x1p = cos_phi * dx + sin_phi * dy
    y1p = -sin_phi * dx + cos_phi * dy

    # scale radii up when they cannot reach the end point
    scale = x1p**2 / rx**2 + y1p**2 / ry**2
    if scale > 1:
        rx, ry = rx * math.sqrt(scale), ry * math.sqrt(scale)

    num = rx**2 * ry**2 - rx**2 * y1p**2 - ry**2 * x1p**2
    den = rx**2 * y1p**2 + ry**2 * x1p**2
    coef = math.sqrt(max(num, 0) / den)
    if arc.large_arc == arc.sweep:
        coef = -coef
    cxp = coef * rx * y1p / ry
    cyp = -coef * ry * x1p / rx
    cx = cos_phi * cxp - sin_phi * cyp + (x1 + x2) / 2
    cy = sin_phi * cxp + cos_phi * cyp + (y1 + y2) / 2

    theta = _vector_angle(1, 0, (x1p - cxp) / rx, (y1p - cyp) / ry)
    delta = _vector_angle((x1p - cxp) / rx, (y1p - cyp) / ry,
                          (-x1p - cxp) / rx, (-y1p - cyp) / ry)
    if not arc.sweep and delta > 0:
        delta -= 2 * math.pi
    elif arc.sweep and delta < 0:
        delta += 2 * math.pi

    angles = theta + delta * t
    xs = cx + rx * np.cos(angles) * cos_phi - ry * np.sin(angles) * sin_phi
    ys = cy + rx * np.cos(angles) * sin_phi + ry * np.sin(angles) * cos_phi
    return np.column_stack((xs, ys))
