from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Optional, Tuple

import numpy as np


Point3 = Tuple[float, float, float]
RGBA = Tuple[float, float, float, float]


class SliceLimitMarkerType(IntEnum):
    TOP_SLICE_LIMIT = 0
    BOTTOM_SLICE_LIMIT = 1


SLICE_LIMIT_NAMESPACES = {
    SliceLimitMarkerType.TOP_SLICE_LIMIT: 'top_slice_limit',
    SliceLimitMarkerType.BOTTOM_SLICE_LIMIT: 'bottom_slice_limit',
}
UNKNOWN_NAMESPACE = 'unknown_type'

# Two triangles ([0,1,2], [1,2,3]) sharing the edge between corner 1 and 2
TRIANGLE_CORNER_INDICES = (0, 1, 2, 1, 2, 3)

TOP_COLOR: RGBA = (1.0, 0.0, 0.0, 0.8)     # red
BOTTOM_COLOR: RGBA = (0.0, 1.0, 0.0, 0.8)  # green

MARKER_ID = 0
MARKER_ALPHA = 0.25
MARKER_SCALE: Point3 = (1.0, 1.0, 1.0)
TRIANGLE_LIST = 'triangle_list'
ADD = 'add'


@dataclass(frozen=True)
class TriangulatedSurface:
    vertices: Tuple[Point3, ...]
    colors: Tuple[RGBA, ...]
    ns: str
    frame_id: str
    stamp: Any = None
    marker_id: int = MARKER_ID
    primitive: str = TRIANGLE_LIST
    action: str = ADD
    scale: Point3 = MARKER_SCALE
    alpha: float = MARKER_ALPHA


def as_slice_limit_type(value) -> Optional[SliceLimitMarkerType]:
    """
    Enum member for a marker type, or None if unrecognized. Members and
    plain int codes are recognized; bool, float and anything else are not.
    """
    if isinstance(value, SliceLimitMarkerType):
        return value
    if type(value) is int:
        try:
            return SliceLimitMarkerType(value)
        except ValueError:
            return None
    return None


def slice_limit_type_to_string(marker_type) -> str:
    """Namespace label for a marker type, 'unknown_type' if unrecognized."""
    return SLICE_LIMIT_NAMESPACES.get(as_slice_limit_type(marker_type), UNKNOWN_NAMESPACE)


def plane_corners(side_length: float) -> np.ndarray:
    """
    Corners of a square centered at the plane-body origin, z = 0.
    Rows are p0 = (+h, +h), p1 = (-h, +h), p2 = (+h, -h), p3 = (-h, -h).
    """
    h = side_length / 2.0
    return np.array([[h, h, 0.0],
                     [-h, h, 0.0],
                     [h, -h, 0.0],
                     [-h, -h, 0.0]])


def slice_limit_vertices(T_G_PB, side_length: float, height: float) -> Tuple[Point3, ...]:
    """
    Triangle-list vertices of the square in the global frame.

    x and y come from T_G_PB applied to the plane-body corners. z is set to
    `height` afterwards, the transform's own z is dropped since the height is
    specified in the global frame.
    """
    vertices_PB = plane_corners(side_length)[list(TRIANGLE_CORNER_INDICES)]
    vertices_G = np.atleast_2d(T_G_PB.apply(vertices_PB))
    return tuple((float(v[0]), float(v[1]), float(height)) for v in vertices_G)


def slice_limit_color(marker_type) -> RGBA:
    if as_slice_limit_type(marker_type) is SliceLimitMarkerType.TOP_SLICE_LIMIT:
        return TOP_COLOR
    return BOTTOM_COLOR


def slice_limit_colors(marker_type, count: int = len(TRIANGLE_CORNER_INDICES)) -> Tuple[RGBA, ...]:
    return (slice_limit_color(marker_type),) * count


def build_slice_limit_surface(T_G_PB, side_length: float, height: float,
                              frame_id: str, marker_type,
                              stamp: Optional[Any] = None) -> TriangulatedSurface:
    vertices = slice_limit_vertices(T_G_PB, side_length, height)
    return TriangulatedSurface(
        vertices=vertices,
        colors=slice_limit_colors(marker_type, len(vertices)),
        ns=slice_limit_type_to_string(marker_type),
        frame_id=frame_id,
        stamp=stamp,
    )
