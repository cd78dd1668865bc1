import rclpy.logging
from geometry_msgs.msg import Point
from std_msgs.msg import ColorRGBA
from visualization_msgs.msg import Marker

from slice_limit_markers.marker_builder import (
    UNKNOWN_NAMESPACE,
    build_slice_limit_surface,
)

logger = rclpy.logging.get_logger('slice_limit_markers')


def _stamp_to_msg(stamp):
    # rclpy.time.Time -> builtin_interfaces/Time, messages pass through
    if hasattr(stamp, 'to_msg'):
        return stamp.to_msg()
    return stamp


def surface_to_marker(surface):
    """Fill a TRIANGLE_LIST Marker from a TriangulatedSurface."""
    marker = Marker()
    marker.header.frame_id = surface.frame_id
    if surface.stamp is not None:
        marker.header.stamp = _stamp_to_msg(surface.stamp)
    marker.ns = surface.ns
    marker.id = surface.marker_id
    marker.type = Marker.TRIANGLE_LIST
    marker.action = Marker.ADD
    marker.pose.orientation.w = 1.0
    marker.scale.x, marker.scale.y, marker.scale.z = surface.scale
    marker.color.a = float(surface.alpha)

    if surface.ns == UNKNOWN_NAMESPACE:
        logger.debug('Building slice limit marker for an unrecognized marker type')

    for (x, y, z), (r, g, b, a) in zip(surface.vertices, surface.colors):
        marker.points.append(Point(x=x, y=y, z=z))
        marker.colors.append(ColorRGBA(r=r, g=g, b=b, a=a))

    return marker


def slice_limits_to_marker(T_G_PB, slice_visualization_side_length, timestamp,
                           global_frame_id, height, slice_limit_type):
    surface = build_slice_limit_surface(
        T_G_PB, slice_visualization_side_length, height,
        global_frame_id, slice_limit_type, stamp=timestamp)
    return surface_to_marker(surface)
