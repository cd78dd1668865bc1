#!/usr/bin/env python3
import rclpy
from rclpy.node import Node

from visualization_msgs.msg import Marker

from tf2_ros import Buffer, TransformListener
from tf2_ros import TransformException

from slice_limit_markers.marker_builder import SliceLimitMarkerType
from slice_limit_markers.marker_msgs import slice_limits_to_marker
from slice_limit_markers.transform import Transform


class SliceLimitMarkerPub(Node):
    """
    Publishes the top and bottom slice limits as two translucent squares
    centered on plane_body_frame, expressed in global_frame.

    Each limit is one TRIANGLE_LIST marker, told apart by its namespace
    ("top_slice_limit" red, "bottom_slice_limit" green).
    """

    def __init__(self, **kwargs):
        super().__init__('slice_limit_marker_pub', **kwargs)

        self.declare_parameter('global_frame', 'odom')
        self.declare_parameter('plane_body_frame', 'base_link')
        self.declare_parameter('slice_visualization_side_length', 10.0)
        self.declare_parameter('bottom_slice_height', 0.0)
        self.declare_parameter('top_slice_height', 1.0)
        self.declare_parameter('publish_rate_hz', 1.0)
        self.declare_parameter('marker_topic', 'slice_limits')
        self.declare_parameter('publish_slice_limits', True)

        params = self._parameters
        self.global_frame = params['global_frame'].value
        self.plane_body_frame = params['plane_body_frame'].value
        self.side_length = float(params['slice_visualization_side_length'].value)
        self.bottom_slice_height = float(params['bottom_slice_height'].value)
        self.top_slice_height = float(params['top_slice_height'].value)
        self.publish_rate_hz = float(params['publish_rate_hz'].value)
        self.marker_topic = params['marker_topic'].value
        self.publish_slice_limits = params['publish_slice_limits'].value

        self.tf_buffer = Buffer()
        self.tf_listener = TransformListener(self.tf_buffer, self)

        self.pub = self.create_publisher(Marker, self.marker_topic, 10)

        period = 1.0 / max(self.publish_rate_hz, 0.1)
        self.timer = self.create_timer(period, self.on_timer)

        self.get_logger().info(
            f"Slice limit markers started. global_frame='{self.global_frame}', "
            f"plane_body_frame='{self.plane_body_frame}', side={self.side_length:.2f} m, "
            f"bottom={self.bottom_slice_height:.2f} m, top={self.top_slice_height:.2f} m, "
            f"topic='{self.marker_topic}'"
        )

    def make_slice_limit_markers(self, T_G_PB, stamp):
        """Returns [top, bottom] markers for the plane-body pose T_G_PB."""
        limits = [
            (SliceLimitMarkerType.TOP_SLICE_LIMIT, self.top_slice_height),
            (SliceLimitMarkerType.BOTTOM_SLICE_LIMIT, self.bottom_slice_height),
        ]
        return [
            slice_limits_to_marker(T_G_PB, self.side_length, stamp,
                                   self.global_frame, height, limit_type)
            for limit_type, height in limits
        ]

    def on_timer(self):
        if not self.publish_slice_limits:
            return

        try:
            tf = self.tf_buffer.lookup_transform(
                self.global_frame,
                self.plane_body_frame,
                rclpy.time.Time()
            )
        except TransformException as e:
            self.get_logger().warn(
                f'TF lookup failed for {self.global_frame}->{self.plane_body_frame}: {e}',
                throttle_duration_sec=5.0)
            return

        T_G_PB = Transform.from_msg(tf.transform)
        stamp = self.get_clock().now().to_msg()
        for marker in self.make_slice_limit_markers(T_G_PB, stamp):
            self.pub.publish(marker)


def main(args=None):
    rclpy.init(args=args)
    node = SliceLimitMarkerPub()
    try:
        rclpy.spin(node)
    except KeyboardInterrupt:
        pass
    finally:
        node.destroy_node()
        rclpy.shutdown()


if __name__ == '__main__':
    main()
