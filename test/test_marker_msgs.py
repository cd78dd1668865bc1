"""Tests for the visualization_msgs/Marker conversion and the publisher node."""

from types import SimpleNamespace

import pytest

pytest.importorskip('rclpy')
pytest.importorskip('visualization_msgs.msg')
pytest.importorskip('tf2_ros')

import rclpy  # noqa: E402
from rclpy.time import Time as RosTime  # noqa: E402
from builtin_interfaces.msg import Time  # noqa: E402
from geometry_msgs.msg import TransformStamped  # noqa: E402
from visualization_msgs.msg import Marker  # noqa: E402

from slice_limit_markers.marker_builder import SliceLimitMarkerType  # noqa: E402
from slice_limit_markers.marker_msgs import slice_limits_to_marker  # noqa: E402
from slice_limit_markers.transform import Transform  # noqa: E402

TOP = SliceLimitMarkerType.TOP_SLICE_LIMIT
BOTTOM = SliceLimitMarkerType.BOTTOM_SLICE_LIMIT


@pytest.fixture
def ros_context():
    rclpy.init()
    yield
    rclpy.shutdown()


def _body_transform(node, x, y):
    t = TransformStamped()
    t.header.stamp = node.get_clock().now().to_msg()
    t.header.frame_id = 'odom'
    t.child_frame_id = 'base_link'
    t.transform.translation.x = x
    t.transform.translation.y = y
    t.transform.translation.z = 0.7
    t.transform.rotation.w = 1.0
    return t

def test_marker_fields():
    stamp = Time(sec=12, nanosec=34)
    marker = slice_limits_to_marker(Transform.identity(), 2.0, stamp, 'odom', 5.0, TOP)

    assert marker.header.frame_id == 'odom'
    assert marker.header.stamp == stamp
    assert marker.ns == 'top_slice_limit'
    assert marker.id == 0
    assert marker.type == Marker.TRIANGLE_LIST
    assert marker.action == Marker.ADD
    assert (marker.scale.x, marker.scale.y, marker.scale.z) == (1.0, 1.0, 1.0)
    assert marker.color.a == pytest.approx(0.25)

    points = [(p.x, p.y, p.z) for p in marker.points]
    assert points == [(1.0, 1.0, 5.0), (-1.0, 1.0, 5.0), (1.0, -1.0, 5.0),
                      (-1.0, 1.0, 5.0), (1.0, -1.0, 5.0), (-1.0, -1.0, 5.0)]
    assert len(marker.colors) == 6
    for c in marker.colors:
        assert (c.r, c.g, c.b) == (1.0, 0.0, 0.0)
        assert c.a == pytest.approx(0.8)


def test_bottom_and_unknown_markers():
    bottom = slice_limits_to_marker(Transform.identity(), 1.0, None, 'map', 0.0, BOTTOM)
    assert bottom.ns == 'bottom_slice_limit'
    assert all(c.g == 1.0 and c.r == 0.0 for c in bottom.colors)

    unknown = slice_limits_to_marker(Transform.identity(), 1.0, None, 'map', 0.0, 7)
    assert unknown.ns == 'unknown_type'
    assert len(unknown.points) == 6


def test_rclpy_time_is_converted():
    stamp = RosTime(seconds=3)
    marker = slice_limits_to_marker(Transform.identity(), 1.0, stamp, 'map', 0.0, TOP)
    assert marker.header.stamp.sec == 3


def test_node_builds_top_and_bottom(ros_context):
    from slice_limit_markers.slice_limit_marker_pub_node import SliceLimitMarkerPub

    node = SliceLimitMarkerPub()
    try:
        T_G_PB = Transform.from_xyz_yaw(1.0, 1.0, 0.3, 0.0)
        top, bottom = node.make_slice_limit_markers(T_G_PB, Time(sec=1))
        assert top.ns == 'top_slice_limit'
        assert bottom.ns == 'bottom_slice_limit'
        assert {p.z for p in top.points} == {node.top_slice_height}
        assert {p.z for p in bottom.points} == {node.bottom_slice_height}
        assert top.header.frame_id == node.global_frame
        # default side length is 10 m
        assert (top.points[0].x, top.points[0].y) == pytest.approx((6.0, 6.0))
    finally:
        node.destroy_node()


def _make_node(**params):
    from rclpy.parameter import Parameter
    from slice_limit_markers.slice_limit_marker_pub_node import SliceLimitMarkerPub

    overrides = [Parameter(name, value=value) for name, value in params.items()]
    node = SliceLimitMarkerPub(parameter_overrides=overrides)
    published = []
    node.pub = SimpleNamespace(publish=published.append)
    return node, published


def test_tick_skipped_when_frame_is_missing(ros_context):
    node, published = _make_node(plane_body_frame='no_such_frame')
    try:
        node.on_timer()
        assert published == []
    finally:
        node.destroy_node()


def test_tick_skipped_when_publishing_disabled(ros_context):
    node, published = _make_node(publish_slice_limits=False)
    try:
        node.tf_buffer.set_transform(_body_transform(node, 2.0, -1.0), 'test')
        node.on_timer()
        assert published == []
    finally:
        node.destroy_node()


def test_tick_publishes_top_and_bottom(ros_context):
    node, published = _make_node(slice_visualization_side_length=2.0, top_slice_height=3.0)
    try:
        node.tf_buffer.set_transform(_body_transform(node, 2.0, -1.0), 'test')
        node.on_timer()

        assert [m.ns for m in published] == ['top_slice_limit', 'bottom_slice_limit']
        top = published[0]
        assert top.header.frame_id == 'odom'
        # body translated by (2, -1), its z of 0.7 is dropped
        assert (top.points[0].x, top.points[0].y, top.points[0].z) == pytest.approx((3.0, 0.0, 3.0))
        assert (top.points[5].x, top.points[5].y) == pytest.approx((1.0, -2.0))
    finally:
        node.destroy_node()
