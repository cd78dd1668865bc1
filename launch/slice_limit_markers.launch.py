from launch import LaunchDescription
from launch_ros.actions import Node
from ament_index_python.packages import get_package_share_directory
import os

def generate_launch_description():
    params = os.path.join(get_package_share_directory('slice_limit_markers'), 'config', 'params.yaml')

    slice_limit_marker_pub = Node(
        package='slice_limit_markers',
        executable='slice_limit_marker_pub',
        name='slice_limit_marker_pub',
        output='screen',
        parameters=[params]
    )

    nodes = []
    nodes.append(slice_limit_marker_pub)

    return LaunchDescription(nodes)
