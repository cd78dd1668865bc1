import numpy as np
from scipy.spatial.transform import Rotation as R


class Transform:
    """
    Rigid transform (rotation followed by translation).

    Named after the frames it maps between, e.g. T_G_PB takes points from the
    plane-body frame (PB) into the global frame (G).
    """

    def __init__(self, rotation=None, translation=None):
        self.rotation = rotation if rotation is not None else R.identity()
        if translation is None:
            translation = np.zeros(3)
        self.translation = np.asarray(translation, dtype=float).reshape(3)

    @classmethod
    def identity(cls):
        return cls()

    @classmethod
    def from_xyz_yaw(cls, x, y, z, yaw):
        return cls(R.from_euler('z', yaw), (x, y, z))

    @classmethod
    def from_msg(cls, msg):
        """
        Build from a geometry_msgs/Transform. A TransformStamped is accepted
        as well, its .transform is used.
        """
        if hasattr(msg, 'transform'):
            msg = msg.transform
        tr = msg.translation
        q = msg.rotation
        # scipy quaternions are (x, y, z, w), same as ROS
        return cls(R.from_quat([q.x, q.y, q.z, q.w]), (tr.x, tr.y, tr.z))

    def apply(self, points):
        """Apply to a 3-vector or an (N, 3) array of points."""
        points = np.asarray(points, dtype=float)
        return self.rotation.apply(points) + self.translation

    def __mul__(self, other):
        if isinstance(other, Transform):
            return Transform(self.rotation * other.rotation, self.apply(other.translation))
        return self.apply(other)
