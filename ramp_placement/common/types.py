"""
Common type definitions for ramp placement.

This module provides the Pydantic-based Pose type used to exchange
world-space positions and orientations with the AR host application.

The Pose follows the convention of mobile AR frameworks:
- Translation (tx, ty, tz) in meters
- Rotation as a unit quaternion (qx, qy, qz, qw), scalar last
- Right-handed frame where the forward direction is -Z

All rigid-body algebra (composition, inversion, point transformation) is
implemented with numpy.
"""

import math
from typing import Any, Sequence, Tuple

import numpy as np
from pydantic import BaseModel, field_validator, model_validator


class Pose(BaseModel):
    """
    Immutable rigid-body pose (position + orientation).

    Attributes:
        tx, ty, tz: Translation in meters.
        qx, qy, qz, qw: Rotation quaternion (normalized on construction).

    Example:
        >>> anchor = Pose.from_translation(1.0, 0.0, -2.0)
        >>> tap = Pose.from_translation(3.0, 0.0, -7.0)
        >>> local = anchor.inverse().compose(tap)
        >>> local.translation
        (2.0, 0.0, -5.0)
    """

    tx: float = 0.0
    ty: float = 0.0
    tz: float = 0.0
    qx: float = 0.0
    qy: float = 0.0
    qz: float = 0.0
    qw: float = 1.0

    model_config = {"frozen": True}

    @field_validator("tx", "ty", "tz", "qx", "qy", "qz", "qw")
    @classmethod
    def _validate_finite(cls, v: float) -> float:
        if not math.isfinite(v):
            raise ValueError(f"Pose components must be finite, got {v}")
        return v

    @model_validator(mode="before")
    @classmethod
    def _normalize_rotation(cls, data: Any) -> Any:
        """Scale the quaternion to unit length; reject a zero rotation."""
        if not isinstance(data, dict):
            return data

        quat = [
            float(data.get("qx", 0.0)),
            float(data.get("qy", 0.0)),
            float(data.get("qz", 0.0)),
            float(data.get("qw", 1.0)),
        ]
        norm = math.sqrt(sum(c * c for c in quat))
        if not math.isfinite(norm) or norm == 0.0:
            raise ValueError(f"Rotation quaternion must be non-zero, got {quat}")

        return {
            **data,
            "qx": quat[0] / norm,
            "qy": quat[1] / norm,
            "qz": quat[2] / norm,
            "qw": quat[3] / norm,
        }

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def identity(cls) -> "Pose":
        """Pose at the origin with no rotation."""
        return cls()

    @classmethod
    def from_translation(cls, x: float, y: float, z: float) -> "Pose":
        """Pose at (x, y, z) with identity rotation."""
        return cls(tx=x, ty=y, tz=z)

    @classmethod
    def from_axis_angle(
        cls,
        axis: Sequence[float],
        angle_rad: float,
        translation: Sequence[float] = (0.0, 0.0, 0.0),
    ) -> "Pose":
        """
        Create a pose rotated by angle_rad around axis.

        Args:
            axis: Rotation axis (any non-zero length).
            angle_rad: Rotation angle in radians (right-hand rule).
            translation: Optional (x, y, z) translation.

        Raises:
            ValueError: If axis has zero length.
        """
        axis_arr = np.asarray(axis, dtype=np.float64)
        length = float(np.linalg.norm(axis_arr))
        if length == 0.0:
            raise ValueError("Rotation axis must be non-zero")

        x, y, z = axis_arr / length * math.sin(angle_rad / 2.0)
        tx, ty, tz = translation
        return cls(
            tx=tx,
            ty=ty,
            tz=tz,
            qx=float(x),
            qy=float(y),
            qz=float(z),
            qw=math.cos(angle_rad / 2.0),
        )

    @classmethod
    def from_numpy(cls, translation: np.ndarray, quaternion: np.ndarray) -> "Pose":
        """Create a pose from a (3,) translation and an (x, y, z, w) quaternion."""
        translation = np.asarray(translation, dtype=np.float64).reshape(-1)
        quaternion = np.asarray(quaternion, dtype=np.float64).reshape(-1)
        if translation.shape != (3,) or quaternion.shape != (4,):
            raise ValueError(
                f"Expected translation (3,) and quaternion (4,), "
                f"got {translation.shape} and {quaternion.shape}"
            )
        return cls(
            tx=float(translation[0]),
            ty=float(translation[1]),
            tz=float(translation[2]),
            qx=float(quaternion[0]),
            qy=float(quaternion[1]),
            qz=float(quaternion[2]),
            qw=float(quaternion[3]),
        )

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def translation(self) -> Tuple[float, float, float]:
        """Translation as an (x, y, z) tuple."""
        return (self.tx, self.ty, self.tz)

    @property
    def rotation(self) -> Tuple[float, float, float, float]:
        """Rotation quaternion as an (x, y, z, w) tuple."""
        return (self.qx, self.qy, self.qz, self.qw)

    def translation_array(self) -> np.ndarray:
        return np.array(self.translation, dtype=np.float64)

    def rotation_matrix(self) -> np.ndarray:
        """3x3 rotation matrix of this pose's quaternion."""
        x, y, z, w = self.rotation
        return np.array(
            [
                [1.0 - 2.0 * (y * y + z * z), 2.0 * (x * y - z * w), 2.0 * (x * z + y * w)],
                [2.0 * (x * y + z * w), 1.0 - 2.0 * (x * x + z * z), 2.0 * (y * z - x * w)],
                [2.0 * (x * z - y * w), 2.0 * (y * z + x * w), 1.0 - 2.0 * (x * x + y * y)],
            ],
            dtype=np.float64,
        )

    def to_matrix(self) -> np.ndarray:
        """4x4 homogeneous transform."""
        matrix = np.eye(4, dtype=np.float64)
        matrix[:3, :3] = self.rotation_matrix()
        matrix[:3, 3] = self.translation_array()
        return matrix

    # ------------------------------------------------------------------
    # Algebra
    # ------------------------------------------------------------------

    def compose(self, other: "Pose") -> "Pose":
        """
        Return self * other (apply other first, then self).

        The resulting pose maps points from other's frame into the frame
        this pose is expressed in.
        """
        translation = self.rotation_matrix() @ other.translation_array()
        translation += self.translation_array()
        quaternion = _quaternion_multiply(
            np.array(self.rotation), np.array(other.rotation)
        )
        return Pose.from_numpy(translation, quaternion)

    def inverse(self) -> "Pose":
        """Return the pose that undoes this one: p.compose(p.inverse()) == identity."""
        inv_rotation = self.rotation_matrix().T
        translation = -(inv_rotation @ self.translation_array())
        quaternion = np.array([-self.qx, -self.qy, -self.qz, self.qw])
        return Pose.from_numpy(translation, quaternion)

    def transform_point(self, point: Sequence[float]) -> Tuple[float, float, float]:
        """Map a point from this pose's local frame into its parent frame."""
        p = np.asarray(point, dtype=np.float64).reshape(3)
        x, y, z = self.rotation_matrix() @ p + self.translation_array()
        return (float(x), float(y), float(z))

    def is_close(self, other: "Pose", atol: float = 1e-6) -> bool:
        """Compare poses, treating q and -q as the same rotation."""
        if not np.allclose(self.translation, other.translation, atol=atol):
            return False
        q1 = np.array(self.rotation)
        q2 = np.array(other.rotation)
        return bool(np.allclose(q1, q2, atol=atol) or np.allclose(q1, -q2, atol=atol))

    def __repr__(self) -> str:
        return (
            f"Pose(t=({self.tx:.3f}, {self.ty:.3f}, {self.tz:.3f}), "
            f"q=({self.qx:.3f}, {self.qy:.3f}, {self.qz:.3f}, {self.qw:.3f}))"
        )


def _quaternion_multiply(q1: np.ndarray, q2: np.ndarray) -> np.ndarray:
    """Hamilton product of two (x, y, z, w) quaternions."""
    x1, y1, z1, w1 = q1
    x2, y2, z2, w2 = q2
    return np.array(
        [
            w1 * x2 + x1 * w2 + y1 * z2 - z1 * y2,
            w1 * y2 - x1 * z2 + y1 * w2 + z1 * x2,
            w1 * z2 + x1 * y2 - y1 * x2 + z1 * w2,
            w1 * w2 - x1 * x2 - y1 * y2 - z1 * z2,
        ],
        dtype=np.float64,
    )
