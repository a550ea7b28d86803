"""
Vector geometry on the 2-sphere used by the directional samplers.

Spherical coordinates follow the (theta, phi, r) convention: theta is the
polar angle measured from +z, phi the azimuth in the xy-plane and r the norm.
"""

from __future__ import annotations

import numpy as np
from scipy.spatial.transform import Rotation

CANONICAL_AXIS = np.array([0.0, 0.0, 1.0])


def compute_norm(v: np.ndarray) -> float:
    """Euclidean norm of a vector."""
    return float(np.sqrt(np.dot(v, v)))


def normalize(v: np.ndarray) -> np.ndarray:
    """Returns v scaled to unit norm. The zero vector is returned unchanged."""
    v = np.asarray(v, dtype=np.float64)
    length = compute_norm(v)
    return v / length if length > 0 else v.copy()


def normalized_cross(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Returns the normalized cross product between vectors.

    Parallel vectors give the zero vector.
    """
    return normalize(np.cross(a, b))


def cartesian_to_spherical(v: np.ndarray) -> tuple[float, float, float]:
    """
    Convert a cartesian 3-vector to spherical coordinates.

    Parameters
    ----------
    v : np.ndarray, shape=(3,)
        Cartesian vector.

    Returns
    -------
    theta : float
        Polar angle from +z in [0, pi].
    phi : float
        Azimuth in (-pi, pi].
    r : float
        Euclidean norm of v.
    """
    x, y, z = v
    r = compute_norm(np.asarray(v, dtype=np.float64))
    if r == 0:
        return 0.0, 0.0, 0.0
    theta = float(np.arccos(np.clip(z / r, -1.0, 1.0)))
    phi = float(np.arctan2(y, x))
    return theta, phi, r


def spherical_to_cartesian(theta: float, phi: float, r: float = 1.0) -> np.ndarray:
    """Inverse of cartesian_to_spherical."""
    return np.array([
        r * np.sin(theta) * np.cos(phi),
        r * np.sin(theta) * np.sin(phi),
        r * np.cos(theta),
    ])


def _orthogonal_axis(a: np.ndarray) -> np.ndarray:
    # pick the basis vector least aligned with a
    basis = np.zeros(3)
    basis[np.argmin(np.abs(a))] = 1.0
    return normalized_cross(a, basis)


def rotation_matrix_from_vectors(a: np.ndarray, b: np.ndarray) -> np.ndarray:
    """
    Rotation matrix taking the direction of a onto the direction of b.

    Uses the Rodrigues formula for the shortest arc between the two
    directions. For antipodal vectors the rotation is a half turn about an
    axis orthogonal to a.

    Parameters
    ----------
    a : np.ndarray, shape=(3,)
        Source vector.
    b : np.ndarray, shape=(3,)
        Target vector.

    Returns
    -------
    np.ndarray, shape=(3, 3)
        Orthonormal matrix R with R @ a_hat == b_hat.
    """
    a = normalize(a)
    b = normalize(b)
    v = np.cross(a, b)
    c = float(np.dot(a, b))
    s = compute_norm(v)

    if s < 1e-12:
        if c > 0:
            return np.eye(3)
        # half turn: R = 2 k k^T - I
        k = _orthogonal_axis(a)
        return 2.0 * np.outer(k, k) - np.eye(3)

    k = v / s
    K = np.array([[0.0, -k[2], k[1]],
                  [k[2], 0.0, -k[0]],
                  [-k[1], k[0], 0.0]])
    return np.eye(3) + s * K + (1.0 - c) * (K @ K)


def rotate_around_axis(v: np.ndarray, angle: float, axis: np.ndarray) -> np.ndarray:
    """Rotate v by angle (radians, right-handed) around axis."""
    axis = normalize(axis)
    return Rotation.from_rotvec(angle * axis).apply(np.asarray(v, dtype=np.float64))


def recompose_tensor(eigenvalues: np.ndarray, eigenvectors: np.ndarray) -> np.ndarray:
    """Builds V diag(w) V^T from eigenvalues w and eigenvectors V (columns)."""
    return (eigenvectors * eigenvalues) @ eigenvectors.T
