"""Descriptive statistics of samples of unit vectors."""

from __future__ import annotations

import numpy as np


def cosine_similarity(a: np.ndarray, b: np.ndarray) -> float:
    """Cosine of the angle between a and b."""
    return float(np.dot(a, b) / (np.linalg.norm(a) * np.linalg.norm(b)))


class SphericalStatistics:
    """
    Summary statistics of a set of directions on the 2-sphere.

    Parameters
    ----------
    data : np.ndarray, shape=(n, 3)
        Unit vectors, one per row.

    Attributes
    ----------
    resultant_vector : np.ndarray
        Sum of the vectors.
    mean_resultant_length : float
        Norm of the resultant divided by n, in [0, 1].
    mean_vector : np.ndarray
        Normalized resultant (the empirical mean direction).
    fisher_k : float
        Estimate (n - 1) / (n - R) of the VMF concentration.
    eigenvalues : np.ndarray
        Eigenvalues of the orientation tensor, in descending order.
    eigenvectors : np.ndarray
        Matching eigenvectors, one per row.
    """

    def __init__(self, data):
        data = np.asarray(data, dtype=np.float64)
        n = len(data)
        self.n = n
        self.resultant_vector = np.sum(data, axis=0)
        self.resultant_length = float(np.linalg.norm(self.resultant_vector))
        self.mean_resultant_length = self.resultant_length / n
        self.mean_vector = (self.resultant_vector / self.resultant_length
                            if self.resultant_length > 0 else self.resultant_vector)
        self.fisher_k = ((n - 1) / (n - self.resultant_length)
                         if n > self.resultant_length else np.inf)

        self.orientation_tensor = np.dot(np.transpose(data), data) / n
        eigenvalues, eigenvectors = np.linalg.eigh(self.orientation_tensor)
        order = (-eigenvalues).argsort()
        self.eigenvalues = eigenvalues[order]
        self.eigenvectors = eigenvectors[:, order].T

    def summary(self) -> dict[str, float]:
        """Flat dict of the scalar statistics, for logging."""
        result = {
            'n': self.n,
            'mean_resultant_length': self.mean_resultant_length,
            'fisher_k': float(self.fisher_k),
        }
        for i, value in enumerate(self.mean_vector):
            result[f'mean_vector_{i}'] = float(value)
        for i, value in enumerate(self.eigenvalues):
            result[f'eigenvalue_{i}'] = float(value)
        return result
