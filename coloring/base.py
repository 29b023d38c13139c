from abc import ABC, abstractmethod
import numpy as np

from fractals.base import ClassificationField

DEFAULT_GAMMA = 2.2


def gamma_fraction(iterations: np.ndarray, max_iter: int, gamma: float) -> np.ndarray:
    """Escape fraction iterations / max_iter raised to 1 / gamma."""
    t = iterations.astype(np.float64) / float(max_iter)
    return np.power(t, 1.0 / gamma)


class ColoringStrategy(ABC):
    @abstractmethod
    def apply(self, field: ClassificationField) -> np.ndarray:
        ...
