from __future__ import annotations
import logging
from typing import Dict, Any, List

logger = logging.getLogger(__name__)

# Nested dict: [fractal][op_name] -> meta
_REGISTRY: Dict[str, Dict[str, Dict[str, Any]]] = {}

def register_kernel(fractal: str, op_name: str, **meta: Any) -> None:
    """
    Register kernel metadata for a given fractal and operation.
    Example:
        register_kernel("mandelbrot", "point", func=mandelbrot_point, family="escape")
    """
    _REGISTRY.setdefault(fractal, {})[op_name] = meta
    logger.debug("registered kernel %s.%s", fractal, op_name)

def load_kernel(fractal: str, op_name: str) -> Dict[str, Any]:
    """
    Load kernel metadata from the registry for the given parameters.
    Raises KeyError if not found.
    """
    try:
        meta = _REGISTRY[fractal][op_name]
    except KeyError as e:
        raise KeyError(f"Kernel not found for fractal='{fractal}', op='{op_name}'") from e
    if "func" not in meta or not callable(meta["func"]):
        raise KeyError(f"registry[{fractal}.{op_name}] must provide a callable 'func'")
    return meta

def list_kernels(fractal: str) -> List[str]:
    """
    List all registered operation names for the given fractal.
    """
    return sorted(_REGISTRY.get(fractal, {}))
