from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("bsp-geometry")  # Matches the name in pyproject.toml
except PackageNotFoundError:
    # package is not installed
    __version__ = "0.0.0-dev"

from .config import GeometryConfig, get_config, reset_config, set_config
from .geometry import (
    Arc,
    ArcsSet,
    ArcsSplit,
    BSPTree,
    Chord,
    Interval,
    IntervalsSet,
    Location,
    OrientedPoint,
    RegionFactory,
    S1Point,
    Side,
    SubChord,
    SubOrientedPoint,
    Vector1D,
)
from .utils.exceptions import (
    ConfigurationError,
    DimensionMismatchError,
    GeometryError,
    InconsistentStateAt2PiWrapping,
    InternalGeometryError,
    NotAnIntervalError,
    NotConvexHyperplanesError,
)

__all__ = [
    "Arc",
    "ArcsSet",
    "ArcsSplit",
    "BSPTree",
    "Chord",
    "ConfigurationError",
    "DimensionMismatchError",
    "GeometryConfig",
    "GeometryError",
    "InconsistentStateAt2PiWrapping",
    "InternalGeometryError",
    "Interval",
    "IntervalsSet",
    "Location",
    "NotAnIntervalError",
    "NotConvexHyperplanesError",
    "OrientedPoint",
    "RegionFactory",
    "S1Point",
    "Side",
    "SubChord",
    "SubOrientedPoint",
    "Vector1D",
    "__version__",
    "get_config",
    "reset_config",
    "set_config",
]
