"""Location validator pipeline."""

from .base import FunctionValidator, LocationValidator
from .builtin import (
    BiomeValidator,
    BlockValidator,
    ProtectionValidator,
    TargetOccupancyValidator,
    WorldBorderValidator,
    builtin_validators,
)
from .registry import ValidatorRegistry, default_validators, set_default_validators

__all__ = [
    "BiomeValidator",
    "BlockValidator",
    "FunctionValidator",
    "LocationValidator",
    "ProtectionValidator",
    "TargetOccupancyValidator",
    "ValidatorRegistry",
    "WorldBorderValidator",
    "builtin_validators",
    "default_validators",
    "set_default_validators",
]
