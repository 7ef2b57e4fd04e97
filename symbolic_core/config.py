"""Runtime configuration for the symbolic core."""

from dataclasses import dataclass, fields, replace
from typing import Optional

from .logging_system import LogLevel, log_info


@dataclass(frozen=True)
class CoreConfig:
    # Run the per-kind canonical-form check whenever a node is created
    validate_canonical: bool = True
    # Deduplicate structurally identical nodes through the global node cache
    intern_nodes: bool = True


_global_config: Optional[CoreConfig] = None


def get_config() -> CoreConfig:
    """Get or create the global configuration"""
    global _global_config
    if _global_config is None:
        _global_config = CoreConfig()
    return _global_config


def configure(**overrides) -> CoreConfig:
    """Replace selected settings of the global configuration"""
    global _global_config
    known = {f.name for f in fields(CoreConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
    _global_config = replace(get_config(), **overrides)
    log_info(f"Core configuration updated: {_global_config}", LogLevel.DETAILED)
    return _global_config


def reset_config() -> CoreConfig:
    """Restore the default configuration"""
    global _global_config
    _global_config = CoreConfig()
    return _global_config
