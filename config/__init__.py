from .loader import ConfigError, load_config, get_config, reload_config
from .schema import CandlechartConfig, DataConfig, IndicatorsConfig, ViewConfig

__all__ = [
    "ConfigError",
    "load_config",
    "get_config",
    "reload_config",
    "CandlechartConfig",
    "DataConfig",
    "IndicatorsConfig",
    "ViewConfig",
]
