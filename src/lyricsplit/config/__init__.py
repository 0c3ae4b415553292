from .schema import SplitterConfig, ToleranceCfg, DEFAULT_ABBREVIATIONS
from .loader import load_config, load_config_from_string, ConfigLoadError

__all__ = [
    'SplitterConfig', 'ToleranceCfg', 'DEFAULT_ABBREVIATIONS',
    'load_config', 'load_config_from_string', 'ConfigLoadError',
]
