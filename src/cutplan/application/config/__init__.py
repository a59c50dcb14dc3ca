"""Project configuration schema and loading.

Public API:
    - ProjectConfiguration: Root project model
    - BoardConfig, PieceConfig, TemplateConfig: Item models
    - load_config: Load a project from a JSON file
    - load_config_from_dict: Load a project from a dictionary
    - ConfigError: Exception for project file errors
    - config_to_boards, config_to_pieces, config_to_templates: Adapters to
      domain value objects

Example:
    >>> from pathlib import Path
    >>> from cutplan.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("bookshelf.json"))
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from cutplan.application.config.adapter import (
    config_to_boards,
    config_to_pieces,
    config_to_templates,
)
from cutplan.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from cutplan.application.config.schema import (
    SUPPORTED_VERSIONS,
    BoardConfig,
    PieceConfig,
    ProjectConfiguration,
    TemplateConfig,
)

__all__ = [
    "BoardConfig",
    "ConfigError",
    "PieceConfig",
    "ProjectConfiguration",
    "SUPPORTED_VERSIONS",
    "TemplateConfig",
    "config_to_boards",
    "config_to_pieces",
    "config_to_templates",
    "load_config",
    "load_config_from_dict",
]
