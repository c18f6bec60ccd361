"""Project configuration model for evalexplorer.

Captures evalexplorer.yaml fields with sensible defaults for
display-level settings like the default status filter and log level.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

CONFIG_FILENAME = "evalexplorer.yaml"


class ExplorerConfig(BaseModel):
    """Project-level configuration loaded from evalexplorer.yaml."""

    model_config = {"extra": "forbid"}

    default_status: Literal["all", "pass", "fail"] = "all"
    ci_mode: bool = False
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    duration_precision: int = Field(default=3, ge=0, le=9)
    reason_width: int = Field(default=60, ge=10)


def find_project_root(start: Path | None = None) -> Path:
    """Walk up from start (default: cwd) looking for evalexplorer.yaml.

    Args:
        start: Starting path (file or directory). Defaults to cwd.

    Returns:
        Path to the directory containing evalexplorer.yaml, or cwd if
        none is found.
    """
    current = (start or Path.cwd()).resolve()
    if current.is_file():
        current = current.parent
    while current != current.parent:
        if (current / CONFIG_FILENAME).exists():
            return current
        current = current.parent
    return Path.cwd()


def load_config(project_root: Path | None = None) -> ExplorerConfig:
    """Load ExplorerConfig from evalexplorer.yaml. Returns defaults if not found.

    Args:
        project_root: Directory holding the config file. If None,
            uses find_project_root() to locate it.

    Returns:
        Validated ExplorerConfig instance.
    """
    if project_root is None:
        project_root = find_project_root()
    config_path = project_root / CONFIG_FILENAME
    if not config_path.exists():
        return ExplorerConfig()
    import yaml

    raw = yaml.safe_load(config_path.read_text(encoding="utf-8"))
    if raw is None:
        return ExplorerConfig()
    return ExplorerConfig.model_validate(raw)
