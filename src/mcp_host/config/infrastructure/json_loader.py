"""JSON tool-server config loader — creates a default document when none exists."""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from mcp_host.config.domain.mcp_servers import McpServersConfig
from mcp_host.config.domain.observer import ConfigObserver
from mcp_host.config.infrastructure.errors import ConfigLoadError, ConfigValidationError

DEFAULT_CONFIG_FILENAME = ".mcp.json"


def default_config_path() -> Path:
    return Path.home() / DEFAULT_CONFIG_FILENAME


class JsonConfigLoader:
    """Loads and validates the tool-server config document."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path | None = None) -> McpServersConfig:
        """
        Load the config at ``path`` (or the per-user default), creating it if absent.

        A missing file is replaced by an empty ``{"mcpServers": {}}`` document,
        written to ``path`` and returned.

        Raises:
            ConfigLoadError: if the file cannot be written, read, or parsed as JSON.
            ConfigValidationError: if the document does not match the schema.
        """
        resolved = (path or default_config_path()).expanduser()

        if not resolved.exists():
            cfg = McpServersConfig()
            _write_default(path=resolved, cfg=cfg)
            self._observer.config_default_created(path=resolved)
            return cfg

        raw = _parse_json(path=resolved)
        cfg = _build_config(raw=raw)
        self._observer.config_loaded(path=resolved, server_count=len(cfg.mcp_servers))
        return cfg


def _write_default(path: Path, cfg: McpServersConfig) -> None:
    data = cfg.model_dump(mode="json", by_alias=True)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2), encoding="utf-8")
    except OSError as exc:
        raise ConfigLoadError(path=path, reason=str(exc)) from exc


def _parse_json(path: Path) -> Any:
    try:
        with path.open("r", encoding="utf-8") as fh:
            return json.load(fh)
    except OSError as exc:
        raise ConfigLoadError(path=path, reason=str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid JSON: {exc}") from exc


def _build_config(raw: Any) -> McpServersConfig:
    try:
        return McpServersConfig.model_validate(raw)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc
