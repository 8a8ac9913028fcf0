"""Global configuration — XDG paths, YAML file, env vars, defaults."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, fields
from pathlib import Path

import yaml


def _default_config_dir() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg) / "wcagscope"
    return Path.home() / ".config" / "wcagscope"


def _default_browser_args() -> list[str]:
    return ["--no-sandbox", "--disable-setuid-sandbox"]


@dataclass
class WcagScopeConfig:
    """Application-wide configuration."""

    config_dir: Path = field(default_factory=_default_config_dir)
    web_host: str = "127.0.0.1"
    web_port: int = 3200
    static_dir: Path = Path("public")
    pa11y_command: str = "pa11y"
    scan_timeout: float = 180.0
    navigation_timeout: float = 60.0
    visibility_timeout: float = 5.0
    browser_args: list[str] = field(default_factory=_default_browser_args)
    verbose: bool = False

    @classmethod
    def load(cls, path: str | Path | None = None) -> WcagScopeConfig:
        """Load config from an optional YAML file, then environment variables.

        Without an explicit *path*, ``config.yaml`` in the config directory is
        read if it exists. Environment variables win over file values.
        """
        config = cls()

        config_path = Path(path) if path else config.config_dir / "config.yaml"
        if path or config_path.is_file():
            config._apply_file(config_path)

        env_port = os.environ.get("WCAGSCOPE_PORT") or os.environ.get("PORT")
        if env_port:
            config.web_port = int(env_port)

        return config

    def _apply_file(self, path: Path) -> None:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
        if data is None:
            return
        if not isinstance(data, dict):
            raise ValueError("Config YAML must be a mapping")

        known = {f.name for f in fields(self)}
        for key, value in data.items():
            if key not in known or key == "config_dir":
                continue
            if key == "static_dir":
                value = Path(value)
            elif key == "web_port":
                value = int(value)
            elif key in ("scan_timeout", "navigation_timeout", "visibility_timeout"):
                value = float(value)
            elif key == "browser_args":
                value = [str(a) for a in value or []]
            setattr(self, key, value)
