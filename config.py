"""Configuration loading and validation for adu-manifest."""

import tomllib
from dataclasses import dataclass
from pathlib import Path

from action import is_remote_source


DEFAULT_CONFIG_PATH = Path("config.toml")

DEFAULTS = {
    "action_source": "update-action.json",
    "request_timeout": 30.0,
    "output_json": False,
}


@dataclass
class Config:
    action_source: str
    request_timeout: float
    output_json: bool

    @property
    def is_remote(self) -> bool:
        """Whether the update action is fetched over HTTP(S)."""
        return is_remote_source(self.action_source)

    @classmethod
    def load(
        cls,
        config_path: Path | None = None,
        action_override: str | None = None,
        timeout_override: float | None = None,
        output_json_override: bool | None = None,
    ) -> "Config":
        """Load configuration from TOML file with defaults."""
        config_data = dict(DEFAULTS)

        path = config_path or DEFAULT_CONFIG_PATH
        if path.exists():
            with open(path, "rb") as f:
                file_config = tomllib.load(f)
                config_data.update(file_config)

        if action_override:
            config_data["action_source"] = action_override
        if timeout_override is not None:
            config_data["request_timeout"] = timeout_override
        if output_json_override is not None:
            config_data["output_json"] = output_json_override

        action_source = str(config_data["action_source"])
        if not is_remote_source(action_source):
            action_source = str(Path(action_source).expanduser())

        return cls(
            action_source=action_source,
            request_timeout=float(config_data["request_timeout"]),
            output_json=bool(config_data["output_json"]),
        )
