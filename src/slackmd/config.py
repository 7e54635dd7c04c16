"""Settings for the slackmd command line.

The library entry points never read these; they only pick the CLI's
output format, destination and HTML page title.
"""

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)

_DEFAULT_CONFIG_PATH = Path("~/.config/slackmd/config.toml").expanduser()
_ENV_PREFIX = "SLACKMD_"


@dataclass
class SlackmdConfig:
    """CLI settings, read from the top level of the TOML file."""

    default_format: str = "markdown"
    output_dir: str = ""
    html_title: str = "Slack message"


def config_path() -> Path:
    """Return ``$SLACKMD_CONFIG`` or ``~/.config/slackmd/config.toml``."""
    return Path(
        os.environ.get(f"{_ENV_PREFIX}CONFIG", str(_DEFAULT_CONFIG_PATH))
    ).expanduser()


def _known_keys() -> list[str]:
    return [f.name for f in fields(SlackmdConfig)]


def load_config(path: Path | None = None) -> SlackmdConfig:
    """Load settings from TOML, then apply ``SLACKMD_<KEY>`` env overrides."""
    import tomllib

    config = SlackmdConfig()
    path = (path or config_path()).expanduser()

    if path.exists():
        logger.info("Loading config from %s", path)
        with open(path, "rb") as f:
            data = tomllib.load(f)
        for key, value in data.items():
            if key in _known_keys():
                setattr(config, key, str(value))
            else:
                logger.warning("Ignoring unknown config key %s in %s", key, path)
    else:
        logger.debug("No config file found at %s, using defaults", path)

    for key in _known_keys():
        value = os.environ.get(_ENV_PREFIX + key.upper())
        if value is not None:
            setattr(config, key, value)
    return config


def set_config_value(key: str, value: str) -> None:
    """Persist one setting to the config file, keeping the others."""
    import tomllib

    if key not in _known_keys():
        known = ", ".join(_known_keys())
        msg = f"Unknown config key {key!r}, expected one of: {known}"
        raise ValueError(msg)

    path = config_path()
    path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, str] = {}
    if path.exists():
        with open(path, "rb") as f:
            data = {k: str(v) for k, v in tomllib.load(f).items()}
    data[key] = value

    lines = []
    for k, v in data.items():
        escaped = v.replace("\\", "\\\\").replace('"', '\\"')
        lines.append(f'{k} = "{escaped}"')
    path.write_text("\n".join(lines) + "\n")
    logger.info("Set %s = %s in %s", key, value, path)
