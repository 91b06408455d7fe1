import os
import logging
from pathlib import Path

import yaml
from dotenv import load_dotenv

log = logging.getLogger("statestack.config")

# Project root is two levels up from src/statestack/
PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"

DEFAULT_PANELS = {
    "main_menu": {"title": "Main Menu", "color": [30, 60, 120], "rect": [0, 0, 640, 480]},
    "pause": {"title": "Paused", "color": [90, 90, 90], "rect": [170, 140, 300, 200]},
}


def load_config(config_path: str = None) -> dict:
    """Load configuration from YAML file with .env overrides."""
    load_dotenv(PROJECT_ROOT / ".env")

    yaml_path = Path(config_path) if config_path else CONFIG_DIR / "default_screens.yaml"
    if not yaml_path.exists():
        log.warning("Config file not found: %s, using defaults", yaml_path)
        config = {}
    else:
        with open(yaml_path) as f:
            config = yaml.safe_load(f) or {}

    panels = config.get("panels") or {k: dict(v) for k, v in DEFAULT_PANELS.items()}
    config["panels"] = panels

    # Environment variable overrides
    display = config.setdefault("display", {})
    display["width"] = int(os.environ.get("STATESTACK_WIDTH", display.get("width", 640)))
    display["height"] = int(os.environ.get("STATESTACK_HEIGHT", display.get("height", 480)))

    config["initial"] = os.environ.get(
        "STATESTACK_INITIAL", config.get("initial", next(iter(panels)))
    )
    if config["initial"] not in panels:
        raise ValueError(f"initial panel {config['initial']!r} is not defined")

    log.info(
        "Config loaded: %d panels, initial '%s', display %dx%d",
        len(panels),
        config["initial"],
        display["width"],
        display["height"],
    )
    return config
