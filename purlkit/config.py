import tomllib
import os
import logging
from typing import Dict, Any, Optional

CONFIG_FILE_PATH = "pyproject.toml"

OUTPUT_FORMATS = ("text", "json")

DEFAULT_CONFIG = {
    "logging_level": "WARNING",
    "output_format": "text",  # Options: "text", "json"
}

def get_logging_level_from_string(level_str: str) -> int:
    """Converts a logging level string to its integer value."""
    level = getattr(logging, level_str.upper(), logging.WARNING)
    return level if isinstance(level, int) else logging.WARNING

def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Loads purlkit configuration from the [tool.purlkit] table of pyproject.toml.
    Falls back to default values if the file or specific keys are not found.
    The environment variable `PURLKIT_LOGGING_LEVEL` overrides `logging_level`.
    """
    path = path or CONFIG_FILE_PATH
    config = DEFAULT_CONFIG.copy()
    logger = logging.getLogger(__name__)

    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
            tool = data.get("tool", {})
            tool_config = tool.get("purlkit", {}) if isinstance(tool, dict) else None
            if not isinstance(tool_config, dict):
                logger.warning(f"[tool.purlkit] in {path} is not a table. Using default configurations.")
                tool_config = {}

            if tool_config:
                config["logging_level"] = str(tool_config.get("logging_level", config["logging_level"]))
                config["output_format"] = tool_config.get("output_format", config["output_format"])
                if config["output_format"] not in OUTPUT_FORMATS:
                    logger.warning(
                        f"Invalid 'output_format': {config['output_format']} in {path}. "
                        f"Using default '{DEFAULT_CONFIG['output_format']}'. Allowed values: 'text', 'json'."
                    )
                    config["output_format"] = DEFAULT_CONFIG["output_format"]

    except FileNotFoundError:
        logger.info(f"{path} not found. Using default configurations.")
    except tomllib.TOMLDecodeError:
        logger.error(f"Error decoding {path}. Using default configurations.")

    config["logging_level"] = os.getenv("PURLKIT_LOGGING_LEVEL", config["logging_level"])

    # Convert logging_level string to its integer representation.
    config["logging_level_int"] = get_logging_level_from_string(config["logging_level"])

    return config

# Load configuration once when the module is imported.
CONFIG = load_config()
