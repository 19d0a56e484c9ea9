import json
from pathlib import Path

from aircraft_encryptor.core import settings
from aircraft_encryptor.core.logging_config import system_logger
from aircraft_encryptor.crypto.errors import ConfigError

DEFAULT_CONFIG = {
    "source_suffix": settings.SOURCE_SUFFIX,
    "encrypted_suffix": settings.ENCRYPTED_SUFFIX,
    "decrypted_suffix": settings.DECRYPTED_SUFFIX,
}


def load_config(path=None) -> dict:
    """
    Read config.json and merge it over DEFAULT_CONFIG.
    A missing file is not an error: defaults are returned.
    """
    config_file = Path(path or settings.CONFIG_FILE)

    if not config_file.exists():
        system_logger.info(f"{config_file} not found. Using default config.")
        return DEFAULT_CONFIG.copy()

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise ConfigError(f"{config_file} is not valid JSON: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"{config_file} must hold a JSON object, got {type(data).__name__}"
        )

    for key in DEFAULT_CONFIG:
        if key in data and not isinstance(data[key], str):
            raise ConfigError(f"{config_file}: '{key}' must be a string")

    config = DEFAULT_CONFIG.copy()
    config.update({k: v for k, v in data.items() if k in DEFAULT_CONFIG})
    return config


def save_config(config: dict, path=None):
    config_file = Path(path or settings.CONFIG_FILE)
    config_file.parent.mkdir(parents=True, exist_ok=True)

    with open(config_file, "w", encoding="utf-8") as f:
        json.dump(config, f, indent=2)


def update_config(new_data: dict, path=None):
    config = load_config(path)
    config.update(new_data)
    save_config(config, path)
    return config
