"""
Configuration loading.

Loads import settings and the owner seed file from YAML, with environment
overrides for deployment.
"""

import os
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from schedule_sync.config.settings import ImportSettings
from schedule_sync.core.models import Owner

# Environment variable -> settings field
ENV_OVERRIDES = {
    "SCHEDULE_SYNC_DELIMITER": "delimiter",
    "SCHEDULE_SYNC_ENCODING": "encoding",
    "SCHEDULE_SYNC_OWNERS_FILE": "owners_file",
    "SCHEDULE_SYNC_EXPORT_DIR": "export_dir",
    "LOG_LEVEL": "log_level",
    "LOG_FORMAT": "log_format",
}


class SettingsLoader:
    """
    Loads ImportSettings from a YAML file.

    Expected YAML format:
    ```yaml
    import:
      delimiter: ","
      allowed_extensions: [".csv"]
      owners_file: config/owners.yaml
      export_dir: reports
    logging:
      level: INFO
      format: json
    ```
    """

    def __init__(self, config_path: str | Path | None = None, env_file: str | Path | None = None):
        """
        Initialize the settings loader.

        Args:
            config_path: YAML settings file; defaults only when None
            env_file: Optional .env file loaded before overrides are read
        """
        self.config_path = Path(config_path) if config_path else None
        if self.config_path and not self.config_path.exists():
            raise FileNotFoundError(f"Settings file not found: {config_path}")
        self.env_file = env_file

    def load(self) -> ImportSettings:
        """
        Load settings: file values first, then environment overrides.

        Returns:
            Validated settings

        Raises:
            ValueError: If the YAML is malformed or holds invalid values
        """
        values: dict[str, Any] = {}
        if self.config_path:
            values.update(self._read_file())

        if self.env_file:
            load_dotenv(self.env_file, override=False)
        for env_name, field_name in ENV_OVERRIDES.items():
            env_value = os.getenv(env_name)
            if env_value:
                values[field_name] = env_value

        return ImportSettings(**values)

    def _read_file(self) -> dict[str, Any]:
        with open(self.config_path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        if not isinstance(config, dict):
            raise ValueError("Settings file must contain a mapping")

        values: dict[str, Any] = dict(config.get("import") or {})
        logging_section = config.get("logging") or {}
        if "level" in logging_section:
            values["log_level"] = logging_section["level"]
        if "format" in logging_section:
            values["log_format"] = logging_section["format"]
        return values


def load_owners(owners_path: str | Path) -> list[Owner]:
    """
    Load the owner collection from a YAML file.

    Expected YAML format:
    ```yaml
    owners:
      - id: "1"
        name: Juan Pérez
        email: juan@empresa.com
        department: Desarrollo
        schedules:
          - id: s1
            ownerId: "1"
            date: "2025-01-08"
            startTime: "09:00"
            endTime: "17:00"
            activity: Desarrollo Frontend
            status: active
    ```

    Args:
        owners_path: Path to the owners file

    Returns:
        Owners in file order

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the file is malformed
    """
    path = Path(owners_path)
    if not path.exists():
        raise FileNotFoundError(f"Owners file not found: {owners_path}")

    with open(path, encoding="utf-8") as f:
        config = yaml.safe_load(f)

    if not config or "owners" not in config:
        raise ValueError("Owners file must contain 'owners' section")
    if not isinstance(config["owners"], list):
        raise ValueError("'owners' must be a list")

    owners = []
    for idx, entry in enumerate(config["owners"]):
        if not isinstance(entry, dict) or "id" not in entry:
            raise ValueError(f"Owner entry {idx} is missing 'id'")
        # YAML reads unquoted ids as ints
        entry = {**entry, "id": str(entry["id"])}
        entry["schedules"] = [
            {**record, "ownerId": str(record.get("ownerId", entry["id"]))}
            for record in entry.get("schedules") or []
        ]
        owners.append(Owner(**entry))
    return owners
