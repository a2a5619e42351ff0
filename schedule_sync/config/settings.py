"""
Settings model for schedule imports.
"""

from typing import Literal

from pydantic import BaseModel, Field, field_validator


class ImportSettings(BaseModel):
    """
    Runtime settings of the import tooling.

    Attributes:
        delimiter: Field delimiter of the payload
        allowed_extensions: Accepted payload file suffixes
        encoding: Payload text encoding
        owners_file: YAML file seeding the owner collection
        export_dir: Directory receiving exported reports
        log_level: DEBUG, INFO, WARNING, ERROR or CRITICAL
        log_format: "json" or "text"
    """

    delimiter: str = Field(",", min_length=1, max_length=1)
    allowed_extensions: list[str] = Field(default_factory=lambda: [".csv"])
    encoding: str = "utf-8"
    owners_file: str | None = "config/owners.yaml"
    export_dir: str = "reports"
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level '{v}'")
        return level

    @field_validator("allowed_extensions")
    @classmethod
    def normalize_extensions(cls, v: list[str]) -> list[str]:
        return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]

    class Config:
        json_schema_extra = {
            "example": {
                "delimiter": ",",
                "allowed_extensions": [".csv"],
                "encoding": "utf-8",
                "owners_file": "config/owners.yaml",
                "export_dir": "reports",
                "log_level": "INFO",
                "log_format": "json"
            }
        }
