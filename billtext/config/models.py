"""Configuration schema models using Pydantic."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator


class ReclassifierMode(str, Enum):
    """Which line-ordering heuristic the reclassifier applies after repositioning.

    STRICT drops numbered lines that break the ascending line-number sequence.
    STRUCTURAL keeps every line, spaces out headers and joins wrapped
    continuation fragments onto their numbered parent line.
    """

    STRICT = "strict"
    STRUCTURAL = "structural"


class LogLevel(str, Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class LogFormat(str, Enum):
    """Log output formats."""

    JSON = "json"
    KEY_VALUE = "key-value"


class ReclassifierConfig(BaseModel):
    """Settings for the line reclassifier pipeline."""

    mode: ReclassifierMode = Field(
        ReclassifierMode.STRUCTURAL, description="strict or structural"
    )
    line_number_width: int = Field(
        8, ge=4, le=16, description="Width of the line-number column"
    )
    max_join_length: int = Field(
        120, ge=40, le=400,
        description="Longest line a wrapped continuation may be joined into",
    )

    model_config = {"use_enum_values": True}


class FilteringConfig(BaseModel):
    """Settings for the boilerplate content filter."""

    enabled: bool = Field(True, description="Strip page footers, attributions and front matter")


class HttpConfig(BaseModel):
    """Settings for fetching PDFs over HTTP."""

    timeout: int = Field(30, ge=5, le=300, description="Request timeout in seconds")
    user_agent: str = Field(
        "billtext/1.0", min_length=1, description="User-Agent header for PDF requests"
    )
    verify_ssl: bool = Field(True, description="Validate TLS certificates")
    max_pdf_size_mb: int = Field(
        50, ge=1, le=200, description="Largest PDF payload accepted, in megabytes"
    )

    @field_validator("user_agent")
    @classmethod
    def strip_user_agent(cls, v: str) -> str:
        """Strip whitespace from user agent."""
        stripped = v.strip()
        if not stripped:
            raise ValueError("user_agent cannot be empty")
        return stripped


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: LogLevel = Field(LogLevel.INFO, description="Log level")
    format: LogFormat = Field(
        LogFormat.KEY_VALUE, description="Log output format (json or key-value)"
    )

    model_config = {"use_enum_values": True}


class AppConfig(BaseModel):
    """Root configuration object. Every section is optional."""

    reclassifier: ReclassifierConfig = Field(default_factory=ReclassifierConfig)
    filtering: FilteringConfig = Field(default_factory=FilteringConfig)
    http: HttpConfig = Field(default_factory=HttpConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
