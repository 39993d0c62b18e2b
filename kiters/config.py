from pydantic import BaseModel, Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from kiters.request_id import Width, validate_width

ENV_PREFIX = "KITERS_"

REQUEST_ID_HEADER_DEFAULT = "X-Request-ID"


class LoggingSettings(BaseModel):
    verbose: bool = Field(
        True, description="If logging to stdout with request id correlation"
    )


class RequestIdSettings(BaseModel):
    enabled: bool = Field(True, description="Install the request id middleware")
    width: Width = Field(
        Width.NARROW, description="Characters per id, 6 (narrow) or 11 (wide)."
    )
    mixed: bool = Field(
        False, description="Scramble counter values before encoding."
    )
    header_name: str = Field(
        REQUEST_ID_HEADER_DEFAULT, description="Header carrying the request id."
    )
    trust_inbound: bool = Field(
        False, description="Reuse a well-formed request id sent by the client."
    )

    @field_validator("width", mode="before")
    @classmethod
    def check_width(cls, value):
        return validate_width(value)


class MetricsSettings(BaseModel):
    enabled: bool = Field(
        True,
        description="If expose issued id counters to prometheus",
    )
    endpoint: str = Field("/metrics", description="Path to mount metrics on.")


class TraceSettings(BaseModel):
    enabled: bool = Field(True, description="Stamp request ids onto OTel spans")
    service_name: str = Field(
        "kiters", description="Service Name used in trace provider."
    )


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        case_sensitive=False, env_prefix=ENV_PREFIX, env_nested_delimiter="__"
    )

    request_id: RequestIdSettings = Field(default_factory=RequestIdSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    metrics: MetricsSettings = Field(default_factory=MetricsSettings)
    tracing: TraceSettings = Field(default_factory=TraceSettings)


def get_settings() -> Settings:
    if not hasattr(get_settings, "_instance"):
        get_settings._instance = Settings()
    return get_settings._instance
