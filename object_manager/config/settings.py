from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ----------------------------
# Logger settings
# ----------------------------
class LoggingSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="OBJECT_MANAGER_LOG_", extra="ignore")

    name: str = "object_manager"
    level: str = "INFO"
    colored: bool = True


# ----------------------------
# Container settings
# ----------------------------
class ContainerSettings(BaseSettings):
    model_config = SettingsConfigDict(env_prefix="OBJECT_MANAGER_", extra="ignore")

    # exact runtime-type matching of constructor arguments
    strict_argument_types: bool = True
    # fail fast with CircularDependency instead of recursing
    detect_cycles: bool = True


# ----------------------------
# Top-level settings
# ----------------------------
class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    container: ContainerSettings = Field(default_factory=ContainerSettings)
