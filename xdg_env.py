"""
Environment snapshot for xdir.

Reads the XDG Base Directory variables from the process environment.
A fresh XdgEnvironment is built for every query so changes to os.environ
are always picked up.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class XdgEnvironment(BaseSettings):
    """XDG directory overrides.

    Each field is read from exactly one variable, matched case-sensitively
    (xdg_cache_home is not XDG_CACHE_HOME). A variable that is missing or
    set to the empty string is left as None. Values are otherwise taken
    verbatim (no whitespace stripping).
    """

    model_config = SettingsConfigDict(
        case_sensitive=True,
        env_ignore_empty=True,
        extra="ignore",
    )

    cache_home: str | None = Field(
        default=None,
        validation_alias="XDG_CACHE_HOME",
        description="User-specific non-essential data",
    )
    config_home: str | None = Field(
        default=None,
        validation_alias="XDG_CONFIG_HOME",
        description="User-specific configuration files",
    )
    bin_home: str | None = Field(
        default=None,
        validation_alias="XDG_BIN_HOME",
        description="User-specific executables",
    )
    data_home: str | None = Field(
        default=None,
        validation_alias="XDG_DATA_HOME",
        description="User-specific data files",
    )
    state_home: str | None = Field(
        default=None,
        validation_alias="XDG_STATE_HOME",
        description="User-specific state files",
    )
    runtime_dir: str | None = Field(
        default=None,
        validation_alias="XDG_RUNTIME_DIR",
        description="Per-session runtime files",
    )

    def get(self, name: str) -> str | None:
        return getattr(self, name)

    @classmethod
    def variable(cls, name: str) -> str:
        """Environment variable backing a field."""
        return cls.model_fields[name].validation_alias
