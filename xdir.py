"""
Platform-agnostic standard directory locations.

Every category resolves the same way on every platform: an XDG environment
variable wins when it is set and non-empty, otherwise a fixed subdirectory
of the user's home is used.

    Directory   Environment         Default
    home        $HOME               platform-specific
    cache       $XDG_CACHE_HOME     ~/.cache
    config      $XDG_CONFIG_HOME    ~/.config
    bin         $XDG_BIN_HOME       ~/.local/bin
    data        $XDG_DATA_HOME      ~/.local/share
    state       $XDG_STATE_HOME     ~/.local/state
    runtime     $XDG_RUNTIME_DIR    (none)

Each function returns None when the location cannot be determined, which
almost always means the environment is misconfigured. Nothing is created,
checked for existence, or cached.

Override values are wrapped in pathlib.Path without trimming, expanding or
resolving them. The result compares equal to Path(value), but pathlib's own
lexical cleanup still applies: "/tmp/c/" comes back as "/tmp/c" and "a//b"
as "a/b". Callers that need the raw string should read the variable
themselves.

Applications that need the platform's native conventions (~/Library on
macOS, %APPDATA% on Windows) should use platformdirs instead.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from pathlib import Path

from homedir import HomeProvider, StaticHomeProvider, SystemHomeProvider
from xdg_env import XdgEnvironment

__all__ = [
    "Directory",
    "DirectoryResolver",
    "HomeProvider",
    "StaticHomeProvider",
    "SystemHomeProvider",
    "all_dirs",
    "bin",
    "cache",
    "config",
    "data",
    "home",
    "resolve",
    "runtime",
    "state",
]

logger = logging.getLogger(__name__)


class Directory(str, enum.Enum):
    """The standard directory categories."""

    HOME = "home"
    CACHE = "cache"
    CONFIG = "config"
    BIN = "bin"
    DATA = "data"
    STATE = "state"
    RUNTIME = "runtime"


@dataclass(frozen=True)
class LookupRule:
    """How a category is looked up."""

    env_field: str  # XdgEnvironment field holding the override
    fallback: str | None  # subpath of home, None means no fallback


LOOKUP_RULES: dict[Directory, LookupRule] = {
    Directory.CACHE: LookupRule("cache_home", ".cache"),
    Directory.CONFIG: LookupRule("config_home", ".config"),
    Directory.BIN: LookupRule("bin_home", ".local/bin"),
    Directory.DATA: LookupRule("data_home", ".local/share"),
    Directory.STATE: LookupRule("state_home", ".local/state"),
    Directory.RUNTIME: LookupRule("runtime_dir", None),
}


class DirectoryResolver:
    """
    Resolve standard directories against the current environment.

    The resolver holds no state besides its home provider; the environment
    is re-read on every call.
    """

    def __init__(self, provider: HomeProvider | None = None):
        """
        Args:
            provider: Source of the home directory (default: SystemHomeProvider)
        """
        self.provider = provider if provider is not None else SystemHomeProvider()

    def resolve(self, directory: Directory | str) -> Path | None:
        """
        Resolve a single category.

        Raises:
            ValueError: If directory is not a known category
        """
        return self._resolve(Directory(directory), XdgEnvironment())

    def all_dirs(self) -> dict[Directory, Path | None]:
        """Resolve every category against one environment snapshot."""
        env = XdgEnvironment()
        return {directory: self._resolve(directory, env) for directory in Directory}

    def _resolve(self, directory: Directory, env: XdgEnvironment) -> Path | None:
        if directory is Directory.HOME:
            return self.provider.home_dir()

        rule = LOOKUP_RULES[directory]
        variable = XdgEnvironment.variable(rule.env_field)
        value = env.get(rule.env_field)
        if value:
            logger.debug(f"{directory.value}: using {variable}")
            return Path(value)

        if rule.fallback is None:
            logger.debug(f"{directory.value}: {variable} not set")
            return None

        home_path = self.provider.home_dir()
        if home_path is None:
            logger.debug(f"{directory.value}: no override and no home directory")
            return None

        logger.debug(f"{directory.value}: {variable} not set, using home/{rule.fallback}")
        return home_path / rule.fallback

    def home(self) -> Path | None:
        """Returns the path to the user's home directory."""
        return self.resolve(Directory.HOME)

    def cache(self) -> Path | None:
        """Returns the path to the user's cache directory."""
        return self.resolve(Directory.CACHE)

    def config(self) -> Path | None:
        """Returns the path to the user's config directory."""
        return self.resolve(Directory.CONFIG)

    def bin(self) -> Path | None:
        """Returns the path to the user's executable directory."""
        return self.resolve(Directory.BIN)

    def data(self) -> Path | None:
        """Returns the path to the user's data directory."""
        return self.resolve(Directory.DATA)

    def state(self) -> Path | None:
        """Returns the path to the user's state directory."""
        return self.resolve(Directory.STATE)

    def runtime(self) -> Path | None:
        """Returns the path to the user's runtime directory."""
        return self.resolve(Directory.RUNTIME)


_default = DirectoryResolver()

home = _default.home
cache = _default.cache
config = _default.config
bin = _default.bin
data = _default.data
state = _default.state
runtime = _default.runtime
resolve = _default.resolve
all_dirs = _default.all_dirs
