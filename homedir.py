"""
Home directory providers.

The resolver in xdir only needs one question answered: where is the
user's home directory? Anything platform-specific lives here.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Protocol

logger = logging.getLogger(__name__)


class HomeProvider(Protocol):
    """Answers the location of the current user's home directory."""

    def home_dir(self) -> Path | None: ...


class SystemHomeProvider:
    """
    Look up the home directory the way the platform does.

    Resolution order:
    - POSIX: HOME (if set and non-empty), then the password database entry
      for the current uid
    - Windows: USERPROFILE, then HOMEDRIVE + HOMEPATH; HOME is ignored even
      when an MSYS or Git Bash shell sets it

    Returns None instead of raising when nothing usable is found.
    """

    def home_dir(self) -> Path | None:
        if os.name == "nt":
            candidate = os.path.expanduser("~")
        else:
            candidate = os.environ.get("HOME") or self._passwd_home()

        # expanduser hands "~" back untouched when it cannot find anything
        if not candidate or candidate.startswith("~"):
            logger.debug("Home directory could not be determined")
            return None
        return Path(candidate)

    @staticmethod
    def _passwd_home() -> str | None:
        try:
            import pwd
        except ImportError:
            logger.debug("pwd module unavailable, no password database lookup")
            return None

        try:
            return pwd.getpwuid(os.getuid()).pw_dir
        except KeyError:
            logger.debug(f"No password database entry for uid {os.getuid()}")
            return None


class StaticHomeProvider:
    """Always answers the same home directory (or None)."""

    def __init__(self, path: str | os.PathLike[str] | None):
        self.path = Path(path) if path is not None else None

    def home_dir(self) -> Path | None:
        return self.path

    def __repr__(self) -> str:
        return f"StaticHomeProvider({self.path!r})"
