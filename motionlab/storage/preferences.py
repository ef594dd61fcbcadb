"""
Persistent key/value preferences

Float values stored as one JSON document per namespace. Writes are
synchronous and replace the file atomically so a power loss leaves either
the old or the new document on disk.
"""

import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

logger = logging.getLogger(__name__)


def default_prefs_dir() -> Path:
    """Per-user directory for preference files"""
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / "motionlab"
    return Path.home() / ".config" / "motionlab"


class Preferences:
    """
    Namespaced float store

    Example:
        >>> prefs = Preferences("motion-lab")
        >>> high_g = prefs.get_float("highG", 0.0)
        >>> prefs.put_float("highG", 2.4)
    """

    def __init__(self, namespace: str, directory: Optional[Union[str, Path]] = None):
        """
        Args:
            namespace: application identifier, used as the file name
            directory: where to keep the file (default: per-user config dir)
        """
        self.namespace = namespace
        self.directory = Path(directory) if directory is not None else default_prefs_dir()
        self.path = self.directory / f"{namespace}.json"
        self._values: Dict[str, float] = self._load()

    def _load(self) -> Dict[str, float]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable preferences {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.warning(f"Ignoring malformed preferences {self.path}")
            return {}
        return data

    def get_float(self, key: str, default: float = 0.0) -> float:
        """Return the stored value, or default if missing or not a number"""
        value = self._values.get(key, default)
        try:
            return float(value)
        except (TypeError, ValueError):
            return default

    def put_float(self, key: str, value: float) -> None:
        """Store value and write the namespace file immediately"""
        self._values[key] = float(value)
        self._save()

    def _save(self) -> None:
        """Write the namespace file; failures keep the in-memory value"""
        tmp_path = self.path.with_suffix(".json.tmp")
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(self._values, f, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_path, self.path)
        except OSError as e:
            logger.warning(f"Could not save preferences to {self.path}: {e}")
            return
        finally:
            if tmp_path.exists():
                tmp_path.unlink()
        logger.debug(f"Saved preferences to {self.path}")

