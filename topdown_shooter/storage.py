import json
import logging
import math
import os

log = logging.getLogger(__name__)


class HighscoreStore:
    """Tiny key-value store backed by a JSON file.

    ``get`` never raises: a missing, unreadable or corrupt file, or a value
    that is not a non-negative number, reads as ``default``.
    """

    def __init__(self, path):
        self.path = path

    def _load(self):
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            log.warning("could not read %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            log.warning("ignoring %s: expected an object, got %s", self.path, type(data).__name__)
            return {}
        return data

    def get(self, key, default=0):
        value = self._load().get(key, default)
        if isinstance(value, bool) or not isinstance(value, (int, float)) or not math.isfinite(value) or value < 0:
            log.warning("bad value for %r in %s: %r", key, self.path, value)
            return default
        return int(value)

    def set(self, key, value):
        data = self._load()
        data[key] = int(value)
        try:
            with open(self.path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2)
        except OSError as e:
            # game should not crash if disk is read-only
            log.warning("could not write %s: %s", self.path, e)
