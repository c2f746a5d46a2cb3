import json
from dataclasses import dataclass, asdict
from pathlib import Path

CONFIG_DIR = Path.home() / ".config" / "histcomplete"

TRUE_STRINGS = ("1", "true", "yes", "on")


@dataclass
class Config:
    history_file: str = str(CONFIG_DIR / "history.csv")
    max_suggestions: int = 10
    complete_while_typing: bool = True

    @staticmethod
    def _get_config_path() -> Path:
        """Returns path to ~/.config/histcomplete/config.json"""
        CONFIG_DIR.mkdir(parents=True, exist_ok=True)
        return CONFIG_DIR / "config.json"

    @property
    def history_path(self) -> Path:
        return Path(self.history_file).expanduser()

    @classmethod
    def load(cls) -> "Config":
        """Loads config from file or returns defaults."""
        path = cls._get_config_path()
        if not path.exists():
            return cls()

        try:
            with open(path, "r") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError):
            return cls()  # Fallback to defaults on a broken file

        if not isinstance(data, dict):
            return cls()

        # Unknown keys are dropped, badly typed values keep their default
        values = {}
        for key in asdict(cls()):
            if key not in data:
                continue
            try:
                values[key] = cls._convert(key, data[key])
            except (TypeError, ValueError, OverflowError):
                continue
        return cls(**values)

    @staticmethod
    def _convert(key: str, value):
        """Coerces a raw value for key. Raises TypeError or ValueError if it doesn't fit."""
        if key == "max_suggestions":
            if isinstance(value, bool):
                raise TypeError(f"{key} must be a number")
            value = int(value)
            if value < 0:
                raise ValueError(f"{key} must be 0 or more")
        elif key == "complete_while_typing":
            if isinstance(value, str):
                value = value.strip().lower() in TRUE_STRINGS
            elif not isinstance(value, (bool, int)):
                raise TypeError(f"{key} must be true or false")
            value = bool(value)
        elif not isinstance(value, str):
            raise TypeError(f"{key} must be a string")
        return value

    def save(self):
        """Saves current config to file."""
        path = self._get_config_path()
        with open(path, "w") as f:
            json.dump(asdict(self), f, indent=4)

    def set(self, key: str, value):
        """Updates a config value and persists it."""
        if key not in asdict(self):
            raise KeyError(f"Unknown config key: {key}")

        setattr(self, key, self._convert(key, value))
        self.save()
