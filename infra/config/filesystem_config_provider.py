from __future__ import annotations

import json
import re
from pathlib import Path

from domain.models import AppConfig
from domain.utils import split_csv

_REQUIRED_CONFIG_KEYS = {"API_TOKENS"}
_PLACEHOLDER_PATTERN = re.compile(r"^YOUR_", re.IGNORECASE)
_DEFAULT_HOST = "127.0.0.1"
_DEFAULT_PORT = 8000


class FileSystemConfigProvider:
    """Reads config.json from a config directory.

    Every public method re-reads from disk so that edits
    to the JSON file take effect without restarting the app.
    """

    def __init__(self, config_dir: str) -> None:
        self._config_dir = Path(config_dir)

    def validate(self) -> list[str]:
        errors: list[str] = []
        config_path = self._config_dir / "config.json"

        config_data = self._validate_json_file(config_path, _REQUIRED_CONFIG_KEYS, errors)
        if config_data is not None:
            errors.extend(self._validate_config_formats(config_data))

        return errors

    @staticmethod
    def _validate_config_formats(data: dict) -> list[str]:
        errors: list[str] = []
        tokens = data.get("API_TOKENS")
        if not isinstance(tokens, dict) or not tokens:
            errors.append("API_TOKENS must be a non-empty object mapping tokens to user ids.")
        else:
            for token, uid in tokens.items():
                if _PLACEHOLDER_PATTERN.search(token):
                    errors.append(f"API_TOKENS entry for '{uid}' is a placeholder. Set a real token.")
                if not isinstance(uid, str) or not uid.strip():
                    errors.append("API_TOKENS values must be non-empty user id strings.")

        port = data.get("PORT", _DEFAULT_PORT)
        if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
            errors.append(f"PORT must be an integer between 1 and 65535, got {port!r}.")

        host = data.get("HOST", _DEFAULT_HOST)
        if not isinstance(host, str) or not host.strip():
            errors.append("HOST must be a non-empty string.")

        origins = data.get("ALLOWED_ORIGINS")
        if origins is not None:
            if isinstance(origins, list):
                if not all(isinstance(o, str) for o in origins):
                    errors.append("ALLOWED_ORIGINS entries must be strings.")
            elif not isinstance(origins, str):
                errors.append("ALLOWED_ORIGINS must be a list or a comma-separated string.")

        debug_mode = data.get("debug_mode")
        if debug_mode is not None and not isinstance(debug_mode, bool):
            errors.append("debug_mode must be a boolean (true/false), not a string.")

        return errors

    def get_config(self) -> AppConfig:
        data = self._read_json("config.json")
        origins = data.get("ALLOWED_ORIGINS") or ()
        if isinstance(origins, str):
            origins = split_csv(origins)
        return AppConfig(
            api_tokens=data["API_TOKENS"],
            host=data.get("HOST", _DEFAULT_HOST),
            port=int(data.get("PORT", _DEFAULT_PORT)),
            allowed_origins=tuple(origins),
            debug_mode=bool(data.get("debug_mode", False)),
        )

    # -- internal helpers ---------------------------------------------------

    def _read_json(self, filename: str) -> dict:
        path = self._config_dir / filename
        return json.loads(path.read_text(encoding="utf-8"))

    @staticmethod
    def _validate_json_file(
        path: Path,
        required_keys: set[str],
        errors: list[str],
    ) -> dict | None:
        """Validate a JSON file exists and has required keys.

        Returns the parsed dict on success, or None if the file
        is missing or unparseable.
        """
        if not path.is_file():
            errors.append(f"Missing file: {path}")
            return None
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (json.JSONDecodeError, OSError) as exc:
            errors.append(f"Cannot read {path}: {exc}")
            return None
        if not isinstance(data, dict):
            errors.append(f"{path.name} must contain a JSON object")
            return None
        missing = required_keys - set(data.keys())
        if missing:
            errors.append(f"{path.name} missing keys: {', '.join(sorted(missing))}")
            return None
        return data
