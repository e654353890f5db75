import logging
import os
from dataclasses import dataclass

# Fields that may be changed at runtime (CLI --set); name -> type
EDITABLE_FIELDS: dict[str, type] = {
    "MAX_RESULTS": int,
    "SHOW_GRID": bool,
    "LOG_LEVEL": str,
    "DEBUG": bool,
}


@dataclass
class Settings:
    MAX_RESULTS: int = 10
    SHOW_GRID: bool = True

    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s %(name)s %(levelname)s %(message)s"
    DEBUG: bool = False

    def __post_init__(self):
        # Override from environment
        for fld in self.__dataclass_fields__:
            env_val = os.environ.get(fld)
            if env_val is not None:
                setattr(self, fld, _coerce(type(getattr(self, fld)), env_val))


def _coerce(target: type, value):
    if target is bool:
        if isinstance(value, bool):
            return value
        return str(value).strip().lower() in ("1", "true", "yes", "on")
    if target is int:
        if isinstance(value, bool):
            raise ValueError("expected an integer, got a boolean")
        return int(value)
    if target is float:
        return float(value)
    return str(value)


def log_level_value(name: str) -> int:
    """Numeric logging level for a name such as "info"; ValueError if unknown."""
    level = logging.getLevelName(str(name).strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level {name!r}")
    return level


def get_editable_settings(cfg: Settings) -> dict:
    return {name: getattr(cfg, name) for name in EDITABLE_FIELDS}


def update_settings(cfg: Settings, **values) -> dict[str, str]:
    """Apply editable values to ``cfg``. Returns {field: error} for rejected ones.

    Valid fields are applied even when others in the same call are rejected.
    """
    errors: dict[str, str] = {}
    for name, raw in values.items():
        if name not in EDITABLE_FIELDS:
            if hasattr(cfg, name):
                errors[name] = "not editable"
            else:
                errors[name] = "unknown setting"
            continue
        try:
            value = _coerce(EDITABLE_FIELDS[name], raw)
            if name == "LOG_LEVEL":
                log_level_value(value)
            setattr(cfg, name, value)
        except (TypeError, ValueError) as e:
            errors[name] = f"invalid {EDITABLE_FIELDS[name].__name__}: {e}"
    return errors


settings = Settings()
