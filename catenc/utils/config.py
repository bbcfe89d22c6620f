"""Config loading with validation."""

import yaml
from pathlib import Path

from catenc.encoders.registry import list_encoders
from catenc.io.serialization import VOCAB_FORMATS

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Encoder constructor arguments each scheme accepts from the `encoding` section
SCHEME_OPTIONS = {
    "ordinal": ("reserve_empty",),
    "onehot": ("reserve_empty",),
    "rolling_frequency": ("window",),
}


def load_config(path: str = "configs/default.yaml") -> dict:
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Config not found: {path}")
    with open(p) as f:
        cfg = yaml.safe_load(f) or {}

    # Validate required keys
    for key in ("encoding", "io"):
        if key not in cfg:
            raise ValueError(f"Missing config key: {key}")
    validate_config(cfg)
    return cfg


def validate_config(cfg: dict) -> None:
    enc = cfg["encoding"]
    scheme = enc.get("scheme")
    if scheme not in list_encoders():
        raise ValueError(
            f"encoding.scheme must be one of {list_encoders()}, got {scheme!r}"
        )
    window = enc.get("window", 1)
    if isinstance(window, bool) or not isinstance(window, int) or window <= 0:
        raise ValueError(f"encoding.window must be a positive integer, got {window!r}")
    if not isinstance(enc.get("reserve_empty", False), bool):
        raise ValueError("encoding.reserve_empty must be true or false")

    fmt = cfg["io"].get("format", "json")
    if fmt not in VOCAB_FORMATS:
        raise ValueError(f"io.format must be one of {VOCAB_FORMATS}, got {fmt!r}")

    level = log_level(cfg)
    if level not in LOG_LEVELS:
        raise ValueError(f"logging.level must be one of {LOG_LEVELS}, got {level!r}")


def default_vocab_format(cfg: dict) -> str:
    """Vocabulary format for files whose suffix names no format."""
    return cfg["io"].get("format", "json")


def log_level(cfg: dict) -> str:
    return str((cfg.get("logging") or {}).get("level", "INFO")).upper()


def encoder_kwargs(cfg: dict, scheme: str | None = None) -> dict:
    """Constructor keyword arguments for `scheme` (default: the configured one)."""
    enc = cfg["encoding"]
    scheme = scheme or enc["scheme"]
    return {k: enc[k] for k in SCHEME_OPTIONS.get(scheme, ()) if k in enc}
