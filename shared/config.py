"""
PinPoint Configuration Management
==================================

Centralized configuration for the PinPoint toolkit using Python
dataclasses and TOML-based persistence.

Config is kept separate from code: every tunable lives in a dataclass
with a sensible default, and a ``config.toml`` file may override any
subset of keys.

References:
    - Wiggins, A. (2011). The Twelve-Factor App. https://12factor.net/
    - TOML v1.0.0 Specification. https://toml.io/en/v1.0.0
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


# ---------------------------------------------------------------------------
# Default configuration file path relative to the project root
# ---------------------------------------------------------------------------
_DEFAULT_CONFIG_PATH: Path = Path(__file__).resolve().parent.parent / "config.toml"


# ========================== Tool-Specific Configs ==========================


@dataclass(frozen=False, slots=True)
class PredictorConfig:
    """Configuration for the WPS PIN predictor.

    Scoring constants that affect compatibility of the confidence values
    are not configurable; these settings only control where observations
    come from, how many are read, and what gets displayed.
    """

    # Neighbor dataset
    database: str = "pinpoint.db"
    neighbor_limit: int = 1000
    scan_timeout: float = 0.0  # seconds, 0 disables the deadline

    # Display filters
    top: int = 0
    min_confidence: float = 0.0


# =========================== Global Settings ===============================


@dataclass(frozen=False, slots=True)
class GlobalConfig:
    """Global settings: logging verbosity, log files and output location."""

    log_level: str = "WARNING"
    log_file: str = ""
    log_json: bool = False
    output_dir: str = "output"
    debug: bool = False


# =========================== Master Config =================================


@dataclass(frozen=False, slots=True)
class PinpointConfig:
    """Master configuration aggregating predictor and global settings.

    Usage:
        >>> config = PinpointConfig.load()                  # from default path
        >>> config = PinpointConfig.load("custom.toml")     # from custom path
        >>> config.predictor.neighbor_limit
        1000
    """

    global_settings: GlobalConfig = field(default_factory=GlobalConfig)
    predictor: PredictorConfig = field(default_factory=PredictorConfig)

    # ------------------------------------------------------------------ #
    #  TOML Loading
    # ------------------------------------------------------------------ #

    @classmethod
    def load(cls, path: str | Path | None = None) -> PinpointConfig:
        """Load configuration from a TOML file.

        If *path* is ``None`` the loader looks for ``config.toml`` in the
        project root.  Missing keys fall back to dataclass defaults.

        Args:
            path: Filesystem path to a TOML configuration file.

        Returns:
            A fully-populated :class:`PinpointConfig` instance.

        Raises:
            FileNotFoundError: If the specified path does not exist
                *and* was explicitly provided by the caller.
        """
        config_path = Path(path) if path is not None else _DEFAULT_CONFIG_PATH

        if not config_path.exists():
            if path is not None:
                raise FileNotFoundError(
                    f"Configuration file not found: {config_path}"
                )
            return cls()

        with open(config_path, "rb") as fh:
            raw: dict[str, Any] = tomllib.load(fh)

        return cls(
            global_settings=cls._build_section(GlobalConfig, raw.get("global", {})),
            predictor=cls._build_section(PredictorConfig, raw.get("pinpoint", {})),
        )

    # ------------------------------------------------------------------ #
    #  Serialisation helpers
    # ------------------------------------------------------------------ #

    def to_dict(self) -> dict[str, Any]:
        """Serialise the entire configuration tree to a plain dictionary."""
        return asdict(self)

    @staticmethod
    def _build_section(cls: type, data: dict[str, Any]) -> Any:
        """Instantiate a dataclass *cls* using only the keys it declares.

        Unknown keys in the TOML source are ignored so that newer config
        files do not break older code.
        """
        valid_keys = {f.name for f in cls.__dataclass_fields__.values()}  # type: ignore[attr-defined]
        filtered = {k: v for k, v in data.items() if k in valid_keys}
        return cls(**filtered)
