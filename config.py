"""Configuration management for Pocket Ledger.

Reads configuration from ~/.config/ledger.toml and creates default config if needed.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional
import tomllib
import tomli_w


@dataclass
class Config:
    """Application configuration."""

    base_dir: Path
    log_level: str
    log_dir: Path
    currency_symbol: str = "₹"
    top_expenses: int = 5
    seed_file: Optional[Path] = None

    @classmethod
    def default(cls) -> "Config":
        """Create a Config with default values."""
        home = Path.home()
        base_dir = home / "data" / "ledger"
        return cls(
            base_dir=base_dir,
            log_level="INFO",
            log_dir=base_dir / "logs",
        )


def get_config_path() -> Path:
    """Get the path to the config file."""
    return Path.home() / ".config" / "ledger.toml"


def get_samples_dir() -> Path:
    """Get the path to the bundled sample data directory.

    This is always relative to the code location, not configurable.
    """
    return Path(__file__).parent / "ingestion" / "samples"


def get_sample_path() -> Path:
    """Get the path to the bundled sample ledger."""
    return get_samples_dir() / "november_2025.yaml"


def load_config() -> Config:
    """Load configuration from file, creating default if it doesn't exist.

    Returns:
        Config object with loaded or default values.
    """
    config_path = get_config_path()

    # If config doesn't exist, create it with defaults
    if not config_path.exists():
        config = Config.default()
        _write_config(config)
        return config

    with open(config_path, "rb") as f:
        data = tomllib.load(f)

    # Parse with defaults for any missing values
    base_dir = Path(data.get("base_dir", Path.home() / "data" / "ledger"))

    log_config = data.get("logging", {})
    log_level = log_config.get("level", "INFO")
    log_dir = Path(log_config.get("log_dir", base_dir / "logs"))

    display_config = data.get("display", {})
    currency_symbol = display_config.get("currency_symbol", "₹")
    top_expenses = int(display_config.get("top_expenses", 5))

    data_config = data.get("data", {})
    seed_file = data_config.get("seed_file")

    return Config(
        base_dir=base_dir,
        log_level=log_level,
        log_dir=log_dir,
        currency_symbol=currency_symbol,
        top_expenses=top_expenses,
        seed_file=Path(seed_file) if seed_file else None,
    )


def _write_config(config: Config) -> None:
    """Write config to the config file.

    Args:
        config: Config object to write.
    """
    config_path = get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = {
        "base_dir": str(config.base_dir),
        "logging": {
            "level": config.log_level,
            "log_dir": str(config.log_dir),
        },
        "display": {
            "currency_symbol": config.currency_symbol,
            "top_expenses": config.top_expenses,
        },
    }
    # TOML has no null, so an unset seed file is simply left out
    if config.seed_file is not None:
        data["data"] = {"seed_file": str(config.seed_file)}

    with open(config_path, "wb") as f:
        tomli_w.dump(data, f)
