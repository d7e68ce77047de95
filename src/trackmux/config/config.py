"""Configuration management for trackmux."""

import tomllib
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, ClassVar

from trackmux.config.paths import default_config_path
from trackmux.platform.logging import logger


def _path_field(default: Path | None = None) -> Any:
    """Create a field for Path objects with proper conversion.

    Args:
        default: Default value for the field.

    Returns:
        Field with proper metadata for path handling.
    """
    return field(default=default, metadata={"path": True})


@dataclass
class Config:
    """Application configuration."""

    # Output defaults applied when the caller does not pass explicit settings
    output_codec: str = "FLAC"
    output_quality: str = "27"
    bitrate: int | None = None
    apply_metadata: bool = True

    # Album art resize target
    album_art_size: int = 3600
    album_art_quality: float = 1.0

    # External binaries; resolved from PATH when unset
    ffmpeg_path: Path | None = _path_field()
    flac_path: Path | None = _path_field()

    # Log file path
    log_file: Path | None = _path_field()

    # Artwork download timeout in seconds
    http_timeout: float = 15.0

    _instance: ClassVar["Config | None"] = None
    _loaded_from: ClassVar[Path | None] = None

    def __post_init__(self) -> None:
        """Convert string paths to ``Path`` objects using field metadata."""

        for f in fields(self):
            if not f.metadata.get("path", False):
                continue
            value = getattr(self, f.name)
            if isinstance(value, str):
                setattr(self, f.name, Path(value) if value.strip() else None)

    def save(self, target: Path | None = None) -> Path:
        """Save configuration to ``target`` or the default config path."""

        config_dict = asdict(self)
        for key, value in config_dict.items():
            if isinstance(value, Path):
                config_dict[key] = str(value)

        destination = target or default_config_path()
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
            _ = destination.write_text(self._render_toml(config_dict), encoding="utf-8")
            logger.info("Configuration saved to %s", destination)
        except Exception as e:
            logger.error("Failed to save configuration: %s", e)
            raise
        return destination

    def _render_toml(self, config: dict[str, Any]) -> str:
        """Render configuration as TOML with inline guidance."""

        lines: list[str] = []

        lines.append("# trackmux Configuration File")
        lines.append("")

        lines.append("# Output codec: FLAC, WAV, ALAC, MP3, AAC or OPUS")
        lines.append(f"output_codec = {self._format_toml_value(config['output_codec'])}")
        lines.append("# Source quality tier (5 = MP3 320, 6/7/27 = FLAC)")
        lines.append(f"output_quality = {self._format_toml_value(config['output_quality'])}")
        lines.append("# Target bitrate in kbps for lossy codecs (optional)")
        if config["bitrate"] is not None:
            lines.append(f"bitrate = {self._format_toml_value(config['bitrate'])}")
        lines.append(f"apply_metadata = {self._format_toml_value(config['apply_metadata'])}")
        lines.append("")

        lines.append("# Album art resize target (pixels, JPEG quality 0.0-1.0)")
        lines.append(f"album_art_size = {self._format_toml_value(config['album_art_size'])}")
        lines.append(
            f"album_art_quality = {self._format_toml_value(config['album_art_quality'])}"
        )
        lines.append("")

        lines.append("# External binaries (optional, looked up on PATH when unset)")
        lines.append('# Example: ffmpeg_path = "/usr/local/bin/ffmpeg"')
        if config["ffmpeg_path"] is not None:
            lines.append(f"ffmpeg_path = {self._format_toml_value(config['ffmpeg_path'])}")
        if config["flac_path"] is not None:
            lines.append(f"flac_path = {self._format_toml_value(config['flac_path'])}")
        lines.append("")

        lines.append("# Log file path (optional)")
        if config["log_file"] is not None:
            lines.append(f"log_file = {self._format_toml_value(config['log_file'])}")
        lines.append("")

        lines.append("# Artwork download timeout in seconds")
        lines.append(f"http_timeout = {self._format_toml_value(config['http_timeout'])}")
        lines.append("")

        return "\n".join(lines)

    def _format_toml_value(self, value: Any) -> str:
        """Format a value for TOML serialization."""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (str, Path)):
            return f'"{str(value)}"'
        return str(value)

    @classmethod
    def load(cls, path: Path | None = None) -> "Config":
        """Load configuration from file.

        Missing files yield defaults; nothing is written on load.

        Args:
            path: Explicit config file. Defaults to ``default_config_path()``.

        Returns:
            Config: Loaded configuration object.
        """
        if path is None and cls._instance is not None:
            return cls._instance

        config_file = path or default_config_path()

        try:
            if config_file.exists():
                with open(config_file, "rb") as f:
                    config_dict = tomllib.load(f)

                known = {f.name for f in fields(cls)}
                unknown = sorted(set(config_dict) - known)
                if unknown:
                    logger.warning(
                        "Ignoring unknown configuration keys in %s: %s",
                        config_file,
                        ", ".join(unknown),
                    )
                instance = cls(**{k: v for k, v in config_dict.items() if k in known})
                logger.debug("Configuration loaded from %s", config_file)
            else:
                instance = cls()

            if path is None:
                cls._instance = instance
                cls._loaded_from = config_file
            return instance

        except Exception as e:
            logger.error("Failed to load configuration: %s", e)
            raise


# Global configuration instance
config = Config.load()
