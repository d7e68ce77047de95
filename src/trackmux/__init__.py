"""trackmux: re-encode audio tracks and attach metadata through ffmpeg."""

__version__ = "0.1.0"
