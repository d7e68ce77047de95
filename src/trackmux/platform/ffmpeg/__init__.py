"""ffmpeg engine adapter and bootstrap helpers."""

from .bootstrap import create_engine, load_engine
from .engine import FFmpegEngine

__all__ = ["FFmpegEngine", "create_engine", "load_engine"]
