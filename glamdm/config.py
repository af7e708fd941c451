# config.py
# Startup defaults for a session. Nothing is read from or written to disk;
# only the log level can be overridden, through the environment.

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .color import clamp, parse_hex
from .compositor import RenderMode
from .fonts import FONT_CATALOG

ENV_LOG_LEVEL = "GLAMDM_LOG_LEVEL"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

MIN_STEP, MAX_STEP, STEP_DELTA = 0.5, 30.0, 0.5
MIN_INTERVAL, MAX_INTERVAL = 0.01, 1.0


@dataclass
class Config:
    # Content
    text: str = "glam dm"
    start_hex: str = "#8A2BE2"
    end_hex: str = "#00FFFF"
    # FIGlet
    font_index: int = 0
    # Render
    mode: str = "glyph"
    # Animation
    animate: bool = True
    step_deg: float = 3.0   # degrees per tick
    interval: float = 0.06  # seconds, ~16 FPS
    # Logging
    log_level: str = "WARNING"

    def clamp(self) -> "Config":
        self.font_index = self.font_index % len(FONT_CATALOG)
        self.step_deg   = clamp(float(self.step_deg), MIN_STEP, MAX_STEP)
        self.interval   = clamp(float(self.interval), MIN_INTERVAL, MAX_INTERVAL)
        self.mode       = self.mode.lower() if self.mode.upper() in RenderMode.__members__ else "glyph"
        self.log_level  = self.log_level.upper() if self.log_level.upper() in LOG_LEVELS else "WARNING"
        if parse_hex(self.start_hex) is None: self.start_hex = Config.start_hex
        if parse_hex(self.end_hex) is None:   self.end_hex = Config.end_hex
        return self

    @property
    def render_mode(self) -> RenderMode:
        return RenderMode[self.mode.upper()]

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        env = os.environ if environ is None else environ
        cfg = cls()
        level = env.get(ENV_LOG_LEVEL)
        if level:
            cfg.log_level = level
        return cfg.clamp()
