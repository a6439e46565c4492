"""Configuration for generated stroke-order pages.

A page config is an optional JSON file whose keys mirror ``PageConfig``:
- width / height / padding / drawing_width: hanzi-writer canvas geometry
- stroke_color / radical_color / outline_color: CSS colors
- *_animation_speed / *_delay_between_strokes: normal, slow and quiz timing
- autoplay_delay_ms: delay before the first animation after load
- cdn_url: where the page loads hanzi-writer from
"""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Union

from hanzistroke.logging import log_debug

HANZI_WRITER_CDN = "https://cdn.jsdelivr.net/npm/hanzi-writer@3.5/dist/hanzi-writer.min.js"

_NUMERIC_FIELDS = (
    "padding",
    "drawing_width",
    "stroke_animation_speed",
    "delay_between_strokes",
    "slow_animation_speed",
    "slow_delay_between_strokes",
    "quiz_animation_speed",
    "quiz_delay_between_strokes",
    "autoplay_delay_ms",
)


@dataclass
class PageConfig:
    """Options passed to hanzi-writer by the generated page."""
    width: int = 300
    height: int = 300
    padding: int = 20
    show_outline: bool = True
    stroke_animation_speed: float = 1
    delay_between_strokes: int = 300
    stroke_color: str = "#2c3e50"
    radical_color: str = "#667eea"
    outline_color: str = "#bdc3c7"
    drawing_width: int = 20
    slow_animation_speed: float = 0.5
    slow_delay_between_strokes: int = 500
    quiz_animation_speed: float = 0.5
    quiz_delay_between_strokes: int = 200
    autoplay_delay_ms: int = 800
    cdn_url: str = HANZI_WRITER_CDN

    def __post_init__(self):
        for name in ("width", "height"):
            value = getattr(self, name)
            if not _is_number(value) or value <= 0:
                raise ValueError(f"{name} must be a positive number, got {value!r}")
        for name in _NUMERIC_FIELDS:
            value = getattr(self, name)
            if not _is_number(value) or value < 0:
                raise ValueError(f"{name} must be a non-negative number, got {value!r}")
        if not isinstance(self.show_outline, bool):
            raise ValueError(f"show_outline must be true or false, got {self.show_outline!r}")
        if not self.cdn_url:
            raise ValueError("cdn_url must not be empty")

    def to_dict(self) -> dict:
        return asdict(self)


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def load_page_config(path: Union[str, Path]) -> PageConfig:
    """Load a PageConfig from a JSON file.

    Keys that are not PageConfig fields are ignored.
    """
    config_path = Path(path)
    with open(config_path, encoding="utf-8") as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"{config_path}: expected a JSON object")

    known = {f.name for f in fields(PageConfig)}
    for key in data:
        if key not in known:
            log_debug(f"ignoring unknown page config key {key!r} in {config_path}")

    return PageConfig(**{k: v for k, v in data.items() if k in known})


def write_page_config(path: Union[str, Path], config: PageConfig) -> Path:
    config_path = Path(path)
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
    return config_path
