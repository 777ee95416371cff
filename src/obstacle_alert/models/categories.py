"""
Obstacle categories, their keywords and alert sounds.

KEYWORD_TABLE is ordered: earlier categories win when a name matches
keywords from more than one category.
"""

from enum import Enum


class ObstacleCategory(str, Enum):
    """Alert classes used to pick a sound."""

    STAIRS = "stairs"
    WALL = "wall"
    LOW = "low"
    HEAD = "head"
    CEILING = "ceiling"
    DEFAULT = "default"


KEYWORD_TABLE: tuple[tuple[ObstacleCategory, tuple[str, ...]], ...] = (
    (ObstacleCategory.STAIRS, ("stairs", "staircase", "step")),
    (ObstacleCategory.WALL, ("wall", "door", "window", "partition")),
    (
        ObstacleCategory.LOW,
        (
            "shoe",
            "bed",
            "floor",
            "box",
            "backpack",
            "bottle",
            "cabinet",
            "dresser",
            "chest of drawers",
            "rug",
            "mat",
            "robot vacuum",
            "dog",
            "cat",
            "toy",
            "bag",
            "table",
        ),
    ),
    (
        ObstacleCategory.HEAD,
        (
            "lamp",
            "fan",
            "ceiling fan",
            "tv",
            "doorframe",
            "shelf",
            "cabinetry",
            "lighting",
            "mirror",
            "hanger",
            "clothing",
            "curtain rod",
            "window blind",
        ),
    ),
    (
        ObstacleCategory.CEILING,
        ("ceiling", "ceiling light", "light fixture", "chandelier"),
    ),
)

# Default sound file per category, relative to audio.sounds_dir
DEFAULT_SOUND_FILES: dict[ObstacleCategory, str] = {
    ObstacleCategory.STAIRS: "whistle.wav",
    ObstacleCategory.WALL: "thud.wav",
    ObstacleCategory.LOW: "click.wav",
    ObstacleCategory.HEAD: "beep.wav",
    ObstacleCategory.CEILING: "swoosh.wav",
    ObstacleCategory.DEFAULT: "beep.wav",
}
