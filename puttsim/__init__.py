"""Mini-golf simulation state: vectors and collision, input, terrain, ball, arrow, pole, camera, sprites, scenes and the game."""

__version__ = "0.1.0"

__all__ = [
    "arrow",
    "camera",
    "collision",
    "game",
    "gameobject",
    "golfball",
    "ground",
    "input",
    "math3d",
    "pole",
    "scenes",
    "sprite",
]