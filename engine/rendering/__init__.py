"""Engine rendering runtime modules."""

from engine.rendering.scene import SceneRenderer
from engine.rendering.transform import TransformStack

__all__ = ["SceneRenderer", "TransformStack"]
