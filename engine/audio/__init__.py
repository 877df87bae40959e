from .sfx import SoundEffects

__all__ = ["SoundEffects"]
