from .abort_controller import AbortController

__all__ = ["AbortController"]
