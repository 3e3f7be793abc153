from .UI import UI as EggTimerUI
from .timer import Timer
from .render_loop import RenderLoop, FrameOutput, dispatch
from .config import AppConfig

__all__ = ["EggTimerUI", "Timer", "RenderLoop", "FrameOutput", "dispatch", "AppConfig"]
