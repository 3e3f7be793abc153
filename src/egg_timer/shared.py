from __future__ import annotations

from dataclasses import dataclass
from abc import ABC
import typing as tp

from textual.widget import Widget

from .timer import Timer

Control = tp.Literal['start', 'stop', 'reset']

CONTROLS: tuple[Control, ...] = tp.get_args(Control)

def controlFor(timer: Timer) -> Control:
    '''
    The one control to display. The other two stay hidden.  
    '''
    if timer.isRunning():
        return 'stop'
    if timer.isFinished():
        return 'reset'
    return 'start'

def titled(
    w: Widget, /, title: str, skip_bottom: bool = True,
    style = ('round', '#999'), padding = (0, 1),
):
    w.styles.border = style
    if skip_bottom:
        w.styles.border_bottom = None
    w.border_title = title
    w.styles.padding = padding
    return w

class Event:
    class Base(ABC):
        pass
    
    @dataclass(frozen=True)
    class FrameTick(Base):
        timestamp: float    # monotonic seconds
    
    @dataclass(frozen=True)
    class ButtonPressed(Base):
        which: Control

        def __post_init__(self) -> None:
            if self.which not in CONTROLS:
                raise ValueError(f'Unknown control: {self.which}')
    
    @dataclass(frozen=True)
    class Destroy(Base):
        error: BaseException | None = None
