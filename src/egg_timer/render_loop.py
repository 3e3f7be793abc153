from __future__ import annotations

import logging
import typing as tp
from datetime import timedelta

from pydantic import BaseModel, ConfigDict, Field

from .timer import Timer
from .shared import Control, Event, controlFor

log = logging.getLogger(__name__)

class FrameOutput(BaseModel):
    progress: float = Field(ge=0.0, le=1.0)
    control: Control
    redraw: bool

    model_config = ConfigDict(
        frozen=True,
    )

class RenderLoop:
    def __init__(self, target: timedelta) -> None:
        self.timer = Timer(target)
        self.last_frame_time: float | None = None
        self.pending: list[Control] = []
        self.destroyed = False
        self.error: BaseException | None = None
    
    def handle(self, event: Event.Base) -> FrameOutput | bool | None:
        '''
        Frame ticks return what to draw.  
        Button presses return `True`: a frame is needed to apply them.  
        Destroy returns `None`.  
        '''
        if self.destroyed:
            raise RuntimeError(f'{event} received after destroy')
        match event:
            case Event.FrameTick(timestamp=timestamp):
                return self.onFrame(timestamp)
            case Event.ButtonPressed(which=which):
                self.pending.append(which)
                return True
            case Event.Destroy(error=error):
                self.destroyed = True
                self.error = error
                log.info('Destroyed. error=%r', error)
                return None
            case _:
                raise TypeError(f'Unknown event: {event!r}')
    
    def onFrame(self, timestamp: float) -> FrameOutput:
        if self.last_frame_time is None:
            dt = timedelta()
        else:
            dt = timedelta(seconds=timestamp - self.last_frame_time)
        self.timer.advance(dt)
        for which in self.pending:
            self.apply(which)
        self.pending.clear()
        self.last_frame_time = timestamp
        output = FrameOutput(
            progress=self.timer.progress(),
            control=controlFor(self.timer),
            redraw=self.timer.isRunning(),
        )
        log.debug('Frame at %.3f: %s', timestamp, output)
        return output
    
    def apply(self, which: Control) -> None:
        match which:
            case 'start':
                self.timer.start()
            case 'stop':
                self.timer.stop()
            case 'reset':
                self.timer.reset()
        log.info('%s -> %r', which, self.timer)
    
    def frame(self, timestamp: float) -> FrameOutput:
        output = self.handle(Event.FrameTick(timestamp))
        assert isinstance(output, FrameOutput)
        return output
    
    def press(self, which: Control) -> None:
        self.handle(Event.ButtonPressed(which))
    
    def destroy(self, error: BaseException | None = None) -> None:
        self.handle(Event.Destroy(error))

def dispatch(
    loop: RenderLoop,
    events: tp.Iterable[Event.Base],
    draw: tp.Callable[[FrameOutput], None],
) -> BaseException | None:
    '''
    Runs `loop` over `events` until a destroy event.  
    Returns the destroy error, unchanged.  
    '''
    for event in events:
        output = loop.handle(event)
        if isinstance(output, FrameOutput):
            draw(output)
        if loop.destroyed:
            return loop.error
    return None
