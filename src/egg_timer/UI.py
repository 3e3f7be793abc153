import logging
import time
import typing as tp

from textual import on
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Container, Vertical
from textual.timer import Timer as Ticker
from textual.widgets import Button, ContentSwitcher, Footer, Header

from .config import AppConfig
from .shared import CONTROLS, Control, Event, titled
from .render_loop import FrameOutput, RenderLoop
from .progress_bar_ascii import ProgressBar

log = logging.getLogger(__name__)

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("space", "press_displayed", "Start/Stop/Reset."),
        Binding("q", "quit", "Quit."),
    ]

    def __init__(self, config: AppConfig | None = None) -> None:
        super().__init__()

        self.app_config = config or AppConfig()
        self.render_loop = RenderLoop(self.app_config.target)
        self.frame_ticker: Ticker | None = None
        self.last_output: FrameOutput | None = None
        self.exit_error: BaseException | None = None

        self.title = self.app_config.title
    
    @property
    def destroy_error(self) -> BaseException | None:
        return self.render_loop.error

    def run(self, **kw) -> tp.Any | None:
        result = super().run(**kw)
        if self._exception is not None:
            self.sendDestroy(self._exception)
        elif self.exit_error is not None:
            self.sendDestroy(self.exit_error)
        elif self.return_code:
            self.sendDestroy(RuntimeError(
                f'{self.title} exited with return code {self.return_code}'
            ))
        else:
            self.sendDestroy(None)
        return result

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)

        with Vertical(id="panel"):
            with titled(Container(id="progress-box"), 'Progress', skip_bottom=False):
                yield ProgressBar(id="progress-bar")
            with ContentSwitcher(id="controls", initial="start-btn"):
                yield Button("start", id="start-btn", variant="success")
                yield Button("stop",  id="stop-btn",  variant="error")
                yield Button("reset", id="reset-btn", variant="primary")

        yield Footer(compact=True)
    
    def on_mount(self) -> None:
        panel = self.query_one('#panel', Vertical)
        panel.styles.width = self.app_config.width
        panel.styles.height = self.app_config.height
        self.frame_ticker = self.set_interval(
            1.0 / self.app_config.fps, self.onFrame, pause=True,
        )
        self.onFrame()

    def onFrame(self) -> None:
        if self.render_loop.destroyed:
            return
        output = self.render_loop.handle(Event.FrameTick(time.monotonic()))
        assert isinstance(output, FrameOutput)
        self.draw(output)
        assert self.frame_ticker is not None
        if output.redraw:
            self.frame_ticker.resume()
        else:
            self.frame_ticker.pause()

    def draw(self, output: FrameOutput) -> None:
        self.last_output = output
        bar = self.query_one('#progress-bar', ProgressBar)
        bar.fraction = output.progress
        box = self.query_one('#progress-box', Container)
        box.border_subtitle = f'{output.progress:.0%}'
        switcher = self.query_one('#controls', ContentSwitcher)
        switcher.current = f'{output.control}-btn'

    def onPress(self, which: Control) -> None:
        if self.render_loop.destroyed:
            return
        if self.render_loop.handle(Event.ButtonPressed(which)):
            self.call_later(self.onFrame)

    @on(Button.Pressed, '#start-btn')
    def onStart(self) -> None:
        self.onPress('start')

    @on(Button.Pressed, '#stop-btn')
    def onStop(self) -> None:
        self.onPress('stop')

    @on(Button.Pressed, '#reset-btn')
    def onReset(self) -> None:
        self.onPress('reset')

    def action_press_displayed(self) -> None:
        switcher = self.query_one('#controls', ContentSwitcher)
        current = switcher.current
        assert current is not None
        which = current.removesuffix('-btn')
        assert which in CONTROLS
        self.onPress(tp.cast(Control, which))

    def sendDestroy(self, error: BaseException | None) -> None:
        if self.render_loop.destroyed:
            return
        if self.frame_ticker is not None:
            self.frame_ticker.stop()
        self.render_loop.handle(Event.Destroy(error))

    def exit(self, result=None, return_code=None, message=None) -> None:
        if return_code:
            # sent by `run` once textual has recorded any exception
            self.exit_error = RuntimeError(
                message or f'{self.title} exited with return code {return_code}'
            )
        else:
            self.sendDestroy(None)
        return super().exit(result, return_code, message)
