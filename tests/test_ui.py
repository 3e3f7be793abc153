import asyncio
from pathlib import Path
from datetime import timedelta

from textual.widgets import ContentSwitcher

import egg_timer
from egg_timer.config import AppConfig
from egg_timer.UI import UI
from egg_timer.progress_bar_ascii import ProgressBar

SHORT = AppConfig(target=timedelta(milliseconds=200))

def displayed(app: UI) -> str | None:
    return app.query_one('#controls', ContentSwitcher).current

def test_starts_idle() -> None:
    async def main() -> None:
        app = UI(SHORT)
        async with app.run_test() as pilot:
            await pilot.pause()
            assert app.title == 'Egg timer'
            assert displayed(app) == 'start-btn'
            assert app.query_one('#progress-bar', ProgressBar).fraction == 0.0
            assert app.frame_ticker is not None
    asyncio.run(main())

def test_start_shows_stop() -> None:
    async def main() -> None:
        app = UI(AppConfig(target=timedelta(seconds=30)))
        async with app.run_test() as pilot:
            await pilot.click('#start-btn')
            await pilot.pause()
            assert app.render_loop.timer.isRunning()
            assert displayed(app) == 'stop-btn'
            assert app.last_output is not None
            assert app.last_output.redraw is True
    asyncio.run(main())

def test_start_runs_to_finished_then_reset() -> None:
    async def main() -> None:
        app = UI(SHORT)
        async with app.run_test() as pilot:
            await pilot.click('#start-btn')
            await pilot.pause(0.6)
            assert app.render_loop.timer.isFinished()
            assert displayed(app) == 'reset-btn'
            assert app.last_output is not None
            assert app.last_output.progress == 1.0
            assert app.last_output.redraw is False

            await pilot.click('#reset-btn')
            await pilot.pause()
            assert displayed(app) == 'start-btn'
            assert app.render_loop.timer.elapsed == timedelta()
    asyncio.run(main())

def test_stop_pauses() -> None:
    async def main() -> None:
        app = UI(AppConfig(target=timedelta(seconds=30)))
        async with app.run_test() as pilot:
            await pilot.click('#start-btn')
            await pilot.pause(0.1)
            await pilot.click('#stop-btn')
            await pilot.pause()
            held = app.render_loop.timer.elapsed
            assert displayed(app) == 'start-btn'

            await pilot.pause(0.2)
            assert app.render_loop.timer.elapsed == held
            assert 0.0 < app.render_loop.timer.progress() < 1.0
    asyncio.run(main())

def test_space_presses_displayed_control() -> None:
    async def main() -> None:
        app = UI(AppConfig(target=timedelta(seconds=30)))
        async with app.run_test() as pilot:
            await pilot.press('space')
            await pilot.pause()
            assert displayed(app) == 'stop-btn'
            await pilot.press('space')
            await pilot.pause()
            assert displayed(app) == 'start-btn'
            assert not app.render_loop.timer.isRunning()
    asyncio.run(main())

def test_quit_sends_clean_destroy() -> None:
    async def main() -> None:
        app = UI(SHORT)
        async with app.run_test() as pilot:
            await pilot.press('q')
            await pilot.pause()
        assert app.render_loop.destroyed
        assert app.destroy_error is None
    asyncio.run(main())

class FailingUI(UI):
    CSS_PATH = str(Path(egg_timer.__file__).parent / 'styles.tcss')
    def on_ready(self) -> None:
        raise OSError('window lost')

def test_crash_error_reaches_destroy_unchanged() -> None:
    app = FailingUI(SHORT)
    app.run(headless=True)

    assert app.return_code == 1
    assert isinstance(app.destroy_error, OSError)
    assert str(app.destroy_error) == 'window lost'
