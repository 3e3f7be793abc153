from textual.reactive import reactive
from textual.app import RenderResult
from textual.widget import Widget

EIGHTHS = ' ▏▎▍▌▋▊▉█'
EMPTY = '░'

def renderBar(fraction: float, width: int) -> str:
    '''
    One row of `width` cells, filled left to right in eighth-cell steps.  
    '''
    if width <= 0:
        return ''
    fraction = min(max(fraction, 0.0), 1.0)
    eighths = round(fraction * width * 8)
    full, part = divmod(eighths, 8)
    buf = [EIGHTHS[-1]] * full
    if part:
        buf.append(EIGHTHS[part])
    buf.extend(EMPTY * (width - len(buf)))
    return ''.join(buf)

class ProgressBar(Widget):
    fraction: reactive[float] = reactive(0.0)

    def __init__(self, *args, **kw) -> None:
        super().__init__(*args, **kw)

        self.fraction = 0.0
    
    def render(self) -> RenderResult:
        W, H = self.size
        row = renderBar(self.fraction, W)
        return '\n'.join([row] * H)
