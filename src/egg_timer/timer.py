import logging
from datetime import timedelta

log = logging.getLogger(__name__)

ZERO = timedelta()

class Timer:
    def __init__(self, target: timedelta) -> None:
        '''
        `target` must be positive: progress is `elapsed / target`.  
        '''
        if target <= ZERO:
            raise ValueError(f'Timer target must be positive, got {target}')
        self.__target = target
        self.elapsed = ZERO
        self.running = False
    
    @property
    def target(self) -> timedelta:
        return self.__target
    
    def isRunning(self) -> bool:
        return self.running
    
    def start(self) -> None:
        self.running = True
    
    def stop(self) -> None:
        self.running = False
    
    def reset(self) -> None:
        self.elapsed = ZERO
        self.running = False
    
    def isFinished(self) -> bool:
        return self.elapsed >= self.__target
    
    def progress(self) -> float:
        return self.elapsed / self.__target
    
    def advance(self, dt: timedelta) -> None:
        if not self.running:
            return
        self.elapsed += max(dt, ZERO)
        if self.elapsed >= self.__target:
            self.elapsed = self.__target
            self.running = False
            log.info('Finished after %s.', self.__target)
    
    def __repr__(self) -> str:
        return (
            f'Timer(elapsed={self.elapsed}, target={self.__target}, '
            f'running={self.running})'
        )
