from __future__ import annotations

import os
import logging
from datetime import timedelta

import dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator
from textual.logging import TextualHandler

log = logging.getLogger(__name__)

class AppConfig(BaseModel):
    title: str = 'Egg timer'
    width: int = Field(default=40, gt=0)    # cells
    height: int = Field(default=12, gt=0)
    target: timedelta = timedelta(seconds=3)
    fps: float = Field(default=60.0, gt=0.0)
    log_level: str = 'INFO'

    model_config = ConfigDict(
        frozen=True,
    )

    @field_validator('target')
    @classmethod
    def validate_target(cls, v: timedelta) -> timedelta:
        if v <= timedelta():
            raise ValueError('target must be positive')
        return v

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        v = v.upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f'Unknown log level: {v}')
        return v

    @classmethod
    def fromEnv(cls) -> AppConfig:
        '''
        Only the log level is read from the environment (or `.env`).  
        Window and countdown settings are static.  
        '''
        dotenv.load_dotenv()
        log_level = os.getenv('EGG_TIMER_LOG_LEVEL')
        if log_level is None:
            return cls()
        return cls(log_level=log_level)

def setupLogging(config: AppConfig) -> None:
    # stderr belongs to the terminal UI
    logging.basicConfig(
        level=config.log_level,
        handlers=[TextualHandler()],
        force=True,
    )
    log.debug('Logging at %s.', config.log_level)
