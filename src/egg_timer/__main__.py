import sys
import logging

from .config import AppConfig, setupLogging
from .UI import UI

log = logging.getLogger(__name__)

def main() -> int:
    config = AppConfig.fromEnv()
    setupLogging(config)
    app = UI(config)
    app.run()
    error = app.destroy_error
    if error is not None:
        log.critical('%s', error)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())
