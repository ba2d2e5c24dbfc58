"""Configuration module for Tunelink.

Public API:
----------
settings: Settings instance
    Pydantic settings object with nested configuration

get_config(key: str, default=None) -> Any
    Flat-key configuration access function

get_logger(name: str) -> Logger
    Get a context-aware logger for your module

setup_loguru_logger(verbose: bool = False) -> None
    Configure Loguru logger for the application

Usage:
------
Library modules only call ``get_logger``. An application embedding tunelink
calls ``setup_loguru_logger`` once at start-up, before signing or loading
entities, to get the console sink and the rotating JSON log file:

```python
from tunelink.config import setup_loguru_logger
setup_loguru_logger(verbose=args.verbose)
```

```python
from tunelink.config import settings
lifetime = settings.intents.lifetime

from tunelink.config import get_logger
logger = get_logger(__name__)
logger.info("Signing entity")
```
"""

from .logging import get_logger, setup_loguru_logger
from .settings import get_config, settings

# Public API
__all__ = [
    "get_config",
    "get_logger",
    "settings",
    "setup_loguru_logger",
]
