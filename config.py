# config.py

"""
Global configuration for the random-streams-options project.

This module centralizes:
  - filesystem paths,
  - default values for random stream options,
  - logging knobs you might want to tweak from a single place.

Other modules *can* import from here, but they don't have to – the
validator itself never reads configuration, only `streams.options`
(which merges user options onto the defaults below) does.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict


# -------------------------------------------------------------------
# Core paths
# -------------------------------------------------------------------

# Root of the project (directory containing main.py, config.py, etc.)
PROJECT_ROOT: Path = Path(__file__).resolve().parent

# Directory for logs (if you want to write logs to disk)
LOGS_DIR: Path = PROJECT_ROOT / "logs"


# -------------------------------------------------------------------
# Logging
# -------------------------------------------------------------------

LOG_LEVEL: int = logging.INFO

LOG_FILENAME: str = "random_streams.log"


# -------------------------------------------------------------------
# Stream option defaults
# -------------------------------------------------------------------

# Values a stream starts from before user options are merged in.
# iter / siter default to "effectively never stop" / "never emit state".
# highWaterMark intentionally has no default here; the stream layer picks it.
STREAM_DEFAULTS: Dict[str, Any] = {
    "objectMode": False,
    "encoding": None,
    "sep": "\n",
    "iter": 1e308,
    "siter": 1e308,
    "copy": True,
}
