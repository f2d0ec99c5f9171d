"""
# Author : Saif Aati
# Contact: SAIF AATI  <saif@caltech.edu> <saifaati@gmail.com>
# Copyright (C) 2022
"""
import logging
import os
import sys
from datetime import datetime
from typing import List, Optional

from geoLOSModel.geoCore.constants import SOFTWARE

LOG_FORMAT = "%(asctime)s [%(levelname)s] - %(message)s"


class GeoLOSModelLog:
    """
    Root logger set up for a LOS model run: one timestamped file per run in log_dir, optionally echoed to stdout.
    Filter and ephemeris warnings (warnings.warn) are routed to the same handlers.
    """

    def __init__(self, log_prefix: str, log_dir: Optional[str] = None, level=logging.INFO, console: bool = True):
        self.log_dir = log_dir or SOFTWARE.WKDIR
        os.makedirs(self.log_dir, exist_ok=True)

        run_time = datetime.now().strftime("%m-%d-%Y-%H-%M-%S")
        self.log_file = os.path.join(self.log_dir, f"{log_prefix}_{run_time}.log")
        self.handlers = self._build_handlers(console)

        logging.basicConfig(level=level, format=LOG_FORMAT, handlers=self.handlers)
        logging.captureWarnings(True)
        logging.debug(f"{SOFTWARE.SOFTWARE_NAME} log file: {self.log_file}")

    def _build_handlers(self, console: bool) -> List[logging.Handler]:
        handlers: List[logging.Handler] = [logging.FileHandler(self.log_file)]
        if console:
            handlers.append(logging.StreamHandler(sys.stdout))
        return handlers
