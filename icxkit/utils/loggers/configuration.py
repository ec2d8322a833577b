# Copyright 2018 ICON Foundation
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import logging
import os
import sys
from functools import reduce
from operator import or_
from typing import List, Optional

import coloredlogs
import verboselogs

from icxkit import configure as conf

_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_FIELD_STYLES = {
    'name': {'color': 'blue'},
    'levelname': {'color': 'black', 'bold': True},
    'asctime': {'color': 'magenta'}
}

_LEVEL_STYLES = {
    'spam': {'color': 'cyan'},
    'debug': {'color': 'green'},
    'verbose': {'color': 'blue'},
    'info': {},
    'notice': {'color': 'magenta'},
    'warning': {'color': 'yellow'},
    'success': {'color': 'green', 'bold': True},
    'error': {'color': 'red'},
    'critical': {'color': 'red', 'bold': True}
}


def parse_output_type(output_type) -> conf.LogOutputType:
    """``"console|file"`` => LogOutputType.console | LogOutputType.file"""
    if isinstance(output_type, str):
        return reduce(or_, (conf.LogOutputType[flag.strip().lower()] for flag in output_type.split('|')))
    return conf.LogOutputType(output_type)


class LogConfiguration:
    """Handlers, level and format applied to the ``icxkit`` logger."""

    logger_name = "icxkit"

    def __init__(self):
        self.log_format = conf.LOG_FORMAT
        self.log_level = verboselogs.SPAM
        self.log_color = True
        self.log_output_type = conf.LogOutputType.console
        self.log_file_location = ""
        self.log_file_prefix = ""
        self.log_file_extension = ""

    @property
    def log_file_path(self) -> str:
        return os.path.join(self.log_file_location, f"{self.log_file_prefix}.{self.log_file_extension}")

    def level(self) -> int:
        if isinstance(self.log_level, int):
            return self.log_level
        return logging.getLevelName(self.log_level.upper())

    def update_logger(self, logger: Optional[logging.Logger] = None):
        logger = logger or logging.getLogger(self.logger_name)
        level = self.level()

        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()
        for handler in self._create_handlers(level):
            logger.addHandler(handler)

        logger.setLevel(level)

    def _create_handlers(self, level: int) -> List[logging.Handler]:
        output_type = parse_output_type(self.log_output_type)
        handlers = []

        if output_type & conf.LogOutputType.console:
            handler = logging.StreamHandler(sys.stdout)
            handler.setFormatter(self._console_formatter())
            handlers.append(handler)

        if output_type & conf.LogOutputType.file and self.log_file_location:
            if os.path.exists(self.log_file_location) and not os.path.isdir(self.log_file_location):
                raise RuntimeError(f"LogFileLocation({self.log_file_location}) is not a directory.")
            os.makedirs(self.log_file_location, exist_ok=True)

            handler = logging.FileHandler(self.log_file_path, encoding='utf-8')
            handler.setFormatter(logging.Formatter(fmt=self.log_format, datefmt=_DATE_FORMAT))
            handlers.append(handler)

        for handler in handlers:
            handler.setLevel(level)
        return handlers

    def _console_formatter(self) -> logging.Formatter:
        if not self.log_color:
            return logging.Formatter(fmt=self.log_format, datefmt=_DATE_FORMAT)

        return coloredlogs.ColoredFormatter(fmt=self.log_format,
                                            datefmt=_DATE_FORMAT,
                                            level_styles=_LEVEL_STYLES,
                                            field_styles=_FIELD_STYLES)
