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
"""Runtime configuration of icxkit.

Every upper case name of :mod:`icxkit.configure_default` becomes a global of
this module. A value is overridden by the environment variable of the same
name and then by :meth:`Configure.load_configure_json`.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from icxkit import configure_default
from icxkit.configure_default import *

_TRUE_STRINGS = ("1", "true", "yes", "on")


def _cast(default, value):
    """Cast ``value`` to the type of ``default``. Strings come from the environment."""
    if not isinstance(value, str) or isinstance(default, str):
        return value

    if isinstance(default, bool):
        return value.strip().lower() in _TRUE_STRINGS
    if isinstance(default, LogOutputType):
        return value
    if isinstance(default, int):
        return int(value)
    if isinstance(default, float):
        return float(value)
    return value


class _Singleton(type):
    _instances = {}

    def __call__(cls, *args, **kwargs):
        if cls not in cls._instances:
            cls._instances[cls] = super().__call__(*args, **kwargs)
        return cls._instances[cls]


class Configure(metaclass=_Singleton):
    def __init__(self):
        self._types: Dict[str, type] = {}
        self.init_configure()

    @property
    def configure_types(self) -> Dict[str, type]:
        return dict(self._types)

    def init_configure(self):
        """Reset every value to its default, applying environment overrides."""
        self._types.clear()
        for name in dir(configure_default):
            if not name.isupper():
                continue

            default = getattr(configure_default, name)
            env_value = os.getenv(name)
            try:
                value = default if env_value is None else _cast(default, env_value)
            except ValueError:
                logging.warning(f"Ignore environment value of {name}: {env_value!r}")
                value = default

            self._set(name, value, type(default))

    def load_configure_json(self, configure_file_path: str) -> None:
        """Apply values of a json file. Unknown keys are skipped.

        :param configure_file_path: json configure file path
        """
        logging.debug(f"try load configure from json file ({configure_file_path})")

        with open(configure_file_path) as json_file:
            json_data = json.load(json_file)

        for name, value in json_data.items():
            if name not in self._types:
                logging.debug(f"this is not configure key({name})")
                continue
            self._set(name, _cast(getattr(configure_default, name), value), self._types[name])

    def _set(self, name: str, value: Any, value_type: type):
        globals()[name] = value
        self._types[name] = value_type


def get_configuration(configure_name: str) -> Optional[dict]:
    value_type = Configure().configure_types.get(configure_name)
    if value_type is None:
        return None

    return {
        'name': configure_name,
        'value': str(globals()[configure_name]),
        'type': value_type.__name__
    }


def set_configuration(configure_name: str, configure_value) -> bool:
    if configure_name not in Configure().configure_types:
        return False

    globals()[configure_name] = configure_value
    return True


Configure()
