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
"""Logging presets. icxkit never touches logging handlers unless asked to."""

from enum import Enum

from icxkit import configure as conf
from .configuration import LogConfiguration, parse_output_type


class PresetType(Enum):
    develop = "develop"
    production = "production"


def _new_preset(log_color: bool) -> LogConfiguration:
    preset = LogConfiguration()
    preset.log_color = log_color
    return preset


_presets = {preset_type: _new_preset(preset_type is PresetType.develop) for preset_type in PresetType}
develop = _presets[PresetType.develop]
production = _presets[PresetType.production]

_current_type = PresetType.production

# LogConfiguration attribute => configure name
_configure_names = {
    "log_format": "LOG_FORMAT",
    "log_level": "ICXKIT_LOG_LEVEL",
    "log_output_type": "LOG_OUTPUT_TYPE",
    "log_file_location": "LOG_FILE_LOCATION",
    "log_file_prefix": "LOG_FILE_PREFIX",
    "log_file_extension": "LOG_FILE_EXTENSION",
}


def get_preset_type() -> PresetType:
    return _current_type


def set_preset_type(preset_type: PresetType):
    global _current_type
    _current_type = PresetType(preset_type)


def get_preset() -> LogConfiguration:
    return _presets[_current_type]


def update_preset(update_logger=True) -> LogConfiguration:
    """Copy the log configure values to the current preset and apply it to the ``icxkit`` logger."""
    preset = get_preset()
    for attr, configure_name in _configure_names.items():
        setattr(preset, attr, getattr(conf, configure_name))

    if update_logger:
        preset.update_logger()
    return preset
