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
"""Origin string of the ICON v3 transaction hash.

Keys of a mapping are visited in sorted order, each followed by its value, and
all parts are joined with ``.``. Nested mappings are wrapped in ``{}`` and
lists in ``[]``. Inside values the characters ``\\ { } [ ] .`` are escaped with
a backslash and ``None`` is written as ``\\0``.
"""

from typing import Iterator, Mapping

_escape_table = str.maketrans({
    "\\": "\\\\",
    "{": "\\{",
    "}": "\\}",
    "[": "\\[",
    "]": "\\]",
    ".": "\\."
})


def _escape(value) -> str:
    if value is None:
        return "\\0"
    return str(value).translate(_escape_table)


def _walk_mapping(mapping: Mapping) -> Iterator[str]:
    for key in sorted(mapping):
        yield key
        yield _serialize(mapping[key])


def _serialize(value) -> str:
    if isinstance(value, Mapping):
        return "{" + ".".join(_walk_mapping(value)) + "}"
    if isinstance(value, list):
        return "[" + ".".join(_serialize(item) for item in value) + "]"
    return _escape(value)


def origin_string(raw_data: Mapping) -> str:
    """The top level mapping is not wrapped in braces."""
    return ".".join(_walk_mapping(raw_data))
