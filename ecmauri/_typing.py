# Copyright 2026 by the ecmauri authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#    http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Private type aliases used internally by ecmauri."""

from __future__ import annotations

from enum import auto
from enum import Enum
from typing import Callable, Literal, TypeVar, Union


class _Undefined(Enum):
    UNDEFINED = auto()

    def __repr__(self) -> str:
        return 'UNDEFINED'

    def __bool__(self) -> bool:
        return False


_T = TypeVar('_T')
UNDEFINED = _Undefined.UNDEFINED
UndefinedOr = Union[Literal[_Undefined.UNDEFINED], _T]

Transform = Callable[[str], str]
