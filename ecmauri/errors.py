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

"""Error classes raised by ecmauri.

All classes are available directly from the `ecmauri` package namespace::

    import ecmauri

    try:
        text = ecmauri.decode_uri(value)
    except ecmauri.MalformedEscapeError as ex:
        print(ex.position, ex.reason)
"""

from __future__ import annotations

from typing import Optional

__all__ = (
    'MalformedEscapeError',
    'UnknownOperationError',
    'URIError',
)


class URIError(ValueError):
    """Base class for all errors raised by ecmauri."""


class MalformedEscapeError(URIError):
    """The text contains a percent-escape that cannot be decoded.

    This covers both a ``%`` that is not followed by two hexadecimal
    digits, and a run of escapes whose bytes do not form valid UTF-8.

    Args:
        encoded (str): The text that was being decoded.
        position (int): Index in `encoded` of the ``%`` starting the
            offending escape or escape run.
        reason (str): Short description of what is wrong.

    Attributes:
        encoded (str): The text that was being decoded.
        position (int): Index of the offending ``%``.
        reason (str): Short description of what is wrong.
    """

    def __init__(self, encoded: str, position: int, reason: str) -> None:
        self.encoded = encoded
        self.position = position
        self.reason = reason

        super().__init__(encoded, position, reason)

    def __str__(self) -> str:
        snippet = self.encoded[self.position : self.position + 12]
        return 'Malformed percent-escape at position {}: {} (near {!r})'.format(
            self.position, self.reason, snippet
        )


class UnknownOperationError(URIError, LookupError):
    """The requested global operation does not exist.

    Args:
        name (str): Name that was looked up.
        available (tuple): Names that do exist, used to
            build a helpful message.
    """

    def __init__(self, name: str, available: Optional[tuple[str, ...]] = None):
        self.name = name
        self.available = available or ()

        super().__init__(name)

    def __str__(self) -> str:
        if not self.available:
            return 'Unknown operation: {!r}'.format(self.name)

        return 'Unknown operation: {!r} (expected one of: {})'.format(
            self.name, ', '.join(self.available)
        )
