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

import sys

__all__ = (
    'ECMAURI_SUPPORTED',
    'HEX_DIGITS',
    'PYTHON_VERSION',
    'URI_ALPHA',
    'URI_DECODE_RESERVED_SET',
    'URI_DIGITS',
    'URI_MARKS',
    'URI_RESERVED',
    'URI_UNESCAPED',
    'URI_UNESCAPED_SET',
)

PYTHON_VERSION = tuple(sys.version_info[:3])
"""Python version information triplet: (major, minor, micro)."""

ECMAURI_SUPPORTED = PYTHON_VERSION >= (3, 8, 0)
"""Whether this version of ecmauri supports the current Python version."""

if not ECMAURI_SUPPORTED:  # pragma: nocover
    raise ImportError(
        'ecmauri requires Python 3.8+. '
        '(Recent Pip should automatically pick a suitable ecmauri version.)'
    )

# NOTE: See also ECMA-262, "URI Syntax and Semantics"
URI_ALPHA = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz'
URI_DIGITS = '0123456789'
URI_MARKS = "-_.!~*'()"
URI_RESERVED = ';/?:@&=+$,'

URI_UNESCAPED = URI_ALPHA + URI_DIGITS + URI_MARKS + URI_RESERVED + '#'
"""Characters that ``encodeURI`` copies to its output verbatim."""

URI_UNESCAPED_SET = frozenset(URI_UNESCAPED)

# NOTE: decodeURI keeps escapes of these intact in strict mode. The '#'
#   is not a reserved character proper, but is treated as one there.
URI_DECODE_RESERVED_SET = frozenset(URI_RESERVED + '#')

HEX_DIGITS = '0123456789ABCDEFabcdef'
