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

"""Entry points mirroring the ECMAScript ``encodeURI``/``decodeURI`` globals.

A script host calls these with whatever arguments the script passed. Only
the first one is looked at; when it is missing, or is not a string, the
result is :data:`UNDEFINED` rather than an empty string::

    from ecmauri import dispatch

    dispatch.invoke('encodeURI', 'a b')  # 'a%20b'
    dispatch.invoke('decodeURI')  # UNDEFINED
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Any, Callable, Mapping, Sequence

import ecmauri
from ecmauri import uri
from ecmauri._typing import _Undefined
from ecmauri._typing import Transform
from ecmauri._typing import UNDEFINED
from ecmauri._typing import UndefinedOr
from ecmauri.errors import UnknownOperationError

__all__ = (
    'decode_uri',
    'encode_uri',
    'GLOBAL_FUNCTIONS',
    'handle_uri',
    'invoke',
    'is_undefined',
    'UNDEFINED',
)


def handle_uri(args: Sequence[Any], transform: Transform) -> UndefinedOr[str]:
    """Apply `transform` to the first of `args`.

    Args:
        args: Positional arguments of the call, as received from the host.
        transform: Function to apply to a non-empty string argument.

    Returns:
        The transformed string; ``''`` for an empty string argument
        (without calling `transform`); :data:`UNDEFINED` when no argument
        was supplied or it is not a ``str``.
    """
    if not args:
        _log_undefined(transform, 'no argument supplied')
        return UNDEFINED

    arg = args[0]
    if not isinstance(arg, str):
        _log_undefined(transform, 'argument of type {}'.format(type(arg).__name__))
        return UNDEFINED

    if not arg:
        return ''

    return transform(arg)


def _log_undefined(transform: Transform, detail: str) -> None:
    name = getattr(transform, '__name__', None) or repr(transform)
    ecmauri._logger.debug('%s returns undefined: %s', name, detail)


def encode_uri(*args: Any) -> UndefinedOr[str]:
    """Host-facing ``encodeURI``; see :func:`ecmauri.uri.encode`."""
    return handle_uri(args, uri.encode)


def decode_uri(*args: Any) -> UndefinedOr[str]:
    """Host-facing ``decodeURI``; see :func:`ecmauri.uri.decode`.

    Raises:
        MalformedEscapeError: The argument contains a malformed escape.
    """
    return handle_uri(args, uri.decode)


GLOBAL_FUNCTIONS: Mapping[str, Callable[..., UndefinedOr[str]]] = MappingProxyType(
    {
        'decodeURI': decode_uri,
        'encodeURI': encode_uri,
    }
)
"""Global function names, as seen by scripts, mapped to their callables."""


def invoke(name: str, *args: Any) -> UndefinedOr[str]:
    """Call the global function registered under `name`.

    Raises:
        UnknownOperationError: No function is registered under `name`.
    """
    try:
        func = GLOBAL_FUNCTIONS[name]
    except KeyError:
        raise UnknownOperationError(name, tuple(sorted(GLOBAL_FUNCTIONS))) from None

    return func(*args)


def is_undefined(value: Any) -> bool:
    """Return ``True`` if `value` is the :data:`UNDEFINED` sentinel."""
    return isinstance(value, _Undefined)
