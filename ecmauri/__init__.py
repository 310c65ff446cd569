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

"""Primary package for ecmauri, ECMAScript-compatible URI escaping.

The `ecmauri` package exposes the ``encodeURI``/``decodeURI`` pair as
plain Python functions::

    import ecmauri

    ecmauri.encode_uri('/söme path')  # '/s%C3%B6me%20path'
    ecmauri.decode_uri('/s%C3%B6me%20path')  # '/söme path'

The string-typed primitives live in the `uri` module, which must be
imported explicitly::

    from ecmauri import uri

    uri.decode('%2Fa%2Fb', preserve_reserved=True)  # '%2Fa%2Fb'
"""

import logging as _logging

__all__ = (
    'constants',
    'decode_uri',
    'dispatch',
    'encode_uri',
    'errors',
    'GLOBAL_FUNCTIONS',
    'invoke',
    'is_undefined',
    'MalformedEscapeError',
    'UNDEFINED',
    'UnknownOperationError',
    'uri',
    'URIError',
    'URI_UNESCAPED',
)

# NOTE: Only to be used internally on the rare occasion that we need to
#   log something that we can't communicate any other way.
_logger = _logging.getLogger('ecmauri')
_logger.addHandler(_logging.NullHandler())

from ecmauri import constants  # NOQA: E402
from ecmauri import dispatch  # NOQA: E402
from ecmauri import errors  # NOQA: E402
from ecmauri import uri  # NOQA: E402
from ecmauri.constants import URI_UNESCAPED  # NOQA: E402
from ecmauri.dispatch import decode_uri  # NOQA: E402
from ecmauri.dispatch import encode_uri  # NOQA: E402
from ecmauri.dispatch import GLOBAL_FUNCTIONS  # NOQA: E402
from ecmauri.dispatch import invoke  # NOQA: E402
from ecmauri.dispatch import is_undefined  # NOQA: E402
from ecmauri.dispatch import UNDEFINED  # NOQA: E402
from ecmauri.errors import MalformedEscapeError  # NOQA: E402
from ecmauri.errors import UnknownOperationError  # NOQA: E402
from ecmauri.errors import URIError  # NOQA: E402

# Package version
from ecmauri.version import __version__  # NOQA: E402, F401
