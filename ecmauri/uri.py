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

"""Percent-escaping utilities.

This module implements the escaping rules of the ECMAScript ``encodeURI``
and ``decodeURI`` global functions over Python strings. Unlike
``urllib.parse.quote``, the set of characters left alone is fixed, and
decoding is strict: malformed escapes are reported instead of being
passed through or replaced::

    from ecmauri import uri

    encoded = uri.encode('https://example.org/café?q=1')
    # 'https://example.org/caf%C3%A9?q=1'
"""

import re

from ecmauri.constants import HEX_DIGITS
from ecmauri.constants import URI_DECODE_RESERVED_SET
from ecmauri.constants import URI_UNESCAPED
from ecmauri.constants import URI_UNESCAPED_SET
from ecmauri.errors import MalformedEscapeError

# NOTE: Lookup keyed by the two hex characters as they appear in the text,
#   so that both cases are accepted without normalizing the input.
_HEX_TO_BYTE = {a + b: int(a + b, 16) for a in HEX_DIGITS for b in HEX_DIGITS}

_SURROGATE_PAIR = re.compile('[\ud800-\udbff][\udc00-\udfff]')


def _create_char_encoder(allowed_chars):

    lookup = {}

    for code_point in range(256):
        if chr(code_point) in allowed_chars:
            encoded_char = chr(code_point)
        else:
            encoded_char = '%{0:02X}'.format(code_point)

        lookup[code_point] = encoded_char

    return lookup.__getitem__


_encode_byte = _create_char_encoder(URI_UNESCAPED_SET)


def _join_surrogate_pair(match):
    high, low = match.group()
    return chr(0x10000 + ((ord(high) - 0xD800) << 10) + (ord(low) - 0xDC00))


def _to_utf8(text):
    try:
        return text.encode()
    except UnicodeEncodeError:
        # NOTE: The text carries surrogate code points. Pairs stand for a
        #   single supplementary character; unpaired ones are kept as their
        #   three-byte form so that encoding never fails.
        text = _SURROGATE_PAIR.sub(_join_surrogate_pair, text)
        return text.encode('utf-8', 'surrogatepass')


def encode(uri):
    """Percent-escape a string the way ``encodeURI`` does.

    Letters, digits, the marks ``-_.!~*'()`` and the URI punctuation
    ``;,/?:@&=+$#`` are copied verbatim. Every other character is
    replaced by one ``%XX`` escape per byte of its UTF-8 encoding,
    using uppercase hexadecimal digits.

    Note:
        A surrogate pair embedded in `uri` is treated as the single
        character it represents. An unpaired surrogate is escaped as the
        three bytes it would occupy in UTF-8, even though such output
        cannot be decoded again.

    Args:
        uri (str): Text to escape.

    Returns:
        str: An ASCII-only version of `uri`. This function never raises
        for any ``str`` argument.

    """

    if not uri:
        return ''

    # PERF: Very fast way to check, learned from urllib.quote
    if not uri.rstrip(URI_UNESCAPED):
        return uri

    return ''.join(map(_encode_byte, _to_utf8(uri)))


def _decode_run(encoded_uri, run, start):
    try:
        return run.decode('utf-8')
    except UnicodeDecodeError as ex:
        # NOTE: Each byte of the run came from a three-character escape.
        raise MalformedEscapeError(
            encoded_uri, start + 3 * ex.start, 'invalid UTF-8 ({})'.format(ex.reason)
        ) from ex


def decode(encoded_uri, preserve_reserved=False):
    """Decode percent-escapes the way ``decodeURI`` does.

    Each run of adjacent ``%XX`` escapes is turned back into bytes and
    decoded as UTF-8. Hexadecimal digits are accepted in either case.
    Characters outside of escapes, including non-ASCII ones, are copied
    through unchanged.

    Args:
        encoded_uri (str): Text to decode.

    Keyword Arguments:
        preserve_reserved (bool): Set to ``True`` to leave escapes of the
            characters ``;/?:@&=+$,#`` untouched (default ``False``). This
            mirrors ECMAScript's ``decodeURI`` exactly, and makes sure that
            decoding never changes how the URI is split into components.

    Returns:
        str: The decoded text.

    Raises:
        MalformedEscapeError: A ``%`` is not followed by two hexadecimal
            digits, or the escaped bytes are not valid UTF-8 (e.g., a
            stray continuation byte, an overlong form, or a truncated
            sequence). Nothing is returned in that case.

    """

    if not encoded_uri:
        return ''

    # Short-circuit if we can
    if '%' not in encoded_uri:
        return encoded_uri

    tokens = encoded_uri.split('%')
    decoded = [tokens[0]]

    run = bytearray()
    run_start = position = len(tokens[0])

    for token in tokens[1:]:
        hex_octet = token[:2]
        try:
            byte = _HEX_TO_BYTE[hex_octet]
        except KeyError:
            # malformed percentage like "x=%" or "y=%G1"
            raise MalformedEscapeError(
                encoded_uri, position, 'expected two hexadecimal digits after "%"'
            ) from None

        if preserve_reserved and chr(byte) in URI_DECODE_RESERVED_SET:
            if run:
                decoded.append(_decode_run(encoded_uri, run, run_start))
                run.clear()

            decoded.append('%' + hex_octet)
        else:
            if not run:
                run_start = position

            run.append(byte)

        literal = token[2:]
        if literal:
            if run:
                decoded.append(_decode_run(encoded_uri, run, run_start))
                run.clear()

            decoded.append(literal)

        position += len(token) + 1

    if run:
        decoded.append(_decode_run(encoded_uri, run, run_start))

    return ''.join(decoded)


__all__ = [
    'decode',
    'encode',
]
