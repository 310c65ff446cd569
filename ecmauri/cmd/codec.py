#!/usr/bin/env python
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
"""
Script that percent-escapes or decodes text the way encodeURI/decodeURI do.
"""
import argparse
import logging
import sys

import ecmauri
from ecmauri import uri


def make_parser():
    """Create the parser for the command line."""
    parser = argparse.ArgumentParser(
        description='Example: ecmauri-codec encode "https://example.org/a b"'
    )
    parser.add_argument(
        'operation',
        choices=('encode', 'decode'),
        help='Whether to escape TEXT or to decode its escapes',
    )
    parser.add_argument(
        'text',
        nargs='?',
        help='The text to process. Read from standard input when omitted',
    )
    parser.add_argument(
        '-s',
        '--strict',
        action='store_true',
        help='Keep escapes of reserved URI characters when decoding',
    )
    parser.add_argument(
        '-v',
        '--verbose',
        action='store_true',
        help='Log debug information to standard error',
    )
    return parser


def read_text(args, stdin):
    if args.text is not None:
        return args.text

    text = stdin.read()
    if text.endswith('\n'):
        text = text[:-1]
    return text


def run(parser, args, stdin):
    if args.strict and args.operation == 'encode':
        parser.error('--strict only applies to the decode operation')

    text = read_text(args, stdin)

    if args.operation == 'encode':
        return uri.encode(text)

    try:
        return uri.decode(text, preserve_reserved=args.strict)
    except ecmauri.MalformedEscapeError as ex:
        ecmauri._logger.debug('decode failed', exc_info=True)
        parser.exit(1, '{}: error: {}\n'.format(parser.prog, ex))


def main():
    parser = make_parser()
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(stream=sys.stderr, format='%(name)s: %(message)s')
        ecmauri._logger.setLevel(logging.DEBUG)

    print(run(parser, args, sys.stdin))


if __name__ == '__main__':  # pragma: no cover
    main()
