import argparse
import json
import logging
import sys
from typing import List, Optional

from wrapnum import bf

DEFAULT_SETTINGS = {
    'tape_size': bf.TAPE_SIZE,
    'timeout': None,
    'log_level': 'ERROR',
}


def load_settings(path: Optional[str]) -> dict:
    """Returns defaults updated with whatever the settings file contains"""
    settings = dict(DEFAULT_SETTINGS)
    if path is not None:
        with open(path) as file:
            settings.update(json.load(file))
    return settings


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog='wrapnum-bf', description='Run a brainfuck program')
    p.add_argument('program', help='Program source')
    p.add_argument('--input', default=None, help='Program input, read from stdin if not given')
    p.add_argument('--settings', default=None, help='JSON settings file')
    p.add_argument('--timeout', type=float, default=None, help='Give up after this many seconds')
    p.add_argument('--tape-size', type=int, default=None, help='Number of cells on the tape')
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    settings = load_settings(args.settings)
    if args.timeout is not None:
        settings['timeout'] = args.timeout
    if args.tape_size is not None:
        settings['tape_size'] = args.tape_size
    if settings['tape_size'] < 1:
        print(f"Tape size must be positive, not {settings['tape_size']}", file=sys.stderr)
        return 1

    # Set basic logging config
    logging.basicConfig(format='%(asctime)s %(message)s', level=settings['log_level'])

    input_ = args.input
    if input_ is None:
        input_ = '' if sys.stdin.isatty() else sys.stdin.read()

    try:
        output = bf.run_program(args.program, input_, settings['timeout'], settings['tape_size'])
    except bf.BFError as e:
        print(e, file=sys.stderr)
        return 1
    sys.stdout.write(output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
