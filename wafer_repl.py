import argparse
import logging
import readline

import wafer

PROMPT = ' :: '


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog='wafer',
        description='A small stack calculator. With no words given, starts '
                    'an interactive prompt.')
    parser.add_argument('-c', '--conf', metavar='PATH',
                        help='configuration script (default: $WAFER_CONF or '
                             '~/.wafer.conf)')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='log what the machine is doing')
    parser.add_argument('words', nargs=argparse.REMAINDER,
                        help='a line to evaluate instead of prompting')
    return parser.parse_args(argv)


def wafer_repl(machine):
    print('Type "exit" or input an end of file (Ctrl+D) to quit.')

    while True:
        machine.execute_line(input(PROMPT))


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s')

    m = wafer.Machine(conf_path=args.conf)
    try:
        m.load_default_script()
    except OSError as e:
        logging.getLogger('wafer').warning(
            'cannot load %s: %s', m.conf_path, e)

    if args.words:
        fault = m.execute_line(' '.join(args.words))
        return 1 if fault else 0

    try:
        wafer_repl(m)
    except (EOFError, KeyboardInterrupt):
        print()  # perfectly acceptable
    return 0


if __name__ == '__main__':
    raise SystemExit(main())
