import argparse
import logging
import sys
from arguments import InvocationArgs, UsageError, USAGE_MESSAGE
from compressors import compressor_for


logger = logging.getLogger(__name__)


class ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise UsageError(USAGE_MESSAGE)


def create_parser():
    parser = ArgumentParser(
        description='Given a .png or .jpg/.jpeg image, write a re-compressed '
                    'copy of it in the same format'
    )
    parser.add_argument('infile', type=str,
                        help='a path to the image to compress')

    parser.add_argument('outfile', type=str,
                        help='a destination path')

    parser.add_argument('level', type=str, nargs='?', default=None,
                        help='JPEG quality (0-100, default 80) or PNG zlib '
                             'compression level (0-9, default 2); values out '
                             'of range fall back to the default')

    parser.add_argument('--strict', action='store_true',
                        help='exit with status 1 if the codec fails')

    parser.add_argument('-v', '--verbose', action='store_true',
                        help='report sizes and the level used')
    return parser


def configure_logging(verbose):
    logging.basicConfig(format='%(message)s', stream=sys.stderr)
    logging.getLogger().setLevel(logging.INFO if verbose else logging.WARNING)


def compress(input_fname, output_fname, level=None):
    args = InvocationArgs.from_strings(input_fname, output_fname, level)

    resolved = args.resolved_level()
    if args.level is not None and args.level != resolved:
        logger.debug('level %d is out of range for %s, using %d',
                     args.level, args.kind.label, resolved)

    logger.info('compressing %s as %s at level %d', args.input_path,
                args.kind.label, resolved)
    compressor = compressor_for(args.kind, resolved)
    return compressor.compress(args.input_path, args.output_path)


def run(argv=None):
    """
    Runs the command line and returns the process exit status

    Flags may appear anywhere among the positional arguments.
    """
    try:
        args = create_parser().parse_intermixed_args(argv)
        configure_logging(args.verbose)
        succeeded = compress(args.infile, args.outfile, args.level)
    except UsageError as e:
        print(e)
        return 1
    except SystemExit as e:
        return e.code

    if not succeeded and args.strict:
        return 1

    print('Compression complete!')
    return 0


def main():
    sys.exit(run())


if __name__ == '__main__':
    main()
