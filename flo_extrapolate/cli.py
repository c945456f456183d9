"""
Extrapolate optical flow from a lower resolution FLO(W) file to a higher resolution.

The output file format (FLO or FLOW) is determined by the input format.
If -x and -y are not passed, they are determined by output-{w,h} / input-{w,h}.

example: flo-extrapolate -w 512 -h 488 -x 5.0 -y 5.0 small.flow large.flow
"""
import argparse
import logging
import sys

from flo_extrapolate.exceptions import FloError
from flo_extrapolate.interface import extrapolate_flow

logger = logging.getLogger(__name__)


def setup_logging(verbose=False):
    """Configure logging for the command-line tool."""
    level = logging.INFO if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S',
    )


def build_parser():
    # -h is the target height, so help moves to -H
    parser = argparse.ArgumentParser(
        prog='flo-extrapolate',
        description=__doc__,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
    )
    parser.add_argument('-H', action='help', help='print this help text')

    group = parser.add_argument_group('extrapolation control')
    group.add_argument('-w', dest='width', type=int, default=None, help='target width')
    group.add_argument('-h', dest='height', type=int, default=None, help='target height')
    group.add_argument('-x', dest='scale_x', type=float, default=-1.0,
                       help='extrapolation factor in x-direction')
    group.add_argument('-y', dest='scale_y', type=float, default=-1.0,
                       help='extrapolation factor in y-direction')

    parser.add_argument('--preview', metavar='PNG', default=None,
                        help='also write a color-coded preview of the result')
    parser.add_argument('--max-flow', type=float, default=None,
                        help='flow magnitude mapped to full saturation in the preview')
    parser.add_argument('-v', '--verbose', action='store_true', help='log progress')
    parser.add_argument('files', nargs='*', metavar='file',
                        help='input file and output file')
    return parser


def main(argv=None):
    """Run the command-line tool. Returns the process exit status."""
    if argv is None:
        argv = sys.argv[1:]

    parser = build_parser()
    if not argv:
        parser.print_usage(sys.stderr)
        return 1

    args = parser.parse_args(argv)
    setup_logging(args.verbose)

    if args.width is None or args.height is None:
        print('Missing argument for width or height', file=sys.stderr)
        return 1
    if len(args.files) != 2:
        print('Expected two arguments (input file, output file) after options.',
              file=sys.stderr)
        return 1

    in_file, out_file = args.files
    try:
        field = extrapolate_flow(in_file, out_file, args.width, args.height,
                                 args.scale_x, args.scale_y)
        if args.preview:
            from flo_extrapolate.viz.flow_color import save_flow_preview
            save_flow_preview(field, args.preview, max_flow=args.max_flow)
            logger.info('Wrote preview %s', args.preview)
    except FloError as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
