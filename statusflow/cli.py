"""
Draw a status flow read from stdin (or the built-in sample)
usage: python -m statusflow.cli [--path DIR] [--name NAME] [--static] [--dot CMD] [--dot-only]
"""
import argparse
import logging
import sys

from .statusflow import StatusFlowError, set_config
from .flow import StatusFlow
from .render import make_output_dir, output_files, write_dot_to_file, render


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog='statusflow',
                                     description='Draw a status flow with graphviz')
    parser.add_argument('--path', default='.', help="output directory path")
    parser.add_argument('--name', default='status_flow', help="base name for output files (without extension)")
    parser.add_argument('--static', action="store_true", help="use the built-in sample flow instead of stdin")
    parser.add_argument('--dot', default=None, help="graphviz executable used to rasterize")
    parser.add_argument('--dot-only', action="store_true", help="only write the .dot file")
    return parser.parse_args(argv)


def main(argv=None, stdin=None):
    args = parse_args(argv)
    if args.dot:
        set_config({"dot": args.dot})
    try:
        flow = StatusFlow.sample() if args.static else StatusFlow.from_stdin(stdin)
        if args.dot_only:
            make_output_dir(args.path)
            (dot_file, _) = output_files(args.path, args.name)
            write_dot_to_file(flow.to_dot(), dot_file)
            print(f"Status flow dot file generated: {dot_file}")
            return 0
        image_file = render(flow, args.path, args.name)
    except StatusFlowError as e:
        logging.critical(f"cannot draw the status flow: {e}")
        return 1
    print(f"Status flow image generated: {image_file}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
