# src/patternkit/cli.py
"""
Command-line interface for patternkit package
"""

import argparse
import logging

from .config import DemoConfig
from .demo import DEMONSTRATIONS, find_demonstration, run_demo
from . import __version__


def demonstration_arg(value):
    """argparse type: resolve a demonstration by number or name."""
    demo = find_demonstration(value)
    if demo is None:
        raise argparse.ArgumentTypeError(
            f"unknown demonstration {value!r} (use --list to see the choices)"
        )
    return demo


def print_demonstration_list():
    """Print every available demonstration with its category."""
    print(f"patternkit v{__version__} - Available Demonstrations")
    print("=" * 50)
    for demo in DEMONSTRATIONS:
        print(f"{demo.number}. {demo.name} ({demo.category.value})")


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="patternkit: classic design patterns, one small example each",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  patternkit-demo                      # Run all fourteen demonstrations
  patternkit-demo --list               # Show the available demonstrations
  patternkit-demo --only 8 --only proxy
        """
    )

    parser.add_argument(
        '--version',
        action='version',
        version=f'patternkit v{__version__}'
    )

    parser.add_argument(
        '--list',
        action='store_true',
        help='List the available demonstrations and exit'
    )

    parser.add_argument(
        '--only',
        type=demonstration_arg,
        action='append',
        metavar='NAME',
        help='Run only this demonstration (number or name); may be repeated'
    )

    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log what the examples do behind the scenes'
    )

    args = parser.parse_args(argv)

    if args.list:
        print_demonstration_list()
        return 0

    if args.verbose:
        logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")

    config = DemoConfig(verbose=args.verbose)
    run_demo(config, selected=args.only)
    return 0


if __name__ == "__main__":
    main()
