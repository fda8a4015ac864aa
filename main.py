# main.py
import argparse
import logging
import sys

import maze_config
import run_and_export
from maze_errors import (
    DimensionTooLargeError,
    InvalidInputError,
    MazeError,
    NoPathFoundError,
    RecordNotFoundError,
)
from maze_record import MAX_FIELD_DIGITS

EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_USAGE = 2
EXIT_NOT_FOUND = 3
EXIT_TOO_LARGE = 4
EXIT_NO_PATH = 5
EXIT_OUTPUT = 6


def _parse_dimension(name: str, raw: str) -> int:
    if len(raw.strip()) > MAX_FIELD_DIGITS:
        raise InvalidInputError(f"Invalid {name}: at most {MAX_FIELD_DIGITS} digits are accepted.")
    try:
        value = int(raw)
    except ValueError:
        raise InvalidInputError(f"Invalid {name} '{raw}'. Please ensure your first two arguments are numbers.")
    if value <= 0:
        raise InvalidInputError(f"Invalid {name} '{raw}'. Rows and columns must be positive.")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Perfect maze generator and breadth-first solver')
    sub = parser.add_subparsers(dest='command', required=True)

    gen = sub.add_parser('generate', help='Generate a maze and write its record to a file')
    gen.add_argument('rows', help='Number of rows')
    gen.add_argument('cols', help='Number of columns')
    gen.add_argument('file', help='Destination file for the maze record')
    gen.add_argument('--seed', type=int, default=None, help='Seed for reproducible mazes')
    gen.add_argument('--html', type=str, default=None, help='Also write an HTML picture to this path')
    gen.add_argument('--open', action='store_true', help='Open the HTML picture in a browser')

    sol = sub.add_parser('solve', help='Solve a maze record file')
    sol.add_argument('file', help='Maze record file')
    sol.add_argument('--html', type=str, default=None, help='Also write an HTML picture of the solution')
    sol.add_argument('--open', action='store_true', help='Open the HTML picture in a browser')
    return parser


def main(argv=None) -> int:
    logging.basicConfig(
        level=getattr(logging, maze_config.LOG_LEVEL, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except SystemExit as e:
        # argparse already printed the usage message
        return EXIT_USAGE if e.code else EXIT_OK

    try:
        if args.command == 'generate':
            rows = _parse_dimension('rows', args.rows)
            cols = _parse_dimension('cols', args.cols)
            print(f"Creating {rows}x{cols} maze...")
            run_and_export.generate_and_export(rows, cols, args.file, seed=args.seed,
                                               html=args.html, auto_open_html=args.open)
        else:
            run_and_export.solve_and_export(args.file, html=args.html, auto_open_html=args.open)
    except RecordNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_NOT_FOUND
    except DimensionTooLargeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_TOO_LARGE
    except NoPathFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_NO_PATH
    except MazeError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_INVALID_INPUT
    except OSError as e:
        print(f"Error: could not write output ({e}). Please check your output paths.", file=sys.stderr)
        return EXIT_OUTPUT
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
