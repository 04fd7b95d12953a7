"""
Command-Line Interface
======================
Parses the command line, runs the requested subcommand and acts as the
single error boundary of the application.

Usage:
    $ engimath matrix-product --dim 2 "2,0,0,3" "4,5"
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from engimath.config import APP_DESCRIPTION, APP_NAME, APP_VERSION
from engimath.errors import EngiMathError
from engimath.linalg import matrix_vector_product
from engimath.logging_config import setup_logging
from engimath.parsing import parse_input_vector, validate_dimension
from engimath.report import MatrixProductResult

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def matrix_product(dim: int, matrix: str, vector: str) -> MatrixProductResult:
    """
    Solve a matrix-vector product problem (M * V) from command-line strings.

    Args:
        dim: The dimension of the square matrix (e.g. 2 for 2x2).
        matrix: Matrix elements, flattened row-major and comma-separated.
        vector: Vector elements, comma-separated.

    Raises:
        InvalidInput: If the dimension or either string is invalid.
        CalculationFailed: If the kernel rejects the parsed inputs.
    """
    validate_dimension(dim)

    matrix_flat = parse_input_vector(matrix, dim * dim)
    vector_in = parse_input_vector(vector, dim)

    output = matrix_vector_product(matrix_flat, vector_in, dim)
    return MatrixProductResult(dim=dim, input_vector=vector_in, output_vector=output)


def _run_matrix_product(args: argparse.Namespace) -> None:
    result = matrix_product(args.dim, args.matrix, args.vector)
    print(result.render())


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog=APP_NAME, description=APP_DESCRIPTION)
    parser.add_argument("--version", action="version", version=f"%(prog)s {APP_VERSION}")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file.")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    subparsers.required = True

    p = subparsers.add_parser(
        "matrix-product",
        help="Solves a matrix-vector product problem (M * V).",
        description="Solves a matrix-vector product problem (M * V).",
    )
    p.add_argument(
        "-d", "--dim",
        required=True,
        type=int,
        help="The dimension of the square matrix (e.g. 2 for 2x2).",
    )
    p.add_argument("matrix", help='Matrix elements, flattened and comma-separated (e.g. "2,0,0,3").')
    p.add_argument("vector", help='Vector elements, comma-separated (e.g. "4,5").')
    p.set_defaults(handler=_run_matrix_product)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the command line and return the process exit code.

    Usage errors are handled by argparse, which exits with status 2.
    """
    args = build_parser().parse_args(argv)
    setup_logging(level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)
    logger.debug(f"Running command: {args.command}")

    try:
        args.handler(args)
    except EngiMathError as e:
        logger.debug(f"Command {args.command} failed: {e!r}")
        print(e, file=sys.stderr)
        return EXIT_FAILURE

    return EXIT_OK


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
