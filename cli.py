"""Command-line interface.

    $ echo "123 877 10" | radix-bignum compute
    1000 107871 0

Operands and base come from positional arguments (all three) or, when
those are omitted, as three whitespace-separated tokens on standard
input.  The output line is ``sum product quotient``; with a zero divisor
only ``sum product`` is printed and the command exits with status 1.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import typer

from arithmetic import DivisionByZero
from bounds import DEFAULT_LIMITS, BoundsError
from calculator import RadixCalculator
from factory import RadixFactory, VerificationError

logger = logging.getLogger("radix_bignum.cli")

OUT_OF_RANGE = "Error: Variable out of range"

app = typer.Typer(
    name="radix-bignum",
    help="Arbitrary-precision arithmetic in bases 2 to 10",
    add_completion=False,
)


def setup_logging(debug: bool = False, verbose: bool = False) -> None:
    """Set up logging configuration"""
    if debug:
        log_level = logging.DEBUG
    elif verbose:
        log_level = logging.INFO
    else:
        log_level = logging.WARNING
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    root = logging.getLogger()
    root.handlers = []
    root.addHandler(handler)
    root.setLevel(log_level)


def _read_operands(
    a: Optional[str], b: Optional[str], base: Optional[str]
) -> tuple[str, str, int]:
    given = [x for x in (a, b, base) if x is not None]
    if given and len(given) < 3:
        # Partial arguments never fall back to stdin
        raise BoundsError("expected all of A B BASE as arguments, or none")
    if given:
        tokens = [a, b, base]
    else:
        tokens = sys.stdin.read().split()
        if len(tokens) < 3:
            logger.error("expected three tokens on stdin, got %d", len(tokens))
            raise BoundsError("expected: A B BASE")
    try:
        return tokens[0], tokens[1], int(tokens[2])
    except ValueError as e:
        raise BoundsError(f"base is not an integer: {tokens[2]!r}") from e


@app.command()
def compute(
    a: Optional[str] = typer.Argument(None, help="First operand"),
    b: Optional[str] = typer.Argument(None, help="Second operand"),
    base: Optional[str] = typer.Argument(None, help="Radix, 2 to 10"),
    remainder: bool = typer.Option(
        False, "--remainder", help="Also print the remainder of A / B"
    ),
    verify: bool = typer.Option(
        False, "--verify", help="Verify the calculator against its spec first"
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    verbose: bool = typer.Option(False, "--verbose", help="Enable info logging"),
) -> None:
    """Print the sum, product and quotient of A and B."""
    setup_logging(debug, verbose)

    try:
        a, b, base = _read_operands(a, b, base)
        if verify:
            calc = RadixFactory.create(base)
        else:
            calc = RadixCalculator(base=base)
        da, db = calc.parse(a), calc.parse(b)
    except BoundsError as e:
        logger.info("rejected input: %s", e)
        typer.echo(OUT_OF_RANGE, err=True)
        raise typer.Exit(code=1)
    except VerificationError as e:
        logger.error("%s", e)
        raise typer.Exit(code=1)

    fields = [
        calc.format(calc.add_digits(da, db)),
        calc.format(calc.mul_digits(da, db)),
    ]

    try:
        q, r = calc.divmod_digits(da, db)
    except DivisionByZero:
        # Sum and product are still defined
        typer.echo(" ".join(fields))
        typer.echo("Error: Division by zero", err=True)
        raise typer.Exit(code=1)

    fields.append(calc.format(q))
    if remainder:
        fields.append(calc.format(r))
    typer.echo(" ".join(fields))


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind"),
    port: int = typer.Option(8000, help="Port to listen on"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
) -> None:
    """Run the HTTP API."""
    import uvicorn

    setup_logging(debug, verbose=True)
    logger.info(
        "serving bases %d-%d on %s:%d",
        DEFAULT_LIMITS.min_base, DEFAULT_LIMITS.max_base, host, port,
    )
    uvicorn.run("app:app", host=host, port=port)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
