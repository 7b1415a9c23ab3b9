__all__ = ["app"]

import logging
from typing import Annotated

import typer
from parsita import ParseError
from returns.result import Failure, Success

from .containers import Placeholder
from .expression import parse_expression
from .extents import parse_extents, parse_named_extents
from .slicing import SliceVector, parse_slice, resolve_slices
from .transforms import bind_variables, has_logical_operator, infer_extents

app = typer.Typer()


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log each inference step to standard error.")
    ] = False,
):
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


def parse_or_exit(text: str):
    match parse_expression(text):
        case Failure(error):
            typer.echo(f"Failed to parse expression:\n{error}", err=True)
            raise typer.Exit(1)
        case Success(parsed_expression):
            return parsed_expression
        case _:
            raise NotImplementedError()


@app.command()
def extents(
    expression: Annotated[
        str,
        typer.Argument(
            show_default=False,
            help="The expression whose extents will be inferred, e.g. A + 2 * B.",
        ),
    ],
    operand_strings: Annotated[
        list[str],
        typer.Option(
            "--operand",
            "-o",
            help=(
                "A variable and its extents separated by a colon, e.g. A:2,3 for a 2-by-3 "
                "tensor. Every variable in the expression must be mentioned."
            ),
        ),
    ] = [],  # noqa: B006; Typer does not support Sequence or tuple
):
    parsed_expression = parse_or_exit(expression)

    # Parse operands
    operands = {}
    for operand_string in operand_strings:
        match parse_named_extents(operand_string):
            case Failure(error):
                typer.echo(f"Failed to parse operand:\n{error}", err=True)
                raise typer.Exit(1)
            case Success((name, operand_extents)):
                pass
            case _:
                raise NotImplementedError()

        if name in operands:
            typer.echo(f"Extents for {name} were mentioned multiple times", err=True)
            raise typer.Exit(1)

        operands[name] = Placeholder(operand_extents)

    match bind_variables(parsed_expression, operands).bind(infer_extents):
        case Failure(error):
            typer.echo(str(error), err=True)
            raise typer.Exit(1)
        case Success(inferred_extents):
            typer.echo(inferred_extents.deparse())
        case _:
            raise NotImplementedError()


@app.command()
def logical(
    expression: Annotated[
        str,
        typer.Argument(
            show_default=False,
            help="The expression to search for a comparison operator, e.g. A + B < C.",
        ),
    ],
):
    parsed_expression = parse_or_exit(expression)

    if has_logical_operator(parsed_expression):
        typer.echo("true")
    else:
        typer.echo("false")


@app.command("slice", context_settings={"ignore_unknown_options": True})
def slice_command(
    extents_string: Annotated[
        str,
        typer.Argument(
            metavar="EXTENTS",
            show_default=False,
            help="The length of each dimension separated by commas, e.g. 5,4.",
        ),
    ],
    slice_strings: Annotated[
        list[str],
        typer.Argument(
            metavar="SLICES",
            show_default=False,
            help="One slice per dimension written first:last:step, e.g. 0:end:2 or -1.",
        ),
    ],
):
    match parse_extents(extents_string):
        case Failure(error):
            typer.echo(f"Failed to parse extents:\n{error}", err=True)
            raise typer.Exit(1)
        case Success(parsed_extents):
            pass
        case _:
            raise NotImplementedError()

    slices = []
    for slice_string in slice_strings:
        match parse_slice(slice_string):
            case Failure(ParseError(_) as error):
                typer.echo(f"Failed to parse slice:\n{error}", err=True)
                raise typer.Exit(1)
            case Failure(error):
                typer.echo(str(error), err=True)
                raise typer.Exit(1)
            case Success(parsed_slice):
                slices.append(parsed_slice)
            case _:
                raise NotImplementedError()

    match resolve_slices(SliceVector(slices), parsed_extents):
        case Failure(error):
            typer.echo(str(error), err=True)
            raise typer.Exit(1)
        case Success(resolved):
            for descriptor in resolved:
                typer.echo(repr(descriptor))
        case _:
            raise NotImplementedError()
