import logging
import sys
from pathlib import Path
from typing import Annotated

import typer

from pymultimap.errors import MalformedPairError
from pymultimap.grouping import GroupingConfigurations, group_lines, render

logger = logging.getLogger("pymultimap")

app = typer.Typer()


@app.callback()
def callback() -> None:
    pass


@app.command()
def group(
    path: Annotated[Path | None, typer.Argument(exists=True, dir_okay=False)] = None,
    separator: str = "=",
    values_separator: str = ",",
    sorted_keys: Annotated[bool, typer.Option("--sorted")] = False,
    first_only: bool = False,
    strip: bool = True,
    log_level: str = "WARNING",
) -> None:
    logging.basicConfig(level=log_level.upper())

    configurations = GroupingConfigurations(
        separator=separator,
        values_separator=values_separator,
        sorted_keys=sorted_keys,
        first_only=first_only,
        strip=strip,
    )

    if path is None:
        lines = sys.stdin.read().splitlines()
    else:
        lines = path.read_text().splitlines()

    try:
        values_map = group_lines(lines, configurations)
    except MalformedPairError as e:
        logger.error("%s", e)
        raise typer.Exit(code=1) from e

    for line in render(values_map, configurations):
        typer.echo(line)


if __name__ == "__main__":
    app()
