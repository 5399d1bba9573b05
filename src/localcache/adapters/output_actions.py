"""Step output adapter for CI runners."""

import uuid
from pathlib import Path

import click


class ActionsOutputAdapter:
    """Publishes outputs to the runner.

    With an output file configured, each value is appended in the runner's
    ``name<<delimiter`` form, so values containing newlines cannot inject
    other outputs. Without one, ``name=value`` is echoed to stdout.
    """

    def __init__(self, output_file: Path | None = None):
        self.output_file = output_file

    def set_output(self, name: str, value: str) -> None:
        if self.output_file is None:
            click.echo(f"{name}={value}")
            return
        delimiter = f"ghadelimiter_{uuid.uuid4()}"
        if delimiter in name or delimiter in value:
            raise ValueError(f"Unexpected input: name or value contains delimiter {delimiter}")
        with open(self.output_file, "a", encoding="utf-8") as f:
            f.write(f"{name}<<{delimiter}\n{value}\n{delimiter}\n")
