"""Command-line interface: the protoc plugin and the tstypes tool."""

from __future__ import annotations

import json
import logging
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING

import click
from google.protobuf.compiler.plugin_pb2 import CodeGeneratorRequest
from google.protobuf.message import DecodeError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from protoc_gen_tstypes.generator.classifier import classify
from protoc_gen_tstypes.generator.descriptors import load_descriptor_set
from protoc_gen_tstypes.generator.driver import generate, output_name, process_request
from protoc_gen_tstypes.generator.types import GeneratorError

if TYPE_CHECKING:
    from protoc_gen_tstypes.generator.types import FileSpec

PLUGIN_NAME = "protoc-gen-tstypes"
LOG_LEVEL_ENV = "PROTOC_GEN_TSTYPES_LOG_LEVEL"

logger = logging.getLogger("protoc_gen_tstypes")


def configure_logging(level: int) -> None:
    """Send package log records to stderr; stdout may carry a plugin response.

    Only the package logger is configured, so handlers installed by an
    embedding application are left alone.
    """
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)


def _read_descriptor_set(input_file: str) -> list[FileSpec]:
    with open(input_file, "rb") as f:
        data = f.read()
    try:
        return load_descriptor_set(data)
    except DecodeError as e:
        raise click.ClickException(f"{input_file} is not a FileDescriptorSet: {e}") from e
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e


@click.group()
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log each generated file")
def cli(verbose: bool) -> None:
    """TypeScript declarations from protobuf descriptor sets."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@cli.command()
@click.option(
    "--input",
    "-i",
    "input_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Descriptor set (protoc --descriptor_set_out)",
)
@click.option("--output", "-o", "output_dir", required=True, help="Output directory")
def gen(input_file: str, output_dir: str) -> None:
    """Generate one .d.ts file per message."""
    files = _read_descriptor_set(input_file)

    try:
        outputs = generate(files)
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e

    out_dir = Path(output_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    for output in outputs:
        (out_dir / output.name).write_text(output.content, encoding="utf-8")
    print(f"Generated {len(outputs)} declaration(s) in {out_dir}")


@cli.command()
@click.option(
    "--input",
    "-i",
    "input_file",
    required=True,
    type=click.Path(exists=True, dir_okay=False),
    help="Descriptor set (protoc --descriptor_set_out)",
)
@click.option("--json", "output_json", is_flag=True, help="Output as JSON")
def info(input_file: str, output_json: bool) -> None:
    """Display the messages in a descriptor set."""
    files = _read_descriptor_set(input_file)

    try:
        if output_json:
            _output_json(files)
        else:
            _output_plain(files)
    except GeneratorError as e:
        raise click.ClickException(str(e)) from e


def _output_json(files: list[FileSpec]) -> None:
    """Output the decoded schema as JSON."""
    data = {"files": [proto_file.to_dict() for proto_file in files]}
    print(json.dumps(data, indent=2))


def _output_plain(files: list[FileSpec]) -> None:
    """Output a message summary using rich text formatting."""
    console = Console()

    for proto_file in files:
        console.print(f"[bold cyan]{proto_file.name}[/bold cyan]")

        table = Table(show_header=True, box=None, padding=(0, 2, 0, 0))
        table.add_column("Message", style="white")
        table.add_column("Fields", style="yellow", justify="right")
        table.add_column("Oneofs", style="yellow", justify="right")
        table.add_column("Output", style="dim")

        for message in proto_file.messages:
            plain_fields, groups = classify(message)
            table.add_row(
                message.name,
                str(len(plain_fields)),
                str(len(groups)),
                output_name(message.name),
            )

        console.print(table)
        console.print()


def plugin() -> int:
    """Run as a protoc plugin: request on stdin, response on stdout."""
    level_name = os.environ.get(LOG_LEVEL_ENV, "WARNING")
    level = logging.getLevelNamesMapping().get(level_name.strip().upper())
    configure_logging(logging.WARNING if level is None else level)
    if level is None:
        logger.warning("Unknown log level %r in %s, using WARNING", level_name, LOG_LEVEL_ENV)

    if sys.stdin.isatty():
        print(f"{PLUGIN_NAME} is a protoc plugin, it is not intended for direct use.", file=sys.stderr)
        print("", file=sys.stderr)
        print("Usage:", file=sys.stderr)
        print("  protoc --tstypes_out=./gen your_file.proto", file=sys.stderr)
        return 1

    request = CodeGeneratorRequest()
    try:
        request.ParseFromString(sys.stdin.buffer.read())
        response = process_request(request)
    except (DecodeError, GeneratorError) as e:
        print(f"{PLUGIN_NAME}: {e}", file=sys.stderr)
        return 1

    sys.stdout.buffer.write(response.SerializeToString())
    sys.stdout.buffer.flush()
    return 0


def plugin_main() -> None:
    """Entry point for protoc-gen-tstypes."""
    sys.exit(plugin())


def main() -> None:
    """Entry point for tstypes."""
    cli()


if __name__ == "__main__":
    main()
