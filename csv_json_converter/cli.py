"""csv2json command line entry point.

Exit codes:
    0: Success
    1: Conversion failed (malformed, empty or ragged input)
    2: Configuration error (bad option value)
    3: I/O error (input unreadable, output unwritable)
"""

import logging
import sys

import click

from .converter import convert_csv_to_json, summarize, to_json_text
from .errors import ConversionError, InvalidConfigurationError
from .io_utils import decode_csv_bytes
from .options import ARRAY_FORMAT, OBJECT_FORMAT, ConversionOptions
from .settings import get_settings

EXIT_SUCCESS = 0
EXIT_CONVERSION_FAILED = 1
EXIT_CONFIG_ERROR = 2
EXIT_IO_ERROR = 3

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, level: str | None = None) -> None:
    """Configure logging for the CLI; logs go to stderr so stdout stays clean JSON."""
    if level is None:
        level = "DEBUG" if verbose else "WARNING"

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


class DefaultCommandGroup(click.Group):
    """Group that runs `convert` when no subcommand is named (`csv2json -i in.csv`)."""

    default_command = "convert"

    def parse_args(self, ctx, args):
        if args and args[0] not in self.commands and args[0] not in ("--help", "--version"):
            args = [self.default_command] + list(args)
        return super().parse_args(ctx, args)


@click.group(cls=DefaultCommandGroup)
@click.version_option(version="1.0.0", prog_name="csv2json")
def cli() -> None:
    """Convert CSV files to JSON format."""


@cli.command()
@click.option("-i", "--input", "input_path", required=True, type=click.Path(dir_okay=False, allow_dash=True),
              help="Input CSV file ('-' for stdin)")
@click.option("-o", "--output", "output_file", type=click.Path(dir_okay=False, writable=True),
              help="Output JSON file (prints to stdout if not given)")
@click.option("-d", "--delimiter", default=",", show_default=True,
              help="Field delimiter; use '\\t' for tabs")
@click.option("--no-header", is_flag=True, help="Input has no header row")
@click.option("--format", "output_format", type=click.Choice([ARRAY_FORMAT, OBJECT_FORMAT]),
              default=ARRAY_FORMAT, show_default=True, help="Output layout")
@click.option("--compact", is_flag=True, help="Compact JSON output (no pretty printing)")
@click.option("--no-infer-types", is_flag=True, help="Keep all values as strings")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def convert(input_path, output_file, delimiter, no_header, output_format, compact, no_infer_types, verbose) -> None:
    """Convert a CSV file to JSON.

    \b
    Examples:
      csv2json -i input.csv -o output.json
      csv2json -i data.csv --format object --delimiter ";"
      csv2json convert -i file.csv --no-header --compact
    """
    setup_logging(verbose)

    try:
        options = ConversionOptions.from_mapping({
            "delimiter": delimiter,
            "has_header": not no_header,
            "output_format": output_format,
            "pretty_print": not compact,
            "infer_types": not no_infer_types,
        })
    except InvalidConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_CONFIG_ERROR)

    try:
        with click.open_file(input_path, "rb") as f:
            text = decode_csv_bytes(f.read())
    except (OSError, UnicodeDecodeError) as e:
        click.echo(f"Error reading input: {e}", err=True)
        sys.exit(EXIT_IO_ERROR)

    try:
        data = convert_csv_to_json(text, options)
    except ConversionError as e:
        click.echo(f"Error converting CSV to JSON: {e}", err=True)
        sys.exit(EXIT_CONVERSION_FAILED)

    json_text = to_json_text(data, options.pretty_print)
    logger.info(summarize(data).describe())

    if output_file:
        try:
            with open(output_file, "w", encoding="utf-8") as f:
                f.write(json_text)
                f.write("\n")
        except OSError as e:
            click.echo(f"Error writing output file: {e}", err=True)
            sys.exit(EXIT_IO_ERROR)
        click.echo(f"Successfully converted {input_path} to {output_file}", err=True)
    else:
        click.echo(json_text)

    sys.exit(EXIT_SUCCESS)


@cli.command()
@click.option("--host", default=None, help="Bind address (default from CSV2JSON_HOST)")
@click.option("--port", type=int, default=None, help="Port (default from CSV2JSON_PORT)")
@click.option("--no-ui", is_flag=True, help="Serve the HTTP API without the web UI")
def serve(host, port, no_ui) -> None:
    """Run the HTTP API (and web UI) with uvicorn."""
    import uvicorn

    from .api import create_app

    settings = get_settings()
    if host:
        settings.host = host
    if port:
        settings.port = port

    setup_logging(level=settings.log_level)
    logger.info("Starting csv2json API on %s:%d", settings.host, settings.port)

    app = create_app(settings, mount_ui=not no_ui)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
