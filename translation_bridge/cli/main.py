"""Command line interface for Translation Bridge."""
import json
import logging
from pathlib import Path

import click
from colorama import Fore, Style, init

from translation_bridge import __version__
from translation_bridge.config import app_config
from translation_bridge.exporter.json_exporter import JsonExporter
from translation_bridge.schema.frameworks import Framework
from translation_bridge.translator.translator import PERFORMANCE_MODES, Translator

# Initialize colorama
init(autoreset=True)

# Formats whose content is decoded JSON rather than raw text
JSON_FRAMEWORKS = {"elementor", "bricks", "beaver-builder", "oxygen"}


def print_banner():
    """Print application banner."""
    click.echo(f"{Fore.CYAN}{'=' * 44}")
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}Translation Bridge{Fore.CYAN}                   ║")
    click.echo(f"{Fore.CYAN}║   {Fore.WHITE}Page Builder Content Converter{Fore.CYAN}       ║")
    click.echo(f"{Fore.CYAN}{'=' * 44}{Style.RESET_ALL}")
    click.echo()


def configure_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else getattr(logging, app_config.log_level.upper(), logging.INFO)
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def read_content(path: Path, framework: str):
    """Read a source file; JSON builders get their payload decoded."""
    text = path.read_text(encoding="utf-8")
    resolved = Framework.resolve(framework)
    if resolved is not None and resolved.slug in JSON_FRAMEWORKS:
        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError):
            return text
    return text


def print_messages(translator: Translator) -> None:
    for warning in translator.get_warnings():
        click.echo(f"{Fore.YELLOW}⚠ [{warning['kind']}] {warning['message']}")
    for error in translator.get_errors():
        click.echo(f"{Fore.RED}✗ {error['message']}", err=True)


@click.group()
@click.version_option(version=__version__)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose):
    """Translation Bridge - Convert content between page builders."""
    configure_logging(verbose)


@cli.command()
@click.argument("source")
@click.argument("target")
@click.argument("input_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", type=click.Path(dir_okay=False), help="Write output to this file")
@click.option("--no-cache", is_flag=True, help="Disable the translation cache")
@click.option("--mode", type=click.Choice(PERFORMANCE_MODES), default=None, help="Performance mode")
def translate(source, target, input_file, output, no_cache, mode):
    """Translate INPUT_FILE from SOURCE to TARGET framework."""
    translator = Translator()
    content = read_content(Path(input_file), source)

    options = {"enable_cache": not no_cache}
    if mode:
        options["performance_mode"] = mode

    result = translator.translate(content, source, target, options)
    print_messages(translator)

    if not translator.last_success:
        click.echo(f"{Fore.RED}❌ Translation failed", err=True)
        raise SystemExit(1)

    stats = translator.get_stats()
    if output:
        output_path = Path(output)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(result, encoding="utf-8")
        click.echo(
            f"{Fore.GREEN}✅ {stats['successful']}/{stats['total_components']} components "
            f"written to {output_path} (confidence {stats['avg_confidence']:.2f})"
        )
    else:
        click.echo(result)


@cli.command()
@click.argument("source")
@click.argument("target")
@click.argument("input_dir", type=click.Path(exists=True, file_okay=False))
@click.option("--report", "-r", type=click.Path(dir_okay=False), help="Export a JSON report")
def batch(source, target, input_dir, report):
    """Translate every file in INPUT_DIR from SOURCE to TARGET."""
    print_banner()

    files = sorted(path for path in Path(input_dir).iterdir() if path.is_file())
    if not files:
        click.echo(f"{Fore.YELLOW}No files found in {input_dir}")
        return

    contents = {path.name: read_content(path, source) for path in files}

    def progress(current, total, key):
        click.echo(f"{Fore.CYAN}[{current}/{total}] {key}")

    translator = Translator()
    results = translator.batch_translate(contents, source, target, {"progress_callback": progress})

    succeeded = 0
    for key, result in results.items():
        if result["success"]:
            succeeded += 1
            click.echo(f"{Fore.GREEN}  ✓ {key}: {result['stats']['successful']} components")
        else:
            messages = "; ".join(error["message"] for error in result["errors"]) or "no components"
            click.echo(f"{Fore.RED}  ✗ {key}: {messages}")

    click.echo(f"\n{Fore.CYAN}{succeeded}/{len(results)} files translated")

    if report:
        path = JsonExporter().export(report, results, source, target)
        click.echo(f"{Fore.GREEN}✅ Report saved to {path}")


@cli.command()
def frameworks():
    """List supported frameworks."""
    translator = Translator()
    supported = translator.get_supported_frameworks()

    click.echo(f"{Fore.CYAN}Supported frameworks:")
    for framework in Framework:
        if framework.slug not in supported:
            continue
        aliases = f" ({', '.join(framework.aliases)})" if framework.aliases else ""
        click.echo(f"  • {framework.slug}{aliases}")


if __name__ == "__main__":
    cli()
