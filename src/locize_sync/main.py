"""
Main entry point for locize-sync.

This module parses arguments, sets up logging, loads the configuration,
and runs one reconciliation pass: discover keys, fetch languages and
resources, resolve missing translations and save them to locize.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

from rich.console import Console
from rich.table import Table

from .config.manager import ConfigManager
from .config.schema import LocizeSyncConfig
from .extraction.key_extractor import KeyExtractor
from .reconciliation.codec import KeyCodec
from .reconciliation.diff import MissingEntries
from .reconciliation.engine import ReconciliationReport, Reconciler
from .reconciliation.types import Resolver, SyncStatus
from .resolvers import MappingResolver, PromptResolver, SkipResolver
from .store.locize_client import LocizeClient
from .utils.cli.args import ParsedArgs, PathValidationError, parse_arguments
from .utils.core.exceptions import LocizeSyncError

logger = logging.getLogger(__name__)

console = Console()


def setup_logging(level: int = logging.INFO, log_file: Path | None = None) -> None:
    """
    Configure console logging and, optionally, a rotating log file.

    Args:
        level: Console log level
        log_file: Detailed log destination (DEBUG and above), if any
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
    )
    simple_formatter = logging.Formatter("%(asctime)s - %(levelname)s - %(message)s")

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=5 * 1024 * 1024,  # 5MB
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)

    # Request lines from the HTTP stack are noise at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)


def welcome() -> None:
    console.print("[bold blue]here we go[/bold blue]")


def build_resolver(args: ParsedArgs) -> Resolver:
    """Pick the resolver for this run from the command-line flags."""
    if args.dry_run:
        return SkipResolver()
    if args.answers is not None:
        return MappingResolver.from_file(args.answers)
    return PromptResolver(console)


def print_missing_table(entries: MissingEntries) -> int:
    """Print missing entries grouped by language; return how many there are."""
    grouped = entries.by_language()
    total = sum(len(keys) for keys in grouped.values())

    table = Table(title="Missing translations")
    table.add_column("Language", style="cyan")
    table.add_column("Missing", justify="right", style="red")
    table.add_column("Keys")
    for code, keys in grouped.items():
        language = entries.languages[code]
        table.add_row(f"{language.name} ({code})", str(len(keys)), ", ".join(keys))

    console.print(table)
    return total


def print_sync_summary(report: ReconciliationReport) -> None:
    for result in report.results:
        match result.status:
            case SyncStatus.SYNCED:
                console.print(f"[green]✓[/green] {result.language}: {result.count} saved")
            case SyncStatus.FAILED:
                console.print(f"[red]✗[/red] {result.language}: {result.error}")
            case _:
                console.print(f"[dim]-[/dim] {result.language}: nothing to save")


async def dry_run(reconciler: Reconciler, root: Path) -> int:
    """Report missing translations without asking or saving anything."""
    keys = await reconciler.discover(root)
    languages = await reconciler.fetch_languages()

    with console.status("Fetching resources..."):
        resources = await reconciler.load(languages)

    missing = print_missing_table(reconciler.plan(keys, languages, resources))
    logger.info(f"Dry run: {missing} missing translation(s), nothing saved")
    return 1 if missing else 0


async def run(args: ParsedArgs, config: LocizeSyncConfig) -> int:
    """
    Run one reconciliation pass.

    Returns:
        Exit code: 0 on completion (per-language save failures are reported,
        not fatal), 1 in dry-run mode when translations are missing
    """
    async with LocizeClient(config.locize) as store:
        reconciler = Reconciler(
            KeyExtractor(config.find_keys),
            store,
            build_resolver(args),
            codec=KeyCodec(escape=config.resolver.separator_escape),
            include_reference_language=config.locize.include_reference_language,
        )

        if args.dry_run:
            return await dry_run(reconciler, args.root)

        report = await reconciler.run(args.root)

    print_sync_summary(report)
    if report.failed:
        logger.warning(
            f"Saving failed for {len(report.failed)} language(s): "
            + ", ".join(r.language for r in report.failed)
        )
    logger.debug("and we're done")
    return 0


def init_config(config_path: Path) -> int:
    """Write a starter configuration unless one already exists."""
    if config_path.exists():
        logger.error(f"Configuration file already exists: {config_path}")
        return 1
    ConfigManager.save_config(ConfigManager.create_starter_config(), config_path)
    logger.info(f"Wrote starter configuration to {config_path}")
    return 0


async def main(argv: list[str] | None = None) -> int:
    """
    Async entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Process exit code
    """
    try:
        args = parse_arguments(argv)
    except PathValidationError as e:
        console.print(f"[red]Error: {e}[/red]")
        return 1

    setup_logging(args.debug_level, args.log_file)

    if args.init:
        return init_config(args.config_file)

    welcome()

    try:
        config = ConfigManager.load_config(args.config_file)
    except FileNotFoundError as e:
        logger.error(f"{e} (run with --init to create one)")
        return 1
    except LocizeSyncError as e:
        logger.error(e.user_message)
        return 1

    logger.debug(f"config: {config.model_dump(exclude={'locize': {'api_key'}})}")

    try:
        return await run(args, config)
    except LocizeSyncError as e:
        logger.error(e.user_message)
        logger.debug("Run aborted", exc_info=True)
        return 1
