"""CLI main entry point."""

import sys
from pathlib import Path
from typing import NoReturn

import click

from ...adapters import (
    ActionsOutputAdapter,
    FsStateAdapter,
    FsStoreAdapter,
    StdLoggerAdapter,
    TarZstdArchiveAdapter,
    UtcClockAdapter,
)
from ...core import (
    CacheService,
    ConfigurationError,
    LocalCacheConfig,
    parse_restore_keys,
    resolve_paths,
)
from ...ports import OutputPort


class CliContext:
    """Objects shared by all commands."""

    def __init__(self, config: LocalCacheConfig, service: CacheService, outputs: OutputPort):
        self.config = config
        self.service = service
        self.outputs = outputs


def create_service(config: LocalCacheConfig) -> CacheService:
    """Create service with wired adapters."""
    logger = StdLoggerAdapter(level=config.log_level)
    return CacheService(
        store=FsStoreAdapter(config.cache_dir),
        archive=TarZstdArchiveAdapter(logger, temp_dir=config.temp_dir),
        state=FsStateAdapter(config.resolved_state_dir),
        clock=UtcClockAdapter(),
        logger=logger,
    )


def create_context(log_level: str | None = None) -> CliContext:
    config = LocalCacheConfig.from_env(log_level=log_level)
    return CliContext(
        config=config,
        service=create_service(config),
        outputs=ActionsOutputAdapter(config.output_file),
    )


def _require_inputs(path: str, key: str) -> list[str]:
    if not key.strip():
        raise ConfigurationError("Input required and not supplied: key")
    paths = resolve_paths(path)
    if not paths:
        raise ConfigurationError("Input required and not supplied: path")
    return paths


def _fail(message: str) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(1)


def _restore_phase(
    ctx: CliContext,
    path: str,
    key: str,
    restore_keys: str | None,
    fail_on_cache_miss: bool,
    lookup_only: bool,
    target_dir: Path | None,
) -> bool:
    """Look up or restore, publish outputs, and report whether anything matched.

    Exits with status 1 on a complete miss when fail_on_cache_miss is set.
    """
    try:
        paths = _require_inputs(path, key)
    except ConfigurationError as e:
        _fail(str(e))
    restore_keys_list = parse_restore_keys(restore_keys)
    log = ctx.service.logger
    log.debug("Inputs", paths=", ".join(paths), key=key, restore_keys=", ".join(restore_keys_list))

    if lookup_only:
        lookup = ctx.service.lookup(key, restore_keys_list)
        ctx.outputs.set_output("cache-hit", str(lookup.cache_hit).lower())
        ctx.outputs.set_output("cache-primary-key", key)
        if fail_on_cache_miss and not lookup.cache_hit:
            _fail("No matching cache found")
        return lookup.matched_key is not None

    target = target_dir if target_dir is not None else ctx.config.default_target_dir
    result = ctx.service.restore(paths, key, restore_keys_list, target)
    ctx.outputs.set_output("cache-hit", str(result.cache_hit).lower())
    ctx.outputs.set_output("cache-primary-key", key)

    if result.cache_hit:
        log.info("Cache restored successfully")
    elif result.partial_match:
        log.info("Cache restored with partial match key", key=result.restored_key)
    else:
        log.info("No matching cache found")
        if fail_on_cache_miss:
            _fail("No matching cache found")
    return result.restored_key is not None


def _restore_options(func):
    """Inputs shared by the run and restore commands."""
    options = [
        click.option("--path", required=True, help="Newline-delimited paths to cache"),
        click.option("--key", required=True, help="Primary cache key"),
        click.option(
            "--restore-keys",
            default=None,
            help="Newline-delimited fallback keys, in priority order",
        ),
        click.option(
            "--fail-on-cache-miss",
            is_flag=True,
            envvar="LC_FAIL_ON_CACHE_MISS",
            help="Fail when no cache entry matches",
        ),
        click.option(
            "--lookup-only",
            is_flag=True,
            envvar="LC_LOOKUP_ONLY",
            help="Check for a cache entry without restoring it",
        ),
        click.option(
            "--target-dir",
            type=click.Path(file_okay=False, path_type=Path),
            default=None,
            help="Extraction directory (default: workspace, else /)",
        ),
    ]
    for option in reversed(options):
        func = option(func)
    return func


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """local-cache - filesystem-backed artifact cache for CI runners."""
    ctx.obj = create_context("DEBUG" if debug else None)


@cli.command()
@_restore_options
@click.option("--compression-level", type=int, default=3, help="zstd level (-5 to 22)")
@click.option("--run-id", default=None, help="Run identifier for the deferred save")
@click.pass_obj
def run(
    ctx: CliContext,
    path: str,
    key: str,
    restore_keys: str | None,
    fail_on_cache_miss: bool,
    lookup_only: bool,
    target_dir: Path | None,
    compression_level: int,
    run_id: str | None,
) -> None:
    """Restore a cache entry and register a save for the post phase on a miss."""
    matched = _restore_phase(
        ctx, path, key, restore_keys, fail_on_cache_miss, lookup_only, target_dir
    )
    if matched or lookup_only:
        return

    ctx.service.logger.info(
        "No matching cache found, will create new cache after workflow completes"
    )
    ctx.service.defer_save(run_id or ctx.config.run_id, key, path, compression_level)


@cli.command()
@_restore_options
@click.pass_obj
def restore(
    ctx: CliContext,
    path: str,
    key: str,
    restore_keys: str | None,
    fail_on_cache_miss: bool,
    lookup_only: bool,
    target_dir: Path | None,
) -> None:
    """Restore a cache entry without registering a save."""
    _restore_phase(ctx, path, key, restore_keys, fail_on_cache_miss, lookup_only, target_dir)


@cli.command()
@click.option("--path", required=True, help="Newline-delimited paths to cache")
@click.option("--key", required=True, help="Cache key")
@click.option("--compression-level", type=int, default=3, help="zstd level (-5 to 22)")
@click.pass_obj
def save(ctx: CliContext, path: str, key: str, compression_level: int) -> None:
    """Save paths under a cache key."""
    try:
        paths = _require_inputs(path, key)
    except ConfigurationError as e:
        _fail(str(e))

    if ctx.service.save(paths, key, compression_level):
        ctx.service.logger.info("Cache saved successfully", key=key)
    else:
        ctx.service.logger.warning("Cache save failed", key=key)


@cli.command()
@click.option("--run-id", default=None, help="Run identifier used by the run command")
@click.pass_obj
def post(ctx: CliContext, run_id: str | None) -> None:
    """Perform the save registered by the run command, if any."""
    saved = ctx.service.run_deferred_save(run_id or ctx.config.run_id)
    if saved is False:
        ctx.service.logger.warning("Post action failed to save cache")


def main() -> None:
    """Main entry point."""
    cli()
