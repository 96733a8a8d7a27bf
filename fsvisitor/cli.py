'''파일 시스템 탐색 CLI 진입점(KR). File system visitor CLI entrypoint (EN).'''

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Sequence

import click

from .config import CliSettings, VisitorConfig
from .exceptions import VisitorError
from .filters import FilterMode, resolve_filter
from .logging import configure_logging
from .models import Entry
from .visitor import FileSystemVisitor

NOTHING_FOUND = 'Nothing found'

logger = logging.getLogger(__name__)


def _parse_filter_mode(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> FilterMode | None:
    '''필터 모드 문자열을 해석한다 · Parse filter mode option.'''

    if value is None:
        return None
    try:
        return FilterMode.parse(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc


def _setup_logging(ctx: click.Context, echo_events: bool) -> None:
    '''명령별 로깅을 설정한다 · Configure logging for a command.'''

    configure_logging(ctx.obj['log_file'], level=ctx.obj['level'], echo_events=echo_events)


def _resolve_target(settings: CliSettings, target_path: Path | None) -> Path:
    target = target_path or settings.target_path
    if target is None:
        raise click.UsageError("Missing option '-t' / '--target-path'.")
    return target


def _print_entries(entries: Iterable[Entry]) -> int:
    '''엔트리를 한 줄씩 출력한다 · Print entries one per line as they arrive.'''

    count = 0
    for entry in entries:
        click.echo(str(entry))
        count += 1
    if count == 0:
        click.echo(NOTHING_FOUND)
    return count


@click.group()
@click.option(
    '--config-file',
    type=click.Path(path_type=Path),
    default=None,
    help='구성 파일 경로 · Config file path',
)
@click.option('--verbose', is_flag=True, help='상세 로그 · Verbose logs')
@click.option('--quiet', is_flag=True, help='간략 로그 · Quiet logs')
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    default=None,
    help='로그 파일 경로 · Log file path',
)
@click.pass_context
def cli(
    ctx: click.Context,
    config_file: Path | None,
    verbose: bool,
    quiet: bool,
    log_file: Path | None,
) -> None:
    '''파일 시스템 탐색 CLI · File system visitor CLI.'''

    level = 'INFO'
    if verbose:
        level = 'DEBUG'
    if quiet:
        level = 'WARNING'
    try:
        settings = CliSettings.from_file(config_file) if config_file else CliSettings()
    except ValueError as exc:
        raise click.ClickException(f'invalid config file {config_file}: {exc}') from exc
    ctx.obj = {
        'settings': settings,
        'level': level,
        'log_file': log_file or settings.log_file,
    }


@cli.command()
@click.option(
    '-t',
    '--target-path',
    type=click.Path(path_type=Path),
    default=None,
    help='대상 폴더 경로 · Target folder path',
)
@click.option(
    '-f',
    '--filter',
    'filter_mode',
    default=None,
    callback=_parse_filter_mode,
    help='필터 모드 · Filter mode (glob-pattern, folders-only, files-only)',
)
@click.option(
    '-g',
    '--glob-pattern',
    default=None,
    help='글롭 패턴 · Glob pattern matched against the full path',
)
@click.option('-l', '--log-events', is_flag=True, help='이벤트 로그 · Log events')
@click.pass_context
def search(
    ctx: click.Context,
    target_path: Path | None,
    filter_mode: FilterMode | None,
    glob_pattern: str | None,
    log_events: bool,
) -> None:
    '''조건에 맞는 엔트리를 찾는다 · Search entries matching a filter.'''

    settings: CliSettings = ctx.obj['settings']
    target = _resolve_target(settings, target_path)
    log_events = log_events or settings.log_events
    _setup_logging(ctx, echo_events=log_events)
    predicate = resolve_filter(
        filter_mode or settings.filter_mode,
        glob_pattern if glob_pattern is not None else settings.glob_pattern,
    )
    config = VisitorConfig(root_path=target, predicate=predicate, verbose_logging=log_events)
    visitor = FileSystemVisitor(config)
    try:
        count = _print_entries(visitor.search())
    except (VisitorError, OSError) as exc:
        logger.error('search failed for %s: %s', target, exc)
        raise click.ClickException(str(exc)) from exc
    logger.info('search of %s produced %d entries', target, count)


@cli.command('list')
@click.option(
    '-t',
    '--target-path',
    type=click.Path(path_type=Path),
    default=None,
    help='대상 폴더 경로 · Target folder path',
)
@click.pass_context
def list_entries(ctx: click.Context, target_path: Path | None) -> None:
    '''모든 엔트리를 나열한다 · List every entry without filtering.'''

    settings: CliSettings = ctx.obj['settings']
    target = _resolve_target(settings, target_path)
    _setup_logging(ctx, echo_events=False)
    visitor = FileSystemVisitor(VisitorConfig(root_path=target))
    try:
        count = _print_entries(visitor.list_all())
    except (VisitorError, OSError) as exc:
        logger.error('listing failed for %s: %s', target, exc)
        raise click.ClickException(str(exc)) from exc
    logger.info('listing of %s produced %d entries', target, count)


def main(argv: Sequence[str] | None = None) -> int:
    '''CLI 진입점을 실행한다 · Execute CLI entry point.'''

    argv = argv or sys.argv[1:]
    cli.main(args=list(argv), prog_name='fsvisitor')
    return 0


if __name__ == '__main__':  # pragma: no cover
    sys.exit(main())
