import json
import logging
from pathlib import Path
from typing import Any, Dict, TextIO

import click
from rich.console import Console

from url_redirector.constants import APP_NAME, ROOT_ENVVAR
from url_redirector.errors import RedirectorError
from url_redirector.rules.classify import diagnose_rule
from url_redirector.rules.compilers import DeclarativeNetRequestCompiler
from url_redirector.rules.models import Redirect, Rule
from url_redirector.rules.repository import RulesRepository
from url_redirector.service import RedirectService
from url_redirector.tui import RedirectorConsoleUI


def _default_root() -> Path:
    return Path.home() / ".config" / APP_NAME


def _repository_from_obj(obj: Dict[str, Any]) -> RulesRepository:
    root = obj.get("root") or _default_root()
    return RulesRepository(Path(root).expanduser())


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(message)s")


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--root",
    type=click.Path(file_okay=False, path_type=Path),
    envvar=ROOT_ENVVAR,
    default=None,
    help=f"Directory holding rules.json (default: ~/.config/{APP_NAME}).",
)
@click.option("-v", "--verbose", count=True, help="Log redirects (-v) or rule compilation (-vv).")
@click.pass_context
def cli(ctx: click.Context, root: Path | None, verbose: int) -> None:
    """Rewrite URLs with exact, wildcard and prefix rules."""
    _configure_logging(verbose)
    ctx.obj = {"root": root}


@cli.group(help="Manage redirect rules.")
def rules() -> None:
    pass


@rules.command("list", help="List rules in evaluation order.")
@click.pass_obj
def rules_list(obj: Dict[str, Any]) -> None:
    ui = RedirectorConsoleUI(Console())
    repo = _repository_from_obj(obj)
    try:
        items = repo.list_rules()
    except RedirectorError as exc:
        raise click.ClickException(str(exc))
    ui.render_rules(items, [diagnose_rule(rule) for rule in items])


@rules.command("add", help="Append a rule redirecting FROM to TO.")
@click.argument("source", metavar="FROM")
@click.argument("destination", metavar="TO")
@click.pass_obj
def rules_add(obj: Dict[str, Any], source: str, destination: str) -> None:
    ui = RedirectorConsoleUI(Console())
    repo = _repository_from_obj(obj)
    try:
        rule = repo.add_rule(source, destination)
    except RedirectorError as exc:
        raise click.ClickException(str(exc))
    ui.render_rule_saved(rule, diagnose_rule(rule))


@rules.command("remove", help="Remove the rule at POSITION (1-based, as listed).")
@click.argument("position", type=int)
@click.pass_obj
def rules_remove(obj: Dict[str, Any], position: int) -> None:
    ui = RedirectorConsoleUI(Console())
    repo = _repository_from_obj(obj)
    try:
        removed = repo.remove_rule(position)
    except RedirectorError as exc:
        raise click.ClickException(str(exc))
    ui.render_rule_removed(removed)


@rules.command("clear", help="Remove every rule.")
@click.confirmation_option(prompt="Are you sure you want to remove all rules?")
@click.pass_obj
def rules_clear(obj: Dict[str, Any]) -> None:
    ui = RedirectorConsoleUI(Console())
    repo = _repository_from_obj(obj)
    try:
        count = repo.clear()
    except RedirectorError as exc:
        raise click.ClickException(str(exc))
    ui.render_cleared(count)


@rules.command("explain", help="Show how a FROM pattern would be matched.")
@click.argument("source", metavar="FROM")
@click.argument("destination", metavar="TO", required=False, default="")
@click.pass_obj
def rules_explain(obj: Dict[str, Any], source: str, destination: str) -> None:
    ui = RedirectorConsoleUI(Console())
    rule = Rule(source=source, destination=destination)
    ui.render_explain(rule, diagnose_rule(rule))


@rules.command("import", help="Append rules from a JSON or YAML file.")
@click.argument("path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--replace", is_flag=True, help="Replace the current rules instead of appending.")
@click.pass_obj
def rules_import(obj: Dict[str, Any], path: Path, replace: bool) -> None:
    ui = RedirectorConsoleUI(Console())
    repo = _repository_from_obj(obj)
    try:
        added, skipped = repo.import_rules(path, replace=replace)
    except RedirectorError as exc:
        raise click.ClickException(str(exc))
    ui.render_transfer("Imported", str(path), added, skipped=skipped)


@rules.command("export", help="Write the rules to a JSON or YAML file.")
@click.argument("path", type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def rules_export(obj: Dict[str, Any], path: Path) -> None:
    ui = RedirectorConsoleUI(Console())
    repo = _repository_from_obj(obj)
    try:
        count = repo.export_rules(path)
    except RedirectorError as exc:
        raise click.ClickException(str(exc))
    ui.render_transfer("Exported", str(path), count)


@cli.command(help="Show where each URL would be redirected.")
@click.argument("urls", metavar="URL...", nargs=-1, required=True)
@click.pass_obj
def match(obj: Dict[str, Any], urls: tuple[str, ...]) -> None:
    ui = RedirectorConsoleUI(Console())
    service = RedirectService(_repository_from_obj(obj))
    try:
        results = list(service.rewrite_many(urls))
    except RedirectorError as exc:
        raise click.ClickException(str(exc))
    ui.render_matches(results)
    if not any(isinstance(result, Redirect) for _, result in results):
        raise click.exceptions.Exit(1)


@cli.command(help="Rewrite URLs read line by line from FILES or stdin.")
@click.argument("files", metavar="[FILE]...", nargs=-1, type=click.File("r"))
@click.option("--only-matched", is_flag=True, help="Drop URLs that no rule matches.")
@click.pass_obj
def rewrite(obj: Dict[str, Any], files: tuple[TextIO, ...], only_matched: bool) -> None:
    service = RedirectService(_repository_from_obj(obj))
    streams = files or (click.get_text_stream("stdin"),)
    try:
        for stream in streams:
            for line in stream:
                url = line.strip()
                if not url:
                    continue
                result = service.evaluate(url)
                if isinstance(result, Redirect):
                    click.echo(result.destination)
                elif not only_matched:
                    click.echo(url)
    except RedirectorError as exc:
        raise click.ClickException(str(exc))


@cli.command("export-dnr", help="Write rules as Chrome declarativeNetRequest dynamic rules.")
@click.argument("output", type=click.File("w"), default="-")
@click.pass_obj
def export_dnr(obj: Dict[str, Any], output: TextIO) -> None:
    repo = _repository_from_obj(obj)
    try:
        items = repo.list_rules()
    except RedirectorError as exc:
        raise click.ClickException(str(exc))
    payload = DeclarativeNetRequestCompiler().compile_all(items)
    json.dump(payload, output, indent=2)
    output.write("\n")


def main() -> int:
    try:
        result = cli(standalone_mode=False)
    except click.exceptions.Exit as exc:
        code = exc.exit_code
        return code if isinstance(code, int) else 1
    except click.exceptions.Abort:
        return 1
    except click.ClickException as exc:
        exc.show()
        return 2
    # Non-standalone click hands back ctx.exit() codes instead of raising.
    return result if isinstance(result, int) else 0


if __name__ == "__main__":
    raise SystemExit(main())
