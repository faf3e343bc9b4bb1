from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from slugroute.core.config import SlugrouteConfig
from slugroute.core.exceptions import SlugrouteError, TreeIntegrityError
from slugroute.core.logging import setup_logging
from slugroute.site import SiteContext, build_context

app = typer.Typer(name="slugroute", help="Resolve site URLs to articles and back.")

console = Console()

_state: dict[str, Path | None] = {"site_root": None}


@app.callback()
def main(
    site_root: Path = typer.Option(None, "--site-root", help="Directory holding .slugroute.toml."),
    log_level: str = typer.Option("WARNING", "--log-level", help="Logging level."),
):
    """
    slugroute command line.
    """
    setup_logging(log_level, log_file=None)
    _state["site_root"] = site_root


def _context() -> SiteContext:
    try:
        return build_context(SlugrouteConfig.load(_state["site_root"]))
    except SlugrouteError as exc:
        console.print(f"[bold red]Configuration error:[/] {exc}")
        raise typer.Exit(code=2) from exc


def _parse_query(pairs: list[str] | None) -> dict[str, str]:
    query: dict[str, str] = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep:
            raise typer.BadParameter(f"Expected key=value, got '{pair}'", param_hint="--query")
        query[key] = value
    return query


@app.command()
def init():
    """
    Create the article and category tables.
    """
    ctx = _context()
    try:
        ctx.initialize()
        console.print(f"✅ Tables ready in {ctx.config.paths.abs_db_path}")
        console.print(f"Active addressing rule: [bold]{ctx.rules.active.name}[/bold]")
    finally:
        ctx.close()


@app.command()
def resolve(
    path: str = typer.Argument("", help="Request path, e.g. 'news/my-story.html'."),
    query: list[str] = typer.Option(None, "--query", "-q", help="Query parameter as key=value."),
):
    """
    Resolve a request path to its article and category.
    """
    ctx = _context()
    try:
        resolver = ctx.resolver(path, _parse_query(query))
        article = resolver.find()
        if not article:
            console.print(f"[bold red]Not found:[/] {resolver.request.to_url()}")
            raise typer.Exit(code=1)

        category = resolver.find_category()
        table = Table(title=resolver.request.to_url())
        table.add_column("Field", style="cyan")
        table.add_column("Value")
        table.add_row("Article", f"{article.id} ({article.slug_type.name.lower()}) {article.header}")
        table.add_row("Category", f"{category.id} {category.slug_path}" if category else "-")
        table.add_row("Published", "yes" if resolver.is_published() else "no")
        table.add_row("Breadcrumbs", " › ".join(crumb.label for crumb in resolver.get_breadcrumbs()))
        table.add_row("Canonical URL", resolver.build_canonical_url())
        console.print(table)
    finally:
        ctx.close()


@app.command()
def url(article_id: int = typer.Argument(..., help="Article id.")):
    """
    Print the canonical URL of an article.
    """
    ctx = _context()
    try:
        article = ctx.articles.get_by_id(article_id)
        if article is None:
            console.print(f"[bold red]No article with id {article_id}[/]")
            raise typer.Exit(code=1)
        try:
            console.print(ctx.resolver("").url_for(article))
        except SlugrouteError as exc:
            console.print(f"[bold red]Cannot build URL:[/] {exc}")
            raise typer.Exit(code=1) from exc
    finally:
        ctx.close()


@app.command("check-tree")
def check_tree():
    """
    Verify the nested-set intervals of the category tree.
    """
    ctx = _context()
    try:
        count = ctx.tree.validate()
    except TreeIntegrityError as exc:
        console.print(f"[bold red]Broken category tree:[/] {exc}")
        raise typer.Exit(code=1) from exc
    finally:
        ctx.close()
    console.print(f"✅ {count} categories form a consistent tree.")
