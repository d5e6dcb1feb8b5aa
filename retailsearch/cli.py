# RetailStack Search CLI - search, suggestions, tag maintenance, recent searches

import json

import click

from .config import load_config
from .engine import METRICS, SearchEngine
from .errors import SearchEngineError
from .logging_config import setup_logging


def _engine(ctx) -> SearchEngine:
    return ctx.obj['engine']


@click.group()
@click.option('--config', 'config_path', default=None, help='Path to config.json')
@click.option('--catalog', 'catalog_path', default=None, help='Product catalog JSON export')
@click.option('--db', 'db_path', default=None, help='SQLite file for recent searches')
@click.option('-v', '--verbose', is_flag=True, help='Log to stderr as well')
@click.pass_context
def cli(ctx, config_path, catalog_path, db_path, verbose):
    """RetailStack product search"""
    try:
        config = load_config(config_path)
    except SearchEngineError as e:
        raise click.ClickException(str(e))

    if catalog_path:
        config.catalog_path = catalog_path
        config.catalog_url = None
    if db_path:
        config.db_path = db_path

    setup_logging(
        log_path=config.log_file,
        console=verbose,
        level='DEBUG' if verbose else config.log_level,
    )

    try:
        engine = SearchEngine(config)
    except SearchEngineError as e:
        raise click.ClickException(str(e))
    ctx.obj = {'engine': engine}


@cli.command()
@click.argument('query', default='')
@click.option('--scores', is_flag=True, help='Show relevance scores')
@click.option('--no-record', is_flag=True, help='Do not add the query to recent searches')
@click.option('--json', 'as_json', is_flag=True, help='Output products as JSON')
@click.pass_context
def search(ctx, query, scores, no_record, as_json):
    """Rank the catalog for QUERY"""
    engine = _engine(ctx)
    try:
        if scores and query.strip():
            matches = engine.ranker.rank_with_scores(query, engine.products)
        else:
            matches = [(p, None) for p in engine.ranker.rank(query, engine.products)]
    except SearchEngineError as e:
        raise click.ClickException(str(e))

    if not no_record and not engine.record_search(query):
        click.echo('Warning: recent search was not saved', err=True)

    if as_json:
        click.echo(json.dumps([p.to_dict() for p, _ in matches], indent=2))
        return

    if not matches:
        click.echo('No products found')
        return
    for product, score in matches:
        line = f"{product.name}  [{product.category or '-'}]  sku={product.sku or '-'}"
        if score is not None:
            line = f"{score:6.2f}  {line}"
        click.echo(line)


@cli.command()
@click.argument('query', default='')
@click.pass_context
def suggest(ctx, query):
    """Suggestions for a partially typed QUERY (recent searches when empty)"""
    engine = _engine(ctx)
    try:
        suggestions = engine.suggest(query)
    except SearchEngineError as e:
        raise click.ClickException(str(e))
    for suggestion in suggestions:
        click.echo(f"{suggestion.kind.value:<9} {suggestion.text}  ({suggestion.count})")


@cli.group()
def tags():
    """Tag vocabulary maintenance"""


@tags.command('list')
@click.pass_context
def tags_list(ctx):
    """All distinct tags in the catalog"""
    try:
        vocabulary = _engine(ctx).tags()
    except SearchEngineError as e:
        raise click.ClickException(str(e))
    for tag in vocabulary:
        click.echo(tag)


@tags.command('cluster')
@click.option('--threshold', type=click.FloatRange(0, 1), default=None,
              help='Similarity needed to merge two tags (default from config)')
@click.option('--metric', type=click.Choice(sorted(METRICS)), default='jaro-winkler')
@click.option('--map', 'show_map', is_flag=True, help='Show which tags merge into which')
@click.pass_context
def tags_cluster(ctx, threshold, metric, show_map):
    """Canonical tags after merging near-duplicate spellings"""
    engine = _engine(ctx)
    clusterer = engine.clusterer(threshold, metric)
    try:
        vocabulary = engine.tags()
    except SearchEngineError as e:
        raise click.ClickException(str(e))

    if show_map:
        for tag, canonical in clusterer.canonical_map(vocabulary).items():
            if tag != canonical:
                click.echo(f"{tag} -> {canonical}")
        return
    for canonical in clusterer.cluster(vocabulary):
        click.echo(canonical)


@cli.group()
def recent():
    """Recent search history"""


@recent.command('list')
@click.pass_context
def recent_list(ctx):
    for query in _engine(ctx).recent.list():
        click.echo(query)


@recent.command('clear')
@click.pass_context
def recent_clear(ctx):
    try:
        _engine(ctx).recent.clear()
    except SearchEngineError as e:
        raise click.ClickException(str(e))
    click.echo('Recent searches cleared')


def main():
    cli(prog_name='retailsearch')


if __name__ == '__main__':
    main()
