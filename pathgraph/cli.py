"""Command line interface for querying a graph stored as CSV files."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from .config import AppConfig, GraphConfig, get_config
from .container import Container
from .domain.errors import (
    ConfigurationError,
    GraphError,
    NodeNotFoundError,
    NoRouteFoundError,
)
from .observability import setup_logging
from .ports.graph import GraphRepositoryPort
from .services import RouteService


def _container(data_dir: Optional[Path]) -> Container:
    config = get_config()
    if data_dir is not None:
        config = AppConfig(
            graph=GraphConfig(data_dir=data_dir),
            observability=config.observability,
        )
    return Container.create_default(config)


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log at DEBUG level.")
def cli(verbose: bool) -> None:
    """Minimum-cost queries over a weighted undirected graph."""
    observability = get_config().observability
    if verbose:
        observability = observability.model_copy(update={"level": "DEBUG"})
    try:
        setup_logging(observability)
    except ConfigurationError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.argument("source", type=int)
@click.argument("target", type=int)
@click.option(
    "--data-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory holding nodes.csv and edges.csv.",
)
def cost(source: int, target: int, data_dir: Optional[Path]) -> None:
    """Print the minimum cost between SOURCE and TARGET."""
    service: RouteService = _container(data_dir).resolve(RouteService)
    try:
        route = service.cost(source, target)
    except NoRouteFoundError:
        click.echo("unreachable")
        return
    except (NodeNotFoundError, GraphError) as e:
        raise click.ClickException(str(e))
    click.echo(route.cost)


@cli.command()
@click.option(
    "--data-dir",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    help="Directory holding nodes.csv and edges.csv.",
)
def info(data_dir: Optional[Path]) -> None:
    """Print node and arc counts of the loaded graph."""
    repository: GraphRepositoryPort = _container(data_dir).resolve(
        GraphRepositoryPort
    )
    try:
        graph = repository.load()
    except GraphError as e:
        raise click.ClickException(str(e))
    click.echo(f"nodes: {graph.node_count}")
    click.echo(f"arcs: {graph.arc_count}")


if __name__ == "__main__":
    cli()
