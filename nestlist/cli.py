"""
Command-line interface for nestlist.
"""
from pathlib import Path
from typing import Optional

import click

from nestlist.constants import get_save_notice
from nestlist.core import NestedListUI
from nestlist.data_store import DataStore
from nestlist.exceptions import NestlistError, StorageError
from nestlist.models.tree import Item, List


def build_demo_tree() -> List:
    """Three nested lists with a sibling item at the top level."""
    third = List(
        name="third list",
        items=[
            Item(id="item 1 for third list id", name="item 1 for third list name"),
        ],
    )
    second = List(
        name="second list",
        items=[
            Item(
                id="item 1 for second list id",
                name="item 1 for second list name",
                sublist=third,
            ),
        ],
    )
    return List(
        name="first list",
        items=[
            Item(
                id="item 1 for first list id",
                name="item 1 for first list name",
                sublist=second,
            ),
            Item(id="item 2 for first list id", name="item 2 for first list name"),
        ],
    )


def _load_page_options(ui: NestedListUI, options_path: Optional[str]) -> None:
    if options_path:
        options = DataStore(Path(options_path)).load_options()
        ui.set_page_options(options.page_options)


@click.group()
def cli():
    """Navigate and edit nested lists in the terminal."""
    pass


@cli.command()
@click.option("-o", "--options", "options_path", type=click.Path(dir_okay=False),
              help="JSON file with per-depth page options.")
def demo(options_path):
    """Run the built-in example tree; saving prints the tree."""
    ui = NestedListUI(build_demo_tree())

    def _print_tree(tree: List) -> Optional[str]:
        click.echo(f"=======> {tree.model_dump_json(by_alias=True)}")
        return get_save_notice()

    ui.on_save(_print_tree)
    try:
        _load_page_options(ui, options_path)
        ui.run()
    except NestlistError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("-o", "--options", "options_path", type=click.Path(dir_okay=False),
              help="JSON file with per-depth page options.")
def edit(path, options_path):
    """Edit the tree stored in PATH; saving writes it back."""
    store = DataStore(Path(path))
    try:
        ui = NestedListUI(store.load_tree())
        _load_page_options(ui, options_path)
    except NestlistError as e:
        raise click.ClickException(str(e))

    def _write_tree(tree: List) -> Optional[str]:
        try:
            store.save_tree(tree)
        except StorageError as e:
            return f"ERROR: {e}"
        return get_save_notice()

    ui.on_save(_write_tree)
    try:
        ui.run()
    except NestlistError as e:
        raise click.ClickException(str(e))


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
def show(path):
    """Print the tree stored in PATH as an outline."""
    try:
        tree = DataStore(Path(path)).load_tree()
    except NestlistError as e:
        raise click.ClickException(str(e))

    click.echo(tree.name)
    for depth, item in tree.iter_outline():
        click.echo(f"{'  ' * (depth + 1)}- {item.name} ({item.id})")


if __name__ == '__main__':
    cli()
