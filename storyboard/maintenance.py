"""Reconcile the catalog document with the blob directory."""

import click
from flask import current_app
from flask.cli import with_appcontext
from loguru import logger


def find_orphaned_blobs(store, blobs):
    """Blob files that no catalog entry references."""
    referenced = {image.filename for image in store.list_images()}
    return [name for name in blobs.filenames() if name not in referenced]


def find_missing_blobs(store, blobs):
    """Catalog entries whose blob file is gone."""
    return [image for image in store.list_images() if not blobs.exists(image.filename)]


def prune_orphaned_blobs(store, blobs):
    removed = []
    for name in find_orphaned_blobs(store, blobs):
        if blobs.discard(name):
            removed.append(name)
    logger.info("Pruned {} orphaned blob(s)", len(removed))
    return removed


@click.command("reconcile")
@click.option("--prune", is_flag=True, help="Delete blob files no entry references.")
@with_appcontext
def reconcile_command(prune):
    """Report mismatches between the catalog and the uploads folder."""
    store = current_app.extensions["catalog"]
    blobs = current_app.extensions["blobs"]

    click.echo("🔧 Checking uploads folder...")
    orphans = find_orphaned_blobs(store, blobs)
    missing = find_missing_blobs(store, blobs)

    for name in orphans:
        click.echo(f"   - orphaned blob: {name}")
    for image in missing:
        click.echo(f"   - missing blob for image {image.id}: {image.filename}")

    if prune and orphans:
        removed = prune_orphaned_blobs(store, blobs)
        click.echo(f"✅ Removed {len(removed)} orphaned blob(s)")

    click.echo(f"🎯 {len(orphans)} orphaned, {len(missing)} missing.")
