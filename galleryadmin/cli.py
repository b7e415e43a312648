# galleryadmin/cli.py
"""
Flask CLI commands:
  flask --app app init-db
  flask --app app backfill-qr
"""

import click
from flask import current_app
from flask.cli import with_appcontext

from .extensions import db
from .result import Err
from .routes import qr_options_from_config
from .services.art_pieces import backfill_qr_codes


@click.command("init-db")
@with_appcontext
def init_db_command():
    """Create missing tables."""
    db.create_all()
    click.echo("Database tables created.")


@click.command("backfill-qr")
@with_appcontext
def backfill_qr_command():
    """Generate QR codes for art pieces that were left without one."""
    result = backfill_qr_codes(current_app.config["PUBLIC_BASE_URL"], qr_options_from_config())
    if isinstance(result, Err):
        raise click.ClickException(result.error.message)
    click.echo(f"Backfilled {result.value} QR code(s).")


def register_commands(app) -> None:
    app.cli.add_command(init_db_command)
    app.cli.add_command(backfill_qr_command)
