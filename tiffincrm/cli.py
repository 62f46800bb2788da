# tiffincrm/cli.py
import click
from flask import Flask

from tiffincrm.extensions import db
from tiffincrm.services.seed import init_database, seed_sample_data


def register_cli(app: Flask) -> None:
    @app.cli.command("init-db")
    @click.option("--drop", is_flag=True, default=False, help="Drop all tables first")
    @click.option("--no-seed", is_flag=True, default=False, help="Skip the sample rows")
    def init_db(drop: bool, no_seed: bool):
        """Create the tables (optionally from scratch) and seed sample data."""
        if drop:
            click.confirm("This deletes every customer, menu item and order. Continue?", abort=True)
            with app.app_context():
                db.drop_all()
            click.echo("[OK] Tables dropped.")
        init_database(app, seed=not no_seed)
        click.echo(f"[DONE] Database ready: {app.config['SQLALCHEMY_DATABASE_URI']}")

    @app.cli.command("seed")
    def seed():
        """Insert the sample rows if the customers table is empty."""
        with app.app_context():
            inserted = seed_sample_data()
        click.echo("[OK] Sample data inserted." if inserted else "[SKIP] Customers already present.")
