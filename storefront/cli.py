# storefront/cli.py
import click
from flask.cli import with_appcontext
from werkzeug.security import generate_password_hash

from .services.catalog_service import seed_sample_products


@click.command("hash-password")
@click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
def hash_password(password):
    """Print a hash for ADMIN_PASSWORD_HASH."""
    click.echo(generate_password_hash(password))


@click.command("seed-products")
@with_appcontext
def seed_products():
    """Insert the sample catalog when the product table is empty."""
    count = seed_sample_products()
    if not count:
        click.echo("Catalog not empty, nothing seeded"); return
    click.echo(f"Seeded {count} products")


def register_cli(app):
    app.cli.add_command(hash_password)
    app.cli.add_command(seed_products)
