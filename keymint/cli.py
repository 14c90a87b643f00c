"""Command line interface for keymint."""

import os

import click

from .errors import CredentialError


@click.group()
@click.option(
    "--env",
    "config_name",
    default=lambda: os.environ.get("KEYMINT_ENV", "production"),
    type=click.Choice(["development", "production", "testing", "default"]),
    help="Configuration profile to load",
)
@click.pass_context
def cli(ctx, config_name):
    """keymint credential generation CLI."""
    ctx.obj = {"config_name": config_name}


def _create_keys(ctx):
    from keymint.app import create_keys

    keys = create_keys(ctx.obj["config_name"])
    ctx.call_on_close(keys.close)
    return keys


@cli.command()
@click.option("--length", "-l", type=int, default=None, help="Password length")
@click.option("--symbols", "-s", default=None, help="Symbols to draw from")
@click.option("--count", "-n", default=1, show_default=True, help="Passwords to print")
@click.pass_context
def password(ctx, length, symbols, count):
    """Generate passwords with the local CSPRNG."""
    keys = _create_keys(ctx)
    if length is None:
        length = keys.config.PASSWORD_DEFAULT_LENGTH

    try:
        for _ in range(count):
            click.echo(keys.gen_secure_random_password(length, symbols))
    except CredentialError as e:
        raise click.ClickException(e.message) from e


@cli.command("random-org-password")
@click.option("--length", "-l", type=int, default=None, help="Password length")
@click.option(
    "--api-key",
    envvar="RANDOM_ORG_API_KEY",
    default=None,
    help="random.org API key (defaults to $RANDOM_ORG_API_KEY)",
)
@click.pass_context
def random_org_password(ctx, length, api_key):
    """Generate a true-random hex password through random.org."""
    keys = _create_keys(ctx)
    if length is None:
        length = keys.config.PASSWORD_DEFAULT_LENGTH

    future = keys.gen_random_org_password(length, api_key)
    try:
        click.echo(future.result())
    except CredentialError as e:
        status_code = getattr(e, "status_code", None)
        detail = f" ({status_code})" if status_code and status_code != 200 else ""
        raise click.ClickException(f"{e.message}{detail}") from e


@cli.command("rsa-keypair")
@click.option(
    "--key-size",
    type=click.Choice(["2048", "4096"]),
    default="4096",
    show_default=True,
    help="RSA modulus size in bits",
)
@click.option(
    "--public-format",
    type=click.Choice(["pem", "openssh"]),
    default="pem",
    show_default=True,
    help="Encoding of the public key",
)
@click.option("--public-only", is_flag=True, help="Print only the public key")
@click.pass_context
def rsa_keypair(ctx, key_size, public_format, public_only):
    """Generate an RSA key pair and print it as PEM."""
    keys = _create_keys(ctx)

    future = keys.gen_rsa_key_pair(key_size=int(key_size))
    try:
        key_pair = future.result()
    except CredentialError as e:
        raise click.ClickException(e.message) from e

    if not public_only:
        click.echo(key_pair.private_pem(), nl=False)
    if public_format == "openssh":
        click.echo(key_pair.public_openssh())
    else:
        click.echo(key_pair.public_pem(), nl=False)


if __name__ == "__main__":
    cli()
