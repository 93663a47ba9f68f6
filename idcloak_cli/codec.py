import logging

import click

from idcloak import IdCloak, IdCloakError, DEFAULT_ALPHABET, shuffle, load_blocklist_file
from idcloak.alphabet import validate_alphabet
from idcloak.logger import configure_logging
from idcloak_config.env import CONFIG


LOG = logging.getLogger(__name__)


def _build_codec(alphabet, min_length, blocklist_file, blocklist_enable) -> IdCloak:
    if not blocklist_enable:
        blocklist = []
    elif blocklist_file:
        blocklist = load_blocklist_file(blocklist_file)
    else:
        blocklist = None
    codec = IdCloak(alphabet=alphabet, min_length=min_length, blocklist=blocklist)
    LOG.debug('codec %r', codec)
    return codec


@click.group()
@click.option('--alphabet', help='Identifier alphabet, default IDCLOAK_ALPHABET or a-z A-Z 0-9')
@click.option('--min-length', type=click.IntRange(min=0),
              help='Minimum identifier length, default IDCLOAK_MIN_LENGTH')
@click.option('--blocklist-file', type=click.Path(exists=True, dir_okay=False),
              help='Word list file, one word per line')
@click.option('--no-blocklist', is_flag=True, help='Disable blocklist filter')
@click.pass_context
def main(ctx, alphabet, min_length, blocklist_file, no_blocklist):
    """IdCloak Commands"""
    configure_logging(level=CONFIG.log_level)
    # validr turns unset optional strings into ''
    alphabet = alphabet or CONFIG.alphabet or None
    if min_length is None:
        min_length = CONFIG.min_length
    blocklist_file = blocklist_file or CONFIG.blocklist_path or None
    blocklist_enable = CONFIG.blocklist_enable and not no_blocklist
    ctx.meta['alphabet'] = alphabet
    try:
        ctx.obj = _build_codec(alphabet, min_length, blocklist_file, blocklist_enable)
    except IdCloakError as ex:
        raise click.ClickException(str(ex)) from ex


@main.command()
@click.argument('numbers', nargs=-1, type=click.IntRange(min=0))
@click.pass_obj
def encode(codec: IdCloak, numbers):
    """Encode numbers to an identifier"""
    try:
        click.echo(codec.encode(numbers))
    except IdCloakError as ex:
        raise click.ClickException(str(ex)) from ex


@main.command()
@click.argument('identifier')
@click.pass_obj
def decode(codec: IdCloak, identifier):
    """Decode an identifier to numbers"""
    try:
        numbers = codec.decode(identifier)
    except IdCloakError as ex:
        raise click.ClickException(str(ex)) from ex
    click.echo(','.join(map(str, numbers)))


@main.command(name='shuffle')
@click.argument('alphabet', required=False)
@click.pass_context
def shuffle_alphabet(ctx, alphabet):
    """Print the shuffled alphabet"""
    alphabet = alphabet or ctx.meta.get('alphabet') or DEFAULT_ALPHABET
    try:
        validate_alphabet(alphabet)
    except IdCloakError as ex:
        raise click.ClickException(str(ex)) from ex
    click.echo(shuffle(alphabet))


if __name__ == "__main__":
    main()
