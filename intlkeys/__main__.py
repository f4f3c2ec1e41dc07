import json
import logging
from collections import namedtuple

import click

from .constant import DEFAULT_CONVENTIONS


def maybe_exit(ctx, exit_code=1):
    if not ctx.obj.debug:
        ctx.exit(exit_code)


GlobalOptions = namedtuple('GlobalOptions', 'verbose debug')


@click.group()
@click.option('-v', '--verbose', is_flag=True)
@click.option('--debug', is_flag=True)
@click.pass_context
def cli(ctx, verbose, debug):
    ctx.obj = GlobalOptions(verbose, debug)
    if verbose:
        logging.basicConfig(level=logging.DEBUG if debug else logging.INFO)


def _dump(found):
    return {'key': found.key, 'meta': found.meta._asdict()}


@cli.command('extract')
@click.argument('paths', nargs=-1, required=True,
                type=click.Path(exists=True))
@click.option('--json', 'as_json', is_flag=True,
              help='Print keys with their metadata as JSON.')
@click.option('--unique', is_flag=True,
              help='Print every key only once.')
@click.option('--hook', default=DEFAULT_CONVENTIONS.use_translations,
              show_default=True,
              help='Function which returns a translator in components.')
@click.option('--server-fn', default=DEFAULT_CONVENTIONS.get_translations,
              show_default=True,
              help='Async function which returns a translator.')
@click.pass_context
def extract_(ctx, paths, as_json, unique, hook, server_fn):
    """Extract translation keys used in PATHS.

    Directories are searched for TypeScript and JavaScript sources.
    Keys which could not be resolved statically are reported as their
    namespace, marked as dynamic."""
    from .errors import Errors, format_error
    from .parser import ParseError
    from .loaders import FileSystemLoader
    from .extractor import extract
    from .utils import iter_source_files, unique as unique_keys

    conventions = DEFAULT_CONVENTIONS._replace(use_translations=hook,
                                               get_translations=server_fn)
    loader = FileSystemLoader()
    errors = Errors()
    try:
        keys = extract(iter_source_files(paths), loader, conventions, errors)
    except ParseError:
        for error in errors.list:
            content = loader.load(error.file).content
            click.echo(format_error(error, content), err=True)
        click.echo('Failed to parse source files.', err=True)
        maybe_exit(ctx)
        raise

    if unique:
        keys = list(unique_keys(keys))

    if as_json:
        click.echo(json.dumps([_dump(k) for k in keys], indent=2))
    else:
        for found in keys:
            if found.meta.dynamic:
                click.echo('{} (dynamic)'.format(found.key))
            else:
                click.echo(found.key)


if __name__ == '__main__':
    cli.main(prog_name='python -m intlkeys')
