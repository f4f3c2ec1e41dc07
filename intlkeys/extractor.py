import logging
from operator import attrgetter

from .errors import Errors
from .parser import parse
from .loaders import FileSystemLoader
from .indexer import HelperIndexer
from .resolver import KeyResolver
from .patterns import Patterns


log = logging.getLogger(__name__)


def load_modules(paths, loader=None, errors=None):
    loader = FileSystemLoader() if loader is None else loader
    errors = Errors() if errors is None else errors
    for path in paths:
        source = loader.load(path)
        yield path, parse(source.content, path, errors)


def extract_modules(modules, conventions=None):
    """Runs both passes over parsed ``(path, module)`` pairs.

    Helpers are indexed over every module before any key is resolved, so a
    helper may be defined in a file which comes after its callers.
    """
    modules = list(modules)
    patterns = Patterns(conventions)

    helpers = HelperIndexer.index(modules)
    log.debug('Indexed %d helper function(s)', len(helpers))

    keys = []
    for path, module in modules:
        keys.extend(KeyResolver.resolve(path, module, helpers, patterns))
    return sorted(keys, key=attrgetter('key'))


def extract(paths, loader=None, conventions=None, errors=None):
    paths = list(paths)
    keys = extract_modules(load_modules(paths, loader, errors), conventions)
    log.info('Found %d key(s) in %d file(s)', len(keys), len(paths))
    return keys
