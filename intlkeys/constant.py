from collections import namedtuple


Conventions = namedtuple('Conventions', [
    'use_translations',
    'get_translations',
    'namespace_property',
    'promise_all',
])

DEFAULT_CONVENTIONS = Conventions(
    use_translations='useTranslations',
    get_translations='getTranslations',
    namespace_property='namespace',
    promise_all='Promise.all',
)

# variable a translator is bound to when the declaration is not a plain name
DEFAULT_TRANSLATOR = 't'

GRAMMARS = {
    '.ts': 'typescript',
    '.mts': 'typescript',
    '.cts': 'typescript',
    '.tsx': 'tsx',
    '.js': 'javascript',
    '.jsx': 'javascript',
    '.mjs': 'javascript',
    '.cjs': 'javascript',
}

DEFAULT_GRAMMAR = 'tsx'

SOURCE_EXTENSIONS = frozenset(GRAMMARS)

EXCLUDED_DIRS = frozenset((
    'node_modules',
    '.git',
    '.next',
))
