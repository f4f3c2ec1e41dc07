import os

from .constant import SOURCE_EXTENSIONS, EXCLUDED_DIRS


def is_source_file(name, extensions=SOURCE_EXTENSIONS):
    if name.endswith('.d.ts'):
        return False
    _, ext = os.path.splitext(name)
    return ext.lower() in extensions


def iter_source_files(paths, extensions=SOURCE_EXTENSIONS,
                      excluded=EXCLUDED_DIRS):
    """Expands directories into the source files they contain.

    Files given explicitly are yielded as is, whatever their extension.
    """
    for path in paths:
        if not os.path.isdir(path):
            yield path
            continue
        for root, dirs, files in os.walk(path):
            dirs[:] = sorted(d for d in dirs if d not in excluded)
            for name in sorted(files):
                if is_source_file(name, extensions):
                    yield os.path.join(root, name)


def unique(keys):
    seen = set([])
    for found in keys:
        ident = (found.key, found.meta.dynamic)
        if ident not in seen:
            seen.add(ident)
            yield found
