from contextlib import contextmanager
from collections import namedtuple


Error = namedtuple('Error', ['file', 'location', 'message'])


class UserError(Exception):
    pass


class Errors(object):

    def __init__(self):
        self.list = []
        self._stack = [None]

    @contextmanager
    def file_ctx(self, path):
        self._stack.append(path)
        try:
            yield
        finally:
            self._stack.pop()

    def error(self, location, message):
        self.list.append(Error(self._stack[-1], location, message))


def format_error(error, content):
    source_lines = content.splitlines()

    def line(index):
        return source_lines[index] if 0 <= index < len(source_lines) else ''

    start, end = error.location.start, error.location.end
    start_line, end_line = start.line - 1, end.line - 1

    first_line = line(start_line)
    indent = len(first_line) - len(first_line.lstrip())
    indent = min(indent, start.column - 1)

    if end_line - start_line > 2:
        snippet = ['  | ' + line(start_line)[indent:],
                   ' ...',
                   '  | ' + line(end_line)[indent:]]
    elif end_line - start_line > 0:
        snippet = ['  | ' + line(l)[indent:]
                   for l in range(start_line, end_line + 1)]
    else:
        highlight_indent = start.column - 1 - indent
        highlight_len = max(end.column - start.column, 1)
        highlight = (' ' * highlight_indent) + ('~' * highlight_len)
        snippet = ['  ' + first_line[indent:],
                   '  ' + highlight]
    return (
        '{message}\n'
        '  File "{file}", line {line_num}\n'
        '{snippet}'
        .format(
            message=error.message,
            file=error.file or '<string>',
            line_num=start.line,
            snippet='\n'.join('  ' + l for l in snippet),
        )
    )
