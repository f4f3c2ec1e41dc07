from intlkeys.nodes import Location, Position
from intlkeys.errors import Errors, Error, format_error


def location(start, end):
    return Location(Position(0, *start), Position(0, *end))


def test_errors_file_ctx():
    errors = Errors()
    loc = location((1, 1), (1, 4))
    with errors.file_ctx('a.tsx'):
        errors.error(loc, 'First')
        with errors.file_ctx('b.tsx'):
            errors.error(loc, 'Nested')
        errors.error(loc, 'Another')
    errors.error(loc, 'Outside')
    assert errors.list == [
        Error('a.tsx', loc, 'First'),
        Error('b.tsx', loc, 'Nested'),
        Error('a.tsx', loc, 'Another'),
        Error(None, loc, 'Outside'),
    ]


def test_format_single_line():
    error = Error('a.ts', location((1, 9), (1, 12)), 'Syntax error')
    assert format_error(error, 'foo(bar baz);\n') == (
        'Syntax error\n'
        '  File "a.ts", line 1\n'
        '    foo(bar baz);\n'
        '            ~~~'
    )


def test_format_indented():
    error = Error('a.ts', location((2, 3), (2, 6)), 'Syntax error')
    content = 'function f() {\n  bad thing\n}\n'
    assert format_error(error, content) == (
        'Syntax error\n'
        '  File "a.ts", line 2\n'
        '    bad thing\n'
        '    ~~~'
    )


def test_format_multiline():
    error = Error(None, location((1, 1), (2, 2)), 'Missing ")"')
    assert format_error(error, 'foo(\n  bar\n') == (
        'Missing ")"\n'
        '  File "<string>", line 1\n'
        '    | foo(\n'
        '    |   bar'
    )


def test_format_long_span():
    error = Error('a.ts', location((1, 1), (5, 2)), 'Syntax error')
    content = 'a(\n1\n2\n3\n)\n'
    assert format_error(error, content) == (
        'Syntax error\n'
        '  File "a.ts", line 1\n'
        '    | a(\n'
        '   ...\n'
        '    | )'
    )
