import os.path
import re
import logging

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Parser

from .nodes import Module, Function, Parameter, VariableDeclaration, Call
from .nodes import ExpressionStatement, Await, PropertyAccess, Identifier
from .nodes import StringLiteral, TemplateExpr, ArrayLiteral, ArrayPattern
from .nodes import BindingElement, ObjectLiteral, Property, ShorthandProperty
from .nodes import Other, Location, Position, FUNCTION_TYPE, TYPE_REFERENCE
from .errors import UserError, Errors
from .constant import GRAMMARS, DEFAULT_GRAMMAR


log = logging.getLogger(__name__)

SYNTAX_ERROR = 'Syntax error'
MISSING_ERROR = 'Missing "{}"'

_LANGUAGES = {
    'typescript': tree_sitter_typescript.language_typescript,
    'tsx': tree_sitter_typescript.language_tsx,
    'javascript': tree_sitter_javascript.language,
}

FUNCTION_KINDS = frozenset((
    'function_declaration',
    'function_expression',
    'function',
    'generator_function',
    'generator_function_declaration',
    'arrow_function',
    'method_definition',
))

TYPE_REFERENCES = frozenset((
    'type_identifier',
    'generic_type',
    'nested_type_identifier',
))

_ESCAPE_RE = re.compile(r'\\(u[dD][89abAB][0-9a-fA-F]{2}'
                        r'\\u[dD][c-fC-F][0-9a-fA-F]{2}|'
                        r'u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|'
                        r'x[0-9a-fA-F]{2}|\r\n|[\s\S])')

_ESCAPES = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    'b': '\b',
    'f': '\f',
    'v': '\v',
    '0': '\0',
    # line continuations
    '\n': '',
    '\r\n': '',
    '\u2028': '',
    '\u2029': '',
}


class ParseError(UserError):
    pass


def _unescape_match(match):
    seq = match.group(1)
    if len(seq) > 1 and seq[0] in 'ux':
        if '\\' in seq:
            # a high and a low surrogate escape make one character
            high, low = int(seq[1:5], 16), int(seq[7:], 16)
            return chr(0x10000 + ((high - 0xD800) << 10) + (low - 0xDC00))
        code = int(seq.strip('ux{}'), 16)
        if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
            # not representable, lone surrogates included
            return match.group(0)
        return chr(code)
    return _ESCAPES.get(seq, seq)


def unescape(value):
    return _ESCAPE_RE.sub(_unescape_match, value)


_parsers = {}


def get_parser(grammar):
    try:
        return _parsers[grammar]
    except KeyError:
        parser = _parsers[grammar] = Parser(Language(_LANGUAGES[grammar]()))
        return parser


def grammar_for(path):
    _, ext = os.path.splitext(path)
    return GRAMMARS.get(ext.lower(), DEFAULT_GRAMMAR)


class Converter(object):
    """Turns a tree-sitter tree into extraction nodes.

    A run of comments is attached once, to the outermost node starting at
    the token which follows it. Comments followed by punctuation (a closing
    brace, for example) belong to no node and are dropped, and so are
    comments which start on the line where the preceding token ends.
    """

    def __init__(self, source):
        self.source = source
        self._comments = {}

    def _text(self, node):
        return self.source[node.start_byte:node.end_byte].decode('utf-8')

    def _location(self, node):
        (start_row, start_col), (end_row, end_col) = \
            node.start_point, node.end_point
        return Location(Position(node.start_byte, start_row + 1, start_col + 1),
                        Position(node.end_byte, end_row + 1, end_col + 1))

    def _kw(self, node):
        kw = {'location': self._location(node)}
        comments = self._comments.get(node.id)
        if comments:
            kw['comments'] = comments
        return kw

    def _collect_comments(self, root):
        outermost, leaves = {}, []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.type == 'comment':
                leaves.append(node)
                continue
            if node.is_named and node.start_byte not in outermost:
                outermost[node.start_byte] = node
            if node.child_count:
                stack.extend(reversed(node.children))
            else:
                leaves.append(node)

        pending, previous = [], None
        for leaf in leaves:
            if leaf.type == 'comment':
                # trailing comments belong to the line they end
                if previous is None or \
                        leaf.start_point[0] != previous.end_point[0]:
                    pending.append(self._text(leaf))
                continue
            if pending:
                target = outermost.get(leaf.start_byte)
                if target is not None:
                    self._comments[target.id] = tuple(pending)
                pending = []
            previous = leaf

    def _named(self, node):
        return [c for c in node.named_children if c.type != 'comment']

    def _elements(self, node):
        elements, current = [], None
        for child in node.children:
            if child.type == ',':
                elements.append(current)
                current = None
            elif child.is_named and child.type != 'comment':
                current = self._element(node, child)
        if current is not None:
            elements.append(current)
        return elements

    def _element(self, parent, node):
        if parent.type == 'array_pattern' and \
                node.type == 'assignment_pattern':
            return BindingElement(
                self.convert(node.child_by_field_name('left')),
                self.convert(node.child_by_field_name('right')),
                **self._kw(node))
        return self.convert(node)

    def convert_tree(self, tree):
        self._collect_comments(tree.root_node)
        return self.convert(tree.root_node)

    def convert(self, node):
        if node is None:
            return None
        if node.type in FUNCTION_KINDS:
            return self._function(node)
        method = getattr(self, '_' + node.type, None)
        if method is None:
            return self._other(node)
        return method(node)

    def _other(self, node):
        return Other(node.type, [self.convert(c) for c in self._named(node)],
                     **self._kw(node))

    def _program(self, node):
        return Module([self.convert(c) for c in self._named(node)],
                      **self._kw(node))

    def _function(self, node):
        name = node.child_by_field_name('name')
        parameters = node.child_by_field_name('parameters')
        if parameters is not None:
            params = [self._parameter(p) for p in self._named(parameters)]
        else:
            # `t => t('key')`
            parameter = node.child_by_field_name('parameter')
            params = [] if parameter is None else [self._parameter(parameter)]
        return Function(node.type,
                        None if name is None else self._text(name),
                        params,
                        self.convert(node.child_by_field_name('body')),
                        **self._kw(node))

    def _parameter(self, node):
        pattern, type_, default = node, None, None
        if node.type in ('required_parameter', 'optional_parameter'):
            pattern = node.child_by_field_name('pattern')
            type_ = node.child_by_field_name('type')
            default = node.child_by_field_name('value')
        elif node.type == 'assignment_pattern':
            pattern = node.child_by_field_name('left')
            default = node.child_by_field_name('right')
        if pattern is not None and pattern.type == 'identifier':
            name = self._text(pattern)
        else:
            name = None
        return Parameter(name,
                         annotation=self._annotation(type_),
                         default=self.convert(default),
                         **self._kw(node))

    def _annotation(self, node):
        if node is None:
            return None
        types = self._named(node)
        if not types:
            return None
        type_ = types[0]
        while type_.type == 'parenthesized_type' and self._named(type_):
            type_ = self._named(type_)[0]
        if type_.type == 'function_type':
            return FUNCTION_TYPE
        elif type_.type in TYPE_REFERENCES:
            return TYPE_REFERENCE
        return type_.type

    def _variable_declarator(self, node):
        return VariableDeclaration(
            self.convert(node.child_by_field_name('name')),
            self.convert(node.child_by_field_name('value')),
            **self._kw(node))

    def _expression_statement(self, node):
        expression, = self._named(node)[:1] or [None]
        return ExpressionStatement(self.convert(expression), **self._kw(node))

    def _call_expression(self, node):
        arguments = node.child_by_field_name('arguments')
        if arguments is None or arguments.type != 'arguments':
            # tagged template
            return self._other(node)
        return Call(self.convert(node.child_by_field_name('function')),
                    [self.convert(a) for a in self._named(arguments)],
                    **self._kw(node))

    def _await_expression(self, node):
        expression, = self._named(node)[:1] or [None]
        return Await(self.convert(expression), **self._kw(node))

    def _member_expression(self, node):
        return PropertyAccess(
            self.convert(node.child_by_field_name('object')),
            self._text(node.child_by_field_name('property')),
            **self._kw(node))

    def _identifier(self, node):
        return Identifier(self._text(node), **self._kw(node))

    def _property_identifier(self, node):
        return Identifier(self._text(node), **self._kw(node))

    def _string(self, node):
        return StringLiteral(unescape(self._text(node)[1:-1]),
                             **self._kw(node))

    def _template_string(self, node):
        substitutions = [c for c in self._named(node)
                         if c.type == 'template_substitution']
        if not substitutions:
            return StringLiteral(unescape(self._text(node)[1:-1]),
                                 **self._kw(node))
        return TemplateExpr(
            [self.convert(e) for s in substitutions for e in self._named(s)],
            **self._kw(node))

    def _array(self, node):
        return ArrayLiteral(self._elements(node), **self._kw(node))

    def _array_pattern(self, node):
        return ArrayPattern(self._elements(node), **self._kw(node))

    def _object(self, node):
        return ObjectLiteral([self.convert(c) for c in self._named(node)],
                             **self._kw(node))

    def _pair(self, node):
        return Property(self.convert(node.child_by_field_name('key')),
                        self.convert(node.child_by_field_name('value')),
                        **self._kw(node))

    def _shorthand_property_identifier(self, node):
        return ShorthandProperty(self._text(node), **self._kw(node))


def _iter_errors(root):
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == 'ERROR' or node.is_missing:
            yield node
        elif node.has_error:
            stack.extend(reversed(node.children))


def parse(content, path='<string>', errors=None):
    errors = Errors() if errors is None else errors
    source = content.encode('utf-8')
    grammar = grammar_for(path)
    tree = get_parser(grammar).parse(source)
    converter = Converter(source)
    if tree.root_node.has_error:
        with errors.file_ctx(path):
            for node in _iter_errors(tree.root_node):
                if node.is_missing:
                    message = MISSING_ERROR.format(node.type)
                else:
                    message = SYNTAX_ERROR
                errors.error(converter._location(node), message)
        raise ParseError('Failed to parse "{}" as {}'.format(path, grammar))
    log.debug('Parsed %s as %s', path, grammar)
    return converter.convert_tree(tree)
