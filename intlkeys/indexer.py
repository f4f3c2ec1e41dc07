import logging
from collections import namedtuple

from .nodes import NodeVisitor, Function, Identifier, StringLiteral
from .nodes import FUNCTION_TYPE, TYPE_REFERENCE


log = logging.getLogger(__name__)

HelperFunction = namedtuple('HelperFunction', 'name param keys')

# unannotated parameters are accepted too, as in plain JavaScript
TRANSLATOR_ANNOTATIONS = frozenset((None, FUNCTION_TYPE, TYPE_REFERENCE))

BOUND_FUNCTIONS = frozenset((
    'arrow_function',
    'function_expression',
    'function',
))

DECLARED_FUNCTIONS = frozenset((
    'function_declaration',
))


def translator_param(function):
    if function.params:
        param = function.params[0]
        if param.name is not None and \
                param.annotation in TRANSLATOR_ANNOTATIONS:
            return param.name
    return None


class KeysCollector(NodeVisitor):

    def __init__(self, param):
        self.param = param
        self.keys = []

    @classmethod
    def collect(cls, node, param):
        self = cls(param)
        self.visit(node)
        return self.keys

    def visit_call(self, node):
        if isinstance(node.callee, Identifier) and \
                node.callee.name == self.param and \
                node.args and isinstance(node.args[0], StringLiteral):
            self.keys.append(node.args[0].value)
        super(KeysCollector, self).visit_call(node)


class HelperIndexer(NodeVisitor):
    """Finds functions which take a translator as their first parameter."""

    def __init__(self):
        self.helpers = {}

    @classmethod
    def index(cls, modules):
        self = cls()
        for path, module in modules:
            log.debug('Indexing helpers in %s', path)
            self.visit(module)
        return self.helpers

    def _register(self, name, function):
        param = translator_param(function)
        if param is None or function.body is None:
            return
        keys = KeysCollector.collect(function.body, param)
        if keys:
            if name in self.helpers:
                log.debug('Helper "%s" is redefined', name)
            log.debug('Helper "%s" uses %d key(s)', name, len(keys))
            self.helpers[name] = HelperFunction(name, param, tuple(keys))

    def visit_variable_declaration(self, node):
        if isinstance(node.name, Identifier) and \
                isinstance(node.init, Function) and \
                node.init.kind in BOUND_FUNCTIONS:
            self._register(node.name.name, node.init)
        super(HelperIndexer, self).visit_variable_declaration(node)

    def visit_function(self, node):
        if node.kind in DECLARED_FUNCTIONS and node.name:
            self._register(node.name, node)
        super(HelperIndexer, self).visit_function(node)
