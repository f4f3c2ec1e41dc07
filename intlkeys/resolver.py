import logging
from collections import namedtuple

from .nodes import NodeVisitor, Module, Function, Identifier, StringLiteral
from .scope import NamespaceStack
from .patterns import Patterns, qualify, comment_key, is_dynamic


log = logging.getLogger(__name__)

Meta = namedtuple('Meta', 'file namespace dynamic')

FoundKey = namedtuple('FoundKey', 'key meta')

SCOPES = (Module, Function)


class KeyResolver(NodeVisitor):
    """Resolves translation keys used in a single module.

    Translators are tracked on a :class:`NamespaceStack`; frames pushed while
    visiting a function (or the module itself) are popped when it ends, and
    namespaces which were used with a non-literal key are reported with a
    placeholder key.
    """

    def __init__(self, path, helpers, patterns=None):
        self.path = path
        self.helpers = helpers
        self.patterns = Patterns() if patterns is None else patterns
        self.namespaces = NamespaceStack()
        self.keys = []

    @classmethod
    def resolve(cls, path, module, helpers, patterns=None):
        self = cls(path, helpers, patterns)
        self.visit(module)
        log.debug('Resolved %d key(s) in %s', len(self.keys), path)
        return self.keys

    def _add(self, namespace, key):
        self.keys.append(FoundKey(qualify(namespace, key),
                                  Meta(self.path, namespace, False)))

    def _add_placeholder(self, namespace):
        self.keys.append(FoundKey(namespace,
                                  Meta(self.path, namespace, True)))

    def visit(self, node):
        depth = len(self.namespaces)
        for comment in node.comments:
            key = comment_key(comment)
            if key:
                # innermost frame, whatever variable it is bound to
                frame = self.namespaces.current()
                self._add('' if frame is None else frame.name, key)

        super(KeyResolver, self).visit(node)

        if isinstance(node, SCOPES):
            for frame in self.namespaces.unwind(depth):
                if frame.dynamic:
                    self._add_placeholder(frame.name)

    def visit_variable_declaration(self, node):
        for variable, namespace in self.patterns.acquisitions(node):
            self.namespaces.push(namespace, variable)
        super(KeyResolver, self).visit_variable_declaration(node)

    def visit_expression_statement(self, node):
        inline = self.patterns.inline_call(node)
        if inline is not None:
            self._add(*inline)
        super(KeyResolver, self).visit_expression_statement(node)

    def visit_call(self, node):
        self._helper_call(node)
        self._translator_call(node)
        super(KeyResolver, self).visit_call(node)

    def _helper_call(self, node):
        match = self.patterns.helper_call(node, self.helpers)
        if match is None:
            return
        helper, argument = match
        namespaces = self.patterns.inline_translator(argument)
        if namespaces is None and isinstance(argument, Identifier):
            frame = self.namespaces.lookup(argument.name)
            if frame is not None:
                namespaces = [frame.name]
        for namespace in namespaces or ():
            for key in helper.keys:
                self._add(namespace, key)

    def _translator_call(self, node):
        match = self.patterns.translator_call(node)
        if match is None:
            return
        variable, argument = match
        frame = self.namespaces.lookup(variable)
        if frame is None:
            return
        if isinstance(argument, StringLiteral):
            if argument.value:
                self._add(frame.name, argument.value)
        elif is_dynamic(argument):
            self.namespaces.mark_dynamic(frame.name)
