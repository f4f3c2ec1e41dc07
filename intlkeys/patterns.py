"""Matchers for the translation API call shapes.

Each matcher looks at a single node and returns what it recognized, or
``None`` when the node has a different shape. They do not know about scopes;
:class:`intlkeys.resolver.KeyResolver` decides what to do with the result.
"""
import re

from .nodes import Call, Await, Identifier, StringLiteral, TemplateExpr
from .nodes import PropertyAccess, ArrayLiteral, ArrayPattern, ObjectLiteral
from .nodes import Property, BindingElement
from .constant import DEFAULT_CONVENTIONS, DEFAULT_TRANSLATOR


# t('some.key') or t("some.key") inside a comment
COMMENT_KEY_RE = re.compile(r'''\bt\((["'])(.*?[^\\])\1\)''')


def qualify(namespace, key):
    return '{}.{}'.format(namespace, key) if namespace else key


def first_arg(call):
    return call.args[0] if call.args else None


def dotted_name(node):
    if isinstance(node, Identifier):
        return node.name
    elif isinstance(node, PropertyAccess):
        head = dotted_name(node.expression)
        if head is not None:
            return '{}.{}'.format(head, node.name)
    return None


def is_call_to(node, name):
    return (isinstance(node, Call) and
            isinstance(node.callee, Identifier) and
            node.callee.name == name)


def is_dynamic(argument):
    return isinstance(argument, (Identifier, TemplateExpr))


def literal_namespace(argument):
    if isinstance(argument, StringLiteral):
        return argument.value
    return ''


def binding_name(node):
    if isinstance(node, BindingElement):
        node = node.target
    if isinstance(node, Identifier):
        return node.name
    return None


def comment_key(comment):
    """Key annotated in a single-line comment, like ``// t('some.key')``"""
    if not comment.startswith('//'):
        return None
    match = COMMENT_KEY_RE.search(comment)
    return match.group(2) if match else None


class Patterns(object):

    def __init__(self, conventions=None):
        self.conventions = conventions or DEFAULT_CONVENTIONS

    def namespaces_of(self, argument):
        """Namespaces named by a ``getTranslations`` argument.

        An object literal yields one namespace per literal ``namespace``
        property; any other argument yields a single namespace, empty when
        it is absent or not a literal.
        """
        if isinstance(argument, ObjectLiteral):
            name = self.conventions.namespace_property
            namespaces = [prop.value.value for prop in argument.properties
                          if isinstance(prop, Property) and
                          isinstance(prop.key, Identifier) and
                          prop.key.name == name and
                          isinstance(prop.value, StringLiteral)]
            return namespaces or ['']
        return [literal_namespace(argument)]

    def use_translations(self, node):
        if is_call_to(node, self.conventions.use_translations):
            return literal_namespace(first_arg(node))
        return None

    def get_translations(self, node):
        if isinstance(node, Await) and \
                is_call_to(node.expression, self.conventions.get_translations):
            return self.namespaces_of(first_arg(node.expression))
        return None

    def promise_all(self, node):
        """Positions of ``getTranslations`` calls in ``await Promise.all``

        Returns a list of ``(index, namespaces)`` pairs.
        """
        if not isinstance(node, Await):
            return None
        call = node.expression
        if not isinstance(call, Call) or \
                dotted_name(call.callee) != self.conventions.promise_all:
            return None
        array = first_arg(call)
        if not isinstance(array, ArrayLiteral):
            return None
        return [(i, self.namespaces_of(first_arg(element)))
                for i, element in enumerate(array.elements)
                if is_call_to(element, self.conventions.get_translations)]

    def acquisitions(self, declaration):
        """Translators bound by a variable declaration.

        Returns a list of ``(variable, namespace)`` pairs, in the order the
        frames are to be pushed.
        """
        init = declaration.init
        if init is None:
            return []
        variable = binding_name(declaration.name) or DEFAULT_TRANSLATOR

        namespace = self.use_translations(init)
        if namespace is not None:
            return [(variable, namespace)]

        namespaces = self.get_translations(init)
        if namespaces is not None:
            return [(variable, ns) for ns in namespaces]

        positions = self.promise_all(init)
        if positions and isinstance(declaration.name, ArrayPattern):
            elements = declaration.name.elements
            acquired = []
            for index, namespaces in positions:
                if index < len(elements):
                    name = binding_name(elements[index])
                    if name is not None:
                        acquired.extend((name, ns) for ns in namespaces)
            return acquired
        return []

    def translator_call(self, call):
        """``(variable, argument)`` for ``t(arg)`` and ``t.method(arg)``"""
        callee = call.callee
        if isinstance(callee, PropertyAccess):
            callee = callee.expression
        if isinstance(callee, Identifier):
            return callee.name, first_arg(call)
        return None

    def helper_call(self, call, helpers):
        """``(helper, argument)`` for a call of a registered helper"""
        if isinstance(call.callee, Identifier) and call.args:
            helper = helpers.get(call.callee.name)
            if helper is not None:
                return helper, call.args[0]
        return None

    def inline_translator(self, argument):
        """Namespaces of a translator acquired right in a call argument"""
        namespace = self.use_translations(argument)
        if namespace is not None:
            return [namespace]
        return self.get_translations(argument)

    def inline_call(self, statement):
        """``(namespace, key)`` for ``useTranslations('ns')('key');`` and
        ``useTranslations('ns').method('key');``"""
        call = statement.expression
        if not isinstance(call, Call):
            return None
        callee = call.callee
        if isinstance(callee, PropertyAccess):
            callee = callee.expression
        namespace = self.use_translations(callee)
        key = first_arg(call)
        if namespace is None or not isinstance(key, StringLiteral) or \
                not key.value:
            return None
        return namespace, key.value
