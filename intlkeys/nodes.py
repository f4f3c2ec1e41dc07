from collections import namedtuple


_undefined = object()

Position = namedtuple('Position', 'offset line column')

Location = namedtuple('Location', 'start end')

# parameter annotation kinds, other annotations keep their grammar type name
FUNCTION_TYPE = 'function'
TYPE_REFERENCE = 'reference'


class Node(object):
    location = None
    comments = ()

    def __init__(self, location=_undefined, comments=_undefined):
        if location is not _undefined:
            self.location = location
        if comments is not _undefined:
            self.comments = tuple(comments)

    def iter_children(self):
        return iter(())

    def accept(self, visitor):
        raise NotImplementedError


def _present(*nodes):
    return [node for node in nodes if node is not None]


class Module(Node):

    def __init__(self, body, **kw):
        self.body = tuple(body)
        super(Module, self).__init__(**kw)

    def __repr__(self):
        return '<module {}>'.format(' '.join(map(repr, self.body)))

    def iter_children(self):
        return iter(self.body)

    def accept(self, visitor):
        return visitor.visit_module(self)


class Function(Node):
    """Any function-like node: declarations, expressions, arrows, methods.

    ``kind`` keeps the grammar's node type, ``body`` is ``None`` for
    bodiless signatures.
    """

    def __init__(self, kind, name, params, body, **kw):
        self.kind = kind
        self.name = name
        self.params = tuple(params)
        self.body = body
        super(Function, self).__init__(**kw)

    def __repr__(self):
        return '({} {} [{}] {!r})'.format(
            self.kind, self.name or '<anonymous>',
            ' '.join(map(repr, self.params)), self.body)

    def iter_children(self):
        return iter(list(self.params) + _present(self.body))

    def accept(self, visitor):
        return visitor.visit_function(self)


class Parameter(Node):

    def __init__(self, name, annotation=None, default=None, **kw):
        self.name = name
        self.annotation = annotation
        self.default = default
        super(Parameter, self).__init__(**kw)

    def __repr__(self):
        if self.annotation:
            return '{}:{}'.format(self.name, self.annotation)
        return '{}'.format(self.name)

    def iter_children(self):
        return iter(_present(self.default))

    def accept(self, visitor):
        return visitor.visit_parameter(self)


class VariableDeclaration(Node):

    def __init__(self, name, init, **kw):
        self.name = name
        self.init = init
        super(VariableDeclaration, self).__init__(**kw)

    def __repr__(self):
        return '(let {!r} {!r})'.format(self.name, self.init)

    def iter_children(self):
        return iter(_present(self.name, self.init))

    def accept(self, visitor):
        return visitor.visit_variable_declaration(self)


class ExpressionStatement(Node):

    def __init__(self, expression, **kw):
        self.expression = expression
        super(ExpressionStatement, self).__init__(**kw)

    def __repr__(self):
        return '{!r};'.format(self.expression)

    def iter_children(self):
        return iter(_present(self.expression))

    def accept(self, visitor):
        return visitor.visit_expression_statement(self)


class Call(Node):

    def __init__(self, callee, args, **kw):
        self.callee = callee
        self.args = tuple(args)
        super(Call, self).__init__(**kw)

    def __repr__(self):
        return '{!r}({})'.format(self.callee, ', '.join(map(repr, self.args)))

    def iter_children(self):
        return iter(_present(self.callee, *self.args))

    def accept(self, visitor):
        return visitor.visit_call(self)


class Await(Node):

    def __init__(self, expression, **kw):
        self.expression = expression
        super(Await, self).__init__(**kw)

    def __repr__(self):
        return 'await {!r}'.format(self.expression)

    def iter_children(self):
        return iter(_present(self.expression))

    def accept(self, visitor):
        return visitor.visit_await(self)


class PropertyAccess(Node):

    def __init__(self, expression, name, **kw):
        self.expression = expression
        self.name = name
        super(PropertyAccess, self).__init__(**kw)

    def __repr__(self):
        return '{!r}.{}'.format(self.expression, self.name)

    def iter_children(self):
        return iter(_present(self.expression))

    def accept(self, visitor):
        return visitor.visit_property_access(self)


class Identifier(Node):

    def __init__(self, name, **kw):
        self.name = name
        super(Identifier, self).__init__(**kw)

    def __repr__(self):
        return self.name

    def accept(self, visitor):
        return visitor.visit_identifier(self)


class StringLiteral(Node):

    def __init__(self, value, **kw):
        self.value = value
        super(StringLiteral, self).__init__(**kw)

    def __repr__(self):
        return repr(self.value)

    def accept(self, visitor):
        return visitor.visit_string_literal(self)


class TemplateExpr(Node):
    """Template literal with at least one substitution."""

    def __init__(self, substitutions, **kw):
        self.substitutions = tuple(substitutions)
        super(TemplateExpr, self).__init__(**kw)

    def __repr__(self):
        return '`{}`'.format(''.join('${{{!r}}}'.format(s)
                                     for s in self.substitutions))

    def iter_children(self):
        return iter(self.substitutions)

    def accept(self, visitor):
        return visitor.visit_template_expr(self)


class _Elements(Node):
    """Holes (``[a, , b]``) are kept as ``None``."""

    def __init__(self, elements, **kw):
        self.elements = tuple(elements)
        super(_Elements, self).__init__(**kw)

    def __repr__(self):
        return '[{}]'.format(', '.join('' if e is None else repr(e)
                                       for e in self.elements))

    def iter_children(self):
        return iter(_present(*self.elements))


class ArrayLiteral(_Elements):

    def accept(self, visitor):
        return visitor.visit_array_literal(self)


class ArrayPattern(_Elements):

    def accept(self, visitor):
        return visitor.visit_array_pattern(self)


class BindingElement(Node):

    def __init__(self, target, default, **kw):
        self.target = target
        self.default = default
        super(BindingElement, self).__init__(**kw)

    def __repr__(self):
        return '{!r}={!r}'.format(self.target, self.default)

    def iter_children(self):
        return iter(_present(self.target, self.default))

    def accept(self, visitor):
        return visitor.visit_binding_element(self)


class ObjectLiteral(Node):

    def __init__(self, properties, **kw):
        self.properties = tuple(properties)
        super(ObjectLiteral, self).__init__(**kw)

    def __repr__(self):
        return '{{{}}}'.format(', '.join(map(repr, self.properties)))

    def iter_children(self):
        return iter(self.properties)

    def accept(self, visitor):
        return visitor.visit_object_literal(self)


class Property(Node):

    def __init__(self, key, value, **kw):
        self.key = key
        self.value = value
        super(Property, self).__init__(**kw)

    def __repr__(self):
        return '{!r}: {!r}'.format(self.key, self.value)

    def iter_children(self):
        return iter(_present(self.key, self.value))

    def accept(self, visitor):
        return visitor.visit_property(self)


class ShorthandProperty(Node):

    def __init__(self, name, **kw):
        self.name = name
        super(ShorthandProperty, self).__init__(**kw)

    def __repr__(self):
        return self.name

    def accept(self, visitor):
        return visitor.visit_shorthand_property(self)


class Other(Node):
    """Any syntax the extraction has no dedicated shape for."""

    def __init__(self, kind, children, **kw):
        self.kind = kind
        self.children = tuple(children)
        super(Other, self).__init__(**kw)

    def __repr__(self):
        if not self.children:
            return '<{}>'.format(self.kind)
        return '<{} {}>'.format(self.kind,
                                ' '.join(map(repr, self.children)))

    def iter_children(self):
        return iter(self.children)

    def accept(self, visitor):
        return visitor.visit_other(self)


class NodeVisitor(object):

    def visit(self, node):
        node.accept(self)

    def generic_visit(self, node):
        for child in node.iter_children():
            self.visit(child)

    def visit_module(self, node):
        self.generic_visit(node)

    def visit_function(self, node):
        self.generic_visit(node)

    def visit_parameter(self, node):
        self.generic_visit(node)

    def visit_variable_declaration(self, node):
        self.generic_visit(node)

    def visit_expression_statement(self, node):
        self.generic_visit(node)

    def visit_call(self, node):
        self.generic_visit(node)

    def visit_await(self, node):
        self.generic_visit(node)

    def visit_property_access(self, node):
        self.generic_visit(node)

    def visit_identifier(self, node):
        pass

    def visit_string_literal(self, node):
        pass

    def visit_template_expr(self, node):
        self.generic_visit(node)

    def visit_array_literal(self, node):
        self.generic_visit(node)

    def visit_array_pattern(self, node):
        self.generic_visit(node)

    def visit_binding_element(self, node):
        self.generic_visit(node)

    def visit_object_literal(self, node):
        self.generic_visit(node)

    def visit_property(self, node):
        self.generic_visit(node)

    def visit_shorthand_property(self, node):
        pass

    def visit_other(self, node):
        self.generic_visit(node)
