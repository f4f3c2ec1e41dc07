from intlkeys.nodes import VariableDeclaration, ExpressionStatement, Call
from intlkeys.nodes import Await, PropertyAccess, Identifier, StringLiteral
from intlkeys.nodes import TemplateExpr, ArrayLiteral, ArrayPattern, Other
from intlkeys.nodes import BindingElement, ObjectLiteral, Property
from intlkeys.nodes import ShorthandProperty
from intlkeys.constant import DEFAULT_CONVENTIONS
from intlkeys.indexer import HelperFunction
from intlkeys.patterns import Patterns, qualify, comment_key, dotted_name
from intlkeys.patterns import is_dynamic


def call(name, *args):
    return Call(Identifier(name), args)


def use_translations(*args):
    return call('useTranslations', *args)


def get_translations(*args):
    return Await(call('getTranslations', *args))


def promise_all(*elements):
    return Await(Call(PropertyAccess(Identifier('Promise'), 'all'),
                      [ArrayLiteral(elements)]))


def namespace_object(*properties):
    return ObjectLiteral(list(properties))


def test_qualify():
    assert qualify('NS', 'key') == 'NS.key'
    assert qualify('', 'key') == 'key'


def test_dotted_name():
    assert dotted_name(PropertyAccess(Identifier('Promise'), 'all')) == \
        'Promise.all'
    assert dotted_name(PropertyAccess(call('f'), 'all')) is None


def test_is_dynamic():
    assert is_dynamic(Identifier('key'))
    assert is_dynamic(TemplateExpr([Identifier('id')]))
    assert not is_dynamic(StringLiteral('key'))
    assert not is_dynamic(None)


def test_comment_key():
    assert comment_key("// t('some.static.key')") == 'some.static.key'
    assert comment_key('// t("double")') == 'double'
    assert comment_key("// See t('first') or t('second')") == 'first'
    assert comment_key("/* t('block') */") is None
    assert comment_key("// format('date')") is None
    assert comment_key("// t('mismatched\")") is None
    assert comment_key("// t('')") is None


def test_use_translations():
    patterns = Patterns()
    assert patterns.use_translations(use_translations(StringLiteral('NS'))) \
        == 'NS'
    assert patterns.use_translations(use_translations()) == ''
    assert patterns.use_translations(use_translations(Identifier('ns'))) \
        == ''
    assert patterns.use_translations(call('other', StringLiteral('NS'))) \
        is None


def test_get_translations():
    patterns = Patterns()
    assert patterns.get_translations(
        get_translations(StringLiteral('NS'))) == ['NS']
    assert patterns.get_translations(get_translations()) == ['']
    assert patterns.get_translations(get_translations(namespace_object(
        ShorthandProperty('locale'),
        Property(Identifier('namespace'), StringLiteral('NS')),
    ))) == ['NS']
    assert patterns.get_translations(get_translations(namespace_object(
        Property(Identifier('namespace'), StringLiteral('A')),
        Property(Identifier('namespace'), StringLiteral('B')),
    ))) == ['A', 'B']
    assert patterns.get_translations(get_translations(namespace_object(
        Property(Identifier('namespace'), Identifier('ns')),
    ))) == ['']
    # not awaited
    assert patterns.get_translations(
        call('getTranslations', StringLiteral('NS'))) is None


def test_promise_all():
    patterns = Patterns()
    assert patterns.promise_all(promise_all(
        call('load'),
        call('getTranslations', StringLiteral('A')),
        Identifier('x'),
        call('getTranslations', namespace_object(
            Property(Identifier('namespace'), StringLiteral('B')))),
    )) == [(1, ['A']), (3, ['B'])]
    assert patterns.promise_all(Await(call('all', ArrayLiteral([])))) is None
    assert patterns.promise_all(call('load')) is None


def test_acquisitions():
    patterns = Patterns()
    acquisitions = patterns.acquisitions

    assert acquisitions(VariableDeclaration(
        Identifier('other'), use_translations(StringLiteral('NS')),
    )) == [('other', 'NS')]
    assert acquisitions(VariableDeclaration(
        Other('object_pattern', []), use_translations(),
    )) == [('t', '')]
    assert acquisitions(VariableDeclaration(
        Identifier('t'), get_translations(StringLiteral('NS')),
    )) == [('t', 'NS')]
    assert acquisitions(VariableDeclaration(
        ArrayPattern([Identifier('data'), None,
                      BindingElement(Identifier('tx'), Identifier('y'))]),
        promise_all(call('load'), Identifier('x'),
                    call('getTranslations', StringLiteral('P'))),
    )) == [('tx', 'P')]
    assert acquisitions(VariableDeclaration(
        Identifier('both'),
        promise_all(call('getTranslations', StringLiteral('P'))),
    )) == []
    assert acquisitions(VariableDeclaration(Identifier('t'), None)) == []
    assert acquisitions(VariableDeclaration(
        Identifier('t'), call('translate', StringLiteral('NS')),
    )) == []


def test_conventions():
    patterns = Patterns(DEFAULT_CONVENTIONS._replace(
        use_translations='useT', get_translations='getT'))
    assert patterns.acquisitions(VariableDeclaration(
        Identifier('t'), call('useT', StringLiteral('NS')),
    )) == [('t', 'NS')]
    assert patterns.acquisitions(VariableDeclaration(
        Identifier('t'), use_translations(StringLiteral('NS')),
    )) == []


def test_translator_call():
    patterns = Patterns()
    key = StringLiteral('key')
    assert patterns.translator_call(call('t', key)) == ('t', key)
    assert patterns.translator_call(
        Call(PropertyAccess(Identifier('t'), 'rich'), [key])) == ('t', key)
    assert patterns.translator_call(call('t')) == ('t', None)
    assert patterns.translator_call(
        Call(PropertyAccess(PropertyAccess(Identifier('a'), 'b'), 'c'),
             [key])) is None
    assert patterns.translator_call(
        Call(use_translations(StringLiteral('NS')), [key])) is None


def test_helper_call():
    patterns = Patterns()
    helper = HelperFunction('schema', 't', ('required',))
    helpers = {'schema': helper}
    helper_, argument = patterns.helper_call(call('schema', Identifier('t')),
                                             helpers)
    assert helper_ is helper
    assert argument.name == 't'
    assert patterns.helper_call(call('schema'), helpers) is None
    assert patterns.helper_call(call('other', Identifier('t')), helpers) \
        is None


def test_inline_translator():
    patterns = Patterns()
    assert patterns.inline_translator(
        use_translations(StringLiteral('NS'))) == ['NS']
    assert patterns.inline_translator(use_translations()) == ['']
    assert patterns.inline_translator(
        use_translations(Identifier('ns'))) == ['']
    assert patterns.inline_translator(
        get_translations(StringLiteral('S'))) == ['S']
    assert patterns.inline_translator(get_translations()) == ['']
    assert patterns.inline_translator(Identifier('t')) is None


def test_inline_call():
    patterns = Patterns()
    namespace = use_translations(StringLiteral('NS'))
    assert patterns.inline_call(ExpressionStatement(
        Call(namespace, [StringLiteral('one')]))) == ('NS', 'one')
    assert patterns.inline_call(ExpressionStatement(
        Call(PropertyAccess(namespace, 'rich'),
             [StringLiteral('two')]))) == ('NS', 'two')
    assert patterns.inline_call(ExpressionStatement(
        Call(namespace, [Identifier('key')]))) is None
    assert patterns.inline_call(ExpressionStatement(
        Call(PropertyAccess(use_translations(), 'raw'),
             [StringLiteral('bare')]))) == ('', 'bare')
    assert patterns.inline_call(ExpressionStatement(
        call('t', StringLiteral('key')))) is None
    assert patterns.inline_call(ExpressionStatement(Identifier('x'))) is None
