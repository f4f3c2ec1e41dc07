from textwrap import dedent
from unittest.mock import patch

from intlkeys.nodes import Node
from intlkeys.loaders import DictLoader
from intlkeys.extractor import extract


def _ne(self, other):
    return not self.__eq__(other)


def _node_eq(self, other):
    if type(self) is not type(other):
        return False
    d1 = dict(self.__dict__)
    d1.pop('location', None)
    d2 = dict(other.__dict__)
    d2.pop('location', None)
    return d1 == d2


NODE_EQ_PATCHER = patch.multiple(Node, __eq__=_node_eq, __ne__=_ne)


def sources(*contents, **kwargs):
    ext = kwargs.pop('ext', '.tsx')
    return {'file{}{}'.format(i, ext): dedent(content).strip() + '\n'
            for i, content in enumerate(contents)}


def extract_sources(*contents, **kwargs):
    mapping = sources(*contents, ext=kwargs.pop('ext', '.tsx'))
    return extract(sorted(mapping), DictLoader(mapping), **kwargs)


def extract_keys(*contents, **kwargs):
    return [found.key for found in extract_sources(*contents, **kwargs)]
