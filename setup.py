from setuptools import setup, find_packages

setup(
    name='IntlKeys',
    version='0.1.dev0',
    description='Static extraction of next-intl translation keys',
    packages=find_packages(exclude=['tests', 'tests.*']),
    license='BSD',
    python_requires='>=3.9',
    install_requires=[
        'tree-sitter>=0.23',
        'tree-sitter-typescript>=0.23',
        'tree-sitter-javascript>=0.23',
    ],
    extras_require={
        'cli': ['click'],
        'test': ['pytest', 'click'],
    }
)
