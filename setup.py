import os
import re

from setuptools import find_packages, setup

VERSION = '0.1.0'


def parse_md_readme():
    """
    read the markdown readme for the long description, stripping the html comment blocks
    which pypi will not render
    """
    try:
        with open(os.path.join(os.path.dirname(__file__), 'README.md')) as fh:
            long_description = fh.read()
    except OSError:
        long_description = ''
    return re.sub(r'<!--.*?-->\n?', '', long_description, flags=re.DOTALL)


TEST_REQS = [
    'pytest',
    'pytest-cov',
]


INSTALL_REQS = [
    'pandas>=1.1.5',
]


setup(
    name='linetemplate',
    version='{}'.format(VERSION),
    package_dir={'': 'src'},
    packages=find_packages(where='src', exclude=['tests']),
    description='Compiles line templates which translate tabular genomics records into english text',
    long_description=parse_md_readme(),
    long_description_content_type='text/markdown',
    install_requires=INSTALL_REQS,
    extras_require={
        'test': TEST_REQS,
        'dev': ['black', 'flake8'] + TEST_REQS,
    },
    python_requires='>=3.7',
    test_suite='tests',
)
