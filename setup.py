"""Integrates Scoped with Python's setuptools."""

from setuptools import setup, find_packages

from scoped import _ROOT_DIRECTORY_PATH as ROOT_DIRECTORY_PATH

with open(ROOT_DIRECTORY_PATH / 'scoped' / 'assets' / 'VERSION', encoding='utf-8') as f:
    VERSION = f.read().strip()

with open(ROOT_DIRECTORY_PATH / 'README.md', encoding='utf-8') as f:
    long_description = f.read()


extras_require_setuptools = [
    'setuptools ~= 68.2, >= 68.2.2',
    'twine ~= 4.0, >= 4.0.0',
    'wheel ~= 0.40, >= 0.40.0',
]


extras_require_test = [
    'pytest ~= 7.3, >= 7.3.1',
    'pytest-cov ~= 4.0, >= 4.0.0',
    'pytest-mock ~= 3.10, >= 3.10.0',
]


extras_require_development = [
    'autopep8 ~= 2.0, >= 2.0.2',
    'basedmypy ~= 2.0, >= 2.2.1',
    'coverage ~= 7.2, >= 7.2.4',
    'flake8 ~= 6.0, >= 6.0.0',
    *extras_require_test,
    *extras_require_setuptools,
]


SETUP = {
    'name': 'scoped',
    'description': 'Scoped runs an action between acquiring and releasing a resource, and threads errors from every phase into the release',
    'long_description': long_description,
    'long_description_content_type': 'text/markdown',
    'version': VERSION,
    'license': 'GPLv3',
    'classifiers': [
        'License :: OSI Approved :: GNU General Public License v3 (GPLv3)',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Operating System :: MacOS :: MacOS X',
        'Operating System :: POSIX :: Linux',
        'Operating System :: Microsoft :: Windows',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Typing :: Typed ',
    ],
    'python_requires': '~= 3.11',
    'install_requires': [
        'typing-extensions ~= 4.9, >= 4.9.0',
    ],
    'extras_require': {
        'development': extras_require_development,
        'setuptools': extras_require_setuptools,
        'test': extras_require_test,
    },
    'packages': find_packages(),
    'package_data': {
        'scoped': [
            'assets/VERSION',
        ],
    },
}

if __name__ == '__main__':
    setup(**SETUP)
