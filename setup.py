from setuptools import setup, find_packages

with open('requirements.txt') as f:
    required = f.read().splitlines()

setup(
    name = 'confreg',
    version = '0.1.0',
    description = 'Provider and feature configuration registry',
    packages = find_packages(include=['confreg', 'confreg.*']),
    python_requires = '>=3.10',
    install_requires = required,
    extras_require = {
        'test': ['pytest>=7.0', 'pytest-cov'],
    },
)
