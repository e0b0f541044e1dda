# Welcome to the polyroots setup.py.
import sys

# Make sure that polyroots is running on Python 3.8.0 or later
# (postponed annotations and typing_extensions.TypeGuard are used everywhere)

if sys.version_info < (3, 8, 0):
    raise RuntimeError("polyroots requires Python 3.8.0 or later.")


from setuptools import find_packages, setup

setup(
    name='polyroots',
    version='0.1.0',
    description='Closed-form real roots of polynomials up to degree four in PyTorch',
    license='Apache License 2.0',
    python_requires='>=3.8',
    packages=find_packages(include=['polyroots', 'polyroots.*']),
    install_requires=['torch>=1.9.1', 'typing_extensions'],
    extras_require={
        'dev': [
            'mypy[reports]',
            'numpy',
            'pydocstyle',
            'pytest',
            'pytest-cov',
        ],
        'test': ['numpy', 'pytest', 'pytest-cov'],
    },
)
