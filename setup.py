"""The pykanjidic setup.py script."""

from setuptools import setup, find_packages


setup(
    name='pykanjidic',
    version='0.1.0',
    package_dir={'': 'src'},
    packages=find_packages(where='src'),
    python_requires='>=3.8',
    install_requires=[
        'lxml',
        'pydantic>=2',
    ],
    extras_require={
        'test': ['pytest'],
    },
)
