#!/usr/bin/env python

from setuptools import setup
from pathlib import Path

# Read the contents of the README file:
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text()

setup(
    name='geoserver-catalog',
    version='0.1.0',
    packages=['geoserver_catalog','geoserver_catalog.mixins','geoserver_catalog.resources','geoserver_catalog.unitest'],
    description='library to manage the geoserver catalog through the geoserver restapi',
    long_description=long_description,
    long_description_content_type='text/markdown',
    zip_safe=False,
    keywords=['geoserver','catalog','restapi'],
    install_requires=[
        'requests>=2.25.0',
        'pytz>=2024.1',
        'Jinja2>=3.1.4'
    ],
    extras_require={
        'test':['pytest']
    },
    classifiers=[
        'Intended Audience :: Developers',
        'Development Status :: 3 - Alpha',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3.12',
        'Topic :: Software Development :: Libraries',
        'Topic :: Software Development :: Libraries :: Python Modules',
    ],
)
