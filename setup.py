# Encoding: utf-8

# --
# Copyright (c) 2014-2026 Net-ng.
# All rights reserved.
#
# This software is licensed under the BSD License, as described in
# the file LICENSE.txt, which you should have received as part of
# this distribution.
# --

import os

from setuptools import setup, find_namespace_packages

with open(os.path.join(os.path.dirname(__file__), 'README.rst')) as description:
    LONG_DESCRIPTION = description.read()

setup(
    name='nagare-services-fernet',
    author='Net-ng',
    author_email='alain.poirier@net-ng.com',
    description='Nagare Fernet tokens service',
    long_description=LONG_DESCRIPTION,
    license='BSD',
    keywords='fernet token encryption',
    url='https://github.com/nagareproject/services-fernet',
    package_dir={'': 'src'},
    packages=find_namespace_packages('src', include=['nagare.*']),
    zip_safe=False,
    python_requires='>=3.9',
    setup_requires=['setuptools_scm'],
    use_scm_version={'fallback_version': '0.1.0'},
    install_requires=[
        'tinyaes',
        'nagare-services',
        'nagare-services-logging',
    ],
    extras_require={
        'test': ['pytest', 'cryptography'],
    },
    entry_points={
        'console_scripts': [
            'fernet-keygen = nagare.fernet.cli:run_keygen',
            'fernet-sign = nagare.fernet.cli:run_sign',
        ],
        'nagare.services': [
            'fernet = nagare.services.fernet:Fernet',
        ],
    },
)
