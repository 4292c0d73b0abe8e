#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name='tzprefs',
    version='0.1.0',
    description='Per-request time zone resolution for Django sites',
    author='tzprefs devs',
    packages=find_packages(exclude=[]),
    include_package_data=True,
    package_data={'apps.users': ['templates/users/*.html']},
    python_requires='>=3.10',
    install_requires=[
        'Django>=4.2',
        'django-environ',
        'sentry-sdk>=2.0',
        'tzdata',
    ],
    extras_require={
        'test': [
            'factory-boy',
            'pytest',
            'pytest-django',
        ],
    },
 )
