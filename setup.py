#!/usr/bin/env python
# -*- coding: utf-8 -*-
import os

from setuptools import setup

# There are problems running setup.py on Windows if the encoding is not set
with open('README.md', encoding='utf8') as readme_file:
    readme = readme_file.read()
with open('HISTORY.rst', encoding='utf8') as history_file:
    history = history_file.read()
with open(os.path.join('scarf_events', 'VERSION'), encoding='utf8') as version_file:
    version = version_file.read().strip()


setup(
    name='scarf-events',
    version=version,
    description="Minimal client for sending analytics events to a Scarf endpoint.",
    long_description=readme + '\n\n' + history,
    long_description_content_type="text/markdown",
    author="Scarf",
    author_email='help@scarf.sh',
    url='https://github.com/scarf-sh/scarf-events-python',
    packages=[
        'scarf_events',
    ],
    package_dir={'scarf_events': 'scarf_events'},
    package_data={'scarf_events': ['VERSION']},
    entry_points={
        'console_scripts': [
            'scarf-event=scarf_events.cli:cli'
        ]
    },
    include_package_data=True,
    install_requires=[
        'Click>=8.0',
        'httpx>=0.24',
    ],
    extras_require={
        'test': [
            'pytest',
        ],
    },
    python_requires=">=3.9",
    license="MIT license",
    zip_safe=False,
    keywords='scarf analytics telemetry',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ]
)
