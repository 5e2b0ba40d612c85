#!/usr/bin/env python

from setuptools import setup, find_packages
import re

with open("httpranges/__init__.py") as init_file:
    version = re.search(r'^__version__ = "([^"]+)"', init_file.read(), re.M).group(1)

setup(name='httpranges',
      version=version,
      description='Parse and format the value of HTTP Range request headers.',
      long_description=open("README.md").read(),
      long_description_content_type="text/markdown",
      license = "MIT",
      packages=find_packages(include=['httpranges', 'httpranges.*']),
      python_requires=">=3.6",
      install_requires=[
          'markdown >= 2.6.5',
          'markupsafe >= 2.0'
      ],
      extras_require={
          'dev': [
          'mypy',
          'types-Markdown'
          ]
      },
      entry_points={
          'console_scripts': ['httpranges = httpranges.cli:main']
      },
      classifiers=[
        'Programming Language :: Python :: 3',
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'Topic :: Internet :: WWW/HTTP',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: MIT License',
      ],
)
