# -*- coding: utf-8 -*-
from setuptools import setup

from pledge import VERSION

setup(name="pledge",
      version=VERSION,
      description="Lightweight jQuery-style promises with pluggable event loops",
      author="Greg Hazel and Steven Hazel",
      author_email="sah@awesame.org",
      maintainer="Steven Hazel",
      maintainer_email="sah@awesame.org",
      packages=['pledge',
                'pledge.stack',
                'pledge.asyncio_stack',
                'pledge.manual_stack',
                'pledge.twisted_stack',
                'pledge.tornado_stack'],
      python_requires='>=3.8',
      install_requires=[],
      extras_require={
          'twisted': ['twisted'],
          'tornado': ['tornado>=5'],
          'test': ['pytest', 'twisted', 'tornado>=5'],
      },
      license='MIT'
      )
