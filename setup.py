from setuptools import setup

setup(name='alistextra',
      version='0.1',
      description="Convenience helpers for insertion-ordered dicts and sets",
      author='krzygorz',
      author_email='krzygorz@gmail.com',
      license='MIT',
      packages=['alistextra'],
      python_requires='>=3.8',
      install_requires=['ordered-set'],
      extras_require={
        'test': ['pytest'],
      },
      zip_safe=True,
      entry_points = {
        'console_scripts': ['alistextra=alistextra.cli:main'],
      },
      )
