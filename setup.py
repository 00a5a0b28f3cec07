import os

from setuptools import find_packages, setup


def read_version(*path):
    ns = {}
    with open(os.path.join(os.path.dirname(__file__), *path)) as f:
        exec(f.read(), ns)
    return ns['__version__']


setup(name='spanforest',
      version=read_version('spanforest', 'version.py'),
      description='Minimum spanning forests by Kruskal\'s algorithm',
      packages=find_packages(exclude=['tests', 'tests.*']),
      python_requires='>=3.10',
      install_requires=['numpy'],
      extras_require={'test': ['pytest', 'scipy']})
