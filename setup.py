import io
import re
import setuptools

with io.open('src/nr/aggregatemap/__init__.py', encoding='utf8') as fp:
  version = re.search(r"__version__\s*=\s*'(.*)'", fp.read()).group(1)

with io.open('README.md', encoding='utf8') as fp:
  long_description = fp.read()

requirements = ['sortedcontainers >=2.1.0,<3.0.0', 'typing_extensions >=3.7.4']
extras_require = {}
extras_require['test'] = ['pytest']
tests_require = ['pytest']

setuptools.setup(
  name = 'nr.aggregatemap',
  version = version,
  author = 'Niklas Rosenstein',
  author_email = 'rosensteinniklas@gmail.com',
  description = 'Collect key-value pairs into a mapping of keys to collections of values.',
  long_description = long_description,
  long_description_content_type = 'text/markdown',
  url = 'https://git.niklasrosenstein.com/NiklasRosenstein/nr-python-libs',
  license = 'MIT',
  packages = setuptools.find_packages('src', ['test', 'test.*']),
  package_dir = {'': 'src'},
  include_package_data = False,
  install_requires = requirements,
  extras_require = extras_require,
  tests_require = tests_require,
  python_requires = '>=3.6',
  entry_points = {}
)
