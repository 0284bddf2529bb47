
"""
Runs every Python code block of the README as a test case.
"""

import os
import re
import pytest

README = os.path.normpath(os.path.join(__file__, '../../../../../README.md'))


def iter_snippets(filename):
  with open(filename) as fp:
    content = fp.read()
  for match in re.finditer(r'```python\n(.*?)```', content, re.S):
    yield content[:match.start()].count('\n') + 1, match.group(1)


@pytest.mark.parametrize('line_offset,snippet', list(iter_snippets(README)))
def test_readme_snippet(line_offset, snippet):
  code = compile('\n' * line_offset + snippet, README, 'exec')
  exec(code, {})
