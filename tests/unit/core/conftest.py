"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_MD = """\
# Title

Intro with `code` and a [link](https://example.com/?a=1&b=2).

```python
if a < b:
    print("x")
```

## Section *two*
Line one
line two
"""

SAMPLE_HTML = """\
<h1>Title</h1>
<p>Intro with <code>code</code> and a <a href="https://example.com/?a=1&amp;b=2">link</a>.</p>
<pre><code class="language-python">if a &lt; b:
    print(&quot;x&quot;)</code></pre>
<h2>Section <em>two</em></h2>
<p>Line one line two</p>"""


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="sample_html")
def sample_html_fixture():
    return SAMPLE_HTML
