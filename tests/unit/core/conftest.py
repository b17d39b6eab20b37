"""Shared fixtures for core unit tests"""

from html.parser import HTMLParser

import pytest

from idbdoc.config import Settings
from idbdoc.core.parse import make_parser


SAMPLE_MD = """\
# Opening a database

Call `indexedDB.open` with a *name* and a **version**.

## Object stores

- create stores in `onupgradeneeded`
- nested:
  - keyPath
  - autoIncrement

1. open
2. transact

> Requests fire `success` or `error`.

```js
const request = indexedDB.open('library', 1)
request.onsuccess = () => console.log("ok") // done
```

```
plain <b>code</b>
```

| method | returns |
|:-------|--------:|
| get    | request |

See [MDN](https://developer.mozilla.org "IndexedDB") and ![diagram](db.png).

---

Footer paragraph.
"""

VOID_ELEMENTS = {"meta", "link", "br", "hr", "img", "input", "col", "area", "base", "embed", "source", "track", "wbr"}


class TagChecker(HTMLParser):
    """Collect start/end tag balance and text per element while parsing HTML."""

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.stack: list[str] = []
        self.seen: list[str] = []
        self.errors: list[str] = []
        self.text: dict[str, list[str]] = {}

    def handle_starttag(self, tag, attrs):
        self.seen.append(tag)
        if tag not in VOID_ELEMENTS:
            self.stack.append(tag)

    def handle_endtag(self, tag):
        if not self.stack or self.stack[-1] != tag:
            self.errors.append(f"unexpected </{tag}> with open {self.stack}")
            return
        self.stack.pop()

    def handle_data(self, data):
        for tag in set(self.stack):
            self.text.setdefault(tag, []).append(data)


@pytest.fixture(name="sample_md")
def sample_md_fixture():
    return SAMPLE_MD


@pytest.fixture(name="parser")
def parser_fixture():
    return make_parser("gfm-like")


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings()


@pytest.fixture(name="check_html")
def check_html_fixture():
    """Return a function parsing HTML text into a finished TagChecker."""
    def _check(html: str) -> TagChecker:
        checker = TagChecker()
        checker.feed(html)
        checker.close()
        return checker
    return _check
