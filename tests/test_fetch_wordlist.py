import pytest
from script import fetch_wordlist
from script.fetch_wordlist import extract_words, fetch_words

HTML = """
<html><body>
  <h1>Word list</h1>
  <ul><li>CRANE</li><li>slate</li><li>crane</li><li>apple-pie</li></ul>
</body></html>
"""


def test_extract_words_filters_and_dedupes():
    words = extract_words(HTML, N=5)
    assert words == ["crane", "slate", "apple"]


def test_extract_words_any_length():
    words = extract_words("alpha beta\nGamma beta")
    assert words == ["alpha", "beta", "gamma"]


class _Resp:
    def __init__(self, text, status=200):
        self.text = text
        self.status = status

    def raise_for_status(self):
        if self.status >= 400:
            raise fetch_wordlist.requests.HTTPError(f"{self.status}")


def test_fetch_words_uses_requests(monkeypatch):
    calls = {}

    def fake_get(url, timeout):
        calls["url"], calls["timeout"] = url, timeout
        return _Resp("crane slate ab")

    monkeypatch.setattr(fetch_wordlist.requests, "get", fake_get)
    assert fetch_words("https://example.org/w.txt", N=5) == ["crane", "slate"]
    assert calls == {"url": "https://example.org/w.txt", "timeout": 30}


def test_fetch_words_raises_on_http_error(monkeypatch):
    monkeypatch.setattr(fetch_wordlist.requests, "get", lambda url, timeout: _Resp("", 404))
    with pytest.raises(fetch_wordlist.requests.HTTPError):
        fetch_words("https://example.org/missing")
