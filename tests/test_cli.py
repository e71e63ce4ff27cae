# tests/test_cli.py
"""Tests for CLI commands that run without a server."""

import json
import sys

import httpx

import pytest

from anagrammer.cli import client
from anagrammer.cli.main import main


@pytest.fixture
def words_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("yes\nman\nen\nas\nmy\nsane\nSean\nmen\nsay\n", encoding="utf-8")
    return path


def run_cli(monkeypatch, *argv):
    monkeypatch.setattr(sys, "argv", ["anagrammer", *argv])
    main()


def test_signature(monkeypatch, capsys):
    run_cli(monkeypatch, "signature", "Yes", "man")
    assert capsys.readouterr().out.strip() == "a1e1m1n1s1y1"


def test_signature_empty(monkeypatch, capsys):
    run_cli(monkeypatch, "signature")
    assert capsys.readouterr().out.strip() == "(empty)"


def test_word_local(monkeypatch, capsys, words_file):
    run_cli(monkeypatch, "word", "enas", "--words", str(words_file))
    out = capsys.readouterr().out
    assert "sane" in out
    assert "Sean" in out


def test_sentence_local(monkeypatch, capsys, words_file):
    run_cli(monkeypatch, "sentence", "Yes", "man", "--words", str(words_file))
    out = capsys.readouterr().out
    assert "14 anagrams" in out
    assert "men say" in out


def test_sentence_remote(monkeypatch, capsys):
    monkeypatch.setattr(client, "sentence_anagrams", lambda sentence, dictionary=None: {
        "anagrams": [["man", "yes"], ["yes", "man"]],
    })
    run_cli(monkeypatch, "sentence", "yes", "man", "--dict", "small")
    out = capsys.readouterr().out
    assert "2 anagrams" in out


def test_missing_words_file(monkeypatch, capsys, tmp_path):
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "word", "eat", "--words", str(tmp_path / "nope.txt"))
    assert exc.value.code == 1
    assert "✗ Error" in capsys.readouterr().out


def test_serve(monkeypatch):
    import uvicorn

    calls = []
    monkeypatch.setattr(uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    run_cli(monkeypatch, "serve", "--port", "9000")
    assert calls == [("anagrammer.server.main:app", {"host": "127.0.0.1", "port": 9000, "reload": False})]


def test_signature_json(monkeypatch, capsys):
    run_cli(monkeypatch, "signature", "--json", "Tea")
    assert json.loads(capsys.readouterr().out) == [["a", 1], ["e", 1], ["t", 1]]


def test_word_remote(monkeypatch, capsys):
    calls = []

    def fake_word_anagrams(word, dictionary=None):
        calls.append((word, dictionary))
        return {"anagrams": ["ate", "eat", "tea"]}

    monkeypatch.setattr(client, "word_anagrams", fake_word_anagrams)
    run_cli(monkeypatch, "word", "tea")
    out = capsys.readouterr().out
    assert calls == [("tea", None)]
    assert "ate" in out and "eat" in out


def failing(*args, **kwargs):
    raise RuntimeError("server said no")


def test_word_remote_error(monkeypatch, capsys):
    monkeypatch.setattr(client, "word_anagrams", failing)
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "word", "tea", "--dict", "klingon")
    assert exc.value.code == 1
    assert "✗ Error: server said no" in capsys.readouterr().out


# === dict commands (mocked client) ===

def test_dict_add(monkeypatch, capsys, words_file):
    uploaded = {}

    def fake_create(name, words):
        uploaded[name] = words
        return {"name": name, "word_count": len(words)}

    monkeypatch.setattr(client, "create_dictionary", fake_create)
    run_cli(monkeypatch, "dict", "add", str(words_file), "--name", "small")
    out = capsys.readouterr().out
    assert "✓ Created dictionary: small" in out
    assert "words: 9" in out
    assert uploaded["small"][:2] == ["yes", "man"]


def test_dict_add_defaults_name_to_file_stem(monkeypatch, capsys, words_file):
    monkeypatch.setattr(client, "create_dictionary", lambda name, words: {"name": name, "word_count": len(words)})
    run_cli(monkeypatch, "dict", "add", str(words_file))
    assert "✓ Created dictionary: words" in capsys.readouterr().out


def test_dict_add_error(monkeypatch, capsys, words_file):
    monkeypatch.setattr(client, "create_dictionary", failing)
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "dict", "add", str(words_file))
    assert exc.value.code == 1
    assert "✗ Error" in capsys.readouterr().out


def test_dict_list(monkeypatch, capsys):
    monkeypatch.setattr(client, "list_dictionaries", lambda: [
        {"name": "small", "word_count": 9, "created_at": "2026-01-01T00:00:00"},
    ])
    run_cli(monkeypatch, "dict", "list")
    out = capsys.readouterr().out
    assert "small" in out
    assert "9 words" in out


def test_dict_list_empty(monkeypatch, capsys):
    monkeypatch.setattr(client, "list_dictionaries", lambda: [])
    run_cli(monkeypatch, "dict", "list")
    assert "No dictionaries." in capsys.readouterr().out


def test_dict_list_error(monkeypatch, capsys):
    monkeypatch.setattr(client, "list_dictionaries", failing)
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "dict", "list")
    assert exc.value.code == 1
    assert "✗ Error" in capsys.readouterr().out


def test_dict_show(monkeypatch, capsys):
    monkeypatch.setattr(client, "get_dictionary", lambda name: {
        "name": name, "created_at": "2026-01-01T00:00:00", "word_count": 3,
        "words": ["ate", "eat", "tea"],
    })
    run_cli(monkeypatch, "dict", "show", "small", "--limit", "2")
    out = capsys.readouterr().out
    assert "Name: small" in out
    assert "  eat" in out
    assert "  tea" not in out
    assert "... 1 more" in out


def test_dict_show_error(monkeypatch, capsys):
    monkeypatch.setattr(client, "get_dictionary", failing)
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "dict", "show", "nope")
    assert exc.value.code == 1
    assert "✗ Error" in capsys.readouterr().out


def test_dict_delete(monkeypatch, capsys):
    monkeypatch.setattr(client, "delete_dictionary", lambda name: {"deleted": name})
    run_cli(monkeypatch, "dict", "delete", "small")
    assert "✓ Deleted dictionary: small" in capsys.readouterr().out


def test_dict_delete_error(monkeypatch, capsys):
    monkeypatch.setattr(client, "delete_dictionary", failing)
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "dict", "delete", "small")
    assert exc.value.code == 1
    assert "✗ Error" in capsys.readouterr().out


def test_dict_use(monkeypatch, capsys):
    monkeypatch.setattr(client, "set_active_dictionary", lambda name: {
        "dictionary": name, "previous": "default", "db": 3,
    })
    run_cli(monkeypatch, "dict", "use", "english")
    assert "✓ Active dictionary: english (was default, db 3)" in capsys.readouterr().out


def test_dict_use_show_active(monkeypatch, capsys):
    monkeypatch.setattr(client, "get_active_dictionary", lambda: {"dictionary": "english", "db": 0})
    run_cli(monkeypatch, "dict", "use")
    assert "Active dictionary: english (db 0)" in capsys.readouterr().out


def test_dict_use_error(monkeypatch, capsys):
    monkeypatch.setattr(client, "set_active_dictionary", failing)
    with pytest.raises(SystemExit) as exc:
        run_cli(monkeypatch, "dict", "use", "klingon")
    assert exc.value.code == 1
    assert "✗ Error" in capsys.readouterr().out


# === HTTP client ===

class FakeResponse:
    def __init__(self, data):
        self.data = data

    def raise_for_status(self):
        pass

    def json(self):
        return self.data


@pytest.fixture
def recorded_requests(monkeypatch):
    requests = []

    def record(method):
        def send(url, **kwargs):
            requests.append((method, url, kwargs))
            return FakeResponse({"dictionaries": [], "anagrams": [], "dictionary": "x", "previous": "y", "db": 3})
        return send

    for method in ("get", "post", "put", "delete"):
        monkeypatch.setattr(httpx, method, record(method))
    return requests


def test_client_sends_configured_db(monkeypatch, recorded_requests):
    monkeypatch.setenv("ANAGRAMMER_REDIS_DB", "3")
    monkeypatch.setenv("ANAGRAMMER_API_URL", "http://anagrams.test/api/")

    client.set_active_dictionary("english")
    client.get_active_dictionary()
    client.create_dictionary("english", ["tea"])
    client.list_dictionaries()
    client.get_dictionary("english")
    client.delete_dictionary("english")
    client.word_anagrams("tea")
    client.sentence_anagrams(["yes", "man"], "english")

    assert len(recorded_requests) == 8
    for method, url, kwargs in recorded_requests:
        assert url.startswith("http://anagrams.test/api/")
        assert kwargs["params"] == {"db": 3}

    method, url, kwargs = recorded_requests[0]
    assert (method, url) == ("put", "http://anagrams.test/api/state/dictionary")
    assert kwargs["json"] == {"name": "english"}
