import io

import pytest

from jsonparse.cli import main

SIMPLE_JSON = (
    '{"name": "Widget", "count": 3, "tags": ["a", "b"], '
    '"active": true, "owner": null}\n'
)

COMPLEX_JSON = r'''
{
  "id": 1024,
  "price": 12.50,
  "ratio": -2.5e-3,
  "items": [
    {"label": "first \"item\"", "sizes": [1, 2.0, 3e2]},
    {"label": "path\/to\\file", "sizes": []}
  ],
  "meta": {"empty": {}, "flag": false, "note": "caf\u00e9"},
  "nothing": null
}
'''

COMPLEX_DISPLAY = (
    r'{"id": 1024, "price": 12.5, "ratio": -0.0025, "items": '
    r'[{"label": "first \"item\"", "sizes": [1, 2, 300]}, '
    r'{"label": "path\/to\\file", "sizes": []}], '
    r'"meta": {"empty": {}, "flag": false, "note": "caf\u00e9"}, "nothing": null}'
)


@pytest.fixture
def write_file(tmp_path):
    def _write(name, content):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _write


def test_simple_json_file(write_file, capsys):
    path = write_file("test_simple.json", SIMPLE_JSON)
    assert main([path]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Valid JSON:\n" + SIMPLE_JSON
    assert captured.err == ""


def test_complex_json_file(write_file, capsys):
    path = write_file("test.json", COMPLEX_JSON)
    assert main([path]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Valid JSON:\n" + COMPLEX_DISPLAY + "\n"
    assert captured.err == ""


def test_reads_stdin_when_no_arguments(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(" [1, true] \n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Valid JSON:\n[1, true]\n"


def test_trailing_input_warns(write_file, capsys):
    path = write_file("trailing.json", "null extra")
    assert main([path]) == 0
    captured = capsys.readouterr()
    assert captured.out == "Valid JSON:\nnull\n"
    assert captured.err == "Warning: Unparsed input remaining: 'extra'\n"


def test_invalid_json_fails(write_file, capsys):
    path = write_file("bad.json", "[1,]")
    assert main([path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert captured.err.startswith("Invalid JSON: ")


def test_missing_file_fails(tmp_path, capsys):
    path = str(tmp_path / "missing.json")
    assert main([path]) == 1
    captured = capsys.readouterr()
    assert captured.err.startswith(f"Error reading file '{path}': ")