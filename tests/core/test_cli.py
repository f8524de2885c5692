# tests/core/test_cli.py
import json
import logging

import pytest

from snapshot_analyzer.app import main, build_parser

SNAPSHOT = {
    "tag": "div",
    "classes": ["container"],
    "styles": {"display": "flex", "padding": "12px"},
    "children": [
        {"tag": "button", "classes": ["btn", "btn-primary"], "children": []},
        {"tag": "button", "classes": ["btn", "btn-primary"], "children": []},
    ],
}


@pytest.fixture(autouse=True)
def restore_logging():
    """Herstel de root logger na elke CLI-aanroep."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def snapshot_file(tmp_path):
    path = tmp_path / "home.json"
    path.write_text(json.dumps(SNAPSHOT))
    return path


def test_parser_requires_inputs():
    """Test dat 'analyze' zonder bestanden een argumentfout geeft."""
    with pytest.raises(SystemExit):
        build_parser().parse_args(["analyze"])


def test_analyze_to_stdout(snapshot_file, capsys):
    """Test 'analyze <bestand>' met JSON-uitvoer op stdout."""
    exit_code = main(["analyze", str(snapshot_file), "--component-map", "--styling-config"])
    assert exit_code == 0

    output = json.loads(capsys.readouterr().out)
    assert output["source"] == "home.json"
    assert "generatedAt" in output
    assert output["report"]["repeatedPatterns"]["button:btn.btn-primary:0"]["count"] == 2
    assert len(output["componentMap"]["buttons"]) == 2
    assert output["stylingConfig"]["theme"]["extend"]["spacing"] == {"3": "12px"}


def test_analyze_accepts_wrapped_capture(tmp_path, capsys):
    """Test dat een capture met een 'dom'-sleutel ook wordt geaccepteerd."""
    path = tmp_path / "capture.json"
    path.write_text(json.dumps({"url": "https://example.com", "dom": SNAPSHOT}))
    assert main(["analyze", str(path)]) == 0
    assert json.loads(capsys.readouterr().out)["report"]["nodeCount"] == 3


def test_analyze_multiple_files_to_directory(tmp_path, snapshot_file):
    """Test meerdere invoerbestanden met een uitvoermap en CSV-export."""
    html_file = tmp_path / "about.html"
    html_file.write_text('<html><body><nav class="menu"><a href="/">Home</a></nav></body></html>')
    out_dir = tmp_path / "reports"

    exit_code = main(["analyze", str(snapshot_file), str(tmp_path / "missing.json"),
                      "-o", str(out_dir), "--csv-dir", str(tmp_path / "csv")])
    # one input is missing, the other is still written
    assert exit_code == 1
    assert (out_dir / "home.analysis.json").exists()
    assert (tmp_path / "csv" / "home_components.csv").exists()

    assert main(["analyze", "--html", str(html_file), "-o", str(tmp_path / "about.json")]) == 0
    report = json.loads((tmp_path / "about.json").read_text())["report"]
    assert report["sections"][0]["purpose"] == "navigation"


def test_analyze_invalid_json(tmp_path):
    """Test dat ongeldige JSON wordt gelogd en exit code 1 geeft."""
    path = tmp_path / "broken.json"
    path.write_text("{not json")
    assert main(["analyze", str(path)]) == 1


def test_no_subcommand_prints_help(capsys):
    """Test dat zonder subcommando de help wordt getoond."""
    assert main([]) == 1
    assert "analyze" in capsys.readouterr().out
