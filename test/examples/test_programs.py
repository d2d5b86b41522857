"""Tests for the standalone example programs and the gallery CLI."""

import json
import runpy
import sys
from pathlib import Path

import pytest

from vlplot.gallery import get_example, list_examples

ROOT = Path(__file__).parent.parent.parent
EXAMPLES_DIR = ROOT / "examples"
GALLERY_SCRIPT = ROOT / "scripts" / "gallery.py"

# example program -> gallery chart it draws
PROGRAMS = {
    "cloropleth_unemployment.py": "choropleth",
    "from_numpy.py": "matrix_scatter",
    "stacked_bar_chart.py": "stacked_bar",
    "stock_graph.py": "stock_price",
}


def _load_main(path: Path):
    return runpy.run_path(str(path), run_name="vlplot_program")["main"]


def _last_line(text: str) -> str:
    return text.strip().splitlines()[-1]


class TestExamplePrograms:
    """Each program builds its chart, shows it, and prints the spec to stderr."""

    def test_every_program_is_listed(self):
        assert sorted(p.name for p in EXAMPLES_DIR.glob("*.py")) == sorted(PROGRAMS)

    @pytest.mark.parametrize("program,example", sorted(PROGRAMS.items()))
    def test_prints_gallery_spec(self, program, example, capsys):
        _load_main(EXAMPLES_DIR / program)()
        printed = json.loads(_last_line(capsys.readouterr().err))
        assert printed == get_example(example).build().to_dict()

    @pytest.mark.parametrize("program", sorted(PROGRAMS))
    def test_writes_page(self, program, tmp_path, capsys):
        _load_main(EXAMPLES_DIR / program)()
        capsys.readouterr()
        pages = list((tmp_path / "pages").glob("vlplot-*.html"))
        assert len(pages) == 1


class TestGalleryCli:
    """scripts/gallery.py list / print / show."""

    def setup_method(self):
        self.main = _load_main(GALLERY_SCRIPT)

    def _run(self, monkeypatch, *argv):
        monkeypatch.setattr(sys, "argv", ["gallery.py", *argv])
        return self.main()

    def test_list(self, monkeypatch, capsys):
        assert self._run(monkeypatch, "list") == 0
        assert capsys.readouterr().out.split() == list_examples()

    def test_list_verbose(self, monkeypatch, capsys):
        assert self._run(monkeypatch, "list", "--verbose") == 0
        out = capsys.readouterr().out
        assert "stacked_bar" in out
        assert "Seattle" in out
        assert len(out.strip().splitlines()) == len(list_examples())

    def test_print(self, monkeypatch, capsys):
        assert self._run(monkeypatch, "print", "stacked_bar") == 0
        printed = json.loads(capsys.readouterr().out)
        assert printed == get_example("stacked_bar").build().to_dict()

    def test_print_with_theme(self, monkeypatch, capsys):
        assert self._run(monkeypatch, "print", "matrix_scatter", "--theme", "dark", "--indent", "2") == 0
        printed = json.loads(capsys.readouterr().out)
        assert printed["config"]["background"] == "#1E1E1E"

    def test_print_unknown_example(self, monkeypatch, capsys):
        assert self._run(monkeypatch, "print", "pie_chart") == 1

    def test_show_without_browser(self, monkeypatch, capsys, tmp_path):
        out_dir = tmp_path / "cli"
        assert self._run(monkeypatch, "show", "choropleth", "--no-browser", "--output-dir", str(out_dir)) == 0
        path = Path(capsys.readouterr().out.strip())
        assert path.parent == out_dir
        assert path.exists()

    def test_no_command(self, monkeypatch, capsys):
        assert self._run(monkeypatch) == 1
