"""
Tests for the command-line interface.
"""

import json
from pathlib import Path

import pytest
from pypdf import PdfReader

from bookify import __version__
from pdf_bookify import build_parser, main


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path, monkeypatch):
    """Keep a bookify.json in the real working directory out of the tests."""
    monkeypatch.chdir(tmp_path)


class TestParser:
    def test_pages_flag_without_value(self):
        """Test that a bare --pages falls back to the legacy 16-page target."""
        args = build_parser().parse_args(['booklet', 'in.pdf', '--pages'])
        assert args.pages == 16

    def test_output_and_temp_are_exclusive(self):
        with pytest.raises(SystemExit) as exc:
            build_parser().parse_args(['booklet', 'in.pdf', '-o', 'x.pdf', '--temp'])
        assert exc.value.code == 2

    def test_bad_choice(self):
        with pytest.raises(SystemExit) as exc:
            main(['double-sided', 'in.pdf', '--flip-type', 'xx'])
        assert exc.value.code == 2

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(['--version'])

        assert exc.value.code == 0
        assert capsys.readouterr().out.strip() == f"pdf-bookify {__version__}"


class TestMain:
    """Tests for main."""

    def test_booklet(self, sample_pdf, tmp_path, capsys):
        output = tmp_path / "booklet.pdf"

        code = main(['booklet', str(sample_pdf(8)), '--layout', 'two-up', '-o', str(output)])

        assert code == 0
        assert f"Created: {output}" in capsys.readouterr().out
        assert len(PdfReader(str(output)).pages) == 4

    def test_booklet_legacy_target(self, sample_pdf, tmp_path):
        output = tmp_path / "booklet.pdf"

        main(['booklet', str(sample_pdf(5)), '--layout', 'two-up', '--pages', '-o', str(output)])

        assert len(PdfReader(str(output)).pages) == 8

    def test_double_sided(self, sample_pdf, tmp_path, capsys):
        output = tmp_path / "even.pdf"

        code = main(['double-sided', str(sample_pdf(6)), '--odd-even', 'even',
                     '--flip-type', 'nr', '-o', str(output)])

        assert code == 0
        assert len(PdfReader(str(output)).pages) == 3

    def test_missing_input(self, tmp_path, capsys):
        code = main(['booklet', str(tmp_path / "missing.pdf")])

        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_config_defaults(self, sample_pdf, tmp_path):
        """Test that --config supplies defaults the flags do not override."""
        config_path = tmp_path / "bookify.json"
        config_path.write_text(json.dumps({'layout': 'two-up'}))
        output = tmp_path / "booklet.pdf"

        main(['--config', str(config_path), 'booklet', str(sample_pdf(8)), '-o', str(output)])

        assert float(PdfReader(str(output)).pages[0].mediabox.width) == 840

    def test_flag_overrides_config(self, sample_pdf, tmp_path):
        config_path = tmp_path / "bookify.json"
        config_path.write_text(json.dumps({'layout': 'two-up'}))
        output = tmp_path / "booklet.pdf"

        main(['--config', str(config_path), 'booklet', str(sample_pdf(8)),
              '--layout', 'four-up', '-o', str(output)])

        assert len(PdfReader(str(output)).pages) == 2

    @pytest.mark.parametrize("command", ['booklet', 'double-sided'])
    def test_dangling_reference(self, command, dangling_resources_pdf, tmp_path, capsys):
        """Test that a PDF broken below the page tree fails cleanly."""
        output = tmp_path / "out.pdf"

        code = main([command, str(dangling_resources_pdf), '-o', str(output)])

        assert code == 1
        assert "Error:" in capsys.readouterr().err
        assert not output.exists()

    def test_defaults_file_in_working_directory(self, sample_pdf, tmp_path):
        """Test that ./bookify.json is picked up without --config."""
        (tmp_path / "bookify.json").write_text(json.dumps({'layout': 'two-up'}))
        output = tmp_path / "booklet.pdf"

        main(['booklet', str(sample_pdf(8)), '-o', str(output)])

        assert len(PdfReader(str(output)).pages) == 4


class TestConfigCommand:
    """Tests for the config subcommand."""

    def test_save_then_use(self, sample_pdf, tmp_path, capsys):
        """Test that saved defaults drive a later run."""
        config_path = tmp_path / "settings" / "bookify.json"

        code = main(['--config', str(config_path), 'config', 'save',
                     '--layout', 'two-up', '--flip-type', 'nn'])

        assert code == 0
        assert f"Saved: {config_path}" in capsys.readouterr().out
        data = json.loads(config_path.read_text())
        assert data['layout'] == 'two-up'
        assert data['flip_type'] == 'nn'
        assert data['odd_even'] == 'odd'

        output = tmp_path / "booklet.pdf"
        main(['--config', str(config_path), 'booklet', str(sample_pdf(8)), '-o', str(output)])
        assert len(PdfReader(str(output)).pages) == 4

    def test_save_keeps_earlier_values(self, tmp_path):
        """Test that saving one option leaves previously saved ones alone."""
        config_path = tmp_path / "bookify.json"

        main(['--config', str(config_path), 'config', 'save', '--layout', 'two-up'])
        main(['--config', str(config_path), 'config', 'save', '--odd-even', 'even'])

        data = json.loads(config_path.read_text())
        assert data['layout'] == 'two-up'
        assert data['odd_even'] == 'even'

    def test_save_failure(self, tmp_path, capsys):
        blocker = tmp_path / "file.txt"
        blocker.write_text("not a directory")

        code = main(['--config', str(blocker / "bookify.json"), 'config', 'save'])

        assert code == 1
        assert "Error:" in capsys.readouterr().err

    def test_path(self, tmp_path, capsys):
        """Test that the default location is the working directory."""
        code = main(['config', 'path'])

        assert code == 0
        printed = Path(capsys.readouterr().out.strip())
        assert printed.resolve() == (tmp_path / "bookify.json").resolve()

    def test_reset(self, tmp_path, capsys):
        config_path = tmp_path / "bookify.json"
        main(['config', 'save', '--layout', 'two-up'])
        assert config_path.exists()
        capsys.readouterr()

        assert main(['config', 'reset']) == 0
        assert not config_path.exists()
        assert "Removed:" in capsys.readouterr().out

        assert main(['config', 'reset']) == 0
        assert "No saved defaults" in capsys.readouterr().out

    def test_action_required(self):
        with pytest.raises(SystemExit) as exc:
            main(['config'])
        assert exc.value.code == 2
