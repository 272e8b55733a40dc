"""
Integration tests for the mdpress command-line interface.

Commands run through Click's CliRunner with the Chromium engine replaced
by FakeEngine, so the whole pipeline except the browser is exercised.
"""
import pytest
from click.testing import CliRunner

from mdpress.pipeline.cli import cli
from mdpress.pipeline.watch import WatchNotification


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def engine(mocker, fake_engine):
    """Every PdfRenderer built by the CLI prints through the fake engine."""
    mocker.patch("mdpress.builders.pdfbuilder.ChromiumEngine", return_value=fake_engine)
    return fake_engine


@pytest.fixture
def invoke(runner, tmp_path):
    """Invoke the CLI with logs written under tmp_path."""
    def _invoke(*args):
        return runner.invoke(cli, ["--log-dir", str(tmp_path / "logs"), *args])
    return _invoke


class TestHelp:
    """Tests for command discovery."""

    def test_group_help(self, runner):
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for command in ("convert", "batch", "watch"):
            assert command in result.output

    @pytest.mark.parametrize("command", ["convert", "batch", "watch"])
    def test_style_options_everywhere(self, runner, command):
        """Every command accepts the presentation options."""
        result = runner.invoke(cli, [command, "--help"])
        assert result.exit_code == 0
        for option in ("--template", "--css", "--theme", "--timeout"):
            assert option in result.output

    def test_help_lists_bundled_assets(self, runner):
        """Template and theme help name the built-in and bundled choices."""
        result = runner.invoke(cli, ["convert", "--help"])
        output = " ".join(result.output.split())
        assert "Template to use (default, technical)" in output
        assert "Theme to use (light, dark)" in output


class TestConvertCommand:
    """Tests for `mdpress convert`."""

    def test_converts_next_to_input(self, invoke, engine, simple_doc, tmp_path):
        result = invoke("convert", str(simple_doc))

        assert result.exit_code == 0, result.output
        assert "Successfully converted" in result.output
        assert (tmp_path / "simple.pdf").read_bytes() == engine.pdf
        assert (tmp_path / "logs" / "operations").is_dir()

    def test_explicit_output_and_theme(self, invoke, engine, simple_doc, tmp_path):
        output = tmp_path / "out" / "report.pdf"
        result = invoke("convert", str(simple_doc), "-o", str(output), "--theme", "dark")

        assert result.exit_code == 0, result.output
        assert output.exists()
        # Bundled dark theme palette
        assert "#1e1f22" in engine.seen_html[0]

    def test_technical_template(self, invoke, engine, simple_doc):
        result = invoke("convert", str(simple_doc), "--template", "technical")
        assert result.exit_code == 0, result.output
        assert "doc-header" in engine.seen_html[0]

    def test_timeout_passed_to_engine(self, invoke, engine, simple_doc):
        result = invoke("convert", str(simple_doc), "--timeout", "7")
        assert result.exit_code == 0, result.output
        assert engine.seen_timeouts == [7.0]

    def test_missing_input_rejected(self, invoke, engine, tmp_path):
        result = invoke("convert", str(tmp_path / "missing.md"))
        assert result.exit_code == 2
        assert engine.seen_html == []

    def test_render_failure_exit_code(self, invoke, mocker, engine_factory, simple_doc, tmp_path):
        failing = engine_factory(error=RuntimeError("Browser closed unexpectedly"))
        mocker.patch("mdpress.builders.pdfbuilder.ChromiumEngine", return_value=failing)

        result = invoke("convert", str(simple_doc))

        assert result.exit_code == 1
        assert "Browser closed unexpectedly" in result.output
        assert not (tmp_path / "simple.pdf").exists()

    def test_missing_css_exit_code(self, invoke, engine, simple_doc, tmp_path):
        doc = simple_doc.parent / "css.md"
        doc.write_text("---\ncss: /nonexistent/brand.css\n---\nText\n", encoding="utf-8")

        result = invoke("convert", str(doc))
        assert result.exit_code == 1
        assert "brand.css" in result.output


class TestBatchCommand:
    """Tests for `mdpress batch`."""

    def test_converts_matches(self, invoke, engine, write_markdown, tmp_path):
        for name in ("a.md", "b.md", "notes.txt"):
            write_markdown(f"docs/{name}", "# Doc\n")
        out = tmp_path / "pdf"

        result = invoke("batch", str(tmp_path / "docs" / "*"), "--output-dir", str(out))

        assert result.exit_code == 0, result.output
        assert "Completed: 2/2 files converted successfully" in result.output
        assert sorted(p.name for p in out.iterdir()) == ["a.pdf", "b.pdf"]

    def test_recursive_pattern(self, invoke, engine, write_markdown, tmp_path):
        write_markdown("tree/top.md", "# Top\n")
        write_markdown("tree/sub/deep.md", "# Deep\n")

        result = invoke("batch", str(tmp_path / "tree" / "**" / "*.md"))

        assert result.exit_code == 0, result.output
        assert (tmp_path / "tree" / "top.pdf").exists()
        assert (tmp_path / "tree" / "sub" / "deep.pdf").exists()

    def test_failure_reported_batch_continues(self, invoke, engine, write_markdown, tmp_path):
        write_markdown("mix/good.md", "# Good\n")
        write_markdown("mix/bad.md", "---\ntitle: [broken\n---\n")

        result = invoke("batch", str(tmp_path / "mix" / "*.md"))

        assert result.exit_code == 0, result.output
        assert "Completed: 1/2 files converted successfully" in result.output
        assert "✗" in result.output
        assert (tmp_path / "mix" / "good.pdf").exists()

    def test_no_matches(self, invoke, engine, tmp_path):
        result = invoke("batch", str(tmp_path / "*.md"))
        assert result.exit_code == 1
        assert "No Markdown files match pattern" in result.output


class TestWatchCommand:
    """Tests for `mdpress watch`."""

    def test_converts_notified_change(self, invoke, engine, mocker, simple_doc, tmp_path):
        def fake_watch(directory, debouncer):
            return debouncer.run([
                WatchNotification.change(simple_doc),
                WatchNotification.change(simple_doc),
            ])

        mocker.patch("mdpress.pipeline.cli.monitor.watch_directory", side_effect=fake_watch)
        out = tmp_path / "pdf"

        result = invoke("watch", str(tmp_path), "--output-dir", str(out), "--theme", "dark")

        assert result.exit_code == 0, result.output
        assert "Watch ended: 1 conversions" in result.output
        assert (out / "simple.pdf").read_bytes() == engine.pdf

    def test_interrupt_stops_cleanly(self, invoke, engine, mocker, tmp_path):
        mocker.patch(
            "mdpress.pipeline.cli.monitor.watch_directory", side_effect=KeyboardInterrupt
        )

        result = invoke("watch", str(tmp_path))

        assert result.exit_code == 0, result.output
        assert "Stopped watching (0 conversions)" in result.output

    def test_file_argument_rejected(self, invoke, simple_doc):
        result = invoke("watch", str(simple_doc))
        assert result.exit_code == 2
