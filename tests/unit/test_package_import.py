"""Tests that using the package as a library leaves host logging alone."""

import subprocess
import sys
import textwrap


def _run(script, cwd):
    return subprocess.run(
        [sys.executable, "-c", textwrap.dedent(script)],
        cwd=cwd,
        capture_output=True,
        text=True,
        check=False,
    )


class TestImportSideEffects:
    """Test importing and calling the library configures nothing."""

    def test_host_logging_survives_import(self, tmp_path):
        """Test the host's root handler and level are kept after import."""
        result = _run(
            """
            import logging

            handler = logging.StreamHandler()
            logging.basicConfig(level=logging.DEBUG, handlers=[handler])

            import tanakhrange

            root = logging.getLogger()
            print(handler in root.handlers, logging.getLevelName(root.level))
            """,
            tmp_path,
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "True DEBUG"

    def test_broken_config_file_does_not_break_import(self, tmp_path):
        """Test a malformed config file in the working directory is not read."""
        (tmp_path / "tanakh-range.yaml").write_text(
            "log_level: [oops\n", encoding="utf-8"
        )
        result = _run("import tanakhrange\nprint('ok')\n", tmp_path)
        assert result.returncode == 0, result.stderr
        assert result.stdout.strip() == "ok"

    def test_extraction_is_silent_without_host_logging(self, tmp_path):
        """Test debug events are not printed when the host configured nothing."""
        result = _run(
            """
            from tanakhrange import extract_range, parse_corpus

            corpus = parse_corpus(
                [{"book": "X", "chapters": {"א": {"א": {"text": "verse1"}}}}]
            )
            extract_range(corpus, "X", "א", "א", "א", "א")
            """,
            tmp_path,
        )
        assert result.returncode == 0, result.stderr
        assert result.stdout == ""
        assert result.stderr == ""
