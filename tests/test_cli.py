"""Tests for the command-line entry point."""

from py_mosaic.cli import build_parser, main

SMALL_RUN = [
    "--size", "10",
    "--samples", "6",
    "--seeds", "4",
    "--circle-frac", "0.5",
    "--timeout", "25",
    "--seed", "3",
]


class TestCli:
    """Test argument handling and output files."""

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.size > 0
        assert args.gif in (True, False)

    def test_writes_png(self, tmp_path, capsys):
        assert main(SMALL_RUN + ["--output-dir", str(tmp_path)]) == 0
        assert (tmp_path / "10-6-4-0.5-25-3.png").exists()
        assert "10-6-4-0.5-25-3.png" in capsys.readouterr().out

    def test_writes_gif(self, tmp_path):
        assert main(SMALL_RUN + ["--output-dir", str(tmp_path), "--gif"]) == 0
        assert (tmp_path / "10-6-4-0.5-25-3.gif").exists()

    def test_creates_output_dir(self, tmp_path):
        output_dir = tmp_path / "nested" / "out"
        assert main(SMALL_RUN + ["--output-dir", str(output_dir)]) == 0
        assert (output_dir / "10-6-4-0.5-25-3.png").exists()

    def test_invalid_parameters(self, tmp_path):
        assert main(["--size", "0", "--output-dir", str(tmp_path)]) == 2

    def test_unwritable_output(self, tmp_path):
        """Test that output failures are reported with a nonzero status."""
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        assert main(SMALL_RUN + ["--output-dir", str(blocker)]) == 1
