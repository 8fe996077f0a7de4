from types import SimpleNamespace
from core.mangler import MangleConfig
from utils.reporter import Reporter, display_summary


def summary(written=5):
    return {
        "input_file": "words.txt", "output_file": "out.txt",
        "transformations": ["double", "reverse"], "lines": 2, "generated": 6,
        "duplicates": 1, "written": written, "elapsed_time": 0.25,
    }


def test_display_summary_console(capsys):
    display_summary(summary())
    out = capsys.readouterr().out
    assert "Variants written:        5" in out
    assert "double, reverse" in out
    assert "saved to 'out.txt'" in out


def test_display_summary_nothing_written(capsys):
    display_summary(summary(written=0))
    assert "Nothing written" in capsys.readouterr().out


def test_display_summary_appends_log(tmp_path):
    log_dir = tmp_path / "logs"
    display_summary(summary(), log_dir)
    display_summary(summary(), log_dir)
    [log_file] = list(log_dir.iterdir())
    assert log_file.name.startswith("mangle_log_")
    assert log_file.read_text().count("Run completed") == 2


def test_reporter_banner():
    mangler = SimpleNamespace(
        input_file="words.txt", output_file="out.txt", encoding="utf-8",
        truncate=True, config=MangleConfig(upper=True), log_dir=None,
    )
    banner = str(Reporter(mangler))
    assert "Wordlist: words.txt" in banner
    assert "Transformations: upper" in banner
