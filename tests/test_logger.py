from pathlib import Path

from renderconv.output.logger import SimpleLogger


def test_levels_route_to_streams(capsys):
    logger = SimpleLogger()
    logger.info("scanning output")
    logger.error("convert failed")

    captured = capsys.readouterr()
    assert "[INFO] scanning output" in captured.out
    assert "[ERROR] convert failed" in captured.err
    assert "convert failed" not in captured.out


def test_log_file_gets_banner_and_lines(tmp_path: Path):
    log_file = tmp_path / "nested" / "run.log"
    logger = SimpleLogger(log_file)
    logger.info("first")
    logger.warning("second")

    content = log_file.read_text()
    assert "Session started:" in content
    assert "[INFO] first" in content
    assert "[WARNING] second" in content


def test_long_paths_stay_on_one_line(capsys):
    long_path = "/".join(["deeply"] * 40) + "/a.ppm"
    SimpleLogger().info(long_path)
    assert len(capsys.readouterr().out.strip().splitlines()) == 1


def test_section_writes_title_and_banner(tmp_path: Path, capsys):
    log_file = tmp_path / "run.log"
    logger = SimpleLogger(log_file)
    logger.section("Converting clock frames")

    out = capsys.readouterr().out
    lines = out.strip().splitlines()
    assert len(lines) == 2
    assert lines[1].endswith("Converting clock frames")
    assert "[INFO]" not in out

    tail = log_file.read_text().splitlines()[-3:]
    assert tail[0] == "=" * 60
    assert tail[1].endswith("Converting clock frames")
    assert tail[2] == "=" * 60


def test_success_goes_to_stdout(capsys):
    SimpleLogger().success("wrote clock.gif")
    assert "[SUCCESS] wrote clock.gif" in capsys.readouterr().out
