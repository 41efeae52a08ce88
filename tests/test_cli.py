from typer.testing import CliRunner

from range_demo.cli import app

runner = CliRunner()


def test_list_shows_every_demo():
    result = runner.invoke(app, ["list"])
    assert result.exit_code == 0
    for slug in ("basics", "matrix", "product", "stream", "tensor"):
        assert f"- {slug}:" in result.output


def test_run_basics():
    result = runner.invoke(app, ["run", "basics"])
    assert result.exit_code == 0
    assert "------------- Initial examples -------------" in result.output
    assert "[3,4,5]" in result.output
    assert "[1,2]\n[3,4]\n[5]" in result.output
    assert "29.5" in result.output
    assert "[[0,1],[2,3],[4]]" in result.output


def test_run_matrix_and_product():
    result = runner.invoke(app, ["run", "matrix"])
    assert result.exit_code == 0
    assert "[55,130]" in result.output
    assert "[1,3,5]\n[2,4,6]" in result.output

    result = runner.invoke(app, ["run", "product"])
    assert result.exit_code == 0
    assert "[22,28]\n[49,64]" in result.output


def test_run_stream_reads_until_bad_token():
    result = runner.invoke(app, ["run", "stream"], input="1 2 3 x 9\n4 5 q\n6\n")
    assert result.exit_code == 0
    assert "stream length:3" in result.output
    assert "In loop:4\nIn loop:5\n" in result.output
    assert "In loop:6" not in result.output
    assert "In loop:9" not in result.output


def test_run_without_slug_runs_everything():
    result = runner.invoke(app, ["run"], input="x\nx\n")
    assert result.exit_code == 0
    assert "Initial examples" in result.output
    assert "And its 'transpose'" in result.output


def test_unknown_demo():
    result = runner.invoke(app, ["run", "nope"])
    assert result.exit_code == 1
    assert "Unknown demo 'nope'" in result.output


def test_transpose4d_command():
    result = runner.invoke(app, ["transpose4d", "-b", "2", "-h", "1", "-w", "1", "-d", "2"])
    assert result.exit_code == 0
    assert "A batch of 2 images of 1x1 pixels with 2 channels." in result.output
    assert "[[0  ,2  ]]" in result.output
    assert "[[1  ,3  ]]" in result.output


def test_transpose4d_color_option():
    result = runner.invoke(app, ["transpose4d", "-b", "1", "-h", "1", "-w", "1", "-d", "3", "--color"], color=True)
    assert result.exit_code == 0
    assert "\033[1;34m2\033[0m" in result.output


def test_check_against_dense():
    result = runner.invoke(app, ["check", "-b", "2", "-h", "2", "-w", "3", "-d", "2"])
    assert result.exit_code == 0
    assert "24 elements match" in result.output


def test_shape_from_environment():
    result = runner.invoke(app, ["check"], env={"RANGE_DEMO_BATCH": "3", "RANGE_DEMO_DEPTH": "1"})
    assert result.exit_code == 0
    assert "(3, 4, 5, 1)" in result.output


def test_invalid_environment_exits():
    result = runner.invoke(app, ["list"], env={"RANGE_DEMO_BATCH": "zero"})
    assert result.exit_code == 1
    assert "Invalid configuration" in result.output


def test_verbose_logs_to_file(tmp_path):
    log_file = tmp_path / "logs" / "demo.log"
    result = runner.invoke(app, ["--verbose", "--log-file", str(log_file), "run", "product"])
    assert result.exit_code == 0
    text = log_file.read_text(encoding="utf-8")
    assert "running demo product" in text
    assert "[lazy_transpose." in text


def test_run_color_option_reaches_tensor_demo():
    result = runner.invoke(app, ["run", "tensor", "--color"], color=True)
    assert result.exit_code == 0
    assert "\033[1;34m2\033[0m" in result.output

    result = runner.invoke(app, ["run", "tensor", "--no-color"], color=True)
    assert result.exit_code == 0
    assert "\033[1;" not in result.output
