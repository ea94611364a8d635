import io

from sysdemos.shell import EXEC_FAILURE, main, run_command, run_shell


def test_run_command_success_status():
    assert run_command("true") == 0


def test_run_command_failure_status():
    assert run_command("false") == 1


def test_run_command_missing_program(capsys):
    assert run_command("/nonexistent/program") == EXEC_FAILURE
    assert "couldn't exec: /nonexistent/program" in capsys.readouterr().err


def test_run_shell_statuses_and_prompts():
    output = io.StringIO()
    statuses = run_shell(io.StringIO("true\nfalse\n"), output)
    assert statuses == [0, 1]
    assert output.getvalue() == "% % "


def test_run_shell_last_line_without_newline():
    output = io.StringIO()
    assert run_shell(["false\n", "true"], output) == [1, 0]
    assert output.getvalue().count("% ") == 2


def test_run_shell_empty_input_prints_nothing():
    output = io.StringIO()
    assert run_shell(io.StringIO(""), output) == []
    assert output.getvalue() == ""


def test_main_rejects_arguments(capsys):
    assert main(["extra"]) == 2
    assert "usage" in capsys.readouterr().err