""" Invoke tasks. """
import os
import sys
import io
from invoke.tasks import task

if isinstance(sys.stdout, io.TextIOWrapper):
    sys.stdout.reconfigure(encoding='utf-8')


@task
def install(c):
    c.run("pip install -e .[test]")


@task
def serve(c, port=8001):
    c.run(f"uvicorn main:app --reload --host 127.0.0.1 --port {port}")


@task
def schedule(c, batch="data/lab_data.json", out=None, lenient=False):
    """Run the batch scheduler on a lab data file."""
    cmd = f"python run.py {batch}"
    if lenient:
        cmd += " --lenient"
    if out:
        cmd += f" --out {out}"
    c.run(cmd, env={"PYTHONUTF8": "1"})


@task
def test(c):
    c.run("pytest -q")


@task
def clean(c):
    """
    Cross-platform clean task to remove all __pycache__ folders and .pyc files.
    """
    if os.name == 'nt':  # Windows
        c.run("for /R %f in (*.pyc) do del /F /Q \"%f\"", warn=True)
        c.run('for /d /r %d in (__pycache__) do @if exist "%d" rmdir /s /q "%d"', warn=True)
    else:  # Unix/Linux/macOS
        c.run("find . -type f -name '*.pyc' -delete", warn=True)
        c.run("find . -type d -name '__pycache__' -exec rm -r {} +", warn=True)
