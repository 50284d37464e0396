"""Crash-on-failure behaviour observed from a child process."""

import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).parent.parent


def _run(code, *args):
    return subprocess.run(
        [sys.executable, "-c", code, *args],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        timeout=60
    )


def test_read_missing_path_terminates_child(tmp_path):
    missing = str(tmp_path / "does-not-exist.txt")
    result = _run(
        "import sys\n"
        "from fileutils import read_file_or_die\n"
        "read_file_or_die(sys.argv[1])\n"
        "print('unreachable')\n",
        missing
    )
    assert result.returncode != 0
    assert missing in result.stderr
    assert "unreachable" not in result.stdout


def test_find_missing_directory_terminates_child(tmp_path):
    missing = str(tmp_path / "gone")
    result = _run(
        "import sys\n"
        "from fileutils import find_files\n"
        "find_files(sys.argv[1])\n",
        missing
    )
    assert result.returncode == 1
    assert missing in result.stderr


def test_write_into_missing_directory_terminates_child(tmp_path):
    target = str(tmp_path / "missing" / "out.txt")
    result = _run(
        "import sys\n"
        "from fileutils import write_string_to_file_or_die\n"
        "write_string_to_file_or_die(b'data', sys.argv[1])\n",
        target
    )
    assert result.returncode == 1
    assert target in result.stderr


def test_read_failure_in_worker_thread_terminates_child(tmp_path):
    missing = str(tmp_path / "missing")
    result = _run(
        "import sys, threading\n"
        "from fileutils import read_file_or_die\n"
        "t = threading.Thread(target=read_file_or_die, args=(sys.argv[1],))\n"
        "t.start()\n"
        "t.join()\n"
        "print('still running')\n",
        missing
    )
    assert result.returncode == 1
    assert missing in result.stderr
    assert "still running" not in result.stdout


def test_find_failure_in_worker_thread_flushes_json_log(tmp_path):
    missing = str(tmp_path / "gone")
    log_dir = tmp_path / "logs"
    result = _run(
        "import sys, threading\n"
        "from fileutils import find_files\n"
        "from fileutils.utils import setup_logging\n"
        "setup_logging(log_dir=sys.argv[2], console=False)\n"
        "t = threading.Thread(target=find_files, args=(sys.argv[1],))\n"
        "t.start()\n"
        "t.join()\n"
        "print('still running')\n",
        missing,
        str(log_dir)
    )
    assert result.returncode == 1
    assert "still running" not in result.stdout
    logged = "".join(p.read_text() for p in log_dir.glob("fileutils_*.jsonl"))
    assert '"event": "fatal"' in logged
    assert "gone" in logged
