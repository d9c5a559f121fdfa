#!/usr/bin/env python
import os
import subprocess
import sys
from pathlib import Path


BASE_DIR = Path(__file__).resolve().parent


def run(command: list[str]) -> None:
    subprocess.check_call(command, cwd=BASE_DIR)


def main() -> None:
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "sprintcoach.settings")
    run([sys.executable, "manage.py", "check"])
    run([sys.executable, "manage.py", "runserver", os.getenv("BIND_ADDRESS", "0.0.0.0:8000")])


if __name__ == "__main__":
    main()
