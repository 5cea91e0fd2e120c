import subprocess
import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.mark.parametrize(
    "statement",
    [
        "import keysmith.generators",
        "from keysmith.generators import generate, build_charset, validate_length",
        "import keysmith.generators.password",
        "import keysmith.generators.length",
        "import keysmith.analyzers",
        "from keysmith.analyzers.strength import analyze",
        "import keysmith.core",
        "from keysmith.core.engine import KeysmithEngine",
        "import keysmith.cli",
    ],
)
def test_module_imports_in_fresh_interpreter(statement):
    completed = subprocess.run(
        [sys.executable, "-c", statement],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
    )
    assert completed.returncode == 0, completed.stderr
