"""
tests/test_imports.py
The data pipeline must import without pulling in the UI runtime, so it can be
reused from scripts and other hosts.
"""

import os
import subprocess
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]

PIPELINE_MODULES = [
    "fireforce.config",
    "fireforce.data.errors",
    "fireforce.data.schema",
    "fireforce.data.loader",
    "fireforce.data.filters",
    "fireforce.data.stats",
    "fireforce.data.state",
    "fireforce.utils.formatting",
]


def test_pipeline_does_not_import_streamlit():
    code = "import sys\n" + "".join(f"import {name}\n" for name in PIPELINE_MODULES)
    code += "print('streamlit' in sys.modules)"
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(REPO_ROOT), env.get("PYTHONPATH")]))
    result = subprocess.run(
        [sys.executable, "-c", code],
        cwd=REPO_ROOT,
        env=env,
        capture_output=True,
        text=True,
        check=True,
    )
    assert result.stdout.strip() == "False"
