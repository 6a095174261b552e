"""
Tests that the package only imports libraries it declares.
"""

import ast
import re
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
PACKAGE_DIR = ROOT / "src" / "worktree_skill"

# Import name -> distribution name, where they differ
DISTRIBUTION_NAMES = {"yaml": "pyyaml"}


def declared_dependencies() -> set[str]:
    text = (ROOT / "pyproject.toml").read_text(encoding="utf-8")
    block = re.search(r"^dependencies = \[(.*?)^\]", text, re.MULTILINE | re.DOTALL)
    assert block is not None
    names = re.findall(r'"([A-Za-z0-9_.-]+)', block.group(1))
    return {name.lower().replace("_", "-") for name in names}


def imported_top_level_names(path: Path) -> set[str]:
    tree = ast.parse(path.read_text(encoding="utf-8"))
    names = set()
    for node in ast.walk(tree):
        if isinstance(node, ast.Import):
            names.update(alias.name.split(".")[0] for alias in node.names)
        elif isinstance(node, ast.ImportFrom) and node.level == 0 and node.module:
            names.add(node.module.split(".")[0])
    return names


class TestDeclaredDependencies:
    """Tests for pyproject.toml dependencies."""

    def test_third_party_imports_are_declared(self):
        """Test every third-party import maps to a declared dependency."""
        declared = declared_dependencies()
        missing = {}
        for path in PACKAGE_DIR.rglob("*.py"):
            for name in imported_top_level_names(path):
                if name in sys.stdlib_module_names or name == "worktree_skill":
                    continue
                distribution = DISTRIBUTION_NAMES.get(name, name).lower()
                if distribution not in declared:
                    missing.setdefault(name, []).append(str(path.relative_to(ROOT)))
        assert missing == {}

    def test_cli_does_not_need_click(self):
        """Test the CLI module relies on typer alone for its command class."""
        names = imported_top_level_names(PACKAGE_DIR / "cli" / "app.py")
        assert "click" not in names
        assert "typer" in names
