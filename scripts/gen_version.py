from pathlib import Path
import tomllib

ROOT = Path(__file__).resolve().parents[1]
PYPROJECT = ROOT / "pyproject.toml"
OUT = ROOT / "src/pydrinth/__version__.py"


def main() -> None:
    data = tomllib.loads(PYPROJECT.read_text())
    project = data["project"]
    version = project["version"]
    author = project["authors"][0]["name"]

    OUT.write_text(
        f'''"""
Auto-generated file. DO NOT EDIT.
"""
__version__ = "{version}"
__author__ = "{author}"
'''
    )

    print(f"Generated {OUT.relative_to(ROOT)} ({version})")


if __name__ == "__main__":
    main()
