"""Rewrite the generated project's package.json."""

import json
from pathlib import Path

from kickstart.errors import MetadataError

PACKAGE_JSON = "package.json"


def render_package_json(project_dir: Path, name: str) -> Path:
    """Set the ``name`` field of ``project_dir/package.json``.

    Every other field and the key order are kept. The file is rewritten
    with 2-space indentation and a trailing newline.

    Returns:
        Path of the rewritten file

    Raises:
        FileNotFoundError: If the project has no package.json
        MetadataError: If package.json is not a JSON object
    """
    path = Path(project_dir) / PACKAGE_JSON
    text = path.read_text(encoding="utf-8")
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise MetadataError(f"Invalid JSON in {path}: {e}") from e
    if not isinstance(data, dict):
        raise MetadataError(f"{path} must contain a JSON object")

    data["name"] = name
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False) + "\n", encoding="utf-8")
    return path
