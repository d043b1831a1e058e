"""
Utility script to generate and write the OpenAPI schema for the Task API.

This script builds the application and serializes its OpenAPI schema to
interfaces/openapi.json (or a path given on the command line) so that API
clients and documentation tools can consume a stable schema without running
the server.

Usage:
    python -m task_api.generate_openapi [OUTPUT_PATH]
"""
from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from .main import create_app, openapi_tags
from .settings import Settings

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = Path("interfaces") / "openapi.json"


def _ensure_tags(schema: Dict[str, Any]) -> None:
    """
    Ensure the OpenAPI schema contains the tag metadata declared by the app.
    Existing tag definitions are left untouched.
    """
    existing_tags: List[Dict[str, Any]] = schema.get("tags", []) or []
    existing_names = {t.get("name") for t in existing_tags if isinstance(t, dict)}
    for tag in openapi_tags:
        if tag.get("name") not in existing_names:
            existing_tags.append(tag)
    if existing_tags:
        schema["tags"] = existing_tags


# PUBLIC_INTERFACE
def generate_openapi(out_path: Optional[Union[str, Path]] = None) -> Path:
    """Generate the OpenAPI schema file and return the written file path."""
    # Default settings keep the schema independent of the caller's environment.
    schema = create_app(Settings()).openapi()
    _ensure_tags(schema)

    path = Path(out_path) if out_path is not None else DEFAULT_OUTPUT
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    logger.info("Wrote OpenAPI schema to %s", path)
    return path


def main() -> None:
    out = generate_openapi(sys.argv[1] if len(sys.argv) > 1 else None)
    print(f"Wrote OpenAPI schema to: {out}")


if __name__ == "__main__":
    main()
