"""Template lookup.

Lookup order for the source template copied into new projects:
1) `AOC_TEMPLATE_PATH` / `template_path` setting
2) `lib.rs` next to the scaffolder
3) the template bundled with the package
"""

from __future__ import annotations

from pathlib import Path

from core.config import AppSettings

TEMPLATE_NAME = "lib.rs"


def bundled_template_path() -> Path:
    # core/resources_loader.py -> core/templates/lib.rs
    return Path(__file__).resolve().parent / "templates" / TEMPLATE_NAME


def resolve_template_path(tool_dir: Path, settings: AppSettings | None = None) -> Path:
    settings = settings or AppSettings()
    if settings.template_path is not None:
        return settings.template_path

    local = tool_dir / TEMPLATE_NAME
    if local.is_file():
        return local
    return bundled_template_path()
