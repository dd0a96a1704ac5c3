"""Load build handles exported by the host as JSON documents."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from promoterebuild.models.build import Build

logger = logging.getLogger(__name__)


class BuildLoadError(ValueError):
    """Raised when a build export cannot be read or does not validate."""


def parse_build(text: str, *, source: str = "<string>") -> Build:
    """Validate a JSON build export."""
    try:
        return Build.model_validate_json(text)
    except ValidationError as exc:
        raise BuildLoadError(
            f"{source}: invalid build export ({exc.error_count()} errors)\n{exc}"
        ) from exc


def load_build(path: Path) -> Build:
    """Read and validate the build export at *path*."""
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise BuildLoadError(f"Build export not found: {path}") from None
    except OSError as exc:
        raise BuildLoadError(f"Cannot read build export {path}: {exc}") from exc

    build = parse_build(text, source=str(path))
    logger.debug("Loaded %s from %s", build.full_display_name, path)
    return build
