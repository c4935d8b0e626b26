"""Resolve a mascot source to its text."""

from __future__ import annotations

import logging
from importlib.resources import files

from papjesz.constants.mascots import DATA_PACKAGE, MASCOT_PRESET_FILES
from papjesz.exceptions import MascotLoadError
from papjesz.types import MascotFile, MascotSource

logger = logging.getLogger(__name__)


def load_mascot(source: MascotSource) -> str:
    """Return the mascot text for a preset name or a :class:`MascotFile`."""
    if isinstance(source, MascotFile):
        try:
            text = source.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise MascotLoadError(f"Cannot read mascot file {source.path}: {exc.strerror or exc}") from exc
        except UnicodeDecodeError as exc:
            raise MascotLoadError(f"Mascot file {source.path} is not valid UTF-8: {exc}") from exc
        logger.debug("Loaded mascot from %s", source.path)
        return text

    resource = MASCOT_PRESET_FILES.get(source)
    if resource is None:
        raise MascotLoadError(f"Unknown mascot preset: {source!r}")
    logger.debug("Loaded bundled mascot preset %s", source)
    return files(DATA_PACKAGE).joinpath(resource).read_text(encoding="utf-8")
