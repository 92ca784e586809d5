"""User-configurable settings and how they are applied to the window."""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING

from chessrules.ui.styles.theme import THEMES, BoardTheme

if TYPE_CHECKING:
    from chessrules.ui.main_window import MainWindow

_LOGGER = logging.getLogger(__name__)

ENV_PREFIX = "CHESSRULES_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


@dataclass
class AppSettings:
    """All user-configurable settings."""

    # Board
    board_theme: str = "Classic"
    show_coordinates: bool = True
    show_reachable: bool = True
    flipped: bool = False

    # Match
    setup: str = "standard"

    # Diagnostics
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> AppSettings:
        """Defaults overridden by ``CHESSRULES_<FIELD>`` variables.

        Values that cannot be converted are ignored with a warning.
        """
        env = os.environ if environ is None else environ
        settings = cls()
        for f in fields(cls):
            raw = env.get(ENV_PREFIX + f.name.upper())
            if raw is None:
                continue
            default = getattr(settings, f.name)
            if isinstance(default, bool):
                value = raw.strip().lower()
                if value in _TRUE:
                    setattr(settings, f.name, True)
                elif value in _FALSE:
                    setattr(settings, f.name, False)
                else:
                    _LOGGER.warning("Ignoring %s%s=%r", ENV_PREFIX, f.name.upper(), raw)
            else:
                setattr(settings, f.name, raw.strip())
        return settings

    @property
    def theme(self) -> BoardTheme:
        return THEMES.get(self.board_theme, BoardTheme.default())


def apply_settings(host: MainWindow) -> None:
    s = host.settings
    scene = host.board_view.board_scene

    scene.set_theme(s.theme)
    scene.set_show_coordinates(s.show_coordinates)
    scene.set_show_reachable(s.show_reachable)
    if scene.is_flipped() != s.flipped:
        scene.set_flipped(s.flipped)
    host.refresh()
