"""Runtime configuration for formcheck."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from formcheck.metadata.loader import BUILTIN_FORMS_PATH, FormDefinition, FormLoader


@dataclass
class FormcheckConfig:
    """Where forms and page state live, and how chatty logging is."""

    forms_path: Path | None = None
    default_form: str = "registration"
    state_path: Path = Path(".formcheck") / "state.yaml"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> FormcheckConfig:
        """Create config from environment variables.

        FORMCHECK_FORMS_PATH: directory of extra form definitions; these
            take precedence over the built-in forms with the same name
        FORMCHECK_DEFAULT_FORM: form used when none is named (default: registration)
        FORMCHECK_STATE_PATH: file holding persisted page state (theme)
        FORMCHECK_LOG_LEVEL: logging level name (default: WARNING)
        """
        forms_path = os.environ.get("FORMCHECK_FORMS_PATH")
        state_path = os.environ.get("FORMCHECK_STATE_PATH")
        return cls(
            forms_path=Path(forms_path) if forms_path else None,
            default_form=os.environ.get("FORMCHECK_DEFAULT_FORM", "registration"),
            state_path=Path(state_path) if state_path else Path(".formcheck") / "state.yaml",
            log_level=os.environ.get("FORMCHECK_LOG_LEVEL", "WARNING").upper(),
        )

    def configure_logging(self) -> None:
        level = logging.getLevelName(self.log_level)
        if not isinstance(level, int):
            level = logging.WARNING
        logging.basicConfig(
            level=level,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    def load_forms(self) -> dict[str, FormDefinition]:
        """Load built-in forms, then the configured forms directory on top."""
        builtin = FormLoader(BUILTIN_FORMS_PATH)
        builtin.load_all()
        forms = dict(builtin.forms)

        if self.forms_path is not None:
            custom = FormLoader(self.forms_path)
            custom.load_all()
            forms.update(custom.forms)

        return forms
