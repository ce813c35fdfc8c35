"""Page-side state for the enhancement script.

Each widget owns its state explicitly; nothing here is a module global.
The form controller is the only piece that talks to the validation engine.
"""

from formcheck.ui.counter import Counter, Tone
from formcheck.ui.disclosure import Accordion, TabGroup
from formcheck.ui.feedback import FieldFeedback, FieldStatus, present
from formcheck.ui.form import FormController, SubmitView
from formcheck.ui.theme import Theme, ThemeState, ThemeStore

__all__ = [
    "Accordion",
    "Counter",
    "FieldFeedback",
    "FieldStatus",
    "FormController",
    "SubmitView",
    "TabGroup",
    "Theme",
    "ThemeState",
    "ThemeStore",
    "Tone",
    "present",
]
