"""Tests for page-side state: feedback, form controller and widgets."""

import pytest
import yaml

from formcheck.metadata.loader import build_validator, load_builtin_form
from formcheck.ui.counter import Counter, Tone
from formcheck.ui.disclosure import Accordion, TabGroup
from formcheck.ui.feedback import FieldFeedback, FieldStatus, present
from formcheck.ui.form import FormController
from formcheck.ui.theme import Theme, ThemeState, ThemeStore
from formcheck.validation.types import ValidationOutcome


@pytest.fixture
def controller():
    return FormController(build_validator(load_builtin_form("registration")))


def fill_valid(controller: FormController) -> None:
    controller.on_input("fullName", "John Doe")
    controller.on_input("email", "john@example.com")
    controller.on_input("password", "Secret1!")
    controller.on_input("confirmPassword", "Secret1!")


# =============================================================================
# Feedback Presenter
# =============================================================================


class TestPresent:
    def test_valid_outcome(self):
        feedback = present("email", ValidationOutcome.valid())
        assert feedback == FieldFeedback(
            field="email",
            status=FieldStatus.SUCCESS,
            success_visible=True,
        )
        assert not feedback.error_visible

    def test_invalid_outcome(self):
        feedback = present("email", ValidationOutcome.invalid("Please enter a valid email address"))
        assert feedback.status is FieldStatus.ERROR
        assert feedback.error_text == "Please enter a valid email address"
        assert feedback.error_visible
        assert not feedback.success_visible

    def test_element_ids(self):
        feedback = present("email", ValidationOutcome.valid())
        assert feedback.error_element_id == "emailError"
        assert feedback.success_element_id == "emailSuccess"


# =============================================================================
# Form Controller
# =============================================================================


class TestFormController:
    def test_input_evaluates_field(self, controller):
        feedback = controller.on_input("fullName", "J")
        assert feedback.status is FieldStatus.ERROR
        assert controller.values["fullName"] == "J"

        feedback = controller.on_input("fullName", "John Doe")
        assert feedback.status is FieldStatus.SUCCESS
        assert controller.feedback["fullName"] is feedback

    def test_confirmation_uses_current_password(self, controller):
        feedback = controller.on_input("confirmPassword", "Secret1!")
        assert feedback.error_text == "Passwords do not match"

        controller.on_input("password", "Secret1!")
        assert controller.on_input("confirmPassword", "Secret1!").status is FieldStatus.SUCCESS

    def test_empty_confirmation(self, controller):
        controller.on_input("password", "Secret1!")
        assert controller.on_input("confirmPassword", "").error_text == "Please confirm your password"

    def test_blur_skips_empty_fields(self, controller):
        assert controller.on_blur("email") is None
        controller.on_input("email", "")
        before = controller.feedback["email"]
        assert controller.on_blur("email") is before

    def test_blur_revalidates_non_empty(self, controller):
        controller.values["email"] = "nope"
        feedback = controller.on_blur("email")
        assert feedback.status is FieldStatus.ERROR

    def test_submit_rejected_keeps_form(self, controller):
        controller.on_input("fullName", "John Doe")
        view = controller.on_submit()

        assert not view.result.accepted
        assert view.form_visible
        assert not view.success_visible
        assert controller.feedback["email"].error_text == "email is required"
        assert controller.feedback["fullName"].status is FieldStatus.SUCCESS
        assert set(controller.feedback) == set(view.result.outcomes)

    def test_submit_accepted_shows_success(self, controller):
        fill_valid(controller)
        view = controller.on_submit()
        assert view.result.accepted
        assert not view.form_visible
        assert view.success_visible


# =============================================================================
# Theme
# =============================================================================


class TestThemeState:
    def test_default_is_light(self):
        state = ThemeState()
        assert state.theme is Theme.LIGHT
        assert state.body_class is None
        assert state.button_label == "🌙 Dark Mode"

    def test_toggle(self):
        dark = ThemeState().toggle()
        assert dark.theme is Theme.DARK
        assert dark.body_class == "dark-mode"
        assert dark.button_label == "☀️ Light Mode"
        assert dark.toggle() == ThemeState()


class TestThemeStore:
    def test_missing_file_is_light(self, tmp_path):
        assert ThemeStore(tmp_path / "state.yaml").load() == ThemeState()

    def test_save_and_load(self, tmp_path):
        store = ThemeStore(tmp_path / "nested" / "state.yaml")
        store.save(ThemeState(Theme.DARK))
        assert store.load().theme is Theme.DARK
        assert yaml.safe_load(store.path.read_text()) == {"theme": "dark"}

    def test_toggle_persists(self, tmp_path):
        store = ThemeStore(tmp_path / "state.yaml")
        assert store.toggle().theme is Theme.DARK
        assert store.load().theme is Theme.DARK
        assert store.toggle().theme is Theme.LIGHT

    def test_save_keeps_other_keys(self, tmp_path):
        path = tmp_path / "state.yaml"
        path.write_text("other: 1\n")
        ThemeStore(path).save(ThemeState(Theme.DARK))
        assert yaml.safe_load(path.read_text()) == {"other": 1, "theme": "dark"}

    @pytest.mark.parametrize("content", ["theme: purple\n", "- a\n- b\n", "theme: [unclosed\n"])
    def test_invalid_content_falls_back_to_light(self, tmp_path, content):
        path = tmp_path / "state.yaml"
        path.write_text(content)
        assert ThemeStore(path).load() == ThemeState()


# =============================================================================
# Counter
# =============================================================================


class TestCounter:
    def test_increment_decrement_reset(self):
        counter = Counter().increment().increment().decrement()
        assert counter.value == 1
        assert counter.reset() == Counter(0)

    def test_counter_is_immutable(self):
        counter = Counter()
        counter.increment()
        assert counter.value == 0

    def test_tone(self):
        assert Counter(3).tone is Tone.POSITIVE
        assert Counter(-1).tone is Tone.NEGATIVE
        assert Counter(0).tone is Tone.NEUTRAL
        assert Counter(3).colour == "#26de81"
        assert Counter(-1).colour == "#ff6b6b"
        assert Counter(0).colour == "#667eea"


# =============================================================================
# Accordion / Tabs
# =============================================================================


class TestAccordion:
    def test_opening_one_closes_others(self):
        faq = Accordion(size=3)
        faq.toggle(0)
        assert faq.is_open(0)
        faq.toggle(2)
        assert faq.open_items == {2}

    def test_clicking_open_item_closes_it(self):
        faq = Accordion(size=3)
        faq.toggle(1)
        faq.toggle(1)
        assert faq.open_items == set()

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            Accordion(size=2).toggle(2)


class TestTabGroup:
    def test_first_tab_active_by_default(self):
        tabs = TabGroup(["html", "css", "js"])
        assert tabs.active == "html"
        assert tabs.panel_id() == "html-panel"

    def test_select(self):
        tabs = TabGroup(["html", "css", "js"])
        tabs.select("js")
        assert tabs.is_active("js")
        assert not tabs.is_active("html")
        assert tabs.panel_id() == "js-panel"

    def test_unknown_tab(self):
        tabs = TabGroup(["html"])
        with pytest.raises(KeyError):
            tabs.select("css")
        with pytest.raises(KeyError):
            TabGroup(["html"], active="css")

    def test_needs_a_tab(self):
        with pytest.raises(ValueError):
            TabGroup([])
