# ===================================================================
# 1. IMPORTS
# ===================================================================
import logging
from typing import Any, cast
from collections.abc import Callable
from nicegui import ui, app

# Local application imports
from .config import Settings
from .gateways import SubmissionGateway, SummaryGateway
from .notifications import AlertCenter
from .preferences import ThemePreference
from .summary import SummaryGenerator
from .utils import FormField, APP_TITLE, SUBMIT_LABEL, SUBMIT_BUSY_LABEL
from .wizard import WizardController, WizardPhase

settings: Settings = Settings.from_env()

logging.basicConfig(level=settings.log_level, format='%(asctime)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__)

# ===================================================================
# 2. FIELD CREATION HELPERS
# ===================================================================

def _create_text_input(f: FormField, v: str, wizard: WizardController) -> ui.input:
    """Creates a text/email/tel input bound to the wizard."""
    element = ui.input(label=f.label, value=v, placeholder=f.placeholder,
                       on_change=lambda e: wizard.edit(f.key, e.value or ''))
    return element.props(f"type={f.ui_type}")

def _create_select_input(f: FormField, v: str, wizard: WizardController) -> ui.select:
    """Creates a dropdown of option codes; an empty answer shows as unselected."""
    return ui.select(options=f.options or {}, label=f.label, value=v or None,
                     on_change=lambda e: wizard.edit(f.key, e.value or '')).props(f"hint='{f.placeholder}'")

def create_field(field_definition: FormField, wizard: WizardController) -> Any:
    """Creates the input element for the field bound to the current step."""
    creator_map: dict[str, Callable[..., Any]] = {
        'text': _create_text_input,
        'email': _create_text_input,
        'tel': _create_text_input,
        'select': _create_select_input,
    }
    creator = creator_map.get(field_definition.ui_type)
    if not creator: raise ValueError(f"Unsupported UI type: {field_definition.ui_type}")

    element = creator(field_definition, wizard.answers.get(field_definition.key, ''), wizard)
    element.props('outlined').classes('w-full')
    element.error = wizard.error
    return element

# ===================================================================
# 3. PAGE
# ===================================================================

@ui.page('/')
def main_page() -> None:
    alerts = AlertCenter(default_duration=settings.alert_duration)
    wizard = WizardController(
        SubmissionGateway(settings.webhook_url, timeout=settings.http_timeout),
        alerts,
    )
    summarizer: SummaryGenerator | None = None
    if settings.summary_enabled:
        summarizer = SummaryGenerator(
            SummaryGateway(settings.summary_api_key, settings.summary_model,
                           settings.summary_base_url, timeout=settings.http_timeout),
            alerts,
        )

    # --- Theme ---
    theme = ThemePreference(cast(dict[str, Any], app.storage.user))
    dark = ui.dark_mode(theme.dark)

    def theme_icon(is_dark: bool) -> str:
        return 'light_mode' if is_dark else 'dark_mode'

    with ui.header(elevated=True).classes('bg-primary text-white q-pa-sm items-center'):
        ui.label(APP_TITLE).classes('text-h5')
        ui.space()
        toggle_button = ui.button(icon=theme_icon(theme.dark), on_click=theme.toggle, color='white').props('flat round')
        toggle_button.tooltip('Toggle light/dark mode')

    def on_theme_change(is_dark: bool) -> None:
        dark.set_value(is_dark)
        toggle_button.props(f"icon={theme_icon(is_dark)}")
    theme.subscribe(on_theme_change)

    # --- Alerts ---
    @ui.refreshable
    def alert_area() -> None:
        for alert in alerts.active:
            with ui.card().classes('w-full bg-negative text-white q-pa-sm q-mb-sm').props('flat'):
                with ui.row().classes('w-full items-center no-wrap'):
                    ui.label(alert.message).classes('col')
                    ui.button(icon='close', on_click=lambda _, h=alert.handle: alerts.dismiss(h)) \
                        .props('flat dense round color=white')
    alerts.subscribe(lambda _: alert_area.refresh())

    # --- Summary overlay ---
    with ui.dialog() as summary_dialog, ui.card().style('max-width: 600px;'):
        ui.label('Applicant summary').classes('text-h6')
        summary_text = ui.label('').style('white-space: pre-wrap;')
        ui.button('Close', on_click=summary_dialog.close).props('flat color=primary').classes('self-end')

    async def show_summary(button: ui.button) -> None:
        if summarizer is None:
            return
        button.props('loading')
        try:
            text = await summarizer.generate(wizard.answers)
        finally:
            button.props(remove='loading')
            button.set_enabled(summarizer.is_available(wizard.answers))
        if text:
            summary_text.set_text(text)
            summary_dialog.open()

    # --- Wizard ---
    current_input: dict[str, Any] = {'element': None}
    rendered_view: dict[str, Any] = {'key': None}

    def render_done() -> None:
        with ui.column().classes('w-full items-center q-pa-lg'):
            ui.label('Thank you for your application!').classes('text-h4 text-positive text-center')
            ui.label('We will reach out to you via email or SMS within the next 48 hours.') \
                .classes('text-body1 text-center')

    @ui.refreshable
    def step_content() -> None:
        rendered_view['key'] = (wizard.step, wizard.phase)
        current_input['element'] = None
        if wizard.phase is WizardPhase.DONE:
            render_done()
            return

        ui.linear_progress(value=wizard.progress, show_value=False).classes('q-mb-md')
        step_def = wizard.current_step
        ui.label(step_def['title']).classes('text-h6 q-mb-xs')
        ui.markdown(step_def['subtitle'])

        field = wizard.current_field
        if field:
            element = create_field(field, wizard)
            element.on('keydown.enter', lambda: wizard.advance())
            if 'hint' in step_def:
                element.props(f'hint="{step_def["hint"]}"')
            current_input['element'] = element

        with ui.row().classes('w-full q-mt-lg justify-between items-center'):
            if wizard.can_retreat:
                ui.button("← Back", on_click=wizard.retreat).props('flat color=grey')
            else:
                ui.label()
            if wizard.is_last_step:
                busy = wizard.phase is WizardPhase.SUBMITTING
                next_button = ui.button(SUBMIT_BUSY_LABEL if busy else SUBMIT_LABEL, on_click=wizard.advance)
                next_button.props('color=primary unelevated').set_enabled(not busy)
            else:
                label = "Start →" if wizard.phase is WizardPhase.INTRO else "Next →"
                ui.button(label, on_click=wizard.advance).props('color=primary unelevated')

    def on_wizard_change(w: WizardController) -> None:
        # Re-render on navigation only; keystrokes just update the error.
        if rendered_view['key'] != (w.step, w.phase):
            step_content.refresh()
        elif current_input['element'] is not None:
            current_input['element'].error = w.error
        if summarizer is not None:
            summary_button.set_enabled(summarizer.is_available(w.answers))
    wizard.subscribe(on_wizard_change)

    with ui.column().classes('w-full items-center q-pt-xl'):
        with ui.column().classes('q-gutter-none').style('width: 95%; max-width: 600px;'):
            alert_area()
            with ui.card().classes('w-full q-pa-md shadow-4'):
                step_content()
            if summarizer is not None:
                summary_button = ui.button('Generate summary', icon='auto_awesome',
                                           on_click=lambda: show_summary(summary_button))
                summary_button.props('outline color=primary').classes('self-center q-mt-md')
                summary_button.set_enabled(summarizer.is_available(wizard.answers))

def main() -> None:
    logger.info(f"Starting {APP_TITLE} on port {settings.port}")
    ui.run(
        host='0.0.0.0',
        port=settings.port,
        title=APP_TITLE,
        storage_secret=settings.storage_secret,
        reload=False,
    )

if __name__ in {"__main__", "__mp_main__"}:
    main()
