"""Dark/light mode preference."""

from src.veloria.client.storage import LocalStorage

DARK_MODE_KEY = "darkMode"


class ThemePreference:
    """Saved choice beats the system preference; with neither, dark wins."""

    def __init__(self, storage: LocalStorage, system_prefers_dark: bool | None = None):
        self.storage = storage
        saved = storage.get_item(DARK_MODE_KEY)
        if saved is not None:
            self.is_dark_mode = saved == "true"
        elif system_prefers_dark is not None:
            self.is_dark_mode = system_prefers_dark
        else:
            self.is_dark_mode = True

    @property
    def theme(self) -> str:
        return "dark" if self.is_dark_mode else "light"

    def toggle(self) -> bool:
        self.is_dark_mode = not self.is_dark_mode
        self.storage.set_item(DARK_MODE_KEY, "true" if self.is_dark_mode else "false")
        return self.is_dark_mode

    def on_system_change(self, prefers_dark: bool) -> None:
        if self.storage.get_item(DARK_MODE_KEY) is None:
            self.is_dark_mode = prefers_dark
