from __future__ import annotations

from PySide6.QtWidgets import QWidget

from texelarchitect.app.state import Store


class BasePanel(QWidget):
    """Base class for left-side panels. Holds a reference to the global store."""
    def __init__(self, store: Store, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self.store.state_changed.connect(self.refresh)

    def refresh(self, *_) -> None:
        """Re-read the store and update the widgets."""
        raise NotImplementedError
