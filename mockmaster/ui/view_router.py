"""Maps the controller's view to a page of a stacked widget."""

from __future__ import annotations

import logging

from PySide6.QtWidgets import QStackedWidget, QWidget

from mockmaster.core.models import ViewState
from mockmaster.core.services.session_controller import QuizSessionController

logger = logging.getLogger(__name__)


class ViewRouter:
    """Shows the page registered for the controller's current view.

    The router keeps no state of its own; which page is visible is derived
    from ``controller.view`` every time it changes.
    """

    def __init__(
        self,
        controller: QuizSessionController,
        stack: QStackedWidget,
        pages: dict[ViewState, QWidget],
    ) -> None:
        missing = set(ViewState) - set(pages)
        if missing:
            raise ValueError(f"No page registered for: {sorted(view.value for view in missing)}")
        self.controller = controller
        self.stack = stack
        self._index_map: dict[ViewState, int] = {}
        for view in ViewState:
            self._index_map[view] = self.stack.addWidget(pages[view])

        self.controller.view_changed.connect(self.show_view)
        self.show_view(self.controller.view)

    def page_index(self, view: ViewState) -> int:
        return self._index_map[view]

    def current_view(self) -> ViewState:
        current = self.stack.currentIndex()
        return next(view for view, index in self._index_map.items() if index == current)

    def show_view(self, view: ViewState) -> None:
        logger.debug("Routing to %s", view.value)
        self.stack.setCurrentIndex(self._index_map[view])
