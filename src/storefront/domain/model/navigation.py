"""Navigation state machine.

The active screen is a single tagged value: exactly one of the view
classes below. Transitions always replace the whole value, so nothing
from the previous screen (such as a selected product) survives a move.

Any view is reachable from any other. The one ordering rule is for
anchor navigation: an anchor only exists on the home screen, so when the
machine is elsewhere it goes home first and scrolls once that state has
been rendered, i.e. on the next ``commit()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, ClassVar, Union

from storefront.domain.model.article import Article
from storefront.domain.model.product import Product


@dataclass(frozen=True)
class Home:
    kind: ClassVar[str] = "home"


@dataclass(frozen=True)
class ProductView:
    product: Product
    kind: ClassVar[str] = "product"


@dataclass(frozen=True)
class ArticleView:
    article: Article
    kind: ClassVar[str] = "article"


@dataclass(frozen=True)
class CheckoutView:
    kind: ClassVar[str] = "checkout"


@dataclass(frozen=True)
class DashboardView:
    kind: ClassVar[str] = "dashboard"


View = Union[Home, ProductView, ArticleView, CheckoutView, DashboardView]

# Screens rendered without the global top and bottom bars.
_CHROMELESS = (CheckoutView, DashboardView)


class Navigator:

    def __init__(self) -> None:
        self._current: View = Home()
        self._after_commit: list[Callable[[], None]] = []

    @property
    def current(self) -> View:
        return self._current

    @property
    def shows_chrome(self) -> bool:
        return not isinstance(self._current, _CHROMELESS)

    @property
    def pending_actions(self) -> int:
        return len(self._after_commit)

    # --- Transitions ----------------------------------------------------------

    def go(self, view: View) -> View:
        """Replace the active view and return the previous one."""
        previous, self._current = self._current, view
        return previous

    def go_home(self) -> None:
        self.go(Home())

    def navigate_to_anchor(self, anchor: str, scroll: Callable[[str], None]) -> None:
        """Scroll to *anchor* on the home screen.

        When already home the scroll runs now. Otherwise the machine moves
        home and the scroll is queued for the next commit.
        """
        if isinstance(self._current, Home):
            scroll(anchor)
            return
        self.go_home()
        self.after_commit(lambda: scroll(anchor))

    # --- Commit boundary ------------------------------------------------------

    def after_commit(self, action: Callable[[], None]) -> None:
        """Queue a one-shot action for the next commit."""
        self._after_commit.append(action)

    def commit(self) -> int:
        """Run queued actions once the current view has been rendered.

        Actions queued while draining run on the following commit.
        Returns the number of actions run.
        """
        actions, self._after_commit = self._after_commit, []
        for action in actions:
            action()
        return len(actions)
