"""Navigation transitions for server-driven pagination.

``transition(state, action)`` is pure: it returns the next pagination state
and, when the navigation needs data, a FetchEffect describing the request
to issue. Controllers apply the state first and then run the effect.
"""

from dataclasses import dataclass
from typing import Optional, Tuple, Union

from .entities.pagination_state import PaginationState
from .entities.requests import PageRequest


@dataclass(frozen=True)
class NextPage:
    pass


@dataclass(frozen=True)
class PrevPage:
    pass


@dataclass(frozen=True)
class GoToPage:
    page: int


@dataclass(frozen=True)
class FirstPage:
    pass


@dataclass(frozen=True)
class LastPage:
    pass


@dataclass(frozen=True)
class ChangePageSize:
    page_size: int


@dataclass(frozen=True)
class Refetch:
    pass


PageAction = Union[NextPage, PrevPage, GoToPage, FirstPage, LastPage, ChangePageSize, Refetch]


@dataclass(frozen=True)
class FetchEffect:
    """Instruction to fetch one page from the remote source."""

    request: PageRequest

    @property
    def page(self) -> int:
        return self.request.page

    @property
    def limit(self) -> int:
        return self.request.limit


def _fetch(state: PaginationState) -> FetchEffect:
    return FetchEffect(PageRequest(page=state.current_page, limit=state.page_size))


def transition(
    state: PaginationState,
    action: PageAction
) -> Tuple[PaginationState, Optional[FetchEffect]]:
    """Apply a navigation action.

    Returns:
        The next state and the fetch to issue, or None for next/prev when
        there is no page in that direction

    Raises:
        TypeError: If the action is not a known page action
    """
    if isinstance(action, NextPage):
        if not state.can_go_next:
            return state, None
        new_state = state.next()
    elif isinstance(action, PrevPage):
        if not state.can_go_prev:
            return state, None
        new_state = state.prev()
    elif isinstance(action, GoToPage):
        new_state = state.with_page(action.page)
    elif isinstance(action, FirstPage):
        new_state = state.with_page(1)
    elif isinstance(action, LastPage):
        new_state = state.with_page(state.total_pages)
    elif isinstance(action, ChangePageSize):
        new_state = state.with_page_size(action.page_size)
    elif isinstance(action, Refetch):
        new_state = state
    else:
        raise TypeError(f"Unknown page action: {action!r}")

    return new_state, _fetch(new_state)
