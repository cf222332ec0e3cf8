# services/app_state.py
#
# Session state for the dashboard page as one immutable value plus a reducer.
# The page keeps exactly one AppState in st.session_state and replaces it
# through reduce(); nothing else writes to it.

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Optional, Union

from helpers_datasets import DatasetMode
from helpers_schema import StoreRecord


@dataclass(frozen=True)
class AppState:
    query: str = ""
    mode: DatasetMode = DatasetMode.REGULAR
    selected: Optional[StoreRecord] = None

    @property
    def has_selection(self) -> bool:
        return self.selected is not None


@dataclass(frozen=True)
class SetQuery:
    query: str


@dataclass(frozen=True)
class SwitchDataset:
    mode: DatasetMode


@dataclass(frozen=True)
class SelectStore:
    record: StoreRecord


@dataclass(frozen=True)
class DismissSelection:
    pass


Action = Union[SetQuery, SwitchDataset, SelectStore, DismissSelection]


def reduce(state: AppState, action: Action) -> AppState:
    if isinstance(action, SetQuery):
        return replace(state, query=action.query or "")
    if isinstance(action, SwitchDataset):
        # selection survives a tab switch
        return replace(state, mode=DatasetMode(action.mode))
    if isinstance(action, SelectStore):
        return replace(state, selected=action.record)
    if isinstance(action, DismissSelection):
        if state.selected is None:
            return state
        return replace(state, selected=None)
    raise TypeError(f"Unknown action: {action!r}")
