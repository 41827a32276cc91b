import datetime

import pytest

from pickerkit.picker import PickerMachine


@pytest.fixture
def emitted():
    return []


@pytest.fixture
def make_picker(emitted):
    """Picker whose "today" is pinned to 2024-06-10 and whose emits land in ``emitted``."""
    def _make(initial_value=None):
        return PickerMachine(
            initial_value=initial_value,
            on_change=emitted.append,
            today=lambda: datetime.date(2024, 6, 10),
        )
    return _make
