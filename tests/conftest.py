import pytest
from _pytest.nodes import Item

MARKERS_BY_DIRECTORY = {
    "units": pytest.mark.unit,
    "integrations": pytest.mark.integration,
}


def pytest_collection_modifyitems(items: list[Item]) -> None:
    """Marks each test as unit or integration from the directory it lives in.

    This lets a run be narrowed with ``-m unit`` or ``-m integration``.

    Args:
        items: A list of test items collected by pytest.
    """
    for item in items:
        for directory, marker in MARKERS_BY_DIRECTORY.items():
            if directory in item.path.parts:
                item.add_marker(marker)
                break
