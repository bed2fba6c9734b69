"""assignbook — contact and assignment tracker with undo/redo.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
::

    import assignbook
    from assignbook.logic import AddPerson, Undo

    model = assignbook.open_model("data/assignbook.json")
    dispatcher = assignbook.dispatcher(model)

    dispatcher.execute(AddPerson(person))
    dispatcher.execute(Undo())

    assignbook.save_model(model, "data/assignbook.json")

    assignbook.__version__
    '0.1.0'
"""
from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

__version__: str = "0.1.0"

if TYPE_CHECKING:
    from assignbook.config import UserPrefs
    from assignbook.logic.dispatcher import Dispatcher
    from assignbook.model.model_manager import ModelManager


def open_model(
    data_file: Path | str | None = None,
    prefs: "UserPrefs | None" = None,
    use_sample: bool = True,
) -> "ModelManager":
    """Load an address book file into a fresh ``ModelManager``.

    Parameters
    ----------
    data_file:
        Path of the data file.  Defaults to ``prefs.data_file``.
    prefs:
        User preferences.  Defaults to ``UserPrefs()``.
    use_sample:
        When the file does not exist, start from sample data instead of
        an empty address book.

    Returns
    -------
    ModelManager
        A model whose undo history starts at the loaded state.

    Raises
    ------
    assignbook.storage.DataLoadError
        If the file exists but cannot be parsed.
    assignbook.model.ValidationError
        If the file holds invalid data.
    """
    from assignbook.config import UserPrefs
    from assignbook.model.address_book import AddressBook
    from assignbook.model.model_manager import ModelManager
    from assignbook.storage import AddressBookStorage, sample_address_book

    effective_prefs = prefs or UserPrefs()
    path = Path(data_file) if data_file is not None else effective_prefs.data_file
    book = AddressBookStorage(path).read()
    if book is None:
        book = sample_address_book() if use_sample else AddressBook()
    return ModelManager(book, effective_prefs.with_data_file(path))


def save_model(model: "ModelManager", data_file: Path | str | None = None) -> None:
    """Write the model's current address book to ``data_file``.

    ``data_file`` defaults to ``model.user_prefs.data_file``.
    """
    from assignbook.storage import AddressBookStorage

    path = Path(data_file) if data_file is not None else model.user_prefs.data_file
    AddressBookStorage(path).save(model.get_address_book())


def dispatcher(model: "ModelManager") -> "Dispatcher":
    """Return a ``Dispatcher`` bound to ``model``."""
    from assignbook.logic.dispatcher import Dispatcher

    return Dispatcher(model)


__all__ = [
    "__version__",
    "open_model",
    "save_model",
    "dispatcher",
]
