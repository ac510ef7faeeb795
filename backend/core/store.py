"""
Task store - the whole collection lives in one pretty-printed JSON file.
Every call reads or rewrites the full file; nothing is cached between calls.
"""

from pathlib import Path
from typing import List, Protocol
from pydantic import TypeAdapter
from .errors import StorageWriteError
from .models import Task
import contextlib
import logging
import os
import tempfile

logger = logging.getLogger(__name__)

_TASK_LIST = TypeAdapter(List[Task])

class TaskStore(Protocol):
    def load(self) -> List[Task]: ...
    def save(self, tasks: List[Task]) -> None: ...

class JsonFileTaskStore:
    def __init__(self, path):
        self.path = Path(path)

    def ensure_initialized(self) -> None:
        """Create the file holding an empty array if it does not exist yet"""
        if self.path.exists():
            return
        self.save([])
        logger.info("Initialized empty task file %s", self.path)

    def load(self) -> List[Task]:
        """
        Read the whole collection. Duplicate ids or updatedAt < createdAt count
        as a parse failure; any read or parse failure degrades to an empty list
        (logged, not raised), so a later save() will overwrite whatever was on disk.
        """
        try:
            raw = self.path.read_bytes()
            tasks = _TASK_LIST.validate_json(raw)
            ids = [t.id for t in tasks]
            if len(set(ids)) != len(ids):
                raise ValueError("duplicate task ids")
            return tasks
        except (OSError, ValueError) as e:
            logger.error("Failed to load tasks from %s: %s", self.path, e)
            return []

    def save(self, tasks: List[Task]) -> None:
        """
        Replace the whole collection. The file is swapped in with os.replace,
        so readers see either the old or the new collection, never a partial one.
        """
        data = _TASK_LIST.dump_json(tasks, by_alias=True, indent=2)
        tmp = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
                fh.write(b"\n")
            os.replace(tmp, self.path)
        except OSError as e:
            if tmp is not None:
                with contextlib.suppress(OSError):
                    os.unlink(tmp)
            logger.exception("Failed to save %d tasks to %s", len(tasks), self.path)
            raise StorageWriteError() from e
