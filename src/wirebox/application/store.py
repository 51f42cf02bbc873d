"""Application layer - Entry storage and the type name index."""

from typing import Dict, List, Optional

from wirebox.domain import Entry


class EntryStore:
    """Id to entry mapping for one namespace (services or parameters).

    Keeps registration order. Each entry carries its own lock flag.

    Attributes:
        _entries: Dictionary mapping ids to entries.
    """

    def __init__(self, entries: Optional[Dict[str, Entry]] = None) -> None:
        self._entries: Dict[str, Entry] = dict(entries) if entries else {}

    def get(self, id: str) -> Optional[Entry]:
        return self._entries.get(id)

    def has(self, id: str) -> bool:
        return id in self._entries

    def is_locked(self, id: str) -> bool:
        """Return True if the entry exists and is locked.

        A missing id is not locked.
        """
        entry = self._entries.get(id)
        if entry is None:
            return False
        return entry.locked

    def put(self, entry: Entry) -> Optional[Entry]:
        """Store an entry, returning the one it replaced (if any).

        Replacing keeps the entry's original position in the ordering.
        """
        previous = self._entries.get(entry.id)
        self._entries[entry.id] = entry
        return previous

    def remove(self, id: str) -> Entry:
        return self._entries.pop(id)

    def ids(self) -> List[str]:
        return list(self._entries)

    def copy(self) -> Dict[str, Entry]:
        return dict(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


class TypeIndex:
    """Secondary index from qualified type name to the service ids registered under it.

    Maintained incrementally on every add, replace and remove so dependency
    lookup never scans the service store.

    Attributes:
        _ids_by_type: Dictionary mapping type names to ordered id lists.
    """

    def __init__(self) -> None:
        self._ids_by_type: Dict[str, List[str]] = {}

    def add(self, type_name: str, id: str) -> None:
        ids = self._ids_by_type.setdefault(type_name, [])
        if id not in ids:
            ids.append(id)

    def remove(self, type_name: str, id: str) -> None:
        ids = self._ids_by_type.get(type_name)
        if not ids or id not in ids:
            return
        ids.remove(id)
        if not ids:
            del self._ids_by_type[type_name]

    def ids(self, type_name: str) -> List[str]:
        return list(self._ids_by_type.get(type_name, []))

    def clear(self) -> None:
        self._ids_by_type.clear()
