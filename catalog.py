# catalog.py
import logging
from typing import Iterator, List, Optional, Sequence

from errors import RoomNotFound
from models import Room, RoomSelection, RoomType

logger = logging.getLogger(__name__)

DEFAULT_ROOMS = (
    Room(RoomType.STANDARD, 100.0, True),
    Room(RoomType.DELUXE, 150.0, True),
    Room(RoomType.SUITE, 200.0, True),
)


class RoomCatalog:
    """Fixed, read-only table of bookable room variants.

    Entries keep the order they were given in, so an integer selection is the
    position of the room in the form's selector.
    """

    def __init__(self, rooms: Optional[Sequence[Room]] = None):
        rooms = tuple(DEFAULT_ROOMS if rooms is None else rooms)
        seen = set()
        for room in rooms:
            if room.type in seen:
                raise ValueError(f"Duplicate room type in catalog: {room.type.label}")
            seen.add(room.type)
        self._rooms = rooms

    @classmethod
    def initialize(cls) -> "RoomCatalog":
        catalog = cls(DEFAULT_ROOMS)
        logger.debug("Room catalog initialized with %d entries", len(catalog))
        return catalog

    def rooms(self) -> List[Room]:
        return list(self._rooms)

    def labels(self) -> List[str]:
        return [r.type.label for r in self._rooms]

    def lookup(self, selection: RoomSelection) -> Room:
        # bool is an int subclass but never a valid selector
        if isinstance(selection, bool):
            raise RoomNotFound(selection)
        if isinstance(selection, int):
            if 0 <= selection < len(self._rooms):
                return self._rooms[selection]
            raise RoomNotFound(selection)
        if isinstance(selection, str):
            try:
                selection = RoomType(selection)
            except ValueError:
                raise RoomNotFound(selection) from None
        if isinstance(selection, RoomType):
            for room in self._rooms:
                if room.type is selection:
                    return room
        raise RoomNotFound(selection)

    def __len__(self) -> int:
        return len(self._rooms)

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms)
