"""
JSON Lines Reservation State Repository

One file per record kind under data_dir, one orjson object per line:
- passengers.jsonl
- trips.jsonl
- bookings.jsonl
- waitlist.jsonl (head to tail per trip)

Saving is staged: every file is first written to a .tmp sibling, and only
once all four writes succeed are they swapped in with os.replace. A write
that fails leaves the previous snapshot on disk untouched and removes the
.tmp files it created.
"""

import os
from pathlib import Path
from typing import Any, BinaryIO, Callable, List, Tuple, Type, TypeVar

import attrs
import orjson

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_reservation_state_repo import (
    IReservationStateRepo,
)
from src.service.reservation.domain.value_object.state_record import (
    BookingRecord,
    PassengerRecord,
    ReservationSnapshot,
    TripRecord,
    WaitlistRecord,
)


R = TypeVar('R')

PASSENGERS_FILE = 'passengers.jsonl'
TRIPS_FILE = 'trips.jsonl'
BOOKINGS_FILE = 'bookings.jsonl'
WAITLIST_FILE = 'waitlist.jsonl'


def _integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f'expected an integer, got {value!r}')
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f'expected an integer, got {value!r}')
    return int(value)


def _number(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise TypeError(f'expected a number, got {value!r}')
    return float(value)


def _text(value: Any) -> str:
    if not isinstance(value, str):
        raise TypeError(f'expected a string, got {value!r}')
    return value


FIELD_DECODERS: dict[str, Callable[[Any], Any]] = {
    'age': _integer,
    'seat_count': _integer,
    'seat_number': _integer,
    'fare': _number,
}


class JsonlReservationStateRepo(IReservationStateRepo):
    def __init__(self, *, data_dir: Path | str) -> None:
        self.data_dir = Path(data_dir)

    @Logger.io
    def load(self) -> ReservationSnapshot:
        return ReservationSnapshot(
            passengers=self._read(PASSENGERS_FILE, PassengerRecord),
            trips=self._read(TRIPS_FILE, TripRecord),
            bookings=self._read(BOOKINGS_FILE, BookingRecord),
            waitlist=self._read(WAITLIST_FILE, WaitlistRecord),
        )

    @Logger.io
    def save(self, *, snapshot: ReservationSnapshot) -> None:
        self.data_dir.mkdir(parents=True, exist_ok=True)
        staged: List[Tuple[Path, Path]] = []
        try:
            for file_name, records in (
                (PASSENGERS_FILE, snapshot.passengers),
                (TRIPS_FILE, snapshot.trips),
                (BOOKINGS_FILE, snapshot.bookings),
                (WAITLIST_FILE, snapshot.waitlist),
            ):
                path = self.data_dir / file_name
                tmp_path = path.with_suffix(path.suffix + '.tmp')
                with tmp_path.open('wb') as f:
                    staged.append((tmp_path, path))
                    self._write(f, records)
            for tmp_path, path in staged:
                os.replace(tmp_path, path)
        finally:
            for tmp_path, _ in staged:
                tmp_path.unlink(missing_ok=True)

    def _read(self, file_name: str, record_type: Type[R]) -> List[R]:
        path = self.data_dir / file_name
        if not path.exists():
            Logger.base.info(f'📂 [STATE] {path} not found, starting empty')
            return []

        records: List[R] = []
        field_names = {field.name for field in attrs.fields(record_type)}
        with path.open('rb') as f:
            for line_number, line in enumerate(f, start=1):
                if not line.strip():
                    continue
                try:
                    payload = orjson.loads(line)
                    records.append(self._to_record(record_type, payload, field_names))
                except (orjson.JSONDecodeError, TypeError, ValueError, KeyError) as e:
                    Logger.base.warning(
                        f'⚠️ [STATE] Skipping malformed line {line_number} in {file_name}: {e}'
                    )
        return records

    @staticmethod
    def _to_record(record_type: Type[R], payload: Any, field_names: set[str]) -> R:
        if not isinstance(payload, dict):
            raise TypeError(f'expected an object, got {type(payload).__name__}')
        missing = field_names - payload.keys()
        if missing:
            raise KeyError(f'missing fields {sorted(missing)}')
        values = {
            name: FIELD_DECODERS.get(name, _text)(payload[name]) for name in field_names
        }
        return record_type(**values)

    @staticmethod
    def _write(f: BinaryIO, records: List[Any]) -> None:
        for record in records:
            f.write(orjson.dumps(attrs.asdict(record)))
            f.write(b'\n')
