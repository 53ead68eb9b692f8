"""Decode batches of raw records and surface what could not be modeled."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from .codec import Record, RecordCodec, unrecognized_values
from .config import DecoderConfig
from .errors import DecodeError
from .logging import get_logger

logger = get_logger(__name__)
R = TypeVar("R", bound=Record)


@dataclass(frozen=True, slots=True)
class DecodeFailure:
    index: int
    error: DecodeError
    raw: Any


@dataclass(frozen=True, slots=True)
class DecodedBatch(Generic[R]):
    records: tuple[R, ...]
    failures: tuple[DecodeFailure, ...]

    @property
    def ok(self) -> bool:
        return not self.failures


def decode_many(
    codec: RecordCodec[R],
    items: Iterable[dict[str, Any] | str | bytes],
    *,
    config: DecoderConfig | None = None,
) -> DecodedBatch[R]:
    """Decode each item on its own; one bad record does not stop the batch.

    Error paths are prefixed with the item index, e.g. ``[2].old_chat_member.user``.
    """
    cfg = config or DecoderConfig()
    records: list[R] = []
    failures: list[DecodeFailure] = []
    for index, item in enumerate(items):
        try:
            record = codec.decode_any(item)
        except DecodeError as exc:
            error = exc.prefixed(index)
            failures.append(DecodeFailure(index=index, error=error, raw=item))
            logger.warning(
                "decode.failed",
                record_type=codec.name,
                field_path=error.field_path,
                error=error.detail,
                raw=item if cfg.log_raw_payloads else None,
            )
            continue
        records.append(record)
        if cfg.report_unrecognized:
            for field_path, value in unrecognized_values(record):
                logger.info(
                    "decode.unrecognized",
                    record_type=codec.name,
                    field_path=f"[{index}].{field_path}",
                    value=value.value,
                )
    return DecodedBatch(records=tuple(records), failures=tuple(failures))
