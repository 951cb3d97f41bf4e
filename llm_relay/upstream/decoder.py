"""Incremental decoder for newline-delimited JSON response bodies."""

from __future__ import annotations

import codecs
import logging

import orjson

from llm_relay.state.records import StreamRecord

logger = logging.getLogger(__name__)


class NdjsonDecoder:
    """Turn arbitrary byte chunks into `StreamRecord`s, one per complete line.

    A line split across reads (including a multi-byte character split across
    reads) is held in the carry-over buffer until its newline arrives. Lines
    that are not JSON objects are skipped.
    """

    def __init__(self) -> None:
        self._text = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._buffer = ""
        self.skipped_lines = 0

    @property
    def pending(self) -> str:
        return self._buffer

    def feed(self, chunk: bytes) -> list[StreamRecord]:
        self._buffer += self._text.decode(chunk)
        if "\n" not in self._buffer:
            return []
        *lines, self._buffer = self._buffer.split("\n")
        return self._parse_lines(lines)

    def flush(self) -> list[StreamRecord]:
        """Parse whatever is left once the body has ended."""
        self._buffer += self._text.decode(b"", final=True)
        tail, self._buffer = self._buffer, ""
        return self._parse_lines([tail])

    def _parse_lines(self, lines: list[str]) -> list[StreamRecord]:
        records: list[StreamRecord] = []
        for line in lines:
            line = line.strip()
            if not line:
                continue
            try:
                obj = orjson.loads(line)
            except orjson.JSONDecodeError:
                self.skipped_lines += 1
                logger.debug("skipping non-JSON stream line: %.120s", line)
                continue
            record = StreamRecord.from_json(obj)
            if record is None:
                self.skipped_lines += 1
                continue
            records.append(record)
        return records


__all__ = ["NdjsonDecoder"]
