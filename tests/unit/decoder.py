from __future__ import annotations

from llm_relay.state.records import StreamRecord
from llm_relay.upstream.decoder import NdjsonDecoder


def test_decoder_reassembles_record_split_across_chunks() -> None:
    decoder = NdjsonDecoder()
    assert decoder.feed(b'{"response": "Hel') == []
    assert decoder.pending == '{"response": "Hel'
    records = decoder.feed(b'lo", "done": false}\n{"response": " world"}\n')
    assert [r.response for r in records] == ["Hello", " world"]
    assert decoder.pending == ""


def test_decoder_handles_multibyte_character_split_across_chunks() -> None:
    body = '{"response": "héllo ✅"}\n'.encode()
    split = body.index("✅".encode()) + 1
    decoder = NdjsonDecoder()
    assert decoder.feed(body[:split]) == []
    records = decoder.feed(body[split:])
    assert records == [StreamRecord(response="héllo ✅")]


def test_decoder_skips_noise_between_valid_records() -> None:
    decoder = NdjsonDecoder()
    records = decoder.feed(b'{"response": "a"}\nnot json at all\n\n[1, 2]\n{"response": "b", "done": true}\n')
    assert [r.response for r in records] == ["a", "b"]
    assert records[-1].done is True
    assert decoder.skipped_lines == 2


def test_decoder_flush_parses_unterminated_tail() -> None:
    decoder = NdjsonDecoder()
    assert decoder.feed(b'{"response": "x", "done": true}') == []
    records = decoder.flush()
    assert records == [StreamRecord(response="x", done=True)]
    assert decoder.flush() == []


def test_decoder_one_byte_at_a_time() -> None:
    body = b'{"response": "ab"}\n{"response": "cd"}\n{"done": true}\n'
    decoder = NdjsonDecoder()
    records: list[StreamRecord] = []
    for i in range(len(body)):
        records.extend(decoder.feed(body[i : i + 1]))
    assert "".join(r.response or "" for r in records) == "abcd"
    assert records[-1].done is True


def test_stream_record_ignores_wrong_types_and_unknown_fields() -> None:
    record = StreamRecord.from_json({"response": 5, "done": "true", "error": "", "model": "m"})
    assert record == StreamRecord()
    assert StreamRecord.from_json("text") is None
    assert StreamRecord.from_json({"error": "boom"}) == StreamRecord(error="boom")
