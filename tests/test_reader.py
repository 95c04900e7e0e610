import codecs
import io
import unittest

import inf
from inf.errors import InvalidLineTerminator, InvalidQuotedValue, InvalidSectionName
from inf.reader import Reader, read

SAMPLE_INF = """; Sample driver
[Version]
Signature   = "$WINDOWS NT$"
Provider    = %ProviderName%
DriverVer   = 07/07/2021, 1.0.0.0

[Audio_Device.NT.Copy]
AudioCodec.sys

[Audio_Service_Inst]
ServiceBinary = %13%\\AudioCodec.sys
Description   = "Pilote audio – édition spéciale"\\
    " (€)"
LongValue     = first part \\
second part

[Strings]
ProviderName = "Ünïcode Provider ✓"
"""


def feed_bytewise(data: bytes) -> inf.Document:
    reader = Reader()

    for i in range(len(data)):
        reader.feed(data[i : i + 1])

    reader.feed(b"", final=True)
    return reader.close()


class TestReader(unittest.TestCase):
    def test_chunk_boundary_independence_utf8(self) -> None:
        data = SAMPLE_INF.encode("utf-8")
        whole = inf.loads(data)

        self.assertEqual(feed_bytewise(data), whole)

        for size in (1, 2, 3, 5, 7, 64, 4096):
            with self.subTest(buffer_size=size):
                self.assertEqual(read(io.BytesIO(data), buffer_size=size), whole)

    def test_chunk_boundary_independence_utf16le(self) -> None:
        data = codecs.BOM_UTF16_LE + SAMPLE_INF.replace("\n", "\r\n").encode(
            "utf-16-le"
        )
        expected = inf.loads(SAMPLE_INF)

        self.assertEqual(feed_bytewise(data), expected)

        for size in (1, 2, 3, 1024):
            with self.subTest(buffer_size=size):
                self.assertEqual(read(io.BytesIO(data), buffer_size=size), expected)

    def test_terminator_equivalence(self) -> None:
        crlf = SAMPLE_INF.replace("\n", "\r\n").encode("utf-8")
        self.assertEqual(inf.loads(crlf), inf.loads(SAMPLE_INF))

    def test_sample_values(self) -> None:
        doc = inf.loads(SAMPLE_INF)

        self.assertEqual(
            doc["Audio_Service_Inst"].entries,
            [
                inf.Entry.key_value(
                    "ServiceBinary", inf.Value.raw("%13%\\AudioCodec.sys")
                ),
                # Only one continuation hop: the quoted remainder is kept raw.
                inf.Entry.key_value(
                    "Description",
                    inf.Value.raw('Pilote audio – édition spéciale\\" (€)"'),
                ),
                inf.Entry.key_value(
                    "LongValue", inf.Value.raw("first part second part")
                ),
            ],
        )
        self.assertEqual(
            doc["Strings"].entries[0].text, "Ünïcode Provider ✓"
        )

    def test_missing_final_terminator(self) -> None:
        doc = inf.loads(b"[S]\r\nkey=value")
        self.assertEqual(doc["S"].entries[0].text, "value")

    def test_empty_input(self) -> None:
        self.assertEqual(len(inf.loads(b"")), 0)
        self.assertEqual(len(read(io.BytesIO(b""))), 0)

    def test_line_error_is_wrapped(self) -> None:
        with self.assertRaises(inf.ReadLineError) as cm:
            inf.loads("[S]\rkey=value\n")

        self.assertEqual(cm.exception.stage, inf.Stage.LINES)
        self.assertIsInstance(cm.exception.cause, InvalidLineTerminator)
        self.assertIs(cm.exception.__cause__, cm.exception.cause)

    def test_trailing_lone_cr_is_rejected(self) -> None:
        with self.assertRaises(inf.ReadLineError):
            read(io.BytesIO(b"[S]\nkey=value\r"))

    def test_grammar_errors_are_wrapped(self) -> None:
        for data, cause in (
            ("[Invalid Section]\n", InvalidSectionName),
            ('[S]\nkey="open\n', InvalidQuotedValue),
            ('[S]\nkey="v" x\n', inf.InvalidContinuation),
        ):
            with self.subTest(data=data):
                with self.assertRaises(inf.SectionParseError) as cm:
                    inf.loads(data)

                self.assertEqual(cm.exception.stage, inf.Stage.SECTIONS)
                self.assertIsInstance(cm.exception.cause, cause)
                self.assertIsInstance(cm.exception, inf.InfError)

    def test_read_error_is_wrapped(self) -> None:
        class FailingStream(io.RawIOBase):
            def readable(self) -> bool:
                return True

            def read(self, size: int = -1) -> bytes:
                raise OSError("device not ready")

        with self.assertRaises(inf.FileReadError) as cm:
            read(FailingStream())

        self.assertEqual(cm.exception.stage, inf.Stage.READ)
        self.assertIsInstance(cm.exception.cause, OSError)

    def test_invalid_buffer_size(self) -> None:
        with self.assertRaises(ValueError):
            read(io.BytesIO(b"[S]\n"), buffer_size=0)

    def test_document_is_read_only_mapping(self) -> None:
        doc = inf.loads(SAMPLE_INF)

        with self.assertRaises(TypeError):
            doc["New"] = inf.Section("New")  # type: ignore[index]

        self.assertEqual(
            [s.name for s in doc.sections],
            ["Version", "Audio_Device.NT.Copy", "Audio_Service_Inst", "Strings"],
        )
