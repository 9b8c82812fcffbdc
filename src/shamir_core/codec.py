"""Text encoding of secrets and share records.

Shares travel as JSON lines, one ``{"x": "<hex>", "y": "<hex>"}`` object per
line. Decoding is all-or-nothing: one bad record rejects the whole batch.
"""
from __future__ import annotations

from typing import Iterable, List, TextIO, Union

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from .errors import MalformedInput
from .field import FieldElement
from .sharing import Share


class ShareRecord(BaseModel):
    x: str
    y: str

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator("x", "y")
    @classmethod
    def _validate_hex(cls, value: str) -> str:
        try:
            return FieldElement.from_hex(value).to_hex()
        except MalformedInput as exc:
            raise ValueError(str(exc)) from None

    @classmethod
    def from_share(cls, share: Share) -> "ShareRecord":
        return cls(x=share.x.to_hex(), y=share.y.to_hex())

    def to_share(self) -> Share:
        return Share(x=FieldElement.from_hex(self.x), y=FieldElement.from_hex(self.y))


def parse_secret(text: str) -> FieldElement:
    return FieldElement.from_hex(text)


def format_secret(secret: FieldElement) -> str:
    return secret.to_hex()


def encode_share(share: Share) -> str:
    return ShareRecord.from_share(share).model_dump_json()


def decode_share(line: str) -> Share:
    try:
        record = ShareRecord.model_validate_json(line)
    except ValidationError as exc:
        raise MalformedInput(f"Invalid share record: {exc.errors()[0]['msg']}") from exc
    return record.to_share()


def decode_shares(lines: Iterable[Union[str, bytes]]) -> List[Share]:
    """Decode every record before returning; byte lines must be UTF-8."""
    shares: List[Share] = []
    for lineno, raw in enumerate(lines, start=1):
        if isinstance(raw, bytes):
            try:
                line = raw.decode("utf-8")
            except UnicodeDecodeError:
                raise MalformedInput(f"line {lineno}: share record is not valid UTF-8") from None
        else:
            line = raw
        if not line.strip():
            continue
        try:
            shares.append(decode_share(line))
        except MalformedInput as exc:
            raise MalformedInput(f"line {lineno}: {exc}") from exc
    return shares


def write_shares(shares: Iterable[Share], stream: TextIO) -> int:
    written = 0
    for share in shares:
        stream.write(encode_share(share) + "\n")
        written += 1
    return written


__all__ = [
    "ShareRecord",
    "parse_secret",
    "format_secret",
    "encode_share",
    "decode_share",
    "decode_shares",
    "write_shares",
]
