"""
Byte string types shared by keys and signatures.

Lamport key material is a sequence of byte strings whose length `H` is only
known once a digest is chosen, so the type here is length-agnostic. Length
invariants are enforced by the models that hold these values.
"""

from __future__ import annotations

from typing import Any, Iterable, SupportsIndex

from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self


def _coerce_to_bytes(value: Any) -> bytes:
    """
    Coerce a variety of inputs to raw bytes.

    Accepts:
      - `bytes` / `bytearray` (returned as immutable `bytes`)
      - Iterables of integers in [0, 255]
      - Hex strings, with or without a '0x' prefix (e.g. "0xdeadbeef" or "deadbeef")

    Raises:
      ValueError / TypeError if conversion is not possible or out-of-range.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        # bytes.fromhex handles empty string and validates hex characters
        return bytes.fromhex(value.removeprefix("0x"))
    if isinstance(value, Iterable):
        # bytes(bytearray(iterable)) enforces each element is an int in 0..255
        return bytes(bytearray(value))
    raise TypeError(f"Cannot convert {type(value).__name__} to bytes")


class HexBytes(bytes):
    """
    An immutable byte string that serializes to hex.

    Used for preimages, digests and signature entries.
    """

    def __new__(cls, value: Any = b"") -> Self:
        """
        Create a new instance from any value coercible to bytes.

        Args:
            value: See `_coerce_to_bytes` for accepted inputs.
        """
        return super().__new__(cls, _coerce_to_bytes(value))

    @classmethod
    def _validate(cls, value: Any) -> Self:
        """Build an instance, reporting unusable input as a validation error."""
        try:
            return cls(value)
        except TypeError as exc:
            raise ValueError(str(exc)) from exc

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        """
        Hook into Pydantic's validation system.

        1. If the input is already an instance of the class, accept it.
        2. Otherwise, coerce the input and instantiate the class.
        3. For JSON serialization, emit a lowercase hex string.
        """
        return core_schema.union_schema(
            [
                core_schema.is_instance_schema(cls),
                core_schema.no_info_plain_validator_function(cls._validate),
            ],
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda x: x.hex(), when_used="json"
            ),
        )

    def __repr__(self) -> str:
        """Return a string representation of the bytes."""
        return f"{type(self).__name__}({self.hex()})"

    def hex(self, sep: str | bytes | None = None, bytes_per_sep: SupportsIndex = 1) -> str:
        """Return the hexadecimal string representation of the underlying bytes."""
        return bytes(self).hex() if sep is None else bytes(self).hex(sep, bytes_per_sep)
