"""Splitting payloads across message units and reassembling them."""

from __future__ import annotations

import logging
from typing import Any, List, Optional, Sequence

from ..crypto.cipher import PayloadCipher
from ..exceptions import KanjiPostError, ProtocolViolationError
from ..protocols import DecodedPayload, ProtocolRegistry, default_registry
from .header import HeaderCodec, iv_for_header
from .unit import SLOT_SIZE, MessageUnitPacker

logger = logging.getLogger(__name__)


class FragmentationEngine:
    """Encrypt a payload into one or more units and decode them back.

    Only the last unit of a sequence carries a genuine header; every other
    unit has a random header with the partial flag set. The whole payload is
    encrypted in one pass with the IV derived from the genuine header, so the
    CBC chain spans unit boundaries.
    """

    def __init__(
        self,
        cipher: PayloadCipher,
        headers: HeaderCodec,
        packer: MessageUnitPacker,
        *,
        registry: Optional[ProtocolRegistry] = None,
    ) -> None:
        self._cipher = cipher
        self._headers = headers
        self._packer = packer
        self._registry = registry if registry is not None else default_registry()

    @property
    def registry(self) -> ProtocolRegistry:
        return self._registry

    def encode(self, protocol_id: int, payload: Any) -> List[str]:
        plaintext = self._registry.render(protocol_id, payload)

        # Payloads shorter than one slot give tail_length == len(plaintext),
        # so the single-unit case is the multi-unit case with no dummies.
        tail_length = len(plaintext) % SLOT_SIZE
        header = self._headers.encode_header(tail_length, protocol_id)
        expected_tail = self._headers.decode_header(header).ciphertext_length

        ciphertext = self._cipher.encrypt(iv_for_header(header), plaintext)
        chunks = [ciphertext[i : i + SLOT_SIZE] for i in range(0, len(ciphertext), SLOT_SIZE)]
        if not chunks or len(chunks[-1]) != expected_tail:
            raise KanjiPostError(
                "payload cipher padding does not match the header block count"
            )

        units = [self._packer.pack(self._headers.encode_dummy_header(), chunk) for chunk in chunks[:-1]]
        units.append(self._packer.pack(header, chunks[-1]))
        logger.debug("encoded %d plaintext bytes into %d unit(s)", len(plaintext), len(units))
        return units

    def decode(self, units: Sequence[str]) -> DecodedPayload:
        """Reassemble *units*, given in transport order with the terminal unit last."""

        units = list(units)
        if not units:
            raise ProtocolViolationError("no units supplied")

        header_bytes, tail_slot = self._packer.unpack(units[-1])
        header = self._headers.decode_header(header_bytes)
        if header.is_partial:
            raise ProtocolViolationError("terminal unit carries a partial header")
        if header.ciphertext_length > SLOT_SIZE:
            raise ProtocolViolationError(
                f"terminal header claims {header.ciphertext_length} bytes, slot holds {SLOT_SIZE}"
            )
        protocol = self._registry.get(header.protocol_id)

        body: List[bytes] = []
        for index, unit in enumerate(units[:-1]):
            partial_header, slot = self._packer.unpack(unit)
            if not self._headers.decode_header(partial_header).is_partial:
                raise ProtocolViolationError(
                    f"inconsistent fragment sequence: unit {index} has a terminal header"
                )
            body.append(slot)
        body.append(tail_slot[: header.ciphertext_length])

        plaintext = self._cipher.decrypt(iv_for_header(header_bytes), b"".join(body))
        logger.debug("decoded %d unit(s) into %d plaintext bytes", len(units), len(plaintext))
        return DecodedPayload(header.protocol_id, protocol.interpret(plaintext))


__all__ = ["FragmentationEngine"]
