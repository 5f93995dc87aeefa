"""Stack of loaded SoundFonts with per-font bank offsets."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Optional, Protocol, TypeVar

from .arena import Arena, Index


class _Font(Protocol):
    def preset(self, bank: int, prognum: int) -> Optional[Any]: ...


F = TypeVar("F", bound=_Font)


@dataclass
class _BankOffset:
    sfont_id: Index
    offset: int


class BankOffsets:
    """Bank number offsets, one per SoundFont."""

    def __init__(self) -> None:
        self._entries: list[_BankOffset] = []

    def _find(self, sfont_id: Index) -> Optional[_BankOffset]:
        return next((e for e in self._entries if e.sfont_id == sfont_id), None)

    def get(self, sfont_id: Index) -> Optional[int]:
        """Offset of the bank numbers in the font, or None if none was set."""
        entry = self._find(sfont_id)
        return None if entry is None else entry.offset

    def set(self, sfont_id: Index, offset: int) -> None:
        """Set the offset of the bank numbers in the font."""
        entry = self._find(sfont_id)
        if entry is not None:
            entry.offset = offset
        else:
            self._entries.insert(0, _BankOffset(sfont_id, offset))

    def remove(self, sfont_id: Index) -> None:
        """Forget the offset of the font, if any."""
        entry = self._find(sfont_id)
        if entry is not None:
            self._entries.remove(entry)


class FontBank(Generic[F]):
    """Loaded SoundFonts; presets are searched from the top of the stack down."""

    def __init__(self) -> None:
        self._fonts: Arena[F] = Arena()
        self._stack: list[Index] = []
        self.bank_offsets = BankOffsets()

    def add_font(self, font: F) -> Index:
        """Store ``font`` on top of the stack and return its id."""
        font_id = self._fonts.insert(font)
        self._stack.insert(0, font_id)
        return font_id

    def remove_font(self, id: Index) -> Optional[F]:
        """Remove the font with ``id`` and return it, or None if there is none."""
        font = self._fonts.remove(id)
        if id in self._stack:
            self._stack.remove(id)
        self.bank_offsets.remove(id)
        return font

    def count(self) -> int:
        """Number of loaded SoundFonts."""
        return len(self._fonts)

    def font(self, id: Index) -> Optional[F]:
        """The font with ``id``, or None."""
        return self._fonts.get(id)

    def nth_font(self, num: int) -> Optional[F]:
        """The font at position ``num`` on the stack; the top is 0."""
        if not 0 <= num < len(self._stack):
            return None
        return self._fonts.get(self._stack[num])

    def _offset_bank(self, sfont_id: Index, banknum: int) -> int:
        offset = self.bank_offsets.get(sfont_id) or 0
        return max(banknum - offset, 0)

    def preset(self, sfont_id: Index, banknum: int, prognum: int) -> Optional[Any]:
        """The preset with the given bank and program in one specific font."""
        font = self.font(sfont_id)
        if font is None:
            return None
        return font.preset(self._offset_bank(sfont_id, banknum), prognum)

    def find_preset(self, banknum: int, prognum: int) -> Optional[tuple[Index, Any]]:
        """First ``(font id, preset)`` matching bank and program, searching from the top."""
        for font_id in self._stack:
            font = self.font(font_id)
            if font is None:
                continue
            preset = font.preset(self._offset_bank(font_id, banknum), prognum)
            if preset is not None:
                return font_id, preset
        return None