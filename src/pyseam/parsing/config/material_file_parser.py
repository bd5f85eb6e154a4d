import logging
from contextlib import contextmanager
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterator, Optional, Union

from pyseam.core.exceptions import FileOpenError
from pyseam.core.materials import MaterialRecord, MaterialStore
from pyseam.data.constants import FileConstants
from pyseam.parsing.utils.tokenizer import is_numeric_token, parse_numeric_prefix, split_fields
from pyseam.parsing.validation.line_classifier import LineKind, RecordPhase, classify_line, is_opaque_block

logger = logging.getLogger(__name__)


class BaseFileParser:
    """Base class for parsing SEAM text input files."""

    def __init__(self, file_path: Union[str, Path], encoding: str = FileConstants.DEFAULT_ENCODING) -> None:
        self.file_path = Path(file_path)
        self.base_dir = self.file_path.parent
        self.encoding = encoding

    @contextmanager
    def _open(self) -> Iterator[IO[str]]:
        """Opens the file for text reading, turning any OS-level failure into FileOpenError."""
        try:
            handle = open(self.file_path, 'r', encoding=self.encoding, errors='replace')
        except OSError as e:
            raise FileOpenError(self.file_path, e.strerror or str(e)) from e
        logger.debug("Opened file: %s", self.file_path)
        with handle:
            yield handle

    def parse(self, *args, **kwargs):
        raise NotImplementedError("Subclasses must implement parse method")


@dataclass
class _ParseState:
    """Cursor state carried across the lines of one material file."""
    phase: RecordPhase = RecordPhase.AWAITING_HEADER
    current: Optional[MaterialRecord] = None
    in_opaque_block: bool = False
    data_lines: int = 0
    skipped_lines: int = 0


class MaterialFileParser(BaseFileParser):
    """
    Parser for REV 3.0 SEAM material files.

    Each material is a pair of data lines: a header ``<id> <type> [name] [comment]``
    followed by a properties line ``<MP1> <MP2> ... <MPn>``. Fields may be
    separated by whitespace or commas. Comment lines (``!``), blank lines and
    block markers (``(...``, ``)...``) are skipped without disturbing the
    header/properties cursor. When a ``(FREQVAL`` block opens between records,
    its all-numeric table rows are skipped until the next block marker or the
    next header-shaped line (second field non-numeric).

    Parsing is lenient: malformed lines never raise.
    """

    def parse(self, store: Optional[MaterialStore] = None) -> MaterialStore:
        """
        Parse the file into a material store.
        Args:
            store: Optional store to merge the parsed records into. It is only
                modified once the whole file has been read.
        Returns:
            The store holding the parsed records (``store`` itself if given)
        Raises:
            FileOpenError: If the file cannot be opened for reading
        """
        logger.info("Loading material file: %s", self.file_path)
        parsed = MaterialStore()
        state = _ParseState()
        with self._open() as handle:
            for line_number, raw_line in enumerate(handle, start=1):
                self._process_line(raw_line.rstrip('\r\n'), line_number, state, parsed)
        if state.phase is RecordPhase.AWAITING_PROPERTIES and state.current is not None:
            logger.warning("Material '%s' in %s has no properties line",
                           state.current.material_id, self.file_path)
        logger.info("Loaded %d materials from %s (%d data lines, %d lines skipped)",
                    len(parsed), self.file_path, state.data_lines, state.skipped_lines)
        if store is None:
            return parsed
        store.update(parsed)
        return store

    def _process_line(self, line: str, line_number: int, state: _ParseState, store: MaterialStore) -> None:
        kind = classify_line(line)
        if kind is LineKind.BLOCK_OPEN:
            # A new block always ends any opaque block left open; frequency tables
            # only sit between records, never inside a header/properties pair
            state.in_opaque_block = (is_opaque_block(line)
                                     and state.phase is RecordPhase.AWAITING_HEADER)
            state.skipped_lines += 1
            return
        if kind is LineKind.BLOCK_CLOSE:
            state.in_opaque_block = False
            state.skipped_lines += 1
            return
        if kind is not LineKind.DATA:
            state.skipped_lines += 1
            return
        fields = split_fields(line)
        if state.in_opaque_block:
            if not _is_header_shaped(fields):
                state.skipped_lines += 1
                return
            logger.debug("Line %d: header ends unterminated frequency block", line_number)
            state.in_opaque_block = False
        state.data_lines += 1
        if state.phase is RecordPhase.AWAITING_HEADER:
            self._read_header(fields, line_number, state, store)
        else:
            self._read_properties(fields, line_number, state)

    @staticmethod
    def _read_header(fields, line_number: int, state: _ParseState, store: MaterialStore) -> None:
        if not fields:
            # The cursor still advances; the following properties line is dropped
            logger.debug("Line %d: header line has no fields", line_number)
            state.current = None
            state.phase = state.phase.advance()
            return
        material_id = fields[0]
        material_type = fields[1] if len(fields) > 1 else ''
        state.current = store.add(MaterialRecord(material_id, material_type))
        state.phase = state.phase.advance()
        logger.debug("Line %d: material '%s' of type '%s'", line_number, material_id, material_type)

    @staticmethod
    def _read_properties(fields, line_number: int, state: _ParseState) -> None:
        state.phase = state.phase.advance()
        if state.current is None:
            logger.debug("Line %d: properties without a material id, dropped", line_number)
            return
        values = parse_numeric_prefix(fields)
        state.current.properties.extend(values)
        if len(values) < len(fields):
            logger.debug("Line %d: kept %d of %d fields for material '%s'",
                         line_number, len(values), len(fields), state.current.material_id)


def _is_header_shaped(fields) -> bool:
    """A header has a non-numeric type as its second field; frequency table rows are all numeric."""
    return len(fields) > 1 and not is_numeric_token(fields[1])
