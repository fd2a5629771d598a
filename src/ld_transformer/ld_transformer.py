"""Main LD Transformer implementation."""

import logging
from contextlib import nullcontext
from typing import Any, List, Optional, TextIO

from .config import ConverterConfig
from .emitter import JSONEmitter
from .error_handler import ErrorHandler
from .io.json_reader import JSONStreamReader
from .io.line_source import LineSource
from .parser import LDParser
from .profiler import PerformanceProfiler
from .serializer import LDSerializer
from .types import (
    AllocationError,
    ConversionError,
    ConversionResult,
    OutputMode,
    StructuralError,
)


class LDTransformer:
    """
    Bidirectional converter between LD text and JSON.

    The stream methods report failures in their result instead of raising;
    ``loads`` and ``dumps`` raise ConversionError directly.
    """

    def __init__(self, config: Optional[ConverterConfig] = None,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize the LD Transformer.

        Args:
            config: Optional converter configuration
            logger: Optional logger instance
        """
        self.config = config or ConverterConfig()
        self.logger = logger or logging.getLogger(__name__)
        self.error_handler = ErrorHandler(self.logger)
        self.serializer = LDSerializer(self.config, self.logger)
        self.profiler = PerformanceProfiler(self.logger)

    def ld_to_json(self, input_stream: TextIO, output_stream: TextIO) -> ConversionResult:
        """
        Convert LD text from a stream into JSON written to another stream.

        Args:
            input_stream: Text stream of LD lines
            output_stream: Text stream receiving JSON

        Returns:
            ConversionResult with operation details
        """
        source = LineSource(input_stream, self.logger)
        emitter = JSONEmitter(output_stream, self.config, self.logger)
        parser = LDParser(source, self.config, self.logger)

        try:
            with self._profile("ld_to_json") as profiler:
                try:
                    records = emitter.emit(parser.iter_documents())
                except MemoryError:
                    raise AllocationError(line_number=source.line_number)
                if profiler is not None:
                    profiler.records = records
                    profiler.sample_performance()
        except ConversionError as e:
            return self._failure(e, emitter.mode, source.line_number)

        self.logger.info(f"Converted {source.line_number} LD lines into {records} JSON "
                         f"value(s) ({emitter.mode.value if emitter.mode else 'empty'})")
        return ConversionResult(
            success=True,
            records=records,
            mode=emitter.mode,
            lines_read=source.line_number
        )

    def json_to_ld(self, input_stream: TextIO, output_stream: TextIO) -> ConversionResult:
        """
        Convert a stream of JSON values into LD text.

        Args:
            input_stream: Text stream of one or more JSON values
            output_stream: Text stream receiving LD lines

        Returns:
            ConversionResult with operation details
        """
        reader = JSONStreamReader(self.logger)
        records = 0
        output_size = 0

        try:
            with self._profile("json_to_ld") as profiler:
                try:
                    for value in reader.iter_values(input_stream):
                        for line in self.serializer.iter_lines(value):
                            output_stream.write(line + "\n")
                            output_size += len(line) + 1
                        records += 1
                except MemoryError:
                    raise AllocationError()
                if profiler is not None:
                    profiler.records = records
                    profiler.output_size = output_size
                    profiler.sample_performance()
        except ConversionError as e:
            if e.line_number is None:
                e.line_number = reader.line_number
            return self._failure(e, None, reader.line_number)

        self.logger.info(f"Converted {records} JSON value(s) from {reader.line_number} lines into LD")
        return ConversionResult(
            success=True,
            records=records,
            lines_read=reader.line_number
        )

    def loads(self, text: str) -> List[Any]:
        """
        Decode LD text into its top-level values.

        Args:
            text: LD text

        Returns:
            List of top-level values in input order

        Raises:
            ConversionError: On the first malformed construct
        """
        parser = LDParser(LineSource.from_text(text, self.logger), self.config, self.logger)
        documents = list(parser.iter_documents())

        if len(documents) > 1 and documents[0].is_anonymous_container:
            raise StructuralError(
                "Only one top-level value is allowed after an anonymous container",
                documents[1].key_line.line_number,
            )
        return [document.value for document in documents]

    def dumps(self, value: Any) -> str:
        """
        Encode a value as LD text.

        Raises:
            ConversionError: If the value has no LD representation
        """
        return self.serializer.serialize(value)

    def _profile(self, operation_name: str):
        if self.config.enable_profiling:
            return self.profiler.profile_operation(operation_name)
        return nullcontext()

    def _failure(self, error: ConversionError, mode: Optional[OutputMode],
                 lines_read: int) -> ConversionResult:
        response = self.error_handler.handle_conversion_error(error)
        self.logger.info(f"Suggested action: {response.suggested_action}")
        return ConversionResult(
            success=False,
            records=0,
            mode=mode,
            lines_read=lines_read,
            errors=[response.diagnostic],
            exit_code=response.exit_code
        )
