"""Lint operations - discover files, extract scopes, report violations."""

from __future__ import annotations

import os
import time
from pathlib import Path

from newsorder.config.constants import DIAGNOSTIC_SOURCE, RULE_NAME
from newsorder.config.models import NewsOrderConfig
from newsorder.core.errors import ErrorCode, ExtractionError
from newsorder.core.excludes import prunable_dirs
from newsorder.core.logging import get_logger
from newsorder.core.progress import progress
from newsorder.extraction import get_registry
from newsorder.extraction.parser import TreeSitterParser
from newsorder.lint.models import Diagnostic, FileResult, LintResult, Severity
from newsorder.order.models import Scope, ScopeKind, Violation
from newsorder.order.ops import validate_scopes

log = get_logger("lint.ops")


class LintOps:
    """Newspaper-order checks for files under a project root.

    A file that cannot be read or parsed yields an ``error`` result; the
    run carries on with the remaining files.
    """

    def __init__(
        self,
        root: Path,
        config: NewsOrderConfig | None = None,
        *,
        parser: TreeSitterParser | None = None,
    ) -> None:
        self._root = root.resolve()
        self._config = config or NewsOrderConfig()
        self._parser = parser or TreeSitterParser()

    @property
    def config(self) -> NewsOrderConfig:
        return self._config

    def discover(self, paths: list[Path] | None = None) -> list[Path]:
        """Expand paths into the files to check.

        Directories are walked recursively, skipping pruned directory names
        and keeping configured extensions. Explicit file paths are kept as
        given. Results are sorted per directory for stable output.
        """
        targets = paths or [self._root]
        extensions = set(self._config.check.extensions)
        pruned = prunable_dirs(self._config.check.exclude_dirs)

        files: list[Path] = []
        for target in targets:
            if not target.is_dir():
                files.append(target)
                continue
            for dirpath, dirnames, filenames in os.walk(target):
                dirnames[:] = sorted(d for d in dirnames if d not in pruned)
                for filename in sorted(filenames):
                    if Path(filename).suffix.lower() in extensions:
                        files.append(Path(dirpath) / filename)
        return files

    def check(self, paths: list[Path] | None = None) -> LintResult:
        """Check every discovered file.

        Args:
            paths: Files or directories (default: the project root)

        Returns:
            LintResult with one FileResult per discovered file
        """
        start_time = time.time()
        files = self.discover(paths)

        results = [self.check_file(path) for path in progress(files, desc="Checking")]

        result = LintResult(files=results, duration_seconds=time.time() - start_time)
        log.info(
            "check_complete",
            files=len(results),
            diagnostics=result.total_diagnostics,
            errors=len(result.errored_files),
            duration_ms=int(result.duration_seconds * 1000),
        )
        return result

    def check_file(self, path: Path) -> FileResult:
        """Check a single file on disk."""
        start_time = time.time()
        display = self._display_path(path)
        limit_bytes = self._config.check.max_file_size_kb * 1024

        try:
            size = path.stat().st_size
            if size > limit_bytes:
                log.debug("file_skipped", path=display, size=size, limit=limit_bytes)
                return FileResult(
                    path=display,
                    status="skipped",
                    error_detail=f"File larger than {self._config.check.max_file_size_kb} KB",
                )
            content = path.read_bytes()
        except OSError as e:
            err = ExtractionError.read_failed(display, str(e))
            log.warning("file_unreadable", path=display, error=str(err))
            return FileResult(path=display, status="error", error_detail=str(err))

        return self._check_content(path, display, content, start_time)

    def check_source(self, source: str | bytes, file_name: str) -> FileResult:
        """Check in-memory source; the extension of ``file_name`` picks the language."""
        content = source.encode("utf-8") if isinstance(source, str) else source
        return self._check_content(Path(file_name), file_name, content, time.time())

    def scopes(self, path: Path, content: bytes | None = None) -> list[Scope]:
        """All scopes of one file, unfiltered.

        Raises:
            ExtractionError: Unsupported extension, missing grammar, or
                unreadable file.
        """
        parsed = self._parser.parse(path, content)
        extractor = get_registry().get(parsed.language)
        if extractor is None:
            raise ExtractionError.unsupported_language(str(path), path.suffix)
        return extractor.extract(parsed.root_node, path.name)

    def _check_content(
        self, path: Path, display: str, content: bytes, start_time: float
    ) -> FileResult:
        try:
            scopes = [s for s in self.scopes(path, content) if self._is_enabled(s)]
        except ExtractionError as e:
            if e.code == ErrorCode.EXTRACTION_UNSUPPORTED_LANGUAGE:
                return FileResult(path=display, status="skipped", error_detail=e.message)
            log.warning("extraction_failed", path=display, error=str(e))
            return FileResult(path=display, status="error", error_detail=str(e))

        violations = validate_scopes(scopes)
        diagnostics = [self._to_diagnostic(display, v) for v in violations]

        return FileResult(
            path=display,
            status="dirty" if diagnostics else "clean",
            diagnostics=diagnostics,
            scopes_checked=len(scopes),
            duration_seconds=time.time() - start_time,
        )

    def _is_enabled(self, scope: Scope) -> bool:
        if scope.kind is ScopeKind.CLASS:
            return self._config.check.check_classes
        return self._config.check.check_functions

    def _to_diagnostic(self, display: str, violation: Violation) -> Diagnostic:
        return Diagnostic(
            path=display,
            line=violation.position.line,
            column=violation.position.column,
            message=violation.message,
            source=DIAGNOSTIC_SOURCE,
            severity=Severity(self._config.check.severity),
            code=RULE_NAME,
            scope=violation.scope_name,
        )

    def _display_path(self, path: Path) -> str:
        try:
            return path.resolve().relative_to(self._root).as_posix()
        except ValueError:
            return path.as_posix()
